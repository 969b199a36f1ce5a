"""
Flat configuration helpers.

FlatConfigBuilder merges defaults and enforces required keys on a single-level
mapping; KeyProjector keeps only an allowlist of keys. Neither applies
transforms, predicates or nesting.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from microconfig.core.exceptions import MissingRequiredValue
from microconfig.schema.validator import ConfigValidator


class FlatConfigBuilder(ConfigValidator):
    """Applies defaults and enforces required keys."""

    def __init__(self, required: Iterable[str] = (), defaults: Optional[Mapping] = None):
        super().__init__()
        self.required = list(required)
        self.defaults = dict(defaults or {})

    def validate(self, config: Mapping) -> Dict[str, Any]:
        """Merge defaults under `config` and check the required keys."""
        merged = dict(config)
        for key, value in self.defaults.items():
            merged.setdefault(key, value)

        for key in self.required:
            if merged.get(key) is None:
                raise MissingRequiredValue(key)

        return merged

    build = validate


class KeyProjector:
    """Filters a mapping down to a list of keys."""

    def __init__(self, keep: Iterable[str], fill: bool = False):
        self.keep = list(keep)
        self.fill = fill

    def project(self, config: Mapping) -> Dict[str, Any]:
        kept = {}
        for key in self.keep:
            if config.get(key) is not None:
                kept[key] = config[key]
            elif self.fill:
                kept[key] = None
        return kept


def build(config: Mapping, required: Iterable[str] = (), defaults: Optional[Mapping] = None) -> Dict[str, Any]:
    """
    Create a configuration mapping, applying defaults and enforcing requirements.

    Args:
        config: Configuration mapping; its keys win over `defaults`
        required: Keys that must be present and not None
        defaults: Default values

    Raises:
        MissingRequiredValue: for the first missing key in `required` order
    """
    return FlatConfigBuilder(required, defaults).validate(config)


def project(config: Mapping, keep: Iterable[str], fill: bool = False) -> Dict[str, Any]:
    """Return a new mapping containing only the `keep` keys that are set in `config`."""
    return KeyProjector(keep, fill).project(config)
