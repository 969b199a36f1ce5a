"""
Configuration validation framework.

This module provides the validator interface used by providers, and the
schema-driven validator that normalizes nested configuration trees.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict

from microconfig.core.exceptions import MissingRequiredValue, SchemaMismatch
from microconfig.logger import get_microconfig_logger
from microconfig.path import DELIMITER
from .rules import SchemaNode, coerce_schema


class ConfigValidator(ABC):
    """Abstract base class for configuration validators."""

    def __init__(self):
        self.logger = get_microconfig_logger().bind(component=type(self).__name__)

    @abstractmethod
    def validate(self, config: Mapping) -> Dict[str, Any]:
        """
        Validate configuration data.

        Returns the normalized configuration as a new dictionary and raises a
        ValidationError subclass on the first violation.
        """
        pass


class SchemaValidator(ConfigValidator):
    """
    Schema-based configuration validator.

    For every key of the schema, in order, the validator resolves the value
    (config value, then default), applies the transform, enforces the required
    flag, recurses into nested schemas and runs the validation predicate. Keys
    not named by the schema are dropped from the result.
    """

    def __init__(self, schema: Mapping, delimiter: str = DELIMITER):
        super().__init__()
        self.schema = coerce_schema(schema)
        self.delimiter = delimiter

    def validate(self, config: Mapping, namespace: str = "") -> Dict[str, Any]:
        """Validate configuration against the schema."""
        result = self._validate_dict(config, self.schema, namespace)
        self.logger.debug("Configuration validated", namespace=namespace or None, keys=list(result))
        return result

    def _validate_dict(self, config: Mapping, schema: Dict[str, SchemaNode], namespace: str) -> Dict[str, Any]:
        """Recursively validate a mapping against schema rules."""
        result = {}

        for key, rule in schema.items():
            path = f"{namespace}{self.delimiter}{key}".strip(self.delimiter)

            value = config[key] if key in config else rule.default

            if rule.transform is not None:
                value = rule.transform(value)

            if rule.required and value is None:
                raise MissingRequiredValue(path, key)

            # A nested schema only applies to mapping values
            if isinstance(value, Mapping) and rule.schema is not None:
                value = self._validate_dict(value, rule.schema, path)

            if rule.validate is not None and value is not None and not rule.validate(value):
                raise SchemaMismatch(path, key, value)

            result[key] = value

        return result


def validate(config: Mapping, schema: Mapping, delimiter: str = DELIMITER, namespace: str = "") -> Dict[str, Any]:
    """
    Validate a configuration tree with the provided schema.

    Args:
        config: Configuration tree
        schema: Mapping of key to SchemaNode or raw rule mapping (default,
            required, schema, transform, validate)
        delimiter: Separator used to build key paths in error messages
        namespace: Path prefix of `config` within a larger tree

    Returns:
        New dictionary holding only the schema's keys

    Raises:
        MissingRequiredValue: a required key resolved to None
        SchemaMismatch: a validation predicate rejected a value
    """
    return SchemaValidator(schema, delimiter).validate(config, namespace)
