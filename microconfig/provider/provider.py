"""
Configuration provider base classes and implementations.

A provider owns the configuration tree of one domain, normalizes it through an
optional validator and answers path queries against it.
"""

import copy
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Any, Optional

from microconfig.core.exceptions import ValidationError
from microconfig.loader import Source, load
from microconfig.logger import get_microconfig_logger
from microconfig.path import DELIMITER, Path as KeyPath, PathResolver
from microconfig.schema.validator import ConfigValidator


class ConfigProvider(ABC):
    """
    Abstract base class for configuration providers.

    Defines the interface that all configuration providers must implement.
    """

    def __init__(self, domain: str, validator: Optional[ConfigValidator] = None, delimiter: str = DELIMITER):
        self.domain = domain
        self.validator = validator
        self.resolver = PathResolver(delimiter)
        self.logger = get_microconfig_logger().bind(component=type(self).__name__, domain=domain)
        self._lock = threading.RLock()

    @abstractmethod
    def get_config(self) -> Dict[str, Any]:
        """Get current configuration."""
        pass

    @abstractmethod
    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration with new values."""
        pass

    @abstractmethod
    def reset_to_defaults(self) -> bool:
        """Reset configuration to defaults."""
        pass

    def get(self, path: KeyPath, default: Any = None) -> Any:
        """Look up a value by path; LazyValues are evaluated on every call."""
        value = self.resolver.get(self.get_config(), path)
        return default if value is None else value

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Check configuration data against the validator."""
        try:
            self._normalize(config)
            return True
        except ValidationError as e:
            self.logger.error("Config validation failed", path=e.path, error=str(e))
            return False

    def _normalize(self, config: Dict[str, Any]) -> Dict[str, Any]:
        if self.validator is None:
            return dict(config)
        return self.validator.validate(config)


class RuntimeConfigProvider(ConfigProvider):
    """
    Runtime configuration provider that keeps config in memory.
    """

    def __init__(self, domain: str, initial_config: Optional[Dict[str, Any]] = None,
                 validator: Optional[ConfigValidator] = None, delimiter: str = DELIMITER):
        super().__init__(domain, validator, delimiter)
        self._initial = copy.copy(initial_config or {})
        self._config = self._normalize(self._initial)

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from memory."""
        with self._lock:
            return self._config.copy()

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Update configuration in memory."""
        with self._lock:
            new_config = self._config.copy()
            new_config.update(updates)

            try:
                self._config = self._normalize(new_config)
            except ValidationError as e:
                self.logger.error("Failed to update runtime config", path=e.path, error=str(e))
                return False
            return True

    def reset_to_defaults(self) -> bool:
        """Restore the initial configuration."""
        with self._lock:
            self._config = self._normalize(self._initial)
            return True


class FileConfigProvider(ConfigProvider):
    """
    File-based configuration provider.

    The file is re-read when its modification time changes. Values set through
    `update_config` are kept in memory on top of the file contents.
    """

    def __init__(self, domain: str, path: Source, fmt: Optional[str] = None,
                 validator: Optional[ConfigValidator] = None, delimiter: str = DELIMITER):
        super().__init__(domain, validator, delimiter)
        self.config_file = Path(path)
        self.fmt = fmt
        self._file_config: Optional[Dict[str, Any]] = None
        self._overrides: Dict[str, Any] = {}
        self._config_cache: Optional[Dict[str, Any]] = None
        self._last_modified: Optional[float] = None

    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from file."""
        with self._lock:
            self._refresh_cache()
            return self._config_cache.copy()

    def update_config(self, updates: Dict[str, Any]) -> bool:
        """Layer new values over the file contents."""
        with self._lock:
            self._refresh_cache()
            overrides = {**self._overrides, **updates}

            try:
                config = self._normalize({**self._file_config, **overrides})
            except ValidationError as e:
                self.logger.error("Failed to update config", path=e.path, error=str(e))
                return False

            self._overrides = overrides
            self._config_cache = config
            return True

    def reset_to_defaults(self) -> bool:
        """Drop in-memory overrides and force a reload from file."""
        with self._lock:
            self._overrides = {}
            self._config_cache = None
            self._last_modified = None
            return True

    def _refresh_cache(self):
        """Refresh configuration cache if file has changed."""
        current_mtime = self.config_file.stat().st_mtime if self.config_file.exists() else None

        if self._config_cache is not None and current_mtime == self._last_modified:
            return

        if current_mtime is None:
            self._file_config = {}
        else:
            self._file_config = load(self.config_file, self.fmt)
            self.logger.debug("Config file loaded", config_file=str(self.config_file))

        self._config_cache = self._normalize({**self._file_config, **self._overrides})
        self._last_modified = current_mtime
