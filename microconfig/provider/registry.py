"""
Configuration registry for managing domain-specific configurations.

This module provides a centralized registry mapping domain names (for example
'database' or 'logging') to their configuration providers.
"""

import threading
from typing import Dict, Any, Optional
from pathlib import Path

from .provider import ConfigProvider, FileConfigProvider
from microconfig.logger import get_microconfig_logger
from microconfig.path import Path as KeyPath
from microconfig.schema.validator import ConfigValidator


class ConfigRegistry:
    """
    Central registry for domain-specific configuration management.

    Domains without an explicit provider are served from
    ``<config_dir>/<domain>.<fmt>``.
    """

    def __init__(self, config_dir: str = "settings", fmt: str = "yaml"):
        self.config_dir = Path(config_dir)
        self.fmt = fmt
        self.logger = get_microconfig_logger().bind(component="ConfigRegistry")
        self._lock = threading.RLock()

        self._providers: Dict[str, ConfigProvider] = {}

        self.logger.debug("ConfigRegistry initialized", config_dir=str(self.config_dir))

    def register_domain(self, domain: str, provider: Optional[ConfigProvider] = None,
                        validator: Optional[ConfigValidator] = None) -> ConfigProvider:
        """
        Register a domain with its configuration provider.

        Args:
            domain: Domain name
            provider: Optional custom provider, defaults to FileConfigProvider
            validator: Validator for the default provider; ignored when
                `provider` is given

        Returns:
            The registered configuration provider
        """
        with self._lock:
            if provider is None:
                provider = FileConfigProvider(
                    domain, self.config_dir / f"{domain}.{self.fmt}", self.fmt, validator
                )

            self._providers[domain] = provider
            self.logger.debug("Domain registered", domain=domain, provider_type=type(provider).__name__)

            return provider

    def get_provider(self, domain: str) -> ConfigProvider:
        """
        Get configuration provider for a domain.

        Unknown domains are registered with the default file provider.
        """
        with self._lock:
            if domain not in self._providers:
                return self.register_domain(domain)

            return self._providers[domain]

    def get_config(self, domain: str) -> Dict[str, Any]:
        """Get configuration for a domain."""
        return self.get_provider(domain).get_config()

    def get(self, domain: str, path: KeyPath, default: Any = None) -> Any:
        """Look up a value by path within a domain."""
        return self.get_provider(domain).get(path, default)

    def update_config(self, domain: str, updates: Dict[str, Any]) -> bool:
        """Update configuration for a domain."""
        return self.get_provider(domain).update_config(updates)

    def reset_domain(self, domain: str) -> bool:
        """Reset a domain to its defaults."""
        return self.get_provider(domain).reset_to_defaults()

    def list_domains(self) -> list[str]:
        """List all registered domains."""
        with self._lock:
            return list(self._providers.keys())

    def reset_all(self):
        """Reset all domains and clear registry."""
        with self._lock:
            for domain in list(self._providers.keys()):
                self.reset_domain(domain)

            self._providers.clear()

            self.logger.debug("Registry reset completed")
