"""
Configuration providers and registry.

- ConfigProvider: abstract provider interface
- RuntimeConfigProvider: in-memory configuration
- FileConfigProvider: configuration read from a file
- ConfigRegistry: domain name to provider map
"""

from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider
from .registry import ConfigRegistry

__all__ = [
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'ConfigRegistry'
]
