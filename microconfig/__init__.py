"""
Configuration tree validation and access.

This package provides:
- Schema-driven validation of nested configuration trees
- Schema definition checks
- Path-based retrieval with lazily computed values
- Flat defaults/required handling and key projection
- File loaders and domain-based configuration providers
"""

# Core operations
from .lazy import LazyValue, lazy
from .path import DELIMITER, PathResolver, get
from .schema import (
    SchemaNode, RULE_NAMES, MetaSchemaValidator, validate_schema,
    ConfigValidator, SchemaValidator, validate
)
from .flat import FlatConfigBuilder, KeyProjector, build, project
from .loader import load

# Providers
from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider, ConfigRegistry

# Exceptions
from .core.exceptions import (
    MicroConfigError, SchemaError, ValidationError, LoaderError,
    InvalidSchemaRule, MissingRequiredValue, SchemaMismatch,
    SourceUnreadable, ParseFailure, UnsupportedFormat, InvalidParseResult
)

# Logging
from .logger import get_microconfig_logger, init_logger, setup_logging
from .logging_config import LoggingConfig

__version__ = '0.1.0'

__all__ = [
    # Core operations
    'LazyValue',
    'lazy',
    'DELIMITER',
    'PathResolver',
    'get',
    'SchemaNode',
    'RULE_NAMES',
    'MetaSchemaValidator',
    'validate_schema',
    'ConfigValidator',
    'SchemaValidator',
    'validate',
    'FlatConfigBuilder',
    'KeyProjector',
    'build',
    'project',
    'load',

    # Providers
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'ConfigRegistry',

    # Exceptions
    'MicroConfigError',
    'SchemaError',
    'ValidationError',
    'LoaderError',
    'InvalidSchemaRule',
    'MissingRequiredValue',
    'SchemaMismatch',
    'SourceUnreadable',
    'ParseFailure',
    'UnsupportedFormat',
    'InvalidParseResult',

    # Logging
    'get_microconfig_logger',
    'init_logger',
    'setup_logging',
    'LoggingConfig'
]
