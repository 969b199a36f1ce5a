"""
Core exceptions for the microconfig package.

This module provides all exception classes used throughout microconfig,
organized by concern and with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    MicroConfigError,
    SchemaError,
    ValidationError,
    LoaderError
)

# Schema and validation exceptions
from .schema import (
    InvalidSchemaRule,
    MissingRequiredValue,
    SchemaMismatch
)

# Loader exceptions
from .loader import (
    SourceUnreadable,
    ParseFailure,
    UnsupportedFormat,
    InvalidParseResult
)

__all__ = [
    # Base exceptions
    'MicroConfigError',
    'SchemaError',
    'ValidationError',
    'LoaderError',

    # Schema and validation exceptions
    'InvalidSchemaRule',
    'MissingRequiredValue',
    'SchemaMismatch',

    # Loader exceptions
    'SourceUnreadable',
    'ParseFailure',
    'UnsupportedFormat',
    'InvalidParseResult'
]
