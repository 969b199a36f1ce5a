"""
Schema and validation exceptions.
"""

from typing import Any

from .base import SchemaError, ValidationError


class InvalidSchemaRule(SchemaError):
    """Raised when a rule set uses an unknown rule name or a mistyped rule value."""

    def __init__(self, key: str, rule: str = None):
        self.key = key
        self.rule = rule
        message = f'Invalid rule provided in the schema for "{key}"'
        if rule:
            message += f" (rule '{rule}')"
        super().__init__(message + ".")


class MissingRequiredValue(ValidationError):
    """Raised when a required key resolves to None after defaults and transforms."""

    def __init__(self, path: str, key: str = None):
        super().__init__(
            path, key,
            f'Missing required value for "{path}" in the config.'
        )


class SchemaMismatch(ValidationError):
    """Raised when a validation predicate rejects a non-null value."""

    def __init__(self, path: str, key: str = None, value: Any = None):
        self.value = value
        super().__init__(
            path, key,
            f'Invalid key "{path}" does not match the schema.'
        )
