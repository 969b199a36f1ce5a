"""
Schema definition, self-checking and validation.

- SchemaNode: rule set for one configuration key
- MetaSchemaValidator: checks and parses schema definitions
- SchemaValidator: normalizes configuration trees against a schema
"""

from .rules import SchemaNode, coerce_schema
from .meta import MetaSchemaValidator, RULE_NAMES, validate_schema
from .validator import ConfigValidator, SchemaValidator, validate

__all__ = [
    'SchemaNode',
    'coerce_schema',
    'MetaSchemaValidator',
    'RULE_NAMES',
    'validate_schema',
    'ConfigValidator',
    'SchemaValidator',
    'validate'
]
