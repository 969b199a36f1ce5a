"""
Schema rule definitions.

A schema maps configuration keys to SchemaNode rule sets. Each rule set may
carry a default value, a required flag, a nested schema, a transform and a
validation predicate.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Optional, Union

Transform = Callable[[Any], Any]
Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class SchemaNode:
    """
    Rules applied to one configuration key.

    Nodes compare by value but are unhashable, since a nested schema is a dict.
    """
    default: Any = None
    required: bool = False
    schema: Optional[Dict[str, 'SchemaNode']] = None
    transform: Optional[Transform] = None
    validate: Optional[Predicate] = None

    __hash__ = None

    @classmethod
    def coerce(cls, rules: Union['SchemaNode', Mapping]) -> 'SchemaNode':
        """
        Build a node from a raw rule mapping without shape checks.

        Unknown rule names are ignored, as are a non-callable transform or
        validate and a non-mapping schema. Use `validate_schema` for a strict
        parse that reports those problems.
        """
        if isinstance(rules, SchemaNode):
            if rules.schema is None:
                return rules
            nested = rules.schema
            return replace(rules, schema=coerce_schema(nested) if isinstance(nested, Mapping) else None)
        if not isinstance(rules, Mapping):
            return cls()

        nested = rules.get('schema')
        transform = rules.get('transform')
        predicate = rules.get('validate')
        return cls(
            default=rules.get('default'),
            required=bool(rules.get('required', False)),
            schema=coerce_schema(nested) if isinstance(nested, Mapping) else None,
            transform=transform if callable(transform) else None,
            validate=predicate if callable(predicate) else None,
        )


def coerce_schema(schema: Mapping) -> Dict[str, SchemaNode]:
    """Coerce every rule set of a raw schema, keeping key order."""
    return {key: SchemaNode.coerce(rules) for key, rules in schema.items()}
