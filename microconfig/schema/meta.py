"""
Schema definition checks.

The meta-schema validator parses raw rule mappings into SchemaNode objects and
rejects rule sets that use unknown rule names or mistyped rule values.
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Dict

from microconfig.core.exceptions import InvalidSchemaRule
from microconfig.logger import get_microconfig_logger
from .rules import SchemaNode

RULE_NAMES = frozenset({'default', 'required', 'schema', 'transform', 'validate'})


class MetaSchemaValidator:
    """Checks the shape of a schema definition, never the configuration data."""

    def __init__(self):
        self.logger = get_microconfig_logger().bind(component="MetaSchemaValidator")

    def validate(self, schema: Mapping) -> Dict[str, SchemaNode]:
        """
        Parse a raw schema into SchemaNode rule sets.

        Args:
            schema: Mapping of configuration key to rule mapping

        Returns:
            Mapping of configuration key to SchemaNode, in the same order

        Raises:
            InvalidSchemaRule: naming the first malformed key. Nested failures
                name the nested key only.
        """
        if not isinstance(schema, Mapping):
            raise TypeError(f"Schema must be a mapping, got {type(schema).__name__}")

        nodes = self._parse(schema)
        self.logger.debug("Schema definition accepted", keys=list(nodes))
        return nodes

    def _parse(self, schema: Mapping) -> Dict[str, SchemaNode]:
        nodes = {}
        for key, rules in schema.items():
            nodes[key] = self._parse_rules(key, rules)
        return nodes

    def _parse_rules(self, key: str, rules: Any) -> SchemaNode:
        if isinstance(rules, SchemaNode):
            if rules.schema is None:
                return rules
            if not isinstance(rules.schema, Mapping):
                raise InvalidSchemaRule(key, 'schema')
            return replace(rules, schema=self._parse(rules.schema))
        if not isinstance(rules, Mapping):
            raise InvalidSchemaRule(key)

        for name in rules:
            if name not in RULE_NAMES:
                raise InvalidSchemaRule(key, name)

        required = rules.get('required')
        nested = rules.get('schema')
        transform = rules.get('transform')
        predicate = rules.get('validate')

        if required is not None and not isinstance(required, bool):
            raise InvalidSchemaRule(key, 'required')
        if nested is not None and not isinstance(nested, Mapping):
            raise InvalidSchemaRule(key, 'schema')
        if transform is not None and not callable(transform):
            raise InvalidSchemaRule(key, 'transform')
        if predicate is not None and not callable(predicate):
            raise InvalidSchemaRule(key, 'validate')

        return SchemaNode(
            default=rules.get('default'),
            required=bool(required),
            schema=self._parse(nested) if nested is not None else None,
            transform=transform,
            validate=predicate,
        )


def validate_schema(schema: Mapping) -> Dict[str, SchemaNode]:
    """Check a schema definition and return it as SchemaNode rule sets."""
    return MetaSchemaValidator().validate(schema)
