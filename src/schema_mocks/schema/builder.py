"""SchemaBuilder: converts a dereferenced schema dict into a SchemaNode tree.

Uses recursive dispatch over the schema keywords the engine understands.
Unknown keywords are ignored.

Identity is preserved: every distinct dict object becomes exactly one
SchemaNode, so a dereferenced document whose ``$ref`` targets were replaced
by shared (possibly self-containing) dicts keeps its cycles as node identity.
That is what the engine's circular-reference guard relies on.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from schema_mocks.schema.nodes import Discriminator, SchemaNode

__all__ = ["SchemaBuilder"]

# Keyword -> SchemaNode attribute for values copied through unchanged.
_SCALAR_KEYWORDS: dict[str, str] = {
    "format": "format",
    "title": "title",
    "$ref": "ref",
    "minimum": "minimum",
    "maximum": "maximum",
    "exclusiveMinimum": "exclusive_minimum",
    "exclusiveMaximum": "exclusive_maximum",
    "multipleOf": "multiple_of",
    "minLength": "min_length",
    "maxLength": "max_length",
    "pattern": "pattern",
    "minItems": "min_items",
    "maxItems": "max_items",
    "x-faker-method": "generator_method",
}

# Keywords where presence matters even when the value is None.
_PRESENCE_KEYWORDS: dict[str, str] = {
    "const": "const",
    "example": "example",
    "default": "default",
}

_COMPOSITION_KEYWORDS: dict[str, str] = {
    "allOf": "all_of",
    "oneOf": "one_of",
    "anyOf": "any_of",
}


@dataclass
class SchemaBuilder:
    """Converts schema dicts (OpenAPI 3.0.x or 3.1.x) into SchemaNode trees.

    A builder memoizes by ``id()`` of each source dict for the duration of a
    ``build`` call, which is how shared and self-referential sub-schemas map
    to a single node instance.

    Example::

        node = {"type": "object", "properties": {}}
        node["properties"]["child"] = node          # self-referential
        tree = SchemaBuilder().build(node)
        assert tree.properties["child"] is tree
    """

    _memo: dict[int, SchemaNode] = field(default_factory=dict, init=False, repr=False)

    def build(self, schema: Mapping[str, Any]) -> SchemaNode:
        """Convert a schema mapping to a SchemaNode tree.

        Args:
            schema: A fully dereferenced schema mapping.

        Returns:
            The root SchemaNode.

        Raises:
            TypeError: If ``schema`` is not a mapping.
        """
        self._memo = {}
        try:
            return self._build(schema)
        finally:
            self._memo = {}

    def _build(self, schema: Any) -> SchemaNode:
        if isinstance(schema, SchemaNode):
            return schema
        if not isinstance(schema, Mapping):
            raise TypeError(f"Schema must be a mapping, got {type(schema)!r}")

        cached = self._memo.get(id(schema))
        if cached is not None:
            return cached

        # Register before recursing so self-references resolve to this node.
        node = SchemaNode()
        self._memo[id(schema)] = node

        raw_type = schema.get("type")
        if isinstance(raw_type, str):
            node.type = raw_type
        elif isinstance(raw_type, list | tuple):
            node.type = tuple(str(t) for t in raw_type)

        for keyword, attr in _SCALAR_KEYWORDS.items():
            value = schema.get(keyword)
            if value is not None:
                setattr(node, attr, value)

        for keyword, attr in _PRESENCE_KEYWORDS.items():
            if keyword in schema:
                setattr(node, attr, schema[keyword])

        node.nullable = schema.get("nullable") is True

        enum = schema.get("enum")
        if isinstance(enum, list | tuple):
            node.enum = list(enum)

        items = schema.get("items")
        if isinstance(items, Mapping):
            node.items = self._build(items)

        properties = schema.get("properties")
        if isinstance(properties, Mapping):
            node.properties = {
                str(name): self._build(prop) for name, prop in properties.items()
            }

        required = schema.get("required")
        if isinstance(required, list | tuple):
            node.required = tuple(dict.fromkeys(str(name) for name in required))

        for keyword, attr in _COMPOSITION_KEYWORDS.items():
            subs = schema.get(keyword)
            if isinstance(subs, list | tuple):
                setattr(node, attr, tuple(self._build(sub) for sub in subs))

        discriminator = schema.get("discriminator")
        if isinstance(discriminator, Mapping) and discriminator.get("propertyName"):
            mapping = discriminator.get("mapping") or {}
            node.discriminator = Discriminator(
                property_name=str(discriminator["propertyName"]),
                mapping={str(tag): str(ref) for tag, ref in mapping.items()},
            )

        return node
