"""Schema merging for ``allOf`` (and multi-pick ``anyOf``).

``merge_schemas`` folds a list of sub-schemas into one plain SchemaNode:

- ``type``: every declared type must be identical; the first conflicting
  pair raises SchemaMocksError (INCOMPATIBLE_COMPOSITION_TYPES).
- ``properties``: merged by name, later sub-schemas overwrite earlier ones.
- ``required``: unioned without duplicates, first-seen order kept.
- every other keyword: taken from whichever sub-schema declares it, later
  sub-schemas winning. ``const``/``example``/``default`` are declared
  unless MISSING, so ``false``, ``[]`` and ``null`` values carry over.

Sub-schemas that carry their own ``allOf`` are flattened first. The merged
node never carries ``allOf``. Input nodes are not modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import fields
from typing import Any

from schema_mocks.errors import ErrorKind, SchemaMocksError
from schema_mocks.schema.nodes import MISSING, SchemaNode, declared_types

__all__ = ["merge_schemas", "types_compatible"]

# Fields with dedicated merge rules (everything else is "last declared wins").
_SPECIAL_FIELDS = frozenset({"type", "properties", "required", "all_of"})
_COPIED_FIELDS = tuple(f.name for f in fields(SchemaNode) if f.name not in _SPECIAL_FIELDS)


# Keywords whose absence is MISSING, so None, False and empty values count.
_VALUE_FIELDS = frozenset({"const", "example", "default"})


def _is_declared(name: str, value: Any) -> bool:
    if name in _VALUE_FIELDS:
        return value is not MISSING
    if name == "nullable":
        return value is True
    if isinstance(value, tuple):
        return bool(value)
    return value is not None


def _type_label(node: SchemaNode) -> str:
    types = declared_types(node)
    return types[0] if len(types) == 1 else "[" + ", ".join(types) + "]"


def types_compatible(a: SchemaNode, b: SchemaNode) -> bool:
    """True when either node declares no type or both declare the same one."""
    types_a, types_b = declared_types(a), declared_types(b)
    return not types_a or not types_b or types_a == types_b


def _flatten(sub_schemas: Iterable[SchemaNode]) -> list[SchemaNode]:
    flat: list[SchemaNode] = []
    for sub in sub_schemas:
        if sub.all_of:
            flat.extend(_flatten(sub.all_of))
        flat.append(sub)
    return flat


def merge_schemas(sub_schemas: Sequence[SchemaNode]) -> SchemaNode:
    """Merge ``sub_schemas`` into a single SchemaNode.

    Args:
        sub_schemas: The schemas to fold, in declaration order.

    Returns:
        A new SchemaNode with no ``all_of``. An empty input yields ``SchemaNode()``.

    Raises:
        SchemaMocksError: (INCOMPATIBLE_COMPOSITION_TYPES) when two
            sub-schemas declare different types. The message names both.
    """
    merged = SchemaNode()
    type_source: SchemaNode | None = None
    properties: dict[str, SchemaNode] = {}
    required: dict[str, None] = {}

    for sub in _flatten(sub_schemas):
        if declared_types(sub):
            if type_source is None:
                type_source = sub
                merged.type = sub.type
            elif not types_compatible(type_source, sub):
                first, second = _type_label(type_source), _type_label(sub)
                raise SchemaMocksError(
                    ErrorKind.INCOMPATIBLE_COMPOSITION_TYPES,
                    f'composed sub-schemas have conflicting types: "{first}" and "{second}"',
                    value=(first, second),
                )

        properties.update(sub.properties)
        required.update(dict.fromkeys(sub.required))

        for name in _COPIED_FIELDS:
            value = getattr(sub, name)
            if _is_declared(name, value):
                setattr(merged, name, value)

    merged.properties = properties
    merged.required = tuple(required)
    return merged
