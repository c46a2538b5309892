"""SchemaNode dataclass and SchemaKind StrEnum for schema trees.

Provides the data types the generation engine walks. SchemaNodes compare and
hash by identity: the same node instance recurring in its own ancestry is
what the circular-reference guard detects, so two structurally equal nodes
must stay distinct.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "MISSING",
    "Discriminator",
    "SchemaKind",
    "SchemaNode",
    "declared_types",
    "is_nullable",
    "primary_kind",
    "resolve_kind",
]


class _MissingType:
    """Sentinel for keywords that are absent (as opposed to set to null)."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _MissingType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _MissingType:
        return self


MISSING: Any = _MissingType()


class SchemaKind(StrEnum):
    """Closed set of value kinds a schema node can resolve to.

    StrEnum values are the lowercased member names, which line up with the
    JSON Schema ``type`` keyword for every member except UNKNOWN.
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    INTEGER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()
    UNKNOWN = auto()


_KIND_BY_NAME: dict[str, SchemaKind] = {
    kind.value: kind for kind in SchemaKind if kind is not SchemaKind.UNKNOWN
}


@dataclass(frozen=True, slots=True)
class Discriminator:
    """OpenAPI discriminator object.

    Attributes:
        property_name: Name of the property whose value identifies the branch.
        mapping:       Tag value -> sub-schema reference (e.g. ``"#/components/schemas/Cat"``).
    """

    property_name: str
    mapping: dict[str, str] = field(default_factory=dict)


@dataclass(eq=False, slots=True)
class SchemaNode:
    """A node of a schema tree.

    Absent keywords are ``None`` (or empty containers); ``example``,
    ``default`` and ``const`` use ``MISSING`` because ``null`` is a legitimate
    value for them. ``type`` is either a single kind name or a tuple of kind
    names (OpenAPI 3.1 style, possibly containing ``"null"``).

    ``eq=False`` keeps the default identity-based ``__eq__``/``__hash__``.
    """

    type: str | tuple[str, ...] | None = None
    format: str | None = None
    title: str | None = None
    ref: str | None = None

    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool | float | None = None
    exclusive_maximum: bool | float | None = None
    multiple_of: float | None = None

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None

    min_items: int | None = None
    max_items: int | None = None
    items: SchemaNode | None = None

    properties: dict[str, SchemaNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    enum: list[Any] | None = None
    const: Any = MISSING
    example: Any = MISSING
    default: Any = MISSING
    nullable: bool = False
    generator_method: str | None = None

    all_of: tuple[SchemaNode, ...] = ()
    one_of: tuple[SchemaNode, ...] = ()
    any_of: tuple[SchemaNode, ...] = ()
    discriminator: Discriminator | None = None


def declared_types(node: SchemaNode) -> tuple[str, ...]:
    """Return the declared ``type`` as a tuple (empty when undeclared)."""
    if node.type is None:
        return ()
    if isinstance(node.type, str):
        return (node.type,)
    return tuple(node.type)


def is_nullable(node: SchemaNode) -> bool:
    """True for ``nullable: true`` (3.0.x) or a type list containing ``"null"`` (3.1.x)."""
    if node.nullable:
        return True
    return not isinstance(node.type, str) and "null" in declared_types(node)


def resolve_kind(node: SchemaNode) -> SchemaKind:
    """Resolve the kind a node generates.

    A single type maps directly; a type list picks its first non-null entry
    (NULL when every entry is null). Without a type, the kind is inferred from
    the shape: OBJECT with ``properties``, ARRAY with ``items``, else UNKNOWN.
    Unrecognised type names resolve to UNKNOWN.
    """
    if isinstance(node.type, str):
        return _KIND_BY_NAME.get(node.type, SchemaKind.UNKNOWN)

    types = declared_types(node)
    if types:
        non_null = [t for t in types if t != "null"]
        if not non_null:
            return SchemaKind.NULL
        return _KIND_BY_NAME.get(non_null[0], SchemaKind.UNKNOWN)

    if node.properties:
        return SchemaKind.OBJECT
    if node.items is not None:
        return SchemaKind.ARRAY
    return SchemaKind.UNKNOWN


def primary_kind(node: SchemaNode) -> SchemaKind | None:
    """Like ``resolve_kind`` but NULL means "no primary type" and yields None."""
    kind = resolve_kind(node)
    return None if kind is SchemaKind.NULL else kind
