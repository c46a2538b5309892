"""Schema model: typed SchemaNode graph built from raw JSON-Schema mappings."""

from __future__ import annotations

from schema_mocks.schema.builder import SchemaBuilder
from schema_mocks.schema.nodes import (
    MISSING,
    Discriminator,
    SchemaKind,
    SchemaNode,
    primary_kind,
    resolve_kind,
)

__all__: list[str] = [
    "MISSING",
    "Discriminator",
    "SchemaBuilder",
    "SchemaKind",
    "SchemaNode",
    "primary_kind",
    "resolve_kind",
]
