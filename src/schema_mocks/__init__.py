"""schema-mocks - seeded mock values from OpenAPI / JSON-Schema schemas."""

from __future__ import annotations

from schema_mocks.api import (
    apply_overrides,
    generate_from_schema,
    generate_many,
    set_by_path,
)
from schema_mocks.config import GenerationOptions
from schema_mocks.errors import ErrorKind, SchemaMocksError
from schema_mocks.generators.engine import GenerationContext, ValueGenerator
from schema_mocks.generators.merger import merge_schemas
from schema_mocks.schema.builder import SchemaBuilder
from schema_mocks.schema.nodes import SchemaKind, SchemaNode
from schema_mocks.smart_defaults import SMART_DEFAULTS, get_smart_default

__version__: str = "0.1.0"
__all__: list[str] = [
    "SMART_DEFAULTS",
    "ErrorKind",
    "GenerationContext",
    "GenerationOptions",
    "SchemaBuilder",
    "SchemaKind",
    "SchemaMocksError",
    "SchemaNode",
    "ValueGenerator",
    "apply_overrides",
    "generate_from_schema",
    "generate_many",
    "get_smart_default",
    "merge_schemas",
    "set_by_path",
]
