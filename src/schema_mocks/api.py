"""Public API functions for schema-mocks.

This module provides the user-facing entry points: generate_from_schema and
generate_many, plus the dot-path override helpers. Each call builds a fresh
seeded Faker provider, so no random state is shared between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_mocks.config import GenerationOptions
from schema_mocks.generators.engine import GenerationContext, ValueGenerator
from schema_mocks.overrides import apply_overrides, set_by_path
from schema_mocks.providers.faker import build_provider
from schema_mocks.schema.builder import SchemaBuilder
from schema_mocks.schema.nodes import SchemaNode

__all__ = ["apply_overrides", "generate_from_schema", "generate_many", "set_by_path"]


def _as_node(schema: Mapping[str, Any] | SchemaNode) -> SchemaNode:
    if isinstance(schema, SchemaNode):
        return schema
    return SchemaBuilder().build(schema)


def _finish(value: Any, options: GenerationOptions) -> Any:
    """Write every override into the generated value, wherever generation left it."""
    if options.overrides and isinstance(value, dict | list):
        apply_overrides(value, options.overrides)
    return value


def generate_from_schema(
    schema: Mapping[str, Any] | SchemaNode,
    options: GenerationOptions | None = None,
) -> Any:
    """Generate one value conforming to ``schema``.

    Args:
        schema:  A JSON-Schema / OpenAPI schema mapping with ``$ref`` already
                 resolved (shared sub-mappings are fine, cycles included), or
                 a prebuilt SchemaNode.
        options: Generation options. Defaults to ``GenerationOptions()`` when None.

    Returns:
        A plain value (None, bool, int, float, str, list or dict). Calls with
        the same schema, options and seed return equal values. When the value
        is a dict or list, the overrides are written into it by path.

    Raises:
        SchemaMocksError: When an ``x-faker-method`` path cannot be resolved,
            or merged ``allOf``/``anyOf`` sub-schemas declare conflicting types.
        TypeError: When ``schema`` is not a mapping.
    """
    options = options or GenerationOptions()
    node = _as_node(schema)
    provider = build_provider(options.seed, options.locale)
    value = ValueGenerator().generate(node, GenerationContext.root(options, provider))
    return _finish(value, options)


def generate_many(
    schema: Mapping[str, Any] | SchemaNode,
    count: int,
    options: GenerationOptions | None = None,
) -> list[Any]:
    """Generate ``count`` values from one seeded provider.

    The values draw from a single random stream, so they differ from one
    another while the whole batch is reproducible for a given seed.

    Args:
        schema:  As for ``generate_from_schema``.
        count:   Number of values to generate (>= 0).
        options: Generation options. Defaults to ``GenerationOptions()`` when None.

    Returns:
        A list of ``count`` generated values.
    """
    if count < 0:
        msg = f"count must be >= 0, got {count}"
        raise ValueError(msg)

    options = options or GenerationOptions()
    node = _as_node(schema)
    provider = build_provider(options.seed, options.locale)
    generator = ValueGenerator()
    context = GenerationContext.root(options, provider)
    return [_finish(generator.generate(node, context), options) for _ in range(count)]
