"""Shared fixtures for the schema-mocks test suite."""

from __future__ import annotations

from typing import Any

import pytest
from faker import Faker

from schema_mocks.config import GenerationOptions
from schema_mocks.generators.engine import GenerationContext, ValueGenerator
from schema_mocks.providers.faker import build_provider
from schema_mocks.schema.builder import SchemaBuilder


@pytest.fixture
def builder() -> SchemaBuilder:
    """A fresh SchemaBuilder instance for each test."""
    return SchemaBuilder()


@pytest.fixture
def provider() -> Faker:
    """A Faker provider seeded with 42."""
    return build_provider(42)


@pytest.fixture
def engine() -> ValueGenerator:
    return ValueGenerator()


@pytest.fixture
def make_context(provider: Faker) -> Any:
    """Factory for root GenerationContexts over the seeded provider."""

    def _make(**option_fields: Any) -> GenerationContext:
        return GenerationContext.root(GenerationOptions(**option_fields), provider)

    return _make


@pytest.fixture
def user_schema() -> dict[str, Any]:
    """A typical API object: required scalars, optional fields, an array."""
    return {
        "type": "object",
        "required": ["id", "email", "age", "tags"],
        "properties": {
            "id": {"type": "string", "format": "uuid"},
            "email": {"type": "string"},
            "firstName": {"type": "string"},
            "age": {"type": "integer", "minimum": 18, "maximum": 99},
            "active": {"type": "boolean"},
            "tags": {
                "type": "array",
                "minItems": 1,
                "maxItems": 3,
                "items": {"type": "string", "enum": ["a", "b", "c"]},
            },
        },
    }


@pytest.fixture
def tree_schema() -> dict[str, Any]:
    """Self-referential schema: every node has an optional list of children."""
    node: dict[str, Any] = {
        "type": "object",
        "required": ["value", "children"],
        "properties": {
            "value": {"type": "integer"},
        },
    }
    node["properties"]["children"] = {"type": "array", "items": node}
    return node
