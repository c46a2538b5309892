"""End-to-end scenarios over realistic API schemas."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from schema_mocks import (
    ErrorKind,
    GenerationOptions,
    SchemaMocksError,
    generate_from_schema,
    merge_schemas,
)
from schema_mocks.schema.builder import SchemaBuilder

ADDRESS: dict[str, Any] = {
    "type": "object",
    "required": ["street", "city", "zip"],
    "properties": {
        "street": {"type": "string"},
        "city": {"type": "string"},
        "zip": {"type": "string"},
    },
}

USERS_RESPONSE: dict[str, Any] = {
    "type": "object",
    "required": ["users"],
    "properties": {
        "users": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["email", "addresses"],
                "properties": {
                    "email": {"type": "string"},
                    "addresses": {"type": "array", "items": ADDRESS},
                },
            },
        }
    },
}


class TestDiscriminatedOneOf:
    """``kind`` always equals the const of whichever branch was drawn."""

    @pytest.fixture
    def pet_schema(self) -> dict[str, Any]:
        return {
            "oneOf": [
                {"properties": {"kind": {"const": "cat"}, "indoor": {"type": "boolean"}}},
                {"properties": {"kind": {"const": "dog"}, "breed": {"type": "string"}}},
            ],
            "discriminator": {"propertyName": "kind"},
        }

    def test_seed_7(self, pet_schema: dict[str, Any]) -> None:
        value = generate_from_schema(pet_schema, GenerationOptions(seed=7))
        assert value["kind"] in {"cat", "dog"}
        if value["kind"] == "cat":
            assert "breed" not in value
        else:
            assert "indoor" not in value

    def test_seed_7_is_repeatable(self, pet_schema: dict[str, Any]) -> None:
        options = GenerationOptions(seed=7)
        assert generate_from_schema(pet_schema, options) == generate_from_schema(pet_schema, options)

    def test_kind_matches_branch_for_many_seeds(self, pet_schema: dict[str, Any]) -> None:
        for seed in range(30):
            value = generate_from_schema(pet_schema, GenerationOptions(seed=seed))
            other = {"cat": "breed", "dog": "indoor"}[value["kind"]]
            assert other not in value


class TestWildcardArrayLength:
    def test_two_users_one_address_each(self) -> None:
        options = GenerationOptions(
            seed=5,
            array_lengths={"users": (2, 2), "users[*].addresses": (1, 1)},
        )
        value = generate_from_schema(USERS_RESPONSE, options)
        assert len(value["users"]) == 2
        for user in value["users"]:
            assert len(user["addresses"]) == 1
            assert set(user["addresses"][0]) == {"street", "city", "zip"}

    def test_wildcard_does_not_leak_to_unrelated_arrays(self) -> None:
        schema = copy.deepcopy(USERS_RESPONSE)
        schema["properties"]["addresses"] = {"type": "array", "minItems": 3, "maxItems": 3, "items": ADDRESS}
        schema["required"].append("addresses")
        options = GenerationOptions(seed=5, array_lengths={"users[*].addresses": (1, 1)})
        assert len(generate_from_schema(schema, options)["addresses"]) == 3


class TestMergeCorrectness:
    def test_object_merge(self) -> None:
        builder = SchemaBuilder()
        merged = merge_schemas(
            [
                builder.build({"type": "object", "properties": {"a": {}}, "required": ["a"]}),
                builder.build({"type": "object", "properties": {"b": {}}, "required": ["b"]}),
            ]
        )
        assert set(merged.required) == {"a", "b"}
        assert set(merged.properties) == {"a", "b"}

    def test_string_integer_conflict(self) -> None:
        builder = SchemaBuilder()
        with pytest.raises(SchemaMocksError) as exc_info:
            merge_schemas([builder.build({"type": "string"}), builder.build({"type": "integer"})])
        assert exc_info.value.kind is ErrorKind.INCOMPATIBLE_COMPOSITION_TYPES


class TestRealisticFixture:
    """A typical OpenAPI component set: inheritance via allOf, a cycle, smart names."""

    @pytest.fixture
    def employee_schema(self) -> dict[str, Any]:
        base = {
            "type": "object",
            "required": ["id", "createdAt"],
            "properties": {
                "id": {"type": "string", "format": "uuid"},
                "createdAt": {"type": "string", "format": "date-time"},
            },
        }
        employee: dict[str, Any] = {
            "allOf": [
                base,
                {
                    "type": "object",
                    "required": ["firstName", "lastName", "email", "address"],
                    "properties": {
                        "firstName": {"type": "string"},
                        "lastName": {"type": "string"},
                        "email": {"type": "string"},
                        "address": ADDRESS,
                        "salary": {"type": "number", "minimum": 30000, "maximum": 200000},
                    },
                },
            ]
        }
        employee["allOf"][1]["properties"]["manager"] = employee
        return employee

    def test_generates_complete_object(self, employee_schema: dict[str, Any]) -> None:
        value = generate_from_schema(employee_schema, GenerationOptions(seed=42, max_depth=2))
        assert {"id", "createdAt", "firstName", "lastName", "email", "address"} <= set(value)
        assert "@" in value["email"]
        assert value["createdAt"].endswith("Z")
        if "salary" in value:
            assert 30000 <= value["salary"] <= 200000

    def test_manager_chain_terminates(self, employee_schema: dict[str, Any]) -> None:
        for seed in range(10):
            value = generate_from_schema(employee_schema, GenerationOptions(seed=seed, max_depth=2))
            depth = 0
            while "manager" in value:
                value = value["manager"]
                depth += 1
            assert depth <= 4
