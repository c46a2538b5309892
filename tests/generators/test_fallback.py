"""Tests for the structural fallback generator.

Covers const/enum precedence, string formats, patterns, length bounds,
integer and number bounds in both OpenAPI dialects, multipleOf, and the
non-string kinds.
"""

from __future__ import annotations

import base64
import datetime as dt
import ipaddress
import re
import uuid
from typing import Any

import pytest
from faker import Faker

from schema_mocks.generators.fallback import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    coin_flip,
    generate_fallback,
)
from schema_mocks.providers.faker import build_provider
from schema_mocks.schema.builder import SchemaBuilder


def _gen(schema: dict[str, Any], provider: Faker) -> Any:
    return generate_fallback(SchemaBuilder().build(schema), provider)


def _many(schema: dict[str, Any], count: int = 50) -> list[Any]:
    """Draw ``count`` values from one seeded provider."""
    node = SchemaBuilder().build(schema)
    fake = build_provider(2024)
    return [generate_fallback(node, fake) for _ in range(count)]


# ---------------------------------------------------------------------------
# const / enum
# ---------------------------------------------------------------------------


class TestConstAndEnum:
    def test_const_wins_over_type(self, provider: Faker) -> None:
        assert _gen({"type": "integer", "const": "fixed"}, provider) == "fixed"

    def test_const_null(self, provider: Faker) -> None:
        assert _gen({"type": "string", "const": None}, provider) is None

    def test_enum_choice(self) -> None:
        values = _many({"type": "string", "enum": ["a", "b", "c"]})
        assert set(values) <= {"a", "b", "c"}
        assert len(set(values)) > 1

    def test_enum_values_are_copies(self, provider: Faker) -> None:
        node = SchemaBuilder().build({"enum": [{"nested": [1]}]})
        value = generate_fallback(node, provider)
        value["nested"].append(2)
        assert node.enum == [{"nested": [1]}]


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


class TestStringFormats:
    def test_date_time(self, provider: Faker) -> None:
        value = _gen({"type": "string", "format": "date-time"}, provider)
        assert value.endswith("Z")
        dt.datetime.fromisoformat(value[:-1])

    def test_date(self, provider: Faker) -> None:
        dt.date.fromisoformat(_gen({"type": "string", "format": "date"}, provider))

    def test_time(self, provider: Faker) -> None:
        dt.time.fromisoformat(_gen({"type": "string", "format": "time"}, provider))

    def test_email(self, provider: Faker) -> None:
        assert "@" in _gen({"type": "string", "format": "email"}, provider)

    @pytest.mark.parametrize("fmt", ["uri", "url"])
    def test_uri(self, provider: Faker, fmt: str) -> None:
        assert _gen({"type": "string", "format": fmt}, provider).startswith("http")

    def test_uuid(self, provider: Faker) -> None:
        uuid.UUID(_gen({"type": "string", "format": "uuid"}, provider))

    def test_ipv4(self, provider: Faker) -> None:
        ipaddress.IPv4Address(_gen({"type": "string", "format": "ipv4"}, provider))

    def test_ipv6(self, provider: Faker) -> None:
        ipaddress.IPv6Address(_gen({"type": "string", "format": "ipv6"}, provider))

    def test_hostname(self, provider: Faker) -> None:
        value = _gen({"type": "string", "format": "hostname"}, provider)
        assert value and " " not in value

    def test_byte_is_base64(self, provider: Faker) -> None:
        value = _gen({"type": "string", "format": "byte"}, provider)
        assert base64.b64decode(value, validate=True)

    def test_binary_is_hex(self, provider: Faker) -> None:
        value = _gen({"type": "string", "format": "binary"}, provider)
        assert len(value) == 32
        int(value, 16)

    def test_password(self, provider: Faker) -> None:
        assert isinstance(_gen({"type": "string", "format": "password"}, provider), str)

    def test_unknown_format_falls_through(self, provider: Faker) -> None:
        value = _gen({"type": "string", "format": "x-custom"}, provider)
        assert isinstance(value, str) and value


class TestStringConstraints:
    def test_pattern(self) -> None:
        for value in _many({"type": "string", "pattern": r"^[A-Z]{3}-\d{2}$"}, 20):
            assert re.fullmatch(r"[A-Z]{3}-\d{2}", value)

    def test_invalid_pattern_degrades(self, provider: Faker) -> None:
        value = _gen({"type": "string", "pattern": "(["}, provider)
        assert isinstance(value, str)

    def test_length_bounds(self) -> None:
        for value in _many({"type": "string", "minLength": 4, "maxLength": 8}):
            assert 4 <= len(value) <= 8
            assert value.isalnum()

    def test_min_length_only(self) -> None:
        for value in _many({"type": "string", "minLength": 40}, 10):
            assert len(value) >= 40

    def test_zero_max_length(self, provider: Faker) -> None:
        assert _gen({"type": "string", "maxLength": 0}, provider) == ""

    def test_plain_string_is_words(self, provider: Faker) -> None:
        value = _gen({"type": "string"}, provider)
        assert 1 <= len(value.split()) <= 5


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestIntegers:
    def test_default_is_int32(self) -> None:
        for value in _many({"type": "integer"}):
            assert isinstance(value, int) and not isinstance(value, bool)
            assert INT32_MIN <= value <= INT32_MAX

    def test_int64_format(self) -> None:
        for value in _many({"type": "integer", "format": "int64"}):
            assert INT64_MIN <= value <= INT64_MAX

    def test_inclusive_bounds(self) -> None:
        values = _many({"type": "integer", "minimum": 1, "maximum": 3})
        assert set(values) == {1, 2, 3}

    def test_boolean_exclusive_bounds(self) -> None:
        schema = {
            "type": "integer",
            "minimum": 1,
            "maximum": 4,
            "exclusiveMinimum": True,
            "exclusiveMaximum": True,
        }
        assert set(_many(schema)) == {2, 3}

    def test_numeric_exclusive_bounds(self) -> None:
        schema = {"type": "integer", "exclusiveMinimum": 5, "exclusiveMaximum": 8}
        assert set(_many(schema)) == {6, 7}

    def test_multiple_of(self) -> None:
        for value in _many({"type": "integer", "minimum": 1, "maximum": 100, "multipleOf": 7}):
            assert value % 7 == 0
            assert 7 <= value <= 98

    def test_contradictory_bounds_collapse_to_minimum(self, provider: Faker) -> None:
        assert _gen({"type": "integer", "minimum": 10, "maximum": 5}, provider) == 10


class TestNumbers:
    def test_bounds(self) -> None:
        for value in _many({"type": "number", "minimum": -1.5, "maximum": 2.5}):
            assert isinstance(value, float)
            assert -1.5 <= value <= 2.5

    def test_default_range(self) -> None:
        for value in _many({"type": "number"}):
            assert -1e9 <= value <= 1e9

    def test_exclusive_minimum_boolean(self) -> None:
        schema = {"type": "number", "minimum": 0, "maximum": 1, "exclusiveMinimum": True}
        for value in _many(schema):
            assert 0 < value <= 1

    def test_exclusive_maximum_numeric(self) -> None:
        schema = {"type": "number", "minimum": 0, "exclusiveMaximum": 1}
        for value in _many(schema):
            assert 0 <= value < 1

    def test_multiple_of(self) -> None:
        for value in _many({"type": "number", "minimum": 0, "maximum": 10, "multipleOf": 0.5}):
            assert (value * 2).is_integer()
            assert 0 <= value <= 10


# ---------------------------------------------------------------------------
# Other kinds
# ---------------------------------------------------------------------------


class TestOtherKinds:
    def test_boolean(self) -> None:
        assert set(_many({"type": "boolean"})) == {True, False}

    def test_null(self, provider: Faker) -> None:
        assert _gen({"type": "null"}, provider) is None

    def test_empty_object(self, provider: Faker) -> None:
        assert _gen({"type": "object"}, provider) == {}

    def test_empty_array(self, provider: Faker) -> None:
        assert _gen({"type": "array"}, provider) == []

    def test_untyped_is_word(self, provider: Faker) -> None:
        value = _gen({}, provider)
        assert isinstance(value, str) and value

    def test_type_list_uses_first_non_null(self, provider: Faker) -> None:
        assert isinstance(_gen({"type": ["null", "integer"]}, provider), int)


class TestCoinFlip:
    def test_seeded(self) -> None:
        a, b = build_provider(8).random, build_provider(8).random
        assert [coin_flip(a) for _ in range(20)] == [coin_flip(b) for _ in range(20)]
