"""Tests for the GenerationOptions frozen dataclass."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from schema_mocks.config import GenerationOptions


class TestDefaults:
    def test_values(self) -> None:
        options = GenerationOptions()
        assert options.seed is None
        assert options.bypass_examples is False
        assert dict(options.overrides) == {}
        assert dict(options.array_lengths) == {}
        assert options.max_depth == 3
        assert options.locale == "en_US"
        assert options.default_max_items == 5


class TestImmutability:
    def test_cannot_assign(self) -> None:
        options = GenerationOptions()
        with pytest.raises(FrozenInstanceError):
            options.seed = 1  # type: ignore[misc]

    def test_overrides_are_read_only_copies(self) -> None:
        source = {"a": 1}
        options = GenerationOptions(overrides=source)
        source["b"] = 2
        assert dict(options.overrides) == {"a": 1}
        with pytest.raises(TypeError):
            options.overrides["c"] = 3  # type: ignore[index]

    def test_array_lengths_normalized_to_int_pairs(self) -> None:
        options = GenerationOptions(array_lengths={"tags": [1, 2]})  # type: ignore[dict-item]
        assert options.array_lengths["tags"] == (1, 2)


class TestValidation:
    def test_negative_max_depth(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            GenerationOptions(max_depth=-1)

    def test_zero_max_depth_allowed(self) -> None:
        assert GenerationOptions(max_depth=0).max_depth == 0

    def test_negative_default_max_items(self) -> None:
        with pytest.raises(ValueError, match="default_max_items"):
            GenerationOptions(default_max_items=-1)

    def test_array_length_must_be_pair(self) -> None:
        with pytest.raises(ValueError, match="pair"):
            GenerationOptions(array_lengths={"tags": (1, 2, 3)})  # type: ignore[dict-item]

    def test_array_length_bounds_non_negative(self) -> None:
        with pytest.raises(ValueError, match=">= 0"):
            GenerationOptions(array_lengths={"tags": (-1, 2)})
