"""GenerationOptions: immutable configuration for one generation call.

GenerationOptions is a frozen (immutable) dataclass validated on
construction. It carries everything a caller may tune; the per-recursion
state (depth, current path, visited nodes) lives in GenerationContext.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from schema_mocks.providers.faker import DEFAULT_LOCALE

__all__ = ["GenerationOptions"]


@dataclass(frozen=True, slots=True)
class GenerationOptions:
    """Immutable options for ``generate_from_schema``.

    Attributes:
        seed: Seed for the data provider. The same seed, schema and options
            always produce the same value. None means unseeded.
        bypass_examples: When True, schema ``example``/``default`` values are
            skipped and every value is generated.
        overrides: Dot-path -> literal value. A value at an overridden path
            is returned as-is, without any type checking.
        array_lengths: Path or property name -> ``(min, max)`` item count.
            Keys may use a ``[*]`` wildcard (``"users[*].addresses"``).
        max_depth: Recursion bound for self-referential schemas (>= 0).
        locale: Faker locale for the data provider.
        default_max_items: Upper item count for arrays that declare no
            upper bound and have no override (>= 0).
    """

    seed: int | None = None
    bypass_examples: bool = False
    overrides: Mapping[str, Any] = field(default_factory=dict)
    array_lengths: Mapping[str, tuple[int, int]] = field(default_factory=dict)
    max_depth: int = 3
    locale: str = DEFAULT_LOCALE
    default_max_items: int = 5

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)
        if self.default_max_items < 0:
            msg = f"default_max_items must be >= 0, got {self.default_max_items}"
            raise ValueError(msg)

        lengths: dict[str, tuple[int, int]] = {}
        for path, bounds in self.array_lengths.items():
            if len(bounds) != 2:
                msg = f"array_lengths[{path!r}] must be a (min, max) pair, got {bounds!r}"
                raise ValueError(msg)
            low, high = int(bounds[0]), int(bounds[1])
            if low < 0 or high < 0:
                msg = f"array_lengths[{path!r}] bounds must be >= 0, got {bounds!r}"
                raise ValueError(msg)
            lengths[path] = (low, high)

        # Frozen: bypass __setattr__ to store read-only copies.
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))
        object.__setattr__(self, "array_lengths", MappingProxyType(lengths))
