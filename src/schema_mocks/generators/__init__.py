"""Value generators: priority-chain engine, composition, merging and fallback."""

from __future__ import annotations

from schema_mocks.generators.composition import CompositionSelector
from schema_mocks.generators.engine import GenerationContext, ValueGenerator
from schema_mocks.generators.fallback import generate_fallback
from schema_mocks.generators.merger import merge_schemas

__all__: list[str] = [
    "CompositionSelector",
    "GenerationContext",
    "ValueGenerator",
    "generate_fallback",
    "merge_schemas",
]
