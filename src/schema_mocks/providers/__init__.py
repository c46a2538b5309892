"""Data providers: seeded Faker construction and dotted generator-path calls."""

from __future__ import annotations

from schema_mocks.providers.faker import DEFAULT_LOCALE, CommerceProvider, build_provider
from schema_mocks.providers.invoker import call_generator_method, resolve_generator_method

__all__: list[str] = [
    "DEFAULT_LOCALE",
    "CommerceProvider",
    "build_provider",
    "call_generator_method",
    "resolve_generator_method",
]
