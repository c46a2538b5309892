"""pytest plugin exposing the ``mock_from_schema`` fixture.

Registered through the ``pytest11`` entry point in pyproject.toml, so any
install of schema-mocks (editable included) makes the fixture available to
every test session without conftest.py wiring.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from schema_mocks import GenerationOptions, SchemaNode, generate_from_schema


@pytest.fixture(scope="session")
def mock_from_schema() -> Any:
    """Fixture that returns a callable mock-value generator.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to generate_from_schema() which builds a fresh provider per call).

    Usage in tests::

        def test_user_payload(mock_from_schema):
            user = mock_from_schema(USER_SCHEMA, seed=42)
            assert "email" in user

        def test_pinned_field(mock_from_schema):
            user = mock_from_schema(USER_SCHEMA, seed=1, overrides={"role": "admin"})
            assert user["role"] == "admin"

    Returns:
        A callable ``_generate(schema, *, seed=None, **option_fields) -> Any``
        where ``option_fields`` are any other GenerationOptions fields.
    """

    def _generate(
        schema: Mapping[str, Any] | SchemaNode,
        *,
        seed: int | None = None,
        **option_fields: Any,
    ) -> Any:
        """Generate one value for ``schema``.

        Raises:
            TypeError: When ``option_fields`` names an unknown option.
            ValueError: When the options are invalid.
        """
        options = GenerationOptions(seed=seed, **option_fields)
        return generate_from_schema(schema, options)

    return _generate
