"""SchemaMocksError: the single error type raised by the generation engine.

Only two situations are treated as a broken schema and fail loudly:

- UNRESOLVABLE_GENERATOR_PATH: an ``x-faker-method`` (or a smart-default
  method path) does not name a callable on the data provider.
- INCOMPATIBLE_COMPOSITION_TYPES: sub-schemas being merged declare different
  ``type`` values.

Every other irregularity degrades to a best-effort value instead.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["ErrorKind", "SchemaMocksError"]


class ErrorKind(StrEnum):
    """What went wrong.

    - UNRESOLVABLE_GENERATOR_PATH    -> "unresolvable_generator_path"
    - INCOMPATIBLE_COMPOSITION_TYPES -> "incompatible_composition_types"
    """

    UNRESOLVABLE_GENERATOR_PATH = auto()
    INCOMPATIBLE_COMPOSITION_TYPES = auto()


class SchemaMocksError(Exception):
    """Raised when a schema cannot be turned into a value.

    Attributes:
        kind:  Which failure occurred (see ErrorKind).
        value: The offending value: the generator method path, or the pair
               of conflicting type declarations.
    """

    def __init__(self, kind: ErrorKind, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value
