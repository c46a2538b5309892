"""DataProvider Protocol: what the engine needs from a fake-data provider.

A ``faker.Faker`` instance satisfies it structurally (its provider methods
are reached through the proxy's ``__getattr__``). Type checkers accept any
object with the same surface, without inheriting from anything.
"""

from __future__ import annotations

import random
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DataProvider(Protocol):
    """Structural protocol for seeded fake-data providers.

    - ``random`` is the provider's own ``random.Random``; the engine draws
      every coin flip, count and shuffle from it so a single seed governs
      the whole generated value.
    - ``get_providers()`` lists the provider objects that named generator
      paths (``"internet.email"``) are resolved against.
    - The remaining methods are the handful of helpers the structural
      fallback calls directly.
    """

    @property
    def random(self) -> random.Random: ...

    def get_providers(self) -> list[Any]: ...

    def seed_instance(self, seed: Any = None) -> Any: ...

    def word(self) -> str: ...

    def words(self, nb: int = 3) -> list[str]: ...
