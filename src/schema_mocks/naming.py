"""NameNormalizer: canonical forms of property and method names.

Two forms are needed:

- a lookup key for smart defaults, where ``firstName``, ``first_name``,
  ``First-Name`` and ``FIRSTNAME`` must all collapse to ``"firstname"``;
- a snake_case form for generator method names, so a faker-js style path
  like ``"internet.userName"`` resolves to the Python ``user_name`` method.

Handles camelCase, PascalCase, snake_case, kebab-case, acronyms
(``"APIKey" -> "api_key"``) and digit boundaries (``"address2" -> "address_2"``).
"""

from __future__ import annotations

import re

from cachetools import LRUCache, cached

__all__ = ["NameNormalizer"]

# Matches snake_case, kebab-case, dotted and whitespace separators
_SEP = re.compile(r"[_\-.\s]+")

# camelCase boundary: lowercase letter followed by uppercase letter
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Acronym run before an uppercase+lowercase pair ("URLParser" -> "URL Parser")
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Letter/digit boundaries in both directions. Applied twice because each
# match consumes both characters ("v2Config" needs a second pass for "2C").
_DIGIT_BOUNDARY = re.compile(r"([a-zA-Z])(\d)|(\d)([a-zA-Z])")


class NameNormalizer:
    """Normalizes names for lookup and for method resolution.

    Both methods are memoized in per-class LRU caches; the normalizer is
    stateless, so one instance can be shared freely.

    Example usage:
        normalizer = NameNormalizer()
        normalizer.lookup_key("first_name")   # "firstname"
        normalizer.lookup_key("firstName")    # "firstname"
        normalizer.snake_case("userName")     # "user_name"
        normalizer.snake_case("APIKey")       # "api_key"
    """

    @staticmethod
    @cached(cache=LRUCache(maxsize=1024))
    def lookup_key(name: str) -> str:
        """Case-fold ``name`` and strip every separator."""
        return _SEP.sub("", name).casefold()

    @staticmethod
    @cached(cache=LRUCache(maxsize=1024))
    def snake_case(name: str) -> str:
        """Convert ``name`` to lowercase snake_case words.

        Processing pipeline (applied in order):
        1. Replace separators with spaces.
        2. Split camelCase boundaries.
        3. Split acronym runs.
        4. Split letter/digit boundaries (two passes).
        5. Lowercase and join the words with underscores.
        """
        s = _SEP.sub(" ", name)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        return "_".join(s.lower().split())
