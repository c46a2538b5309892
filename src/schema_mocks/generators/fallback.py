"""Structural fallback: a value from ``type``/``format``/constraints alone.

This is the lowest-priority step of the generation chain. It has no name or
example awareness and never raises: unknown formats, unusable patterns and
contradictory bounds all degrade to a best-effort value.

Numeric bounds follow both OpenAPI dialects:
- 3.0.x: boolean ``exclusiveMinimum``/``exclusiveMaximum`` qualify
  ``minimum``/``maximum``.
- 3.1.x: numeric ``exclusiveMinimum``/``exclusiveMaximum`` are bounds on
  their own.
"""

from __future__ import annotations

import base64
import copy
import math
import random
import string
from typing import TYPE_CHECKING, Any

import rstr
import structlog

from schema_mocks.schema.nodes import MISSING, SchemaKind, SchemaNode, resolve_kind

if TYPE_CHECKING:
    from faker import Faker

__all__ = ["STRING_FORMATS", "coin_flip", "generate_fallback"]

logger = structlog.get_logger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
FLOAT_MIN = -1e9
FLOAT_MAX = 1e9

_ALPHANUMERIC = string.ascii_letters + string.digits

STRING_FORMATS = frozenset(
    {
        "date-time", "date", "time", "email", "uri", "url", "uuid", "hostname",
        "ipv4", "ipv6", "byte", "binary", "password",
    }
)


def coin_flip(rng: random.Random) -> bool:
    """Seeded fair boolean."""
    return rng.random() < 0.5


def generate_fallback(schema: SchemaNode, provider: Faker) -> Any:
    """Generate a value for ``schema`` from its structural keywords only.

    ``const`` and ``enum`` apply to every kind and win over the type.

    Args:
        schema:   The schema node.
        provider: Seeded Faker instance; its ``random`` drives every draw.

    Returns:
        A plain value matching the resolved kind.
    """
    rng = provider.random

    if schema.const is not MISSING:
        return copy.deepcopy(schema.const)
    if schema.enum:
        return copy.deepcopy(rng.choice(schema.enum))

    match resolve_kind(schema):
        case SchemaKind.STRING:
            return _generate_string(schema, provider)
        case SchemaKind.INTEGER:
            return _generate_integer(schema, rng)
        case SchemaKind.NUMBER:
            return _generate_number(schema, rng)
        case SchemaKind.BOOLEAN:
            return coin_flip(rng)
        case SchemaKind.NULL:
            return None
        case SchemaKind.OBJECT:
            return {}
        case SchemaKind.ARRAY:
            return []
        case SchemaKind.UNKNOWN:
            return provider.word()


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def _from_format(fmt: str, provider: Faker) -> str | None:
    match fmt:
        case "date-time":
            return provider.date_time_iso()
        case "date":
            return provider.date_iso()
        case "time":
            return provider.time_iso()
        case "email":
            return provider.email()
        case "uri" | "url":
            return provider.url()
        case "uuid":
            return provider.uuid4()
        case "hostname":
            return provider.hostname()
        case "ipv4":
            return provider.ipv4()
        case "ipv6":
            return provider.ipv6()
        case "byte":
            return base64.b64encode(" ".join(provider.words(3)).encode()).decode()
        case "binary":
            return provider.binary(length=16).hex()
        case "password":
            return provider.password()
        case _:
            return None


def _from_pattern(pattern: str, rng: random.Random) -> str | None:
    try:
        return rstr.Rstr(rng).xeger(pattern)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "pattern_generation_failed",
            pattern=pattern,
            error=str(exc),
        )
        return None


def _generate_string(schema: SchemaNode, provider: Faker) -> str:
    rng = provider.random

    if schema.format:
        value = _from_format(schema.format, provider)
        if value is not None:
            return value
        logger.debug("unknown_string_format", format=schema.format)

    if schema.pattern:
        value = _from_pattern(schema.pattern, rng)
        if value is not None:
            return value

    if schema.min_length is not None or schema.max_length is not None:
        low = max(int(schema.min_length or 0), 0)
        high = (
            int(schema.max_length)
            if schema.max_length is not None
            else max(low + 20, 30)
        )
        high = max(high, low)
        length = rng.randint(low, high)
        return "".join(rng.choices(_ALPHANUMERIC, k=length))

    return " ".join(provider.words(nb=rng.randint(1, 5)))


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _numeric_bounds(
    schema: SchemaNode,
    default_min: float,
    default_max: float,
    integer: bool,
) -> tuple[float, float]:
    """Intersect the defaults with inclusive and exclusive schema bounds."""

    def above(x: float) -> float:
        return math.floor(x) + 1 if integer else math.nextafter(x, math.inf)

    def below(x: float) -> float:
        return math.ceil(x) - 1 if integer else math.nextafter(x, -math.inf)

    low, high = default_min, default_max
    if schema.minimum is not None:
        low = max(low, schema.minimum)
    if schema.maximum is not None:
        high = min(high, schema.maximum)

    exc_min, exc_max = schema.exclusive_minimum, schema.exclusive_maximum
    # bool before numbers: bool subclasses int
    if isinstance(exc_min, bool):
        if exc_min and schema.minimum is not None:
            low = max(low, above(schema.minimum))
    elif exc_min is not None:
        low = max(low, above(exc_min))

    if isinstance(exc_max, bool):
        if exc_max and schema.maximum is not None:
            high = min(high, below(schema.maximum))
    elif exc_max is not None:
        high = min(high, below(exc_max))

    if integer:
        low, high = math.ceil(low), math.floor(high)
    if low > high:
        high = low
    return low, high


def _snap_to_multiple(
    value: float,
    low: float,
    high: float,
    multiple_of: float,
    rng: random.Random,
) -> float:
    """Draw a multiple of ``multiple_of`` inside [low, high], or round ``value`` to one."""
    k_low = math.ceil(low / multiple_of)
    k_high = math.floor(high / multiple_of)
    if k_low <= k_high:
        k = rng.randint(k_low, k_high)
    else:
        k = round(value / multiple_of)
    return k * multiple_of


def _generate_integer(schema: SchemaNode, rng: random.Random) -> int:
    if schema.format == "int64":
        default_min, default_max = INT64_MIN, INT64_MAX
    else:
        default_min, default_max = INT32_MIN, INT32_MAX

    low, high = _numeric_bounds(schema, default_min, default_max, integer=True)
    value = rng.randint(int(low), int(high))

    if schema.multiple_of is not None and schema.multiple_of > 0:
        return int(round(_snap_to_multiple(value, low, high, schema.multiple_of, rng)))
    return value


def _generate_number(schema: SchemaNode, rng: random.Random) -> float:
    low, high = _numeric_bounds(schema, FLOAT_MIN, FLOAT_MAX, integer=False)
    value = rng.uniform(low, high)

    if schema.multiple_of is not None and schema.multiple_of > 0:
        # Round off binary noise such as 0.30000000000000004.
        return round(_snap_to_multiple(value, low, high, schema.multiple_of, rng), 10)
    return value
