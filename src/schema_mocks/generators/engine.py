"""ValueGenerator: the recursive priority chain that turns schemas into values.

For every node the chain is evaluated top to bottom, first match wins:

1. Override at the current dot-path.
2. Nullability coin flip (``nullable: true`` or a type list with ``"null"``).
3. Schema ``example`` / ``default`` (unless examples are bypassed).
4. ``x-faker-method`` named generator.
5. Smart default by property name (skipped for enum/const, known string
   formats, patterns and composed schemas; failures fall through).
6. Composition: ``allOf`` merge, ``oneOf`` / ``anyOf`` selection.
7. Structural generation by resolved kind: object, array, or fallback.

Recursion is bounded by the circular-reference guard: a child node that is
already among its own ancestors is not expanded once the depth has reached
``max_depth``. Each child context gets ``depth + 1`` and its own copy of the
visited set, so siblings never see each other's ancestry.
"""

from __future__ import annotations

import copy
import dataclasses
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from schema_mocks.errors import SchemaMocksError
from schema_mocks.generators.composition import CompositionSelector
from schema_mocks.generators.fallback import STRING_FORMATS, coin_flip, generate_fallback
from schema_mocks.generators.merger import merge_schemas
from schema_mocks.overrides import (
    child_path,
    descope_array_lengths,
    direct_overrides,
    has_override_under,
    overridden_length,
)
from schema_mocks.providers.invoker import call_generator_method
from schema_mocks.schema.nodes import (
    MISSING,
    SchemaKind,
    SchemaNode,
    is_nullable,
    primary_kind,
    resolve_kind,
)
from schema_mocks.smart_defaults import get_smart_default

if TYPE_CHECKING:
    from collections.abc import Mapping

    from faker import Faker

    from schema_mocks.config import GenerationOptions

__all__ = ["GenerationContext", "ValueGenerator", "minimal_stub"]

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationContext:
    """Per-call state threaded through the recursion.

    Immutable: child contexts are derived with ``descend``.

    Attributes:
        provider:        Seeded Faker instance for this top-level call.
        rng:             The provider's ``random.Random``.
        bypass_examples: Skip ``example``/``default`` when True.
        overrides:       Dot-path -> literal value.
        array_lengths:   Path or property name -> ``(min, max)``.
        max_depth:       Circular-reference recursion bound.
        depth:           Current depth (root is 0).
        path:            Override path of the value being generated.
        property_name:   Name of the property being generated, if any.
        visited:         Ancestor nodes, compared by identity.
        default_max_items: Implicit upper item count for unbounded arrays.
    """

    provider: Faker
    rng: random.Random
    bypass_examples: bool = False
    overrides: Mapping[str, Any] = field(default_factory=dict)
    array_lengths: Mapping[str, tuple[int, int]] = field(default_factory=dict)
    max_depth: int = 3
    depth: int = 0
    path: str = ""
    property_name: str | None = None
    visited: frozenset[SchemaNode] = frozenset()
    default_max_items: int = 5

    @classmethod
    def root(cls, options: GenerationOptions, provider: Faker) -> GenerationContext:
        """Build the top-level context for ``options`` and ``provider``."""
        return cls(
            provider=provider,
            rng=provider.random,
            bypass_examples=options.bypass_examples,
            overrides=options.overrides,
            array_lengths=options.array_lengths,
            max_depth=options.max_depth,
            default_max_items=options.default_max_items,
        )

    def descend(self, node: SchemaNode, **changes: Any) -> GenerationContext:
        """Context for a child of the current node: depth + 1, ``node`` visited."""
        return dataclasses.replace(
            self,
            depth=self.depth + 1,
            visited=self.visited | {node},
            **changes,
        )


def _accepts_smart_default(schema: SchemaNode) -> bool:
    """Value sets, string formats and composed shapes outrank a name-based guess."""
    if schema.enum or schema.const is not MISSING:
        return False
    if schema.pattern or schema.format in STRING_FORMATS:
        return False
    return not (schema.all_of or schema.one_of or schema.any_of)


def _overridden_below(context: GenerationContext) -> bool:
    """True when an override targets a value inside the one being generated."""
    if not context.overrides:
        return False
    return not context.path or has_override_under(context.overrides, context.path)


def _effective_type(schema: SchemaNode) -> str | tuple[str, ...] | None:
    """Declared ``type``, else the kind inferred from ``properties``/``items``."""
    if schema.type is not None:
        return schema.type
    kind = resolve_kind(schema)
    return None if kind is SchemaKind.UNKNOWN else kind.value


def minimal_stub(schema: SchemaNode) -> Any:
    """Smallest valid-looking value for a required property cut off by the depth guard."""
    if is_nullable(schema):
        return None
    match primary_kind(schema):
        case SchemaKind.STRING:
            return ""
        case SchemaKind.INTEGER | SchemaKind.NUMBER:
            return 0
        case SchemaKind.BOOLEAN:
            return False
        case SchemaKind.ARRAY:
            return []
        case SchemaKind.OBJECT:
            return {}
        case _:
            return None


class ValueGenerator:
    """Recursive generator implementing the priority chain.

    Stateless apart from its composition selector; every call's state lives
    in the GenerationContext, so one instance can serve any number of calls.

    Example::

        from schema_mocks.config import GenerationOptions
        from schema_mocks.generators.engine import GenerationContext, ValueGenerator
        from schema_mocks.providers.faker import build_provider
        from schema_mocks.schema.builder import SchemaBuilder

        node = SchemaBuilder().build({"type": "object", "properties": {"email": {"type": "string"}}, "required": ["email"]})
        options = GenerationOptions(seed=42)
        context = GenerationContext.root(options, build_provider(options.seed))
        ValueGenerator().generate(node, context)   # {"email": "..."}
    """

    def __init__(self) -> None:
        self._selector = CompositionSelector(self.generate)

    # ------------------------------------------------------------------
    # Priority chain
    # ------------------------------------------------------------------

    def generate(self, schema: SchemaNode, context: GenerationContext) -> Any:
        """Generate a value for ``schema``.

        Raises:
            SchemaMocksError: When an ``x-faker-method`` path does not resolve
                to a callable, or composed sub-schemas declare conflicting types.
        """
        if context.path and context.path in context.overrides:
            return context.overrides[context.path]

        if is_nullable(schema) and not _overridden_below(context) and coin_flip(context.rng):
            return None

        if not context.bypass_examples:
            if schema.example is not MISSING:
                return copy.deepcopy(schema.example)
            if schema.default is not MISSING:
                return copy.deepcopy(schema.default)

        if schema.generator_method:
            return call_generator_method(context.provider, schema.generator_method)

        if context.property_name and _accepts_smart_default(schema):
            method = get_smart_default(context.property_name, _effective_type(schema))
            if method is not None:
                try:
                    return call_generator_method(context.provider, method)
                except SchemaMocksError as exc:
                    logger.debug(
                        "smart_default_failed",
                        property_name=context.property_name,
                        method=method,
                        error=str(exc),
                    )

        if schema.all_of:
            # The node's own keywords join the merge; its nullability was handled above.
            residue = dataclasses.replace(schema, all_of=(), nullable=False)
            return self.generate(merge_schemas([*schema.all_of, residue]), context)
        if schema.one_of:
            return self._selector.pick_one(schema, context)
        if schema.any_of:
            return self._selector.pick_any(schema, context)

        match primary_kind(schema):
            case SchemaKind.OBJECT:
                return self._generate_object(schema, context)
            case SchemaKind.ARRAY:
                return self._generate_array(schema, context)
            case _:
                return generate_fallback(schema, context.provider)

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def _generate_object(
        self, schema: SchemaNode, context: GenerationContext
    ) -> dict[str, Any]:
        """Generate declared properties, then inject direct overrides.

        Required properties (and any property with an override at or below
        its path) are always generated; other properties are kept on a
        seeded coin flip.
        """
        result: dict[str, Any] = {}
        required = set(schema.required)

        for name, prop in schema.properties.items():
            prop_path = child_path(context.path, name)
            is_required = name in required

            if not is_required and not has_override_under(context.overrides, prop_path):
                if coin_flip(context.rng):
                    continue

            if prop in context.visited and context.depth >= context.max_depth:
                logger.debug(
                    "depth_guard_truncated",
                    path=prop_path,
                    depth=context.depth,
                    required=is_required,
                )
                if is_required:
                    result[name] = minimal_stub(prop)
                continue

            result[name] = self.generate(
                prop,
                context.descend(prop, path=prop_path, property_name=name),
            )

        # Required names without a declared schema still appear.
        for name in schema.required:
            result.setdefault(name, None)

        for name, value in direct_overrides(context.overrides, context.path):
            result[name] = value

        return result

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def _array_bounds(
        self, schema: SchemaNode, context: GenerationContext
    ) -> tuple[int, int]:
        """Resolve ``(min, max)`` item counts.

        Schema ``minItems``/``maxItems`` form the baseline. A matching
        array-length override (by property name first, then by path) narrows
        it, and an override with equal bounds pins the count exactly.
        Without an explicit upper bound from an override, the upper bound is
        capped at ``max(min, default_max_items)``. Finally the lower bound is
        raised to cover every array index that has a value override.
        """
        low = max(int(schema.min_items or 0), 0)
        high: int | None = int(schema.max_items) if schema.max_items is not None else None

        override = None
        if context.property_name:
            override = context.array_lengths.get(context.property_name)
        if override is None and context.path:
            override = context.array_lengths.get(context.path)

        if override is not None:
            override_low, override_high = override
            if override_low == override_high:
                low = high = override_low
            else:
                low = max(low, override_low)
                high = override_high if high is None else min(high, override_high)
        else:
            cap = max(low, context.default_max_items)
            high = cap if high is None else min(high, cap)

        # Every overridden index needs an element to land in.
        low = max(low, overridden_length(context.overrides, context.path))
        if high < low:
            high = low
        return low, high

    def _generate_array(self, schema: SchemaNode, context: GenerationContext) -> list[Any]:
        low, high = self._array_bounds(schema, context)
        count = context.rng.randint(low, high)

        items = schema.items
        if items is None:
            return [context.provider.word() for _ in range(count)]

        if items in context.visited and context.depth >= context.max_depth:
            logger.debug("depth_guard_truncated", path=context.path, depth=context.depth)
            return []

        item_lengths = descope_array_lengths(
            context.array_lengths, context.path, context.property_name
        )
        return [
            self.generate(
                items,
                context.descend(
                    items,
                    path=child_path(context.path, index),
                    property_name=None,
                    array_lengths=item_lengths,
                ),
            )
            for index in range(count)
        ]
