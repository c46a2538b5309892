"""CompositionSelector: ``oneOf`` single-pick and ``anyOf`` multi-pick.

oneOf:
  With a discriminator mapping, one mapping entry is drawn (seeded) and the
  sub-schema it references is located; the entry's tag becomes the
  discriminator value. Without a mapping, or when the reference matches no
  sub-schema, a sub-schema is drawn from the raw list and the discriminator
  value is read from that sub-schema's own property (``enum[0]`` or
  ``const``). The generated object's discriminator property is then
  overwritten with the resolved value.

anyOf:
  A seeded count in ``[1, n]`` of sub-schemas is taken from the front of a
  seeded shuffle. One pick is generated directly; several are merged first,
  so picks declaring different types raise INCOMPATIBLE_COMPOSITION_TYPES.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from schema_mocks.generators.merger import merge_schemas
from schema_mocks.overrides import child_path, has_override_under
from schema_mocks.schema.nodes import MISSING, SchemaNode

if TYPE_CHECKING:
    from schema_mocks.generators.engine import GenerationContext

__all__ = ["CompositionSelector"]

logger = structlog.get_logger(__name__)

_LOCAL_ONE_OF_POINTER = re.compile(r"#/oneOf/(\d+)")

GenerateFn = Callable[[SchemaNode, "GenerationContext"], Any]


def _last_segment(ref: str) -> str:
    return ref.rstrip("/").rsplit("/", 1)[-1]


def find_by_reference(sub_schemas: Sequence[SchemaNode], ref: str) -> SchemaNode | None:
    """Locate the sub-schema a discriminator mapping value points at.

    Tried in order: exact ``$ref`` match, ``title`` (or ``$ref`` tail) equal
    to the reference's last segment, then a local ``#/oneOf/<n>`` pointer.
    """
    for sub in sub_schemas:
        if sub.ref == ref:
            return sub

    name = _last_segment(ref)
    for sub in sub_schemas:
        if sub.title == name or (sub.ref and _last_segment(sub.ref) == name):
            return sub

    match = _LOCAL_ONE_OF_POINTER.fullmatch(ref)
    if match and int(match.group(1)) < len(sub_schemas):
        return sub_schemas[int(match.group(1))]
    return None


def discriminator_value(sub_schema: SchemaNode, property_name: str) -> Any:
    """Read the tag a sub-schema declares for ``property_name``.

    Returns ``enum[0]`` or ``const`` of the property, else the tail of the
    sub-schema's ``$ref`` (OpenAPI implicit mapping), else None.
    """
    properties = sub_schema.properties
    if sub_schema.all_of:
        properties = merge_schemas([sub_schema]).properties

    prop = properties.get(property_name)
    if prop is not None:
        if prop.enum:
            return prop.enum[0]
        if prop.const is not MISSING:
            return prop.const

    if sub_schema.ref:
        return _last_segment(sub_schema.ref)
    return None


class CompositionSelector:
    """Chooses ``oneOf``/``anyOf`` branches and generates the chosen schema.

    The selector does not generate values itself; it hands the chosen (or
    merged) schema back to the engine through ``generate``, with the same
    context, so property name and override path carry over unchanged.
    """

    def __init__(self, generate: GenerateFn) -> None:
        self._generate = generate

    def pick_one(self, schema: SchemaNode, context: GenerationContext) -> Any:
        """Generate one ``oneOf`` branch, honouring the discriminator."""
        rng = context.rng
        sub_schemas = schema.one_of
        discriminator = schema.discriminator

        chosen: SchemaNode | None = None
        tag: Any = None

        if discriminator is not None and discriminator.mapping:
            tag, ref = rng.choice(list(discriminator.mapping.items()))
            chosen = find_by_reference(sub_schemas, ref)
            if chosen is None:
                logger.debug("discriminator_mapping_unmatched", tag=tag, ref=ref)
                tag = None

        if chosen is None:
            chosen = rng.choice(sub_schemas)

        if discriminator is not None and tag is None:
            tag = discriminator_value(chosen, discriminator.property_name)

        value = self._generate(chosen, context)

        if discriminator is not None and tag is not None and isinstance(value, dict):
            # An explicit override of the discriminator property still wins.
            tag_path = child_path(context.path, discriminator.property_name)
            if not has_override_under(context.overrides, tag_path):
                value[discriminator.property_name] = tag
        return value

    def pick_any(self, schema: SchemaNode, context: GenerationContext) -> Any:
        """Generate one or more ``anyOf`` branches, merged into one value.

        Raises:
            SchemaMocksError: When several branches are drawn and they declare
                different types.
        """
        rng = context.rng
        candidates = list(schema.any_of)
        count = rng.randint(1, len(candidates))
        rng.shuffle(candidates)

        selected = candidates[:count]
        if len(selected) == 1:
            return self._generate(selected[0], context)
        return self._generate(merge_schemas(selected), context)
