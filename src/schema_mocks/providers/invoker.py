"""Named generator methods: resolve ``"namespace.method"`` on a Faker instance.

A path such as ``"internet.email"`` names a Faker provider module
(``internet``) and a method on it (``email``). The method segment may be
written in snake_case or camelCase, so faker-js style paths like
``"internet.userName"`` resolve to ``user_name``.

Results are converted to plain JSON-ready values: dates and datetimes become
ISO 8601 strings, Decimals become floats, UUIDs become strings.
"""

from __future__ import annotations

import datetime as dt
import uuid
from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from schema_mocks.errors import ErrorKind, SchemaMocksError
from schema_mocks.naming import NameNormalizer

if TYPE_CHECKING:
    from schema_mocks.protocols import DataProvider

__all__ = ["call_generator_method", "resolve_generator_method", "to_plain"]

_normalizer = NameNormalizer()


def _unresolvable(path: str, detail: str) -> SchemaMocksError:
    return SchemaMocksError(
        ErrorKind.UNRESOLVABLE_GENERATOR_PATH,
        f'x-faker-method "{path}" is not a valid generator path. {detail}',
        value=path,
    )


def _namespace_names(candidate: Any) -> set[str]:
    """Names a provider instance answers to (``__provider__`` and its module)."""
    names: set[str] = set()
    declared = getattr(candidate, "__provider__", "")
    if declared:
        names.add(declared)
        names.add(declared.rsplit(".", 1)[-1])
    # faker.providers.<namespace>[.<locale>]
    parts = type(candidate).__module__.split(".")
    if parts[:2] == ["faker", "providers"] and len(parts) > 2:
        names.add(parts[2])
    return names


def _find_namespace(provider: DataProvider, namespace: str) -> Any | None:
    for candidate in provider.get_providers():
        if namespace in _namespace_names(candidate):
            return candidate
    return None


def resolve_generator_method(provider: DataProvider, path: str) -> Any:
    """Return the bound method named by ``path``.

    Raises:
        SchemaMocksError: (UNRESOLVABLE_GENERATOR_PATH) when the path has
            fewer than two segments, the namespace or method does not exist,
            or the attribute is not callable.
    """
    parts = path.split(".")
    if len(parts) < 2 or not all(parts):
        raise _unresolvable(
            path, 'Expected at least two segments (e.g. "internet.email").'
        )

    namespace, method_name = ".".join(parts[:-1]), parts[-1]
    target = _find_namespace(provider, namespace)
    if target is None:
        raise _unresolvable(path, f'Namespace "{namespace}" not found.')

    for candidate_name in (method_name, _normalizer.snake_case(method_name)):
        if candidate_name.startswith("_"):
            continue
        method = getattr(target, candidate_name, None)
        if method is None:
            continue
        if not callable(method):
            raise _unresolvable(
                path,
                f'"{method_name}" is of type {type(method).__name__}, not a callable.',
            )
        return method

    raise _unresolvable(path, f'Method "{method_name}" not found.')


def call_generator_method(provider: DataProvider, path: str) -> Any:
    """Resolve ``path`` on ``provider``, call it without arguments and return a plain value.

    Raises:
        SchemaMocksError: (UNRESOLVABLE_GENERATOR_PATH) as for
            ``resolve_generator_method``, and also when the method cannot be
            called without arguments.
    """
    method = resolve_generator_method(provider, path)
    try:
        result = method()
    except TypeError as exc:
        raise _unresolvable(path, f"It cannot be called without arguments: {exc}") from exc
    return to_plain(result)


def to_plain(value: Any) -> Any:
    """Convert provider output to null/bool/number/string/list/dict values."""
    # bool before the numeric checks: bool subclasses int
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, dt.datetime | dt.date | dt.time):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, bytes):
        return value.decode("latin-1")
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, list | tuple | set | frozenset):
        return [to_plain(item) for item in value]
    return str(value)
