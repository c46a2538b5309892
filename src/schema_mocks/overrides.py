"""Dot-path override helpers.

Override paths use dot notation with numeric segments for array indices,
matching the shape of the generated value: ``"user.name"``,
``"users.0.email"``. Array-length override keys may additionally contain a
``[*]`` wildcard segment (``"users[*].addresses"``) to scope a nested array
under every element of a repeated ancestor.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

__all__ = [
    "WILDCARD",
    "apply_overrides",
    "child_path",
    "descope_array_lengths",
    "direct_overrides",
    "has_override_under",
    "overridden_length",
    "set_by_path",
]

SEPARATOR = "."
WILDCARD = "[*]"


def child_path(parent: str, segment: str | int) -> str:
    """Join a parent path and a child segment (``"a" + "b" -> "a.b"``; root has no prefix)."""
    return f"{parent}{SEPARATOR}{segment}" if parent else str(segment)


def _is_index(segment: str) -> bool:
    return segment.isdigit()


def set_by_path(root: Any, path: str, value: Any) -> None:
    """Set ``value`` at ``path`` inside ``root``, creating containers as needed.

    Missing intermediate segments become a list when the following segment
    is a numeric index and a dict otherwise. Lists are padded with ``None``
    up to the index being written. If an existing value along the path is a
    scalar the walk stops and nothing is written; scalars are never replaced
    by containers. Once the walk succeeds the final value is always set,
    including ``None``.

    Args:
        root:  The dict (or list) to mutate in place.
        path:  Dot-notation path, e.g. ``"users.0.email"``.
        value: The value to store.
    """
    parts = path.split(SEPARATOR)
    current = root

    for part, next_part in zip(parts, parts[1:]):
        container = _step(current, part, create=[] if _is_index(next_part) else {})
        if container is None:
            return
        current = container

    _assign(current, parts[-1], value)


def _step(current: Any, part: str, create: Any) -> Any:
    """Return the container under ``part``, creating ``create`` when missing.

    Returns None when ``current`` cannot be traversed or holds a scalar there.
    """
    if isinstance(current, MutableMapping):
        if part not in current:
            current[part] = create
        child = current[part]
    elif isinstance(current, list) and _is_index(part):
        index = int(part)
        if index >= len(current):
            current.extend([None] * (index + 1 - len(current)))
        if current[index] is None:
            current[index] = create
        child = current[index]
    else:
        return None

    if not isinstance(child, MutableMapping | list):
        return None
    return child


def _assign(container: Any, part: str, value: Any) -> None:
    if isinstance(container, MutableMapping):
        container[part] = value
    elif isinstance(container, list) and _is_index(part):
        index = int(part)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value


def apply_overrides(root: Any, overrides: Mapping[str, Any]) -> Any:
    """Apply every ``path -> value`` pair of ``overrides`` to ``root`` in place.

    Returns ``root`` for convenience.
    """
    for path, value in overrides.items():
        set_by_path(root, path, value)
    return root


def has_override_under(overrides: Mapping[str, Any], path: str) -> bool:
    """True if ``path`` itself or any path below it has an override."""
    prefix = path + SEPARATOR
    return any(key == path or key.startswith(prefix) for key in overrides)


def direct_overrides(
    overrides: Mapping[str, Any], prefix_path: str
) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for overrides exactly one segment below ``prefix_path``.

    At the root (empty ``prefix_path``) every key without a separator is a
    direct override.
    """
    prefix = prefix_path + SEPARATOR if prefix_path else ""
    for key, value in overrides.items():
        if not key.startswith(prefix):
            continue
        relative = key[len(prefix) :]
        if relative and SEPARATOR not in relative:
            yield relative, value


def descope_array_lengths(
    array_lengths: Mapping[str, tuple[int, int]],
    path: str,
    property_name: str | None,
) -> dict[str, tuple[int, int]]:
    """Rewrite wildcard array-length keys scoped to the current array.

    A key starting with ``"{path}[*]."`` or, failing that,
    ``"{property_name}[*]."`` has that prefix stripped, so the elements of
    the current array see it as a plain path. At most one prefix is stripped
    per key. Non-matching keys pass through unchanged so deeper wildcards
    still apply further down. When a stripped key collides with an existing
    plain key, the stripped (more specific) bound wins.
    """
    prefixes = [f"{scope}{WILDCARD}{SEPARATOR}" for scope in (path, property_name) if scope]
    passthrough: dict[str, tuple[int, int]] = {}
    descoped: dict[str, tuple[int, int]] = {}

    for key, bounds in array_lengths.items():
        for prefix in prefixes:
            if key.startswith(prefix) and len(key) > len(prefix):
                descoped[key[len(prefix) :]] = bounds
                break
        else:
            passthrough[key] = bounds

    return {**passthrough, **descoped}


def overridden_length(overrides: Mapping[str, Any], array_path: str) -> int:
    """Smallest length of the array at ``array_path`` that holds every overridden index.

    ``{"tags.2": "x"}`` needs ``tags`` to have at least 3 elements. Returns 0
    when no override addresses an index of the array.
    """
    prefix = array_path + SEPARATOR if array_path else ""
    length = 0
    for key in overrides:
        if not key.startswith(prefix):
            continue
        head = key[len(prefix) :].split(SEPARATOR, 1)[0]
        if _is_index(head):
            length = max(length, int(head) + 1)
    return length
