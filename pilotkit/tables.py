"""Deep copies of nested dicts and lists that keep cycles and sharing."""

from __future__ import annotations

import copy
from typing import Any, TypeVar

MAX_DEPTH = 75

T = TypeVar("T")


class TooDeepError(ValueError):
    """Raised when a structure nests deeper than the allowed depth."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Table is too deep to copy (max depth {max_depth} exceeded)")
        self.max_depth = max_depth


def _is_table(value: object) -> bool:
    return isinstance(value, (dict, list))


def _copy(value: Any, depth: int, max_depth: int, visited: dict[int, Any]) -> Any:
    if depth > max_depth:
        raise TooDeepError(max_depth)

    existing = visited.get(id(value))
    if existing is not None:
        return existing

    # A shallow copy keeps the container's type and attributes; its
    # contents are then rebuilt. It is registered before filling so that
    # cycles and shared children find this very copy.
    duplicate = copy.copy(value)
    duplicate.clear()
    visited[id(value)] = duplicate

    if isinstance(value, dict):
        for key, item in value.items():
            duplicate[key] = (
                _copy(item, depth + 1, max_depth, visited) if _is_table(item) else item
            )
    else:
        duplicate.extend(
            _copy(item, depth + 1, max_depth, visited) if _is_table(item) else item
            for item in value
        )
    return duplicate


def deep_copy(value: T, max_depth: int = MAX_DEPTH) -> T:
    """Return a deep copy of the dict or list ``value``.

    Nested dicts and lists are copied; keys and every other value are
    reused as they are. A container reached several times, including
    through a cycle, is copied once and that copy is reused everywhere.
    Raises :class:`TooDeepError` past ``max_depth`` levels of nesting.
    """
    if not _is_table(value):
        raise TypeError("Argument must be a table")
    visited: dict[int, Any] = {}
    return _copy(value, 0, max_depth, visited)