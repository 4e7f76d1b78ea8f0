"""Lexical helpers that pull components out of paths and join segments."""

from __future__ import annotations

import os
from collections.abc import Sequence

_NO_COMPONENT = "cannot extract path component"


def _as_text(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path)
    if not isinstance(text, str):
        raise TypeError("path must be a string or a str path-like object")
    return text


def _filename(text: str) -> str:
    return text.rpartition("/")[2]


def _split_extension(name: str) -> tuple[str, str]:
    """Split a file name into (stem, extension), the dot kept on the extension."""
    if name in ("", ".", ".."):
        return name, ""
    dot = name.rfind(".")
    if dot <= 0:
        return name, ""
    return name[:dot], name[dot:]


def _non_empty(value: str) -> str:
    if not value:
        raise ValueError(_NO_COMPONENT)
    return value


def basename(path: str | os.PathLike[str]) -> str:
    """Return the last component of ``path`` (file name with extension)."""
    return _non_empty(_filename(_as_text(path)))


def extension(path: str | os.PathLike[str]) -> str:
    """Return the extension of the file name, including the leading dot."""
    return _non_empty(_split_extension(_filename(_as_text(path)))[1])


def stem(path: str | os.PathLike[str]) -> str:
    """Return the file name without its extension."""
    return _non_empty(_split_extension(_filename(_as_text(path)))[0])


def parent(path: str | os.PathLike[str]) -> str:
    """Return the parent path of ``path``."""
    text = _as_text(path)
    if text and not text.strip("/"):
        return text  # only a root: its own parent
    head, sep, _ = text.rpartition("/")
    if not sep:
        raise ValueError(_NO_COMPONENT)
    trimmed = head.rstrip("/")
    if not trimmed:
        return head + sep  # the root itself
    return trimmed


def _collect_segments(args: tuple[object, ...]) -> list[str]:
    if args and isinstance(args[0], Sequence) and not isinstance(args[0], (str, bytes)):
        items = list(args[0])
        if len(items) < 2:
            raise ValueError("Table must contain at least two strings")
        non_string = "Table contains non-string elements"
    else:
        items = list(args)
        if len(items) < 2:
            raise ValueError("Expected at least two string arguments")
        non_string = "All arguments must be strings"

    segments: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(non_string)
        if not item:
            raise ValueError("Segments cannot be empty")
        segments.append(item)
    return segments


def join_path(*args: object) -> str:
    """Join path segments with exactly one separator between neighbours.

    Accepts either several string arguments or a single list/tuple of
    strings; at least two non-empty segments are required.
    """
    first, *rest = _collect_segments(args)
    path = first
    for segment in rest:
        if not path.endswith("/") and not segment.startswith("/"):
            path += "/"
        elif path.endswith("/") and segment.startswith("/"):
            path = path[:-1]
        path += segment
    return path