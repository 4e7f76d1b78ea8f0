"""Searching a directory tree for entries that match a set of filters."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator


def _check_int(value: object, option: str) -> None:
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise TypeError(f"find: '{option}' must be a number")


def _check_str(value: object, option: str) -> None:
    if value is not None and not isinstance(value, str):
        raise TypeError(f"find: '{option}' must be a string")


def _compile(pattern: str | None, flags: int = 0) -> re.Pattern[str] | None:
    if not pattern:
        return None
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise ValueError(f"invalid regular expression '{pattern}': {exc}") from exc


def _walk(top: str, depth: int, maxdepth: int | None) -> Iterator[tuple[os.DirEntry[str], int]]:
    """Yield (entry, depth) in pre-order; links to directories are not entered."""
    with os.scandir(top) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        yield entry, depth
        if (maxdepth is None or depth < maxdepth) and entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path, depth + 1, maxdepth)


def find(
    root: str | os.PathLike[str],
    *,
    mindepth: int = 0,
    maxdepth: int | None = None,
    kind: str | None = None,
    name: str | None = None,
    iname: str | None = None,
    path: str | None = None,
) -> list[str]:
    """Return the paths below ``root`` that pass every given filter.

    Depth 0 is the direct children of ``root``. ``kind`` is ``"f"`` for
    regular files or ``"d"`` for directories (links are followed for the
    test). ``name`` and ``iname`` are regular expressions that must match
    the whole file name, the latter ignoring case; ``path`` is a regular
    expression searched anywhere in the full path.
    """
    _check_int(mindepth, "mindepth")
    _check_int(maxdepth, "maxdepth")
    _check_str(kind, "type")
    _check_str(name, "name")
    _check_str(iname, "iname")
    _check_str(path, "path")

    top = os.fspath(root)
    if not os.path.exists(top):
        raise FileNotFoundError(f"path does not exist: {top}")
    if not os.path.isdir(top):
        raise NotADirectoryError(f"path is not a directory: {top}")

    name_re = _compile(name)
    iname_re = _compile(iname, re.IGNORECASE)
    path_re = _compile(path)
    low = mindepth if mindepth is not None else 0

    def matches(entry: os.DirEntry[str]) -> bool:
        if kind == "f" and not entry.is_file():
            return False
        if kind == "d" and not entry.is_dir():
            return False
        if name_re is not None and not name_re.fullmatch(entry.name):
            return False
        if iname_re is not None and not iname_re.fullmatch(entry.name):
            return False
        if path_re is not None and not path_re.search(entry.path):
            return False
        return True

    return [
        entry.path
        for entry, depth in _walk(top, 0, maxdepth)
        if depth >= low and matches(entry)
    ]