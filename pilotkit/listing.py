"""Listing the regular files of a directory."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator


def _sorted_entries(directory: str) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _collect(base_real: str, directory: str, recursive: bool, out: list[str]) -> None:
    for entry in _sorted_entries(directory):
        if entry.is_file():
            out.append(os.path.relpath(os.path.realpath(entry.path), base_real))
        if recursive and entry.is_dir():
            _collect(base_real, entry.path, recursive, out)


def list_files(path: str | os.PathLike[str], recursive: bool = False) -> list[str]:
    """Return the regular files in ``path`` as paths relative to it.

    With ``recursive`` the subdirectories are listed too.
    """
    top = os.fspath(path)
    if not os.path.isdir(top):
        raise NotADirectoryError("Path is not a directory")
    files: list[str] = []
    _collect(os.path.realpath(top), top, recursive, files)
    return files


def _regular_files(directory: str, recursive: bool) -> Iterator[str]:
    for entry in _sorted_entries(directory):
        if entry.is_file():
            yield entry.path
        if recursive and entry.is_dir(follow_symlinks=False):
            yield from _regular_files(entry.path, recursive)


class FileIterator:
    """Iterator over the regular files of a directory, read up front."""

    def __init__(self, path: str | os.PathLike[str], recursive: bool = False) -> None:
        try:
            files = list(_regular_files(os.fspath(path), recursive))
        except OSError as exc:
            raise OSError(
                exc.errno, f"cannot access directory: {exc.strerror or exc}"
            ) from exc
        self._files: deque[str] | None = deque(files)

    def __iter__(self) -> FileIterator:
        return self

    def __next__(self) -> str:
        if self._files is None:
            raise ValueError("iterator has been closed")
        if not self._files:
            raise StopIteration
        return self._files.popleft()

    def has_next(self) -> bool:
        """Tell whether another file remains."""
        return bool(self._files)

    def close(self) -> None:
        """Release the file list; further use raises ``ValueError``."""
        self._files = None