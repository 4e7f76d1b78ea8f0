"""Copying of single files and of whole directory trees."""

from __future__ import annotations

import os
import shutil
import stat
import sys
from collections.abc import Iterator

_WARNINGS_MESSAGE = "completed with warnings (see stderr for details)"


class CopyWarningsError(OSError):
    """Raised when a tree copy finished but some entries could not be copied.

    ``warnings`` holds one message per problem, in the order they occurred.
    """

    def __init__(self, warnings: list[str]) -> None:
        super().__init__(_WARNINGS_MESSAGE)
        self.warnings = list(warnings)

    def __str__(self) -> str:
        return _WARNINGS_MESSAGE


class _EntryFailure(OSError):
    """Internal: a per-entry problem that aborts the copy."""


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _copy_contents(source: str, destination: str) -> None:
    """Copy data and permission bits, replacing ``destination`` if present."""
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)


def copy_file(source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> None:
    """Copy the file ``source`` to ``destination``, overwriting it if it exists."""
    src = os.fspath(source)
    dst = os.fspath(destination)

    if not os.path.exists(src):
        raise FileNotFoundError(f"Source file does not exist: {src}")
    if os.path.isdir(dst):
        raise IsADirectoryError(f"Destination path is a directory: {dst}")

    try:
        _copy_contents(src, dst)
    except OSError as exc:
        raise OSError(f"cannot copy file: {_reason(exc)}") from exc


def _is_within(base: str, candidate: str) -> bool:
    """Tell whether ``candidate`` is ``base`` itself or lies below it.

    Compares whole path components, so a name such as ``..data`` is not
    mistaken for the parent component.
    """
    try:
        rel = os.path.relpath(candidate, base)
    except ValueError:
        return False
    if rel == os.curdir:
        return True
    return rel.split(os.sep, 1)[0] != os.pardir


def _walk(top: str, rel: str = "") -> Iterator[tuple[str, str, os.stat_result]]:
    """Yield (path, relative path, lstat) in pre-order, never following links.

    Directories that cannot be opened for lack of permission are skipped.
    """
    try:
        with os.scandir(top) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except PermissionError:
        return
    for entry in ordered:
        relative = os.path.join(rel, entry.name) if rel else entry.name
        info = os.lstat(entry.path)
        yield entry.path, relative, info
        if stat.S_ISDIR(info.st_mode):
            yield from _walk(entry.path, relative)


def _link_target(path: str, source_real: str, destination_real: str) -> str:
    """Target for the recreated link: retargeted only if absolute and inside source."""
    old_target = os.readlink(path)
    if not os.path.isabs(old_target):
        return old_target
    try:
        target_real = os.path.realpath(old_target)
    except OSError:
        return old_target
    if not _is_within(source_real, target_real):
        return old_target
    rel = os.path.relpath(target_real, source_real)
    if rel == os.curdir:
        return destination_real
    return os.path.join(destination_real, rel)


def copy_tree(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    continue_on_error: bool = True,
) -> None:
    """Recursively copy the directory ``source`` into ``destination``.

    Symbolic links are recreated after the files are copied; an absolute
    target that points inside ``source`` is redirected into ``destination``,
    any other target is kept as it is. A destination equal to or inside the
    source is refused.

    With ``continue_on_error`` each problem is reported on stderr and the
    copy goes on, ending in :class:`CopyWarningsError`; otherwise the first
    problem raises ``OSError``.
    """
    src = os.fspath(source)
    dst = os.fspath(destination)

    if not os.path.exists(src):
        raise FileNotFoundError(f"source directory does not exist: {src}")
    if not os.path.isdir(src):
        raise NotADirectoryError(f"source is not a directory: {src}")

    try:
        source_real = os.path.realpath(src)
    except OSError as exc:
        raise OSError(f"cannot resolve source path '{src}': {_reason(exc)}") from exc
    try:
        destination_real = os.path.realpath(dst)
    except OSError as exc:
        raise OSError(
            f"cannot resolve destination path '{dst}': {_reason(exc)}"
        ) from exc

    if _is_within(source_real, destination_real):
        raise ValueError(
            f"destination cannot be inside source: '{dst}' resolves inside '{src}'"
        )

    try:
        os.makedirs(dst, exist_ok=True)
    except OSError as exc:
        raise OSError(f"cannot create destination directory: {_reason(exc)}") from exc

    problems: list[str] = []

    def problem(message: str) -> None:
        if not continue_on_error:
            raise _EntryFailure(message)
        print(f"warning: {message}", file=sys.stderr)
        problems.append(message)

    links: list[tuple[str, str]] = []
    try:
        for path, relative, info in _walk(src):
            dest_path = os.path.join(dst, relative)
            mode = info.st_mode
            if stat.S_ISDIR(mode):
                try:
                    os.makedirs(dest_path, exist_ok=True)
                except OSError as exc:
                    problem(f"cannot create directory '{dest_path}': {_reason(exc)}")
            elif stat.S_ISREG(mode):
                try:
                    _copy_contents(path, dest_path)
                except OSError as exc:
                    problem(f"cannot copy '{path}' to '{dest_path}': {_reason(exc)}")
            elif stat.S_ISLNK(mode):
                links.append(
                    (dest_path, _link_target(path, source_real, destination_real))
                )
            else:
                problem(f"unknown file type: {path}")

        for link_path, target in links:
            try:
                os.symlink(target, link_path)
            except OSError as exc:
                problem(
                    f"cannot create symlink '{link_path}' -> '{target}': {_reason(exc)}"
                )
    except _EntryFailure as failure:
        raise OSError(str(failure)) from failure.__context__
    except OSError as exc:
        raise OSError(f"cannot copy directory: {exc}") from exc

    if problems:
        raise CopyWarningsError(problems)