"""Ownership and permission bits of files and directories."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass


@dataclass(frozen=True)
class FileAttributes:
    """Permission bits (``0o777`` part), owner UID and group GID of a path."""

    mode: int
    owner: int
    group: int


def get_attributes(path: str | os.PathLike[str]) -> FileAttributes:
    """Return the permission bits, owner and group of ``path``."""
    info = os.stat(path)
    return FileAttributes(
        mode=stat.S_IMODE(info.st_mode) & 0o777,
        owner=info.st_uid,
        group=info.st_gid,
    )


def set_attributes(
    path: str | os.PathLike[str],
    owner: int,
    group: int,
    mode: int | None = None,
) -> None:
    """Change the owner and group of ``path`` and, if given, its permissions."""
    if owner < 0 or group < 0:
        raise ValueError("UID and GID must be non-negative")

    try:
        os.chown(path, owner, group)
    except OSError as exc:
        raise type(exc)(exc.errno, exc.strerror) from exc

    if mode is not None:
        try:
            os.chmod(path, mode & 0o7777)
        except OSError as exc:
            raise type(exc)(exc.errno, exc.strerror) from exc