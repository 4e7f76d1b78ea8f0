"""Queries about the working directory and about paths on disk."""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path
from typing import NoReturn


def _text(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path)
    if not isinstance(text, str):
        raise TypeError("Expected one string argument")
    return text


def _reraise(exc: OSError, message: str) -> NoReturn:
    """Raise an exception of the same kind as ``exc`` with a clearer message."""
    raise type(exc)(exc.errno, f"{message}: {exc.strerror}") from exc


def current_dir() -> str:
    """Return the current working directory."""
    return os.getcwd()


def change_dir(path: str | os.PathLike[str]) -> None:
    """Change the working directory to the canonical form of ``path``."""
    text = _text(path)

    try:
        absolute = text if os.path.isabs(text) else os.path.join(os.getcwd(), text)
    except OSError as exc:
        _reraise(exc, f"cannot resolve absolute path for '{text}'")

    try:
        canonical = str(Path(absolute).resolve(strict=True))
    except OSError as exc:
        _reraise(exc, f"cannot resolve canonical path '{absolute}'")
    except RuntimeError as exc:  # symlink loop on older Pythons
        raise OSError(
            errno.ELOOP,
            f"cannot resolve canonical path '{absolute}': {os.strerror(errno.ELOOP)}",
        ) from exc

    if not os.path.isdir(canonical):
        raise NotADirectoryError(
            errno.ENOTDIR,
            f"Path '{canonical}' is not a directory or cannot be accessed",
        )

    try:
        os.chdir(canonical)
    except OSError as exc:
        _reraise(exc, f"cannot change directory to '{canonical}'")


def _stat_mode(text: str, what: str) -> int | None:
    """Return the st_mode of ``text`` (following links), or None if it is absent."""
    try:
        return os.stat(text).st_mode
    except FileNotFoundError:
        return None
    except OSError as exc:
        _reraise(exc, what)


def is_dir(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` is an existing directory.

    A missing path is simply ``False``; other failures raise ``OSError``.
    """
    text = _text(path)
    if not text:
        raise ValueError("path cannot be empty")
    mode = _stat_mode(text, "cannot check directory")
    return mode is not None and stat.S_ISDIR(mode)


def is_file(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` is an existing regular file.

    A missing path is simply ``False``; other failures raise ``OSError``.
    """
    text = _text(path)
    if not text:
        raise ValueError("path cannot be empty")
    mode = _stat_mode(text, "cannot check file")
    return mode is not None and stat.S_ISREG(mode)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` is an existing regular file.

    Unlike :func:`is_file`, an empty path is accepted and answers ``False``.
    """
    text = _text(path)
    mode = _stat_mode(text, f"cannot check '{text}'")
    return mode is not None and stat.S_ISREG(mode)


def file_size(path: str | os.PathLike[str]) -> int:
    """Return the size in bytes of the regular file at ``path``."""
    text = _text(path)
    try:
        info = os.stat(text)
    except FileNotFoundError as exc:
        raise FileNotFoundError(errno.ENOENT, "path does not exist") from exc
    except OSError as exc:
        raise type(exc)(exc.errno, exc.strerror) from exc
    if not stat.S_ISREG(info.st_mode):
        raise OSError("path is not a regular file")
    return info.st_size