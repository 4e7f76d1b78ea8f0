"""Hex digests of file contents."""

from __future__ import annotations

import hashlib
import os
from collections.abc import Callable
from typing import Any

_CHUNK_SIZE = 4096

_CONSTRUCTORS: dict[str, Callable[[], Any]] = {
    "md5": hashlib.md5,
    "blake2b512": hashlib.blake2b,
    "blake2s256": hashlib.blake2s,
}


def _new_hasher(algorithm: str) -> Any:
    constructor = _CONSTRUCTORS.get(algorithm.lower())
    if constructor is not None:
        return constructor()
    return hashlib.new(algorithm)


def file_checksum(path: str | os.PathLike[str], algorithm: str) -> str:
    """Hash the file at ``path`` with ``algorithm`` and return lowercase hex.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` for an
    unknown algorithm.
    """
    hasher = _new_hasher(algorithm)
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()


def md5sum(path: str | os.PathLike[str]) -> str:
    """Return the MD5 digest of a file as 32 hex characters."""
    return file_checksum(path, "md5")


def blake2b512sum(path: str | os.PathLike[str]) -> str:
    """Return the BLAKE2b-512 digest of a file as 128 hex characters."""
    return file_checksum(path, "blake2b512")


def blake2s256sum(path: str | os.PathLike[str]) -> str:
    """Return the BLAKE2s-256 digest of a file as 64 hex characters."""
    return file_checksum(path, "blake2s256")