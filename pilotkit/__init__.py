"""Filesystem, checksum, search, copy and deep-copy helpers for scripting."""

__version__ = "0.1.0"