# src/circbuf/core/errors.py
from __future__ import annotations

__all__ = [
    "CircBufError",
    "InvalidArgument",
    "IndexOutOfRange",
]


class CircBufError(Exception):
    """Base class for every error raised by circbuf."""


class InvalidArgument(CircBufError, ValueError):
    """Bad constructor / config value (e.g. capacity < 2)."""


class IndexOutOfRange(CircBufError, IndexError):
    """at()/put_at() index resolves outside the buffer bounds."""
