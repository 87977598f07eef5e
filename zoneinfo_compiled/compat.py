"""Compatibility settings for decoding malformed TZif files.

Transition type indexes outside of the local time type catalog are rejected
by default. This module provides a context manager that clamps them to the
first local time type instead, for reading files known to be broken.
"""

from __future__ import annotations

from collections.abc import Generator
import contextlib
import contextvars
import enum

__all__ = [
    "TypeIndexPolicy",
    "enable_clamp_type_index",
    "get_type_index_policy",
]


class TypeIndexPolicy(str, enum.Enum):
    """How to handle a transition with an out of range local time type index."""

    STRICT = "strict"
    """Fail with an InvalidTypeIndexError."""

    CLAMP = "clamp"
    """Use the first local time type."""


_type_index_policy = contextvars.ContextVar(
    "type_index_policy", default=TypeIndexPolicy.STRICT
)


@contextlib.contextmanager
def enable_clamp_type_index() -> Generator[None]:
    """Context manager to clamp out of range type indexes to the first type."""
    token = _type_index_policy.set(TypeIndexPolicy.CLAMP)
    try:
        yield
    finally:
        _type_index_policy.reset(token)


def get_type_index_policy() -> TypeIndexPolicy:
    """Return the type index policy for the current context."""
    return _type_index_policy.get()
