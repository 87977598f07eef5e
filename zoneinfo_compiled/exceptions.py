"""Exceptions for the zoneinfo_compiled library."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .limits import Structure


class TZifError(Exception):
    """Base exception for all errors decoding a TZif file."""


class InvalidMagicNumberError(TZifError):
    """Raised when the buffer does not start with the TZif magic bytes.

    The 'actual' attribute holds the bytes that were read in place of the
    signature, which may be shorter than four bytes for a short buffer.
    """

    def __init__(self, actual: bytes) -> None:
        """Initialize InvalidMagicNumberError."""
        super().__init__(f"Invalid magic number: {actual!r}")
        self.actual = actual


class TruncatedError(TZifError):
    """Raised when the buffer ends before a section is fully read."""

    def __init__(self, section: str, expected: int, available: int) -> None:
        """Initialize TruncatedError."""
        super().__init__(
            f"Buffer truncated reading {section}: expected {expected} bytes, "
            f"{available} available"
        )
        self.section = section
        self.expected = expected
        self.available = available


class LimitReachedError(TZifError):
    """Raised when a header count exceeds the configured limits.

    This is raised before any structures are read, so a crafted header
    can't make the parser read large amounts of data.
    """

    def __init__(self, structure: Structure, requested: int, limit: int) -> None:
        """Initialize LimitReachedError."""
        super().__init__(
            f"Too many {structure.label} (tried to read {requested}, limit was {limit})"
        )
        self.structure = structure
        self.requested = requested
        self.limit = limit


class InvalidTextError(TZifError):
    """Raised when a time zone abbreviation is not valid UTF-8."""

    def __init__(self, offset: int, data: bytes) -> None:
        """Initialize InvalidTextError."""
        super().__init__(f"Abbreviation at offset {offset} is not valid UTF-8: {data!r}")
        self.offset = offset
        self.data = data


class InvalidTypeIndexError(TZifError):
    """Raised when a transition references a local time type that does not exist."""

    def __init__(self, position: int, index: int, count: int) -> None:
        """Initialize InvalidTypeIndexError."""
        super().__init__(
            f"Transition {position} references local time type {index}, "
            f"only {count} defined"
        )
        self.position = position
        self.index = index
        self.count = count


class NoTransitionsError(TZifError):
    """Raised when there is no transition to determine the base offset from UTC."""


class NoLocalTimeTypesError(NoTransitionsError):
    """Raised when the file has neither transitions nor local time types."""
