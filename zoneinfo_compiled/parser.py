"""Structural parser for compiled TZif files.

This module reads a buffer of bytes and parses it into a TZData structure,
doing a minimum of interpretation as to what the values mean. Values are
kept as the primitive numbers read from the file. See the cook module for
turning these numbers into time zone data.

The parser only reads the version 1 data block, which uses 32-bit times.
Any later data (the 64-bit data block and footer of version 2+ files) is
left unread. See rfc8536 and tzfile(5) for details on the file format.
"""

from __future__ import annotations

import enum
import io
import logging
import struct
from collections import namedtuple
from dataclasses import dataclass

from .exceptions import InvalidMagicNumberError, TruncatedError
from .limits import Limits

__all__ = [
    "Header",
    "RawLeapSecond",
    "RawLocalTimeType",
    "RawTransition",
    "TZData",
    "TZifVersion",
    "parse",
]

_LOGGER = logging.getLogger(__name__)

MAGIC = b"TZif"
_RESERVED_SIZE = 15

_HEADER_STRUCT = struct.Struct(
    "".join(
        [
            ">",  # Use standard size of packed value bytes
            "B",  # version (1 byte)
            "6L",  # isutcnt, isstdcnt, leapcnt, timecnt, typecnt, charcnt
        ]
    )
)

# Records specifying the local time type
_LOCAL_TIME_TYPE_STRUCT = struct.Struct(
    "".join(
        [
            ">",
            "l",  # utoff (4 bytes): Number of seconds to add to UTC to determine local time
            "B",  # dst (1 byte): Indicates the time is DST (1) or standard (0)
            "B",  # idx (1 byte): Offset index into the time zone designation octets
        ]
    )
)

# Records specifying when a leap second occurs
_LEAP_SECOND_STRUCT = struct.Struct(
    "".join(
        [
            ">",
            "l",  # occur (4 bytes): Time at which the leap second occurs
            "l",  # corr (4 bytes): Total correction after the occurrence
        ]
    )
)


class TZifVersion(enum.Enum):
    """Known versions of the TZif file format."""

    V1 = 0
    V2 = ord("2")
    V3 = ord("3")
    V4 = ord("4")


@dataclass(frozen=True)
class Header:
    """TZif header information."""

    version: int
    """The version byte of the file's format."""

    num_gmt_flags: int
    """The number of UTC/local indicators in the data block."""

    num_standard_flags: int
    """The number of standard/wall indicators in the data block."""

    num_leap_seconds: int
    """The number of leap second records in the data block."""

    num_transitions: int
    """The number of time transitions in the data block."""

    num_local_time_types: int
    """The number of local time type records in the data block."""

    num_abbr_chars: int
    """The number of bytes of time zone designations in the data block."""

    @property
    def format_version(self) -> TZifVersion | None:
        """Return the known format version, or None if not recognized."""
        try:
            return TZifVersion(self.version)
        except ValueError:
            return None


# A transition time paired with the index of its local time type
RawTransition = namedtuple("RawTransition", ["timestamp", "local_time_type_index"])

# A local time type record: offset (4 bytes), is_dst (1 byte) and the
# offset of its abbreviation in the designation octets (1 byte)
RawLocalTimeType = namedtuple("RawLocalTimeType", ["offset", "is_dst", "name_offset"])

RawLeapSecond = namedtuple("RawLeapSecond", ["timestamp", "leap_second_count"])


@dataclass(frozen=True)
class TZData:
    """The internal structure of a TZif file."""

    header: Header
    transitions: tuple[RawTransition, ...]
    time_info: tuple[RawLocalTimeType, ...]
    leap_seconds: tuple[RawLeapSecond, ...]
    strings: bytes
    """The pool of NUL-terminated time zone abbreviations."""

    standard_flags: bytes
    gmt_flags: bytes


class _Parser:
    """A sequential reader over the bytes of a TZif file."""

    def __init__(self, content: bytes) -> None:
        self._buf = io.BytesIO(content)
        self._size = len(content)

    def _read(self, size: int, section: str) -> bytes:
        """Read exactly size bytes or fail with a TruncatedError."""
        data = self._buf.read(size)
        if len(data) != size:
            raise TruncatedError(section, size, len(data))
        return data

    def read_magic(self) -> None:
        magic = self._buf.read(len(MAGIC))
        if magic != MAGIC:
            raise InvalidMagicNumberError(magic)

    def skip_reserved(self) -> None:
        self._read(_RESERVED_SIZE, "reserved")

    def read_header(self) -> Header:
        return Header(*_HEADER_STRUCT.unpack(self._read(_HEADER_STRUCT.size, "header")))

    def read_transitions(self, count: int) -> tuple[RawTransition, ...]:
        # A series of transition times, followed by the index of the local
        # time type for each transition time
        times = struct.unpack(f">{count}l", self._read(count * 4, "transition times"))
        types = self._read(count, "transition types")
        return tuple(RawTransition(*values) for values in zip(times, types))

    def read_local_time_types(self, count: int) -> tuple[RawLocalTimeType, ...]:
        data = self._read(count * _LOCAL_TIME_TYPE_STRUCT.size, "local time types")
        return tuple(
            RawLocalTimeType._make(values)
            for values in _LOCAL_TIME_TYPE_STRUCT.iter_unpack(data)
        )

    def read_leap_seconds(self, count: int) -> tuple[RawLeapSecond, ...]:
        data = self._read(count * _LEAP_SECOND_STRUCT.size, "leap seconds")
        return tuple(
            RawLeapSecond._make(values)
            for values in _LEAP_SECOND_STRUCT.iter_unpack(data)
        )

    def read_octets(self, count: int, section: str) -> bytes:
        return self._read(count, section)

    def remaining(self) -> int:
        return self._size - self._buf.tell()


def parse(content: bytes, limits: Limits | None = None) -> TZData:
    """Parse the bytes of a TZif file into a TZData structure.

    The header counts are checked against the limits (sensible limits by
    default) before any of the data block is read.
    """
    if limits is None:
        limits = Limits.sensible()
    parser = _Parser(content)
    parser.read_magic()
    parser.skip_reserved()

    header = parser.read_header()
    _LOGGER.debug("Read TZif header: %s", header)
    limits.verify(header)

    transitions = parser.read_transitions(header.num_transitions)
    time_info = parser.read_local_time_types(header.num_local_time_types)
    strings = parser.read_octets(header.num_abbr_chars, "abbreviations")
    leap_seconds = parser.read_leap_seconds(header.num_leap_seconds)
    standard_flags = parser.read_octets(header.num_standard_flags, "standard flags")
    gmt_flags = parser.read_octets(header.num_gmt_flags, "gmt flags")

    if remaining := parser.remaining():
        _LOGGER.debug("Ignoring %d trailing bytes after the data block", remaining)

    return TZData(
        header=header,
        transitions=transitions,
        time_info=time_info,
        leap_seconds=leap_seconds,
        strings=strings,
        standard_flags=standard_flags,
        gmt_flags=gmt_flags,
    )
