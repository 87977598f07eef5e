"""Test fixtures."""

from collections.abc import Callable, Sequence
import struct

import pytest

EST = b"".join(
    [
        b"\x54\x5a\x69\x66",  # magic
        b"\x00" * 15,  # reserved
        b"\x00",  # version
        b"\x00\x00\x00\x01",  # num_gmt_flags
        b"\x00\x00\x00\x01",  # num_standard_flags
        b"\x00\x00\x00\x00",  # num_leap_seconds
        b"\x00\x00\x00\x00",  # num_transitions
        b"\x00\x00\x00\x01",  # num_local_time_types
        b"\x00\x00\x00\x04",  # num_abbr_chars
        b"\xff\xff\xb9\xb0\x00\x00",  # local time type: -18000, not dst, name 0
        b"EST\x00",  # abbreviations
        b"\x00",  # standard flags
        b"\x00",  # gmt flags
    ]
)

# Historical Asia/Tokyo data with 9 transitions and 3 local time types
JAPAN = bytes(
    [
        0x54, 0x5A, 0x69, 0x66, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x03,
        0x00, 0x00, 0x00, 0x03, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x09, 0x00, 0x00, 0x00, 0x03,
        0x00, 0x00, 0x00, 0x0D, 0xC3, 0x55, 0x3B, 0x70,
        0xD7, 0x3E, 0x1E, 0x90, 0xD7, 0xEC, 0x16, 0x80,
        0xD8, 0xF9, 0x16, 0x90, 0xD9, 0xCB, 0xF8, 0x80,
        0xDB, 0x07, 0x1D, 0x10, 0xDB, 0xAB, 0xDA, 0x80,
        0xDC, 0xE6, 0xFF, 0x10, 0xDD, 0x8B, 0xBC, 0x80,
        0x02, 0x01, 0x02, 0x01, 0x02, 0x01, 0x02, 0x01,
        0x02, 0x00, 0x00, 0x7E, 0x90, 0x00, 0x00, 0x00,
        0x00, 0x8C, 0xA0, 0x01, 0x05, 0x00, 0x00, 0x7E,
        0x90, 0x00, 0x09, 0x4A, 0x43, 0x53, 0x54, 0x00,
        0x4A, 0x44, 0x54, 0x00, 0x4A, 0x53, 0x54, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    ]
)  # fmt: skip


def build_tzif(
    transitions: Sequence[tuple[int, int]] = (),
    local_time_types: Sequence[tuple[int, int, int]] = (),
    strings: bytes = b"",
    leap_seconds: Sequence[tuple[int, int]] = (),
    standard_flags: bytes = b"",
    gmt_flags: bytes = b"",
    version: bytes = b"\x00",
) -> bytes:
    """Assemble a TZif file with a version 1 data block."""
    header = struct.pack(
        ">4s15xc6L",
        b"TZif",
        version,
        len(gmt_flags),
        len(standard_flags),
        len(leap_seconds),
        len(transitions),
        len(local_time_types),
        len(strings),
    )
    return b"".join(
        [
            header,
            b"".join(struct.pack(">l", timestamp) for timestamp, _ in transitions),
            bytes(index for _, index in transitions),
            b"".join(struct.pack(">lBB", *ltt) for ltt in local_time_types),
            strings,
            b"".join(struct.pack(">ll", *leap) for leap in leap_seconds),
            standard_flags,
            gmt_flags,
        ]
    )


@pytest.fixture
def est() -> bytes:
    """Fixture for a file with a single local time type and no transitions."""
    return EST


@pytest.fixture
def japan() -> bytes:
    """Fixture for a file with historical Asia/Tokyo transitions."""
    return JAPAN


@pytest.fixture
def tzif_builder() -> Callable[..., bytes]:
    """Fixture that assembles TZif files from their structures."""
    return build_tzif
