"""Interpretation of the raw structures of a TZif file.

The parser leaves the data block as it appears in the file: abbreviations
are offsets into a pool of bytes, transitions refer to local time types by
index, and each local time type's classification is split across two flag
arrays stored after the abbreviations. Cooking resolves all of these into a
self-contained TimezoneInfo.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .compat import TypeIndexPolicy, get_type_index_policy
from .exceptions import (
    InvalidTextError,
    InvalidTypeIndexError,
    NoLocalTimeTypesError,
)
from .model import LeapSecond, LocalTimeType, TimezoneInfo, Transition, TransitionType
from .parser import TZData

__all__ = [
    "cook",
    "extract_name",
    "flag_or_default",
    "flags_to_transition_type",
    "resolve_type_index",
]

_LOGGER = logging.getLogger(__name__)


def extract_name(strings: bytes, offset: int) -> str:
    """Find the NUL terminated abbreviation starting at the specified offset.

    An abbreviation that runs to the end of the pool without a NUL is
    returned as is.
    """
    end = strings.find(b"\x00", offset)
    if end == -1:
        end = len(strings)
    name_bytes = strings[offset:end]
    try:
        return name_bytes.decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidTextError(offset, name_bytes) from err


def flag_or_default(flags: bytes, index: int) -> bool:
    """Return the indicator for a local time type, False when the array is short."""
    if index < len(flags):
        return flags[index] != 0
    return False


def flags_to_transition_type(standard: bool, utc: bool) -> TransitionType:
    """Combine the standard/wall and UTC/local indicators into a TransitionType.

    The two indicators are stored in separate arrays, the first completely
    before the second, so they can only be combined after the whole data
    block has been read.
    """
    if utc:
        return TransitionType.UTC
    if standard:
        return TransitionType.STANDARD
    return TransitionType.WALL


def resolve_type_index(
    local_time_types: Sequence[LocalTimeType],
    position: int,
    index: int,
    policy: TypeIndexPolicy,
) -> LocalTimeType:
    """Return the local time type referenced by a transition."""
    if index < len(local_time_types):
        return local_time_types[index]
    if policy == TypeIndexPolicy.STRICT:
        raise InvalidTypeIndexError(position, index, len(local_time_types))
    if not local_time_types:
        raise NoLocalTimeTypesError(
            f"Transition {position} references local time type {index}, none defined"
        )
    _LOGGER.warning(
        "Transition %d references local time type %d of %d, using type 0",
        position,
        index,
        len(local_time_types),
    )
    return local_time_types[0]


def _new_local_time_type(tzdata: TZData, index: int) -> LocalTimeType:
    (offset, is_dst, name_offset) = tzdata.time_info[index]
    return LocalTimeType(
        name=extract_name(tzdata.strings, name_offset),
        offset=offset,
        is_dst=is_dst != 0,
        transition_type=flags_to_transition_type(
            flag_or_default(tzdata.standard_flags, index),
            flag_or_default(tzdata.gmt_flags, index),
        ),
    )


def cook(
    tzdata: TZData, *, type_index_policy: TypeIndexPolicy | None = None
) -> TimezoneInfo:
    """Interpret the raw structures of a TZif file.

    The first transition's local time type becomes the base, in effect for
    all time before the remaining transitions. A file without transitions
    uses its first local time type as the base.
    """
    if type_index_policy is None:
        type_index_policy = get_type_index_policy()

    # First, build up the list of local time types...
    local_time_types = tuple(
        _new_local_time_type(tzdata, index) for index in range(len(tzdata.time_info))
    )

    # ...then, link each transition with the time type it refers to.
    transitions = [
        Transition(
            timestamp=transition.timestamp,
            local_time_type=resolve_type_index(
                local_time_types,
                position,
                transition.local_time_type_index,
                type_index_policy,
            ),
        )
        for position, transition in enumerate(tzdata.transitions)
    ]

    leap_seconds = tuple(
        LeapSecond(leap_second.timestamp, leap_second.leap_second_count)
        for leap_second in tzdata.leap_seconds
    )

    if not transitions:
        if not local_time_types:
            raise NoLocalTimeTypesError("File has no transitions or local time types")
        _LOGGER.debug("No transitions, using local time type 0 as the base")
        base = local_time_types[0]
    else:
        base = transitions.pop(0).local_time_type

    return TimezoneInfo(
        base=base,
        transitions=tuple(transitions),
        local_time_types=local_time_types,
        leap_seconds=leap_seconds,
    )
