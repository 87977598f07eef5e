"""Data model for decoded time zone information."""

from __future__ import annotations

import datetime
import enum
from collections import namedtuple
from dataclasses import dataclass

__all__ = [
    "LeapSecond",
    "LocalTimeType",
    "TimezoneInfo",
    "Transition",
    "TransitionType",
]


class TransitionType(str, enum.Enum):
    """How the transition times associated with a local time type are specified."""

    STANDARD = "standard"
    """Transition times are in standard time."""

    WALL = "wall"
    """Transition times are in wall clock time."""

    UTC = "utc"
    """Transition times are in UTC."""


@dataclass(frozen=True)
class LocalTimeType:
    """A description of local time during a period when the clocks do not change."""

    name: str
    """The time zone abbreviation such as "EST" or "UTC"."""

    offset: int
    """Number of seconds added to UTC to determine local time."""

    is_dst: bool
    """Determines if local time is Daylight Savings Time (else Standard time)."""

    transition_type: TransitionType
    """How transitions into this local time type are specified."""

    @property
    def utcoffset(self) -> datetime.timedelta:
        """Return the offset from UTC as a timedelta."""
        return datetime.timedelta(seconds=self.offset)


@dataclass(frozen=True)
class Transition:
    """A point in time at which the local time type changes."""

    timestamp: int
    """Seconds since the epoch at which the rules for computing local time change."""

    local_time_type: LocalTimeType
    """The local time type in effect from the timestamp, shared with the catalog."""


LeapSecond = namedtuple("LeapSecond", ["timestamp", "leap_second_count"])
"""A leap second specification.

The timestamp is the time at which the leap second occurs and the
leap_second_count is the total number of leap seconds in effect after it.
"""


@dataclass(frozen=True)
class TimezoneInfo:
    """The interpreted contents of a TZif file."""

    base: LocalTimeType
    """The local time type in effect before the first transition."""

    transitions: tuple[Transition, ...]
    """Local time changes after the base, in the order given in the file."""

    local_time_types: tuple[LocalTimeType, ...]
    """All local time types, indexed as in the file."""

    leap_seconds: tuple[LeapSecond, ...] = ()
