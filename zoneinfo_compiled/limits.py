"""Limits on the number of structures read from a TZif file.

The header of a TZif file declares the number of each structure in the data
block as a four byte unsigned integer. An invalid (or maliciously crafted)
file could ask the parser to read gigabytes of data, so the counts are
checked against a set of limits before anything sized by them is read.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Optional, Self

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from .exceptions import LimitReachedError

if TYPE_CHECKING:
    from .parser import Header

__all__ = [
    "Limits",
    "Structure",
]

_LOGGER = logging.getLogger(__name__)


class Structure(str, enum.Enum):
    """A structure counted in the TZif header, used for error reporting."""

    TRANSITIONS = "transitions"
    LOCAL_TIME_TYPES = "local_time_types"
    LEAP_SECONDS = "leap_seconds"
    GMT_FLAGS = "gmt_flags"
    STANDARD_FLAGS = "standard_flags"
    ABBREVIATION_CHARS = "abbreviation_chars"

    @property
    def label(self) -> str:
        """Return a human readable name for the structure."""
        return _LABELS[self]


_LABELS = {
    Structure.TRANSITIONS: "transitions",
    Structure.LOCAL_TIME_TYPES: "local time types",
    Structure.LEAP_SECONDS: "leap seconds",
    Structure.GMT_FLAGS: "GMT flags",
    Structure.STANDARD_FLAGS: "Standard Time flags",
    Structure.ABBREVIATION_CHARS: "timezone abbreviation chars",
}


class Limits(BaseModel):
    """Maximum numbers of structures that can be loaded from a TZif file.

    A limit of None means the count is not checked. The standard/wall and
    UTC/local flag arrays hold one entry per local time type, so they are
    capped by max_local_time_types.
    """

    max_transitions: Optional[NonNegativeInt] = None
    """Maximum number of transitions."""

    max_local_time_types: Optional[NonNegativeInt] = None
    """Maximum number of local time type records."""

    max_abbreviation_chars: Optional[NonNegativeInt] = None
    """Maximum number of bytes of time zone abbreviations."""

    max_leap_seconds: Optional[NonNegativeInt] = None
    """Maximum number of leap second records."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def unbounded(cls) -> Self:
        """No size limits, only suitable for trusted input."""
        return cls()

    @classmethod
    def sensible(cls) -> Self:
        """Limits that pose no danger of using lots of memory.

        These values are taken from the reference implementation's tzfile.h.
        """
        return cls(
            max_transitions=2000,
            max_local_time_types=256,
            max_abbreviation_chars=50,
            max_leap_seconds=50,
        )

    def verify(self, header: Header) -> None:
        """Check the counts read from the header are within these limits.

        The first count over its limit raises a LimitReachedError.
        """
        checks = (
            (Structure.TRANSITIONS, header.num_transitions, self.max_transitions),
            (
                Structure.LOCAL_TIME_TYPES,
                header.num_local_time_types,
                self.max_local_time_types,
            ),
            (Structure.LEAP_SECONDS, header.num_leap_seconds, self.max_leap_seconds),
            (Structure.GMT_FLAGS, header.num_gmt_flags, self.max_local_time_types),
            (
                Structure.STANDARD_FLAGS,
                header.num_standard_flags,
                self.max_local_time_types,
            ),
            (
                Structure.ABBREVIATION_CHARS,
                header.num_abbr_chars,
                self.max_abbreviation_chars,
            ),
        )
        for structure, requested, limit in checks:
            if limit is not None and requested > limit:
                _LOGGER.debug(
                    "Limit reached for %s: %s > %s", structure.label, requested, limit
                )
                raise LimitReachedError(structure, requested, limit)
