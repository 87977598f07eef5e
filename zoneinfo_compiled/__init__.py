"""
.. include:: ../README.md
"""

from .cook import cook
from .exceptions import TZifError
from .limits import Limits
from .model import LeapSecond, LocalTimeType, TimezoneInfo, Transition, TransitionType
from .parser import TZData, parse

__all__ = [
    "LeapSecond",
    "Limits",
    "LocalTimeType",
    "TZData",
    "TZifError",
    "TimezoneInfo",
    "Transition",
    "TransitionType",
    "compat",
    "cook",
    "decode",
    "exceptions",
    "parse",
    "timezoneinfo",
]


def decode(content: bytes) -> TimezoneInfo:
    """Parse and interpret the bytes of a TZif file using sensible limits."""
    return cook(parse(content, Limits.sensible()))
