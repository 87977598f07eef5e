"""Library for loading TZif files from disk or the tzdata package.

This follows the same approach as zoneinfo for finding timezone data. It
first checks the tzdata python package, then falls back to the system
TZPATH.
"""

from __future__ import annotations

import logging
import os
import zoneinfo
from functools import cache
from importlib import resources

from .cook import cook
from .exceptions import TZifError
from .limits import Limits
from .model import TimezoneInfo
from .parser import parse

__all__ = [
    "TimezoneInfoError",
    "available_timezones",
    "read",
    "read_file",
]

_LOGGER = logging.getLogger(__name__)


class TimezoneInfoError(TZifError):
    """Raised on error loading timezone information."""


def available_timezones() -> set[str]:
    """Return the set of system and tzdata timezone keys."""
    return _read_system_timezones() | _read_tzdata_timezones()


@cache
def _read_system_timezones() -> set[str]:
    """Read and cache the set of system and tzdata timezones."""
    return zoneinfo.available_timezones()


@cache
def _read_tzdata_timezones() -> set[str]:
    """Returns the set of valid timezones from tzdata only."""
    try:
        with resources.files("tzdata").joinpath("zones").open(
            "r", encoding="utf-8"
        ) as zones_file:
            return {line.strip() for line in zones_file.readlines()}
    except ModuleNotFoundError:
        return set()


@cache
def _find_tzfile(key: str) -> str | None:
    """Retrieve the path to a TZif file from a key."""
    for search_path in zoneinfo.TZPATH:
        filepath = os.path.join(search_path, key)
        if os.path.isfile(filepath):
            return filepath

    return None


def _iana_key_to_resource(key: str) -> tuple[str, str]:
    """Returns the package and resource file for the specified timezone."""
    if "/" not in key:
        return "tzdata.zoneinfo", key
    package_loc, resource = key.rsplit("/", 1)
    package = "tzdata.zoneinfo." + package_loc.replace("/", ".")
    return package, resource


def _decode(content: bytes, limits: Limits | None, name: str) -> TimezoneInfo:
    try:
        return cook(parse(content, limits))
    except TZifError as err:
        raise TimezoneInfoError(f"Unable to decode timezone data {name}: {err}") from err


def read_file(path: str | os.PathLike[str], limits: Limits | None = None) -> TimezoneInfo:
    """Read and decode a TZif file on disk."""
    _LOGGER.debug("Reading TZif file: %s", path)
    try:
        with open(path, "rb") as tzfile:
            content = tzfile.read()
    except OSError as err:
        raise TimezoneInfoError(f"Unable to read timezone file {path}: {err}") from err
    return _decode(content, limits, str(path))


def read(key: str, limits: Limits | None = None) -> TimezoneInfo:
    """Read the TZif file for an IANA key and return the timezone records."""
    _LOGGER.debug("Reading timezone: %s", key)
    if key not in _read_system_timezones() and key not in _read_tzdata_timezones():
        raise TimezoneInfoError(f"Unable to find timezone in system timezones: {key}")

    # Prefer tzdata package
    (package, resource) = _iana_key_to_resource(key)
    try:
        with resources.files(package).joinpath(resource).open("rb") as tzdata_file:
            return _decode(tzdata_file.read(), limits, key)
    except ModuleNotFoundError:
        _LOGGER.debug("tzdata package has no data for %s", key)
    except FileNotFoundError:
        _LOGGER.debug("tzdata package has no file for %s", key)

    # Fallback to zoneinfo file on local disk
    if (tzfile := _find_tzfile(key)) is not None:
        return read_file(tzfile, limits)

    raise TimezoneInfoError(f"Unable to find timezone data for {key}")
