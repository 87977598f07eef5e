"""Command line tool that prints the transitions in TZif files."""

from __future__ import annotations

import json
import logging
import sys

import click
from pydantic_core import to_jsonable_python

from . import timezoneinfo
from .exceptions import TZifError
from .limits import Limits
from .model import LocalTimeType, TimezoneInfo

_LOGGER = logging.getLogger(__name__)


def format_local_time_type(local_time_type: LocalTimeType) -> str:
    """Return a single line description of a local time type."""
    return (
        f"name:{local_time_type.name:5} offset:{local_time_type.offset:6} "
        f"DST:{str(local_time_type.is_dst):5} "
        f"type:{local_time_type.transition_type.value}"
    )


def dump_lines(tzinfo: TimezoneInfo) -> list[str]:
    """Return the base and the transitions sorted by timestamp, one per line."""
    lines = [f"{'base':>11}: {format_local_time_type(tzinfo.base)}"]
    for transition in sorted(tzinfo.transitions, key=lambda t: t.timestamp):
        lines.append(
            f"{transition.timestamp:11}: "
            f"{format_local_time_type(transition.local_time_type)}"
        )
    for leap_second in tzinfo.leap_seconds:
        lines.append(
            f"{leap_second.timestamp:11}: leap seconds:{leap_second.leap_second_count}"
        )
    return lines


def dump_json(tzinfo: TimezoneInfo) -> str:
    """Return the decoded time zone as JSON."""
    return json.dumps(to_jsonable_python(tzinfo), indent=2)


@click.command()
@click.argument("names", nargs=-1, required=True)
@click.option(
    "-z", "--zone", is_flag=True, help="Treat names as IANA keys instead of paths"
)
@click.option("--unbounded", is_flag=True, help="Disable limits on structure counts")
@click.option("--json", "as_json", is_flag=True, help="Print the decoded data as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    names: tuple[str, ...], zone: bool, unbounded: bool, as_json: bool, verbose: bool
) -> None:
    """Decode TZif files and print their transitions."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    limits = Limits.unbounded() if unbounded else Limits.sensible()

    failed = False
    for name in names:
        try:
            if zone:
                tzinfo = timezoneinfo.read(name, limits)
            else:
                tzinfo = timezoneinfo.read_file(name, limits)
        except TZifError as err:
            _LOGGER.debug("Failed to decode %s", name, exc_info=True)
            click.echo(f"{name}: {err}", err=True)
            failed = True
            continue

        if as_json:
            click.echo(dump_json(tzinfo))
            continue
        click.echo(f"{name}:")
        for line in dump_lines(tzinfo):
            click.echo(line)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    cli()
