"""CLI commands for parsing saved pages offline."""

from typing import TextIO

import click

from ..core import VehicleType, parse_directions, parse_routes, parse_schedule
from .errors import handle_errors
from .formatters import (
    format_directions_json,
    format_directions_table,
    format_routes_json,
    format_routes_table,
    format_schedule_json,
    format_schedule_table,
)
from .options import VEHICLE_TYPE_NAMES, format_option

html_file = click.argument("html_file", type=click.File("r", encoding="utf-8"))


@click.group()
def parse() -> None:
    """Parse pages saved with --save-html or a browser."""
    pass


@parse.command("routes")
@html_file
@click.option(
    "--type",
    "vehicle_type",
    type=click.Choice(VEHICLE_TYPE_NAMES),
    help="Vehicle type of a route listing page (omit for search results)",
)
@format_option
def parse_routes_command(
    html_file: TextIO, vehicle_type: str | None, output_format: str
) -> None:
    """Parse a search-results or route-listing page."""
    kind = VehicleType[vehicle_type.upper()] if vehicle_type else None
    found = parse_routes(html_file.read(), kind)
    if output_format == "json":
        click.echo(format_routes_json(found))
    else:
        format_routes_table(found)


@parse.command("stops")
@html_file
@format_option
def parse_stops_command(html_file: TextIO, output_format: str) -> None:
    """Parse a route detail page."""
    directions = parse_directions(html_file.read())
    if output_format == "json":
        click.echo(format_directions_json(directions))
    else:
        format_directions_table(directions, verbose=True)


@parse.command("schedule")
@html_file
@format_option
@handle_errors
def parse_schedule_command(html_file: TextIO, output_format: str) -> None:
    """Parse a stop timetable page."""
    times = parse_schedule(html_file.read())
    if output_format == "json":
        click.echo(format_schedule_json(times))
    else:
        format_schedule_table(times)
