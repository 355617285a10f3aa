"""CLI main entry point for Perm transit schedules."""

import logging
from datetime import date
from datetime import datetime as dt_module

import click
from rich.console import Console

from ..core import GortransScraper, VehicleType
from ..core.scraper import BASE_URL, DEFAULT_TIMEOUT, RETRY_ATTEMPTS
from .errors import error_console, handle_errors
from .formatters import (
    format_directions_json,
    format_directions_table,
    format_routes_json,
    format_routes_table,
    format_schedule_json,
    format_schedule_table,
)
from .options import VEHICLE_TYPE_NAMES, format_option
from .parse_commands import parse

console = Console()

timeout_option = click.option(
    "--timeout", "-t", default=DEFAULT_TIMEOUT, help="Request timeout in seconds"
)


def parse_day(day_str: str | None) -> date | None:
    """Parse a YYYY-MM-DD option value."""
    if not day_str:
        return None
    try:
        return dt_module.strptime(day_str, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter("Invalid date format. Use YYYY-MM-DD") from None


@click.group()
@click.version_option(version="0.1.0")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Perm Transit Schedule - Routes, stops and timetables of Perm city transport."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("query")
@format_option
@timeout_option
@click.option(
    "--save-html",
    help="Save raw HTML response to file for debugging",
    type=click.Path(),
)
@handle_errors
def search(query: str, output_format: str, timeout: int, save_html: str) -> None:
    """Search routes by number.

    Examples:
        perm-transit search 80
        perm-transit search 7т --format json
    """
    with console.status(f"[bold green]Searching routes for {query}..."):
        scraper = GortransScraper(timeout=timeout)
        routes = scraper.search(query, save_html_path=save_html)

    if not routes:
        error_console.print("[yellow]No routes found[/yellow]")
        return

    if output_format == "json":
        click.echo(format_routes_json(routes))
    else:
        format_routes_table(routes)


@cli.command()
@click.option(
    "--type",
    "vehicle_type",
    type=click.Choice(VEHICLE_TYPE_NAMES),
    default="bus",
    help="Vehicle type to list",
)
@format_option
@timeout_option
@handle_errors
def routes(vehicle_type: str, output_format: str, timeout: int) -> None:
    """List all routes of one vehicle type.

    Examples:
        perm-transit routes --type tram
    """
    kind = VehicleType[vehicle_type.upper()]
    with console.status(f"[bold green]Loading {kind.label} routes..."):
        scraper = GortransScraper(timeout=timeout)
        found = scraper.all_routes(kind)

    if output_format == "json":
        click.echo(format_routes_json(found))
    else:
        format_routes_table(found)


@cli.command()
@click.argument("locator")
@format_option
@timeout_option
@click.option("--verbose", "-v", is_flag=True, help="Show timetable references")
@handle_errors
def stops(locator: str, output_format: str, timeout: int, verbose: bool) -> None:
    """Show directions and stops of a route.

    Examples:
        perm-transit stops /route/80/
    """
    with console.status(f"[bold green]Loading stops of {locator}..."):
        scraper = GortransScraper(timeout=timeout)
        directions = scraper.stops(locator)

    if output_format == "json":
        click.echo(format_directions_json(directions))
    else:
        format_directions_table(directions, verbose=verbose)


@cli.command()
@click.argument("reference")
@format_option
@timeout_option
@click.option("--date", "-d", "day_str", help="Date for the times (YYYY-MM-DD)")
@handle_errors
def schedule(reference: str, output_format: str, timeout: int, day_str: str) -> None:
    """Show arrival times of a stop.

    Examples:
        perm-transit schedule /time-table/80/1701
        perm-transit schedule /time-table/80/1701 --format json --date 2025-10-31
    """
    day = parse_day(day_str)
    with console.status(f"[bold green]Loading timetable {reference}..."):
        scraper = GortransScraper(timeout=timeout)
        times = scraper.schedule(reference)

    if output_format == "json":
        click.echo(format_schedule_json(times, day))
    else:
        format_schedule_table(times)


cli.add_command(parse)


@cli.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
def show_config() -> None:
    """Show current configuration."""
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Site: {BASE_URL}")
    console.print(f"• Default timeout: {DEFAULT_TIMEOUT} seconds")
    console.print(f"• Request attempts: {RETRY_ATTEMPTS}")
    console.print("• Default format: table")


if __name__ == "__main__":
    cli()
