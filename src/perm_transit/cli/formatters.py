"""Output formatters for CLI display."""

import json
from datetime import date

from rich.console import Console
from rich.table import Table

from ..core.models import Direction, Route, ScheduledTime

console = Console()


def format_routes_table(routes: list[Route]) -> None:
    """Display routes as a rich table."""
    if not routes:
        console.print("No routes found.")
        return

    table = Table(title="Routes", show_header=True, header_style="bold magenta")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Number", style="yellow", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Locator", style="dim")

    for route in routes:
        table.add_row(
            route.vehicle_type.label, route.code, route.display_name, route.locator
        )

    console.print(table)


def format_routes_json(routes: list[Route]) -> str:
    """Format routes as JSON."""
    routes_data = [
        {
            "locator": route.locator,
            "display_name": route.display_name,
            "vehicle_type": route.vehicle_type.name.lower(),
            "number": route.number,
            "literal_suffix": route.literal_suffix,
        }
        for route in routes
    ]
    return json.dumps(routes_data, ensure_ascii=False, indent=2)


def format_directions_table(directions: list[Direction], verbose: bool = False) -> None:
    """Display directions with their stops, one table per direction."""
    if not directions:
        console.print("No directions found.")
        return

    for direction in directions:
        console.print(f"Direction: {direction.name}", style="bold", markup=False)
        table = Table(show_header=True, header_style="bold blue")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Stop", style="cyan")
        if verbose:
            table.add_column("Timetable", style="dim")

        for idx, stop in enumerate(direction.stops, 1):
            row = [str(idx), stop.name]
            if verbose:
                row.append(stop.scheduling_reference)
            table.add_row(*row)

        console.print(table)


def format_directions_json(directions: list[Direction]) -> str:
    """Format directions as JSON."""
    directions_data = [
        {
            "name": direction.name,
            "stops": [
                {
                    "name": stop.name,
                    "scheduling_reference": stop.scheduling_reference,
                }
                for stop in direction.stops
            ],
        }
        for direction in directions
    ]
    return json.dumps(directions_data, ensure_ascii=False, indent=2)


def format_schedule_table(times: list[ScheduledTime]) -> None:
    """Display a timetable with one row per hour."""
    if not times:
        console.print("No scheduled times found.")
        return

    # Group minutes by hour, keeping timetable order
    by_hour: dict[int, list[str]] = {}
    for scheduled in times:
        by_hour.setdefault(scheduled.hour, []).append(f"{scheduled.minute:02d}")

    table = Table(title="Timetable", show_header=True, header_style="bold magenta")
    table.add_column("Hour", style="cyan", justify="right")
    table.add_column("Minutes", style="green")

    for hour, minutes in by_hour.items():
        table.add_row(f"{hour:02d}", " ".join(minutes))

    console.print(table)


def format_schedule_json(times: list[ScheduledTime], day: date | None = None) -> str:
    """Format scheduled times as JSON, with full datetimes when a day is given."""
    times_data = []
    for scheduled in times:
        item: dict[str, int | str] = {
            "hour": scheduled.hour,
            "minute": scheduled.minute,
        }
        if day is not None:
            item["datetime"] = scheduled.on(day).isoformat()
        times_data.append(item)
    return json.dumps(times_data, ensure_ascii=False, indent=2)
