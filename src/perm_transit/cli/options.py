"""Options shared by CLI commands."""

import click

from ..core.models import VehicleType

VEHICLE_TYPE_NAMES = [vehicle_type.name.lower() for vehicle_type in VehicleType]

format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
