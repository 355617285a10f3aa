"""Data models for Perm transit schedules."""

from datetime import date, datetime, time
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class VehicleType(IntEnum):
    """Kind of vehicle serving a route.

    The value is the id the site uses for its route listings
    (``/routes-list/<id>/``).
    """

    BUS = 1
    TROLLEYBUS = 2
    TRAM = 3
    TAXI = 4

    @property
    def label(self) -> str:
        """Category name as printed by the site."""
        return _VEHICLE_LABELS[self]


_VEHICLE_LABELS = {
    VehicleType.BUS: "Автобус",
    VehicleType.TROLLEYBUS: "Троллейбус",
    VehicleType.TRAM: "Трамвай",
    VehicleType.TAXI: "Маршрутное такси",
}


class Route(BaseModel):
    """Represents a transit line from the route catalog."""

    model_config = ConfigDict(frozen=True)

    locator: str = Field(..., description="Link to the route detail page")
    display_name: str = Field(..., description="Route name without its number")
    vehicle_type: VehicleType = Field(..., description="Vehicle type")
    number: int = Field(0, description="Route number parsed from the label")
    literal_suffix: str = Field(
        "", max_length=1, description="Single uppercase letter after the number"
    )

    @property
    def code(self) -> str:
        """Route number as shown on vehicles, e.g. '80' or '7Т'."""
        return f"{self.number}{self.literal_suffix}"

    def __str__(self) -> str:
        return f"{self.vehicle_type.label} {self.code}, {self.display_name}"


class Stop(BaseModel):
    """Represents a stop within one direction of a route."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Stop name")
    scheduling_reference: str = Field(
        ..., description="Link to the stop's timetable page"
    )

    def __str__(self) -> str:
        return self.name


class Direction(BaseModel):
    """Represents one travel direction of a route."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Direction name, usually 'from – to'")
    stops: tuple[Stop, ...] = Field(default=(), description="Stops in travel order")

    def __str__(self) -> str:
        return f"{self.name} ({len(self.stops)} stops)"


class ScheduledTime(BaseModel):
    """A scheduled arrival time of day, without a date."""

    model_config = ConfigDict(frozen=True)

    hour: int = Field(..., ge=0, le=23, description="Hour of day")
    minute: int = Field(..., ge=0, le=59, description="Minute of hour")

    def to_time(self) -> time:
        """Convert to a ``datetime.time``."""
        return time(self.hour, self.minute)

    def on(self, day: date) -> datetime:
        """Combine with a calendar date supplied by the caller."""
        return datetime.combine(day, self.to_time())

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
