"""Unit tests for data models."""

from datetime import date, datetime, time

import pytest
from pydantic import ValidationError

from perm_transit.core.models import (
    Direction,
    Route,
    ScheduledTime,
    Stop,
    VehicleType,
)


class TestVehicleType:
    """Test VehicleType enum."""

    def test_listing_ids(self):
        """Test values match the site's route listing ids."""
        assert [int(vehicle_type) for vehicle_type in VehicleType] == [1, 2, 3, 4]

    def test_labels(self):
        """Test category labels."""
        assert VehicleType.BUS.label == "Автобус"
        assert VehicleType.TRAM.label == "Трамвай"
        assert VehicleType.TAXI.label == "Маршрутное такси"


class TestRoute:
    """Test Route model."""

    def test_route_creation(self):
        """Test basic route creation."""
        route = Route(
            locator="/route/207/",
            display_name="Н.Крым - Центральный рынок",
            vehicle_type=VehicleType.TAXI,
            number=7,
            literal_suffix="Т",
        )

        assert route.code == "7Т"
        assert str(route) == "Маршрутное такси 7Т, Н.Крым - Центральный рынок"

    def test_route_defaults(self):
        """Test defaults for number and suffix."""
        route = Route(locator="/route/1/", display_name="Гознак", vehicle_type=1)

        assert route.vehicle_type is VehicleType.BUS
        assert route.number == 0
        assert route.literal_suffix == ""
        assert route.code == "0"

    def test_route_is_immutable(self):
        """Test that returned routes cannot be changed."""
        route = Route(locator="/route/1/", display_name="Гознак", vehicle_type=1)

        with pytest.raises(ValidationError):
            route.number = 5

    def test_suffix_is_single_letter(self):
        """Test that the suffix is at most one character."""
        with pytest.raises(ValidationError):
            Route(
                locator="/route/1/",
                display_name="Гознак",
                vehicle_type=VehicleType.BUS,
                literal_suffix="АБ",
            )


class TestDirection:
    """Test Direction and Stop models."""

    def test_direction_with_stops(self):
        """Test direction creation."""
        direction = Direction(
            name="Туда",
            stops=[
                Stop(name="Гознак", scheduling_reference="/time-table/1/1"),
                Stop(name="Вокзал", scheduling_reference="/time-table/1/2"),
            ],
        )

        assert str(direction) == "Туда (2 stops)"
        assert str(direction.stops[0]) == "Гознак"

    def test_direction_defaults(self):
        """Test empty stop list default."""
        assert Direction(name="Туда").stops == ()

    def test_direction_stops_cannot_change(self):
        """Test that the stop sequence of a direction is read-only."""
        direction = Direction(
            name="Туда",
            stops=[Stop(name="Гознак", scheduling_reference="/time-table/1/1")],
        )

        assert isinstance(direction.stops, tuple)
        with pytest.raises(AttributeError):
            direction.stops.append(
                Stop(name="Вокзал", scheduling_reference="/time-table/1/2")
            )
        assert len(direction.stops) == 1


class TestScheduledTime:
    """Test ScheduledTime model."""

    def test_str(self):
        """Test HH:MM rendering."""
        assert str(ScheduledTime(hour=5, minute=7)) == "05:07"

    def test_to_time(self):
        """Test conversion to datetime.time."""
        assert ScheduledTime(hour=23, minute=59).to_time() == time(23, 59)

    def test_on_date(self):
        """Test combining with a caller supplied date."""
        scheduled = ScheduledTime(hour=6, minute=16)

        assert scheduled.on(date(2025, 10, 31)) == datetime(2025, 10, 31, 6, 16)

    @pytest.mark.parametrize("hour,minute", [(24, 0), (-1, 0), (5, 60), (5, -1)])
    def test_range_validation(self, hour, minute):
        """Test hour and minute bounds."""
        with pytest.raises(ValidationError):
            ScheduledTime(hour=hour, minute=minute)
