"""Token-stream parsers for the three page shapes of the timetable site."""

import logging
from collections.abc import Iterable
from enum import Enum, auto

from .exceptions import ScheduleParseError
from .identifier import extract_identifier
from .models import Direction, Route, ScheduledTime, Stop, VehicleType
from .tokens import EndOfStream, StartTag, Token, tokenize

logger = logging.getLogger(__name__)

ROUTE_PATH_PREFIX = "/route/"
TIMETABLE_PATH_PREFIX = "/time-table/"

CATEGORY_PREFIXES = (
    (VehicleType.BUS.label, VehicleType.BUS),
    (VehicleType.TRAM.label, VehicleType.TRAM),
    (VehicleType.TAXI.label, VehicleType.TAXI),
)

HOUR_CLASS = "hour"
MINUTE_CLASSES = frozenset({"minute trip-with-note", "minute-with-note"})


def _href(token: StartTag) -> str:
    return token.get("href") or ""


def _is_number(text: str) -> bool:
    # int() also takes "1_0" and non-ASCII digits
    return text.isascii() and text.isdigit()


def _remove_quotes(text: str) -> str:
    return text.replace("«", "").replace("»", "")


class _CatalogState(Enum):
    IDLE = auto()
    PENDING = auto()
    LABEL = auto()


class RouteCatalogParser:
    """Extracts routes from search results or a full route listing.

    Search results carry the vehicle category inside each label
    (``Автобус «80, ...»``) and put the label in an ``h4`` inside the route
    link. Listings of one vehicle type put the label straight after the link,
    so the caller passes the known type instead.
    """

    def __init__(self, vehicle_type: VehicleType | None = None):
        """Initialize the parser.

        Args:
            vehicle_type: Vehicle type of a single-type listing page, or None
                for search results
        """
        self.vehicle_type = vehicle_type

    def parse(self, tokens: Iterable[Token]) -> list[Route]:
        """Parse routes from a token stream.

        Args:
            tokens: Tokens of a search-results or route-listing page

        Returns:
            Routes in page order; empty when nothing is recognized
        """
        routes: list[Route] = []
        state = _CatalogState.IDLE
        locator = ""
        hinted = self.vehicle_type is not None

        for token in tokens:
            if isinstance(token, EndOfStream):
                break

            if isinstance(token, StartTag):
                if token.name == "a":
                    href = _href(token)
                    if href.startswith(ROUTE_PATH_PREFIX):
                        locator = href
                        state = (
                            _CatalogState.LABEL if hinted else _CatalogState.PENDING
                        )
                elif not hinted and state is not _CatalogState.IDLE:
                    state = (
                        _CatalogState.LABEL
                        if token.name == "h4"
                        else _CatalogState.PENDING
                    )
                continue

            if state is not _CatalogState.LABEL or not token.data.strip():
                continue

            route = self._build_route(locator, token.data)
            if route is not None:
                routes.append(route)
            state = _CatalogState.IDLE
            locator = ""

        return routes

    def _build_route(self, locator: str, raw_label: str) -> Route | None:
        """Turn a captured label into a Route, or None to discard it."""
        label = raw_label.strip()

        if self.vehicle_type is not None:
            vehicle_type = self.vehicle_type
        else:
            for prefix, candidate in CATEGORY_PREFIXES:
                if label.startswith(prefix):
                    vehicle_type = candidate
                    label = label[len(prefix) :]
                    break
            else:
                logger.debug(f"Skipping {locator}: unknown category in {label!r}")
                return None

        label = _remove_quotes(label.strip()).strip()
        identifier = extract_identifier(label)

        return Route(
            locator=locator,
            display_name=identifier.cleaned_name,
            vehicle_type=vehicle_type,
            number=identifier.number,
            literal_suffix=identifier.literal_suffix,
        )


class _DirectoryState(Enum):
    BEFORE_DIRECTION = auto()
    DIRECTION_NAME = auto()
    IN_DIRECTION = auto()
    STOP_NAME = auto()


class StopDirectoryParser:
    """Extracts the directions of a route and the stops of each direction.

    Every ``h3`` starts a direction; its first text is the direction name.
    Timetable links that follow belong to that direction until the next
    ``h3``.
    """

    def parse(self, tokens: Iterable[Token]) -> list[Direction]:
        """Parse directions from a route detail page token stream.

        Args:
            tokens: Tokens of a route detail page

        Returns:
            Directions in page order, each with its stops in page order
        """
        names: list[str] = []
        stops: list[list[Stop]] = []
        current = -1
        state = _DirectoryState.BEFORE_DIRECTION
        reference = ""

        for token in tokens:
            if isinstance(token, EndOfStream):
                break

            if isinstance(token, StartTag):
                if token.name == "h3":
                    state = _DirectoryState.DIRECTION_NAME
                elif token.name == "a" and state in (
                    _DirectoryState.IN_DIRECTION,
                    _DirectoryState.STOP_NAME,
                ):
                    href = _href(token)
                    if href.startswith(TIMETABLE_PATH_PREFIX):
                        reference = href
                        state = _DirectoryState.STOP_NAME
                    else:
                        state = _DirectoryState.IN_DIRECTION
                continue

            if state is _DirectoryState.DIRECTION_NAME:
                names.append(token.data.strip())
                stops.append([])
                current = len(names) - 1
                state = _DirectoryState.IN_DIRECTION
            elif state is _DirectoryState.STOP_NAME:
                name = token.data.strip()
                if not name:
                    continue
                stops[current].append(
                    Stop(name=name, scheduling_reference=reference)
                )
                state = _DirectoryState.IN_DIRECTION

        return [
            Direction(name=name, stops=direction_stops)
            for name, direction_stops in zip(names, stops)
        ]


class _ScheduleState(Enum):
    OUTSIDE = auto()
    HOUR = auto()
    MINUTE = auto()


class ScheduleParser:
    """Extracts the arrival times of a stop timetable page.

    The page groups times per hour: an ``hour`` block holds the hour and
    nested ``minute`` blocks hold the minutes, some with a footnote
    asterisk. Only a list item ends a group; an ``hour`` block met while
    reading minutes does not.
    """

    def parse(self, tokens: Iterable[Token]) -> list[ScheduledTime]:
        """Parse scheduled times from a timetable page token stream.

        Args:
            tokens: Tokens of a stop timetable page

        Returns:
            Times in page order, without dates

        Raises:
            ScheduleParseError: If an hour block holds something other than
                an hour of day
        """
        times: list[ScheduledTime] = []
        state = _ScheduleState.OUTSIDE
        current_hour = 0

        for token in tokens:
            if isinstance(token, EndOfStream):
                break

            if isinstance(token, StartTag):
                if token.name == "li":
                    state = _ScheduleState.OUTSIDE
                elif token.name == "div":
                    css_class = token.get("class")
                    if css_class == HOUR_CLASS:
                        if state is _ScheduleState.OUTSIDE:
                            state = _ScheduleState.HOUR
                    elif css_class in MINUTE_CLASSES and state is _ScheduleState.HOUR:
                        state = _ScheduleState.MINUTE
                continue

            if state is _ScheduleState.HOUR:
                data = token.data.strip()
                if not data:
                    continue
                current_hour = self._parse_hour(data)
            elif state is _ScheduleState.MINUTE:
                data = token.data.replace("*", "").replace("\n", "").strip()
                if not _is_number(data):
                    logger.debug(f"Skipping minute fragment {token.data!r}")
                    continue
                minute = int(data)
                if not 0 <= minute <= 59:
                    logger.debug(f"Skipping out of range minute {minute}")
                    continue
                times.append(ScheduledTime(hour=current_hour, minute=minute))

        return times

    def _parse_hour(self, data: str) -> int:
        if not _is_number(data):
            raise ScheduleParseError(f"Cannot parse hour: {data!r}")
        hour = int(data)
        if not 0 <= hour <= 23:
            raise ScheduleParseError(f"Hour out of range: {hour}")
        return hour


def parse_routes(markup: str, vehicle_type: VehicleType | None = None) -> list[Route]:
    """Parse routes from search results (no type) or a route listing."""
    return RouteCatalogParser(vehicle_type).parse(tokenize(markup))


def parse_directions(markup: str) -> list[Direction]:
    """Parse directions and stops from a route detail page."""
    return StopDirectoryParser().parse(tokenize(markup))


def parse_schedule(markup: str) -> list[ScheduledTime]:
    """Parse scheduled times from a stop timetable page."""
    return ScheduleParser().parse(tokenize(markup))
