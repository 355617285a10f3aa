"""Core schedule extraction functionality."""

from .exceptions import (
    NetworkError,
    ScheduleParseError,
    ScrapingError,
    TransitScheduleError,
    ValidationError,
)
from .identifier import RouteIdentifier, extract_identifier
from .models import Direction, Route, ScheduledTime, Stop, VehicleType
from .parsers import (
    RouteCatalogParser,
    ScheduleParser,
    StopDirectoryParser,
    parse_directions,
    parse_routes,
    parse_schedule,
)
from .scraper import GortransScraper
from .tokens import EndOfStream, StartTag, Text, Token, tokenize

__all__ = [
    "Direction",
    "EndOfStream",
    "GortransScraper",
    "NetworkError",
    "Route",
    "RouteCatalogParser",
    "RouteIdentifier",
    "ScheduleParseError",
    "ScheduleParser",
    "ScheduledTime",
    "ScrapingError",
    "StartTag",
    "Stop",
    "StopDirectoryParser",
    "Text",
    "Token",
    "TransitScheduleError",
    "ValidationError",
    "VehicleType",
    "extract_identifier",
    "parse_directions",
    "parse_routes",
    "parse_schedule",
    "tokenize",
]
