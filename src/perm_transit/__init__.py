"""Perm Transit Schedule Package

A Python package for extracting routes, stops and timetables of Perm city
transport from gortransperm.ru, with CLI and MCP server capabilities.
"""

__version__ = "0.1.0"

from .core.models import Direction, Route, ScheduledTime, Stop, VehicleType
from .core.scraper import GortransScraper

__all__ = [
    "Direction",
    "GortransScraper",
    "Route",
    "ScheduledTime",
    "Stop",
    "VehicleType",
]
