"""Custom exceptions for Perm transit schedule extraction."""


class TransitScheduleError(Exception):
    """Base exception for transit schedule errors."""

    pass


class ScrapingError(TransitScheduleError):
    """Raised when there's an error extracting data from a page."""

    pass


class ScheduleParseError(ScrapingError):
    """Raised when an hour block of a stop timetable is malformed."""

    pass


class NetworkError(TransitScheduleError):
    """Raised when there's a network-related error."""

    pass


class ValidationError(TransitScheduleError):
    """Raised when input validation fails."""

    pass
