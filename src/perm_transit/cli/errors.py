"""Error rendering shared by CLI commands."""

import sys
from collections.abc import Callable
from functools import wraps
from typing import Any

from rich.console import Console

from ..core import NetworkError, ScheduleParseError, ScrapingError, ValidationError

error_console = Console(stderr=True)


def handle_errors(func: Callable[..., None]) -> Callable[..., None]:
    """Render library errors on stderr and exit with status 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            func(*args, **kwargs)
        except ValidationError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)
        except ScheduleParseError as e:
            error_console.print(f"[red]Timetable error:[/red] {e}")
            sys.exit(1)
        except ScrapingError as e:
            error_console.print(f"[red]Scraping error:[/red] {e}")
            sys.exit(1)
        except NetworkError as e:
            error_console.print(f"[red]Network error:[/red] {e}")
            sys.exit(1)

    return wrapper
