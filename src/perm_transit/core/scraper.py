"""HTTP client for the Perm city transport timetable site."""

import logging
from urllib.parse import quote

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .exceptions import NetworkError, ValidationError
from .models import Direction, Route, ScheduledTime, Stop, VehicleType
from .parsers import parse_directions, parse_routes, parse_schedule

logger = logging.getLogger(__name__)

BASE_URL = "https://www.m.gortransperm.ru"
SEARCH_PATH = "/search/?q={query}"
ROUTES_LIST_PATH = "/routes-list/{vehicle_type}/"
DEFAULT_TIMEOUT = 30
RETRY_ATTEMPTS = 3

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/140.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Charset": "utf-8",
    "Accept-Language": "ru-RU,ru;q=0.9,en;q=0.8",
}


class GortransScraper:
    """Scraper for routes, stops and timetables of gortransperm.ru."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, base_url: str = BASE_URL):
        """Initialize the scraper.

        Args:
            timeout: Request timeout in seconds
            base_url: Site root, without a trailing slash
        """
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)

    def search(self, query: str, save_html_path: str | None = None) -> list[Route]:
        """Search routes by number, e.g. "80" or "7т".

        Args:
            query: Route number, optionally with its letter suffix
            save_html_path: Optional path to save raw HTML for debugging

        Returns:
            Matching routes; empty when the site finds none

        Raises:
            ValidationError: If the query is empty
            NetworkError: If the request fails
        """
        if not query or not query.strip():
            raise ValidationError("Search query cannot be empty")

        url = self.base_url + SEARCH_PATH.format(query=quote(query.strip()))
        html_content = self._fetch_page(url)

        if save_html_path:
            with open(save_html_path, "w", encoding="utf-8") as f:
                f.write(html_content)

        return parse_routes(html_content)

    def all_routes(self, vehicle_type: VehicleType) -> list[Route]:
        """List every route served by one vehicle type.

        Raises:
            NetworkError: If the request fails
        """
        url = self.base_url + ROUTES_LIST_PATH.format(vehicle_type=int(vehicle_type))
        return parse_routes(self._fetch_page(url), vehicle_type)

    def stops(self, route: Route | str) -> list[Direction]:
        """Get the directions of a route with their stops.

        Args:
            route: Route from search/all_routes, or its locator

        Returns:
            Directions in page order

        Raises:
            NetworkError: If the request fails
        """
        locator = route.locator if isinstance(route, Route) else route
        return parse_directions(self._fetch_page(self._absolute(locator)))

    def schedule(self, stop: Stop | str) -> list[ScheduledTime]:
        """Get the arrival times of a stop.

        Times carry no date; combine them with ``ScheduledTime.on()``.

        Args:
            stop: Stop from stops(), or its scheduling reference

        Returns:
            Times in timetable order

        Raises:
            ScheduleParseError: If the timetable has a malformed hour
            NetworkError: If the request fails
        """
        reference = stop.scheduling_reference if isinstance(stop, Stop) else stop
        return parse_schedule(self._fetch_page(self._absolute(reference)))

    def _absolute(self, locator: str) -> str:
        if locator.startswith(("http://", "https://")):
            return locator
        if not locator.startswith("/"):
            locator = "/" + locator
        return self.base_url + locator

    @retry(
        stop=stop_after_attempt(RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=4, max=10),
        retry=retry_if_exception_type(NetworkError),
        reraise=True,
    )
    def _fetch_page(self, url: str) -> str:
        """Fetch a page of the site.

        Args:
            url: Absolute page URL

        Returns:
            HTML content as string

        Raises:
            NetworkError: If request fails
        """
        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Failed to fetch {url}: {str(e)}") from e

        response.encoding = "utf-8"
        return response.text
