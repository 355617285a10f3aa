"""MCP Server for Perm transit schedules.

This module implements a Model Context Protocol (MCP) server that exposes
route search, route listings, stop directories and stop timetables of Perm
city transport.
"""

import asyncio
import json
import logging
from datetime import date
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    TextContent,
    Tool,
)

from ..core.exceptions import TransitScheduleError
from ..core.models import VehicleType
from ..core.scraper import GortransScraper

logger = logging.getLogger(__name__)

VEHICLE_TYPE_NAMES = [vehicle_type.name.lower() for vehicle_type in VehicleType]


def _json_block(data: Any) -> TextContent:
    return TextContent(
        type="text",
        text=f"JSON Data:\n```json\n{json.dumps(data, indent=2, ensure_ascii=False)}\n```",
    )


class TransitMCPServer:
    """MCP Server for Perm transit schedule functionality."""

    def __init__(self) -> None:
        """Initialize the Transit MCP Server."""
        self.server = Server("perm-transit-schedule")
        self.scraper = GortransScraper()

        # Register handlers
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return [
                Tool(
                    name="search_routes",
                    description="Search Perm city transport routes by route number",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "query": {
                                "type": "string",
                                "description": "Route number, optionally with its letter (e.g. '80', '7т')",
                            },
                        },
                        "required": ["query"],
                    },
                ),
                Tool(
                    name="list_routes",
                    description="List all routes served by one vehicle type",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "vehicle_type": {
                                "type": "string",
                                "description": "Vehicle type",
                                "enum": VEHICLE_TYPE_NAMES,
                                "default": "bus",
                            },
                        },
                    },
                ),
                Tool(
                    name="get_stops",
                    description="Get the directions of a route and the stops of each direction",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "locator": {
                                "type": "string",
                                "description": "Route locator from search_routes or list_routes (e.g. '/route/80/')",
                            },
                        },
                        "required": ["locator"],
                    },
                ),
                Tool(
                    name="get_schedule",
                    description="Get the scheduled arrival times at a stop",
                    inputSchema={
                        "type": "object",
                        "properties": {
                            "scheduling_reference": {
                                "type": "string",
                                "description": "Stop timetable reference from get_stops",
                            },
                            "date": {
                                "type": "string",
                                "description": "Date to attach to the times (YYYY-MM-DD, optional)",
                            },
                        },
                        "required": ["scheduling_reference"],
                    },
                ),
            ]

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[TextContent]:
            """Handle tool calls."""
            try:
                if name == "search_routes":
                    return await self._search_routes(arguments)
                elif name == "list_routes":
                    return await self._list_routes(arguments)
                elif name == "get_stops":
                    return await self._get_stops(arguments)
                elif name == "get_schedule":
                    return await self._get_schedule(arguments)
                else:
                    return [TextContent(type="text", text=f"Unknown tool: {name}")]

            except Exception as e:
                logger.error(f"Error in tool {name}: {e}")
                return [TextContent(type="text", text=f"Error: {str(e)}")]

    async def _search_routes(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Search routes by number."""
        query = arguments["query"]

        try:
            routes = self.scraper.search(query)
        except TransitScheduleError as e:
            return [TextContent(type="text", text=f"Route search failed: {str(e)}")]

        if not routes:
            return [TextContent(type="text", text=f"No routes found for '{query}'")]

        return self._routes_result(f"Found {len(routes)} routes for '{query}'", routes)

    async def _list_routes(self, arguments: dict[str, Any]) -> list[TextContent]:
        """List all routes of one vehicle type."""
        vehicle_name = arguments.get("vehicle_type", "bus")
        if vehicle_name not in VEHICLE_TYPE_NAMES:
            return [
                TextContent(
                    type="text",
                    text=f"Unknown vehicle type '{vehicle_name}'. Use one of: {', '.join(VEHICLE_TYPE_NAMES)}",
                )
            ]
        vehicle_type = VehicleType[vehicle_name.upper()]

        try:
            routes = self.scraper.all_routes(vehicle_type)
        except TransitScheduleError as e:
            return [TextContent(type="text", text=f"Route listing failed: {str(e)}")]

        if not routes:
            return [
                TextContent(type="text", text=f"No {vehicle_name} routes found")
            ]

        return self._routes_result(
            f"{len(routes)} {vehicle_type.label} routes", routes
        )

    def _routes_result(self, title: str, routes: list) -> list[TextContent]:
        result_text = f"**{title}:**\n\n"
        for idx, route in enumerate(routes, 1):
            result_text += f"{idx}. **{route.vehicle_type.label} {route.code}** - {route.display_name}\n"
            result_text += f"   Locator: {route.locator}\n"

        routes_data = [route.model_dump(mode="json") for route in routes]
        return [TextContent(type="text", text=result_text), _json_block(routes_data)]

    async def _get_stops(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Get directions and stops of a route."""
        locator = arguments["locator"]

        try:
            directions = self.scraper.stops(locator)
        except TransitScheduleError as e:
            return [TextContent(type="text", text=f"Stop lookup failed: {str(e)}")]

        if not directions:
            return [
                TextContent(type="text", text=f"No directions found for {locator}")
            ]

        result_text = f"**Route {locator} has {len(directions)} directions:**\n\n"
        for direction in directions:
            result_text += f"**{direction.name}** ({len(direction.stops)} stops)\n"
            for idx, stop in enumerate(direction.stops, 1):
                result_text += f"   {idx}. {stop.name} [{stop.scheduling_reference}]\n"
            result_text += "\n"

        directions_data = [direction.model_dump(mode="json") for direction in directions]
        return [
            TextContent(type="text", text=result_text),
            _json_block(directions_data),
        ]

    async def _get_schedule(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Get scheduled arrival times at a stop."""
        reference = arguments["scheduling_reference"]
        day_str = arguments.get("date")

        day = None
        if day_str:
            try:
                day = date.fromisoformat(day_str)
            except ValueError:
                return [
                    TextContent(
                        type="text",
                        text=f"Invalid date '{day_str}'. Use YYYY-MM-DD",
                    )
                ]

        try:
            times = self.scraper.schedule(reference)
        except TransitScheduleError as e:
            return [
                TextContent(type="text", text=f"Timetable lookup failed: {str(e)}")
            ]

        if not times:
            return [
                TextContent(type="text", text=f"No scheduled times found for {reference}")
            ]

        result_text = f"**{len(times)} scheduled arrivals at {reference}:**\n\n"
        result_text += ", ".join(str(scheduled) for scheduled in times) + "\n"

        if day is not None:
            times_data = [scheduled.on(day).isoformat() for scheduled in times]
        else:
            times_data = [str(scheduled) for scheduled in times]

        return [TextContent(type="text", text=result_text), _json_block(times_data)]


async def main() -> None:
    """Main entry point for the MCP server."""
    # Configure logging
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting Perm Transit Schedule MCP Server")

    # Create the server
    server_instance = TransitMCPServer()

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name="perm-transit-schedule",
                server_version="0.1.0",
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
