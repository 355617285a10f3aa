"""MCP (Model Context Protocol) server module for Perm transit schedules.

This module provides an MCP server implementation that exposes route search,
stop directories and stop timetables through the Model Context Protocol.
"""

from .server import TransitMCPServer, main

__all__ = ["TransitMCPServer", "main"]
