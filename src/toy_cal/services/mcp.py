from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from ..api import get_tools
from ..config import AppSettings, get_settings

INSTRUCTIONS = (
    "Toy Cal exposes a personal contacts list and calendar. "
    "Use the contacts-* tools to manage people and the events-* tools to schedule, "
    "search, and remove events. Times are UNIX timestamps in seconds."
)

logger = logging.getLogger(__name__)


def build_mcp_server(settings: Optional[AppSettings] = None) -> FastMCP:
    settings = settings or get_settings()
    server = FastMCP(name=settings.server.name, instructions=INSTRUCTIONS)
    # Register every tool from the shared registry.
    for tool in get_tools():
        logger.debug("Registering MCP tool: %s", tool.name)
        server.tool(
            tool.func,
            name=tool.name,
            description=tool.description,
            tags=set(tool.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    server = build_mcp_server()
    logger.info("Starting MCP server on %s:%s", host, port)
    server.run(transport="streamable-http", host=host, port=port)
