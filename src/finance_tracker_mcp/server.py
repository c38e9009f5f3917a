"""
MCP server for Finance Tracker.

Exposes the category / subcategory / operation store through the
Model Context Protocol.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from finance_tracker_mcp.core.database import FinanceDatabase
from finance_tracker_mcp.core.exceptions import CommandError
from finance_tracker_mcp.tools.tools import FinanceTrackerTools, create_tool_schemas

logger = logging.getLogger(__name__)

COMMANDS = (
    "create_category",
    "create_subcategory",
    "create_operation",
    "list_categories",
    "list_subcategories",
    "list_operations",
    "update_category",
    "update_subcategory",
    "remove_category",
    "remove_subcategory",
)


class FinanceTrackerServer:
    """MCP server for Finance Tracker data."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize the MCP server.

        Opens the database before any handler is registered, so a broken
        database aborts startup.

        Args:
            db_path: Optional path to the SQLite database.
                    If None, uses ~/finances.db.

        Raises:
            SchemaInitError: If the database cannot be opened or initialized
        """
        self.db = FinanceDatabase(db_path)
        self.tools = FinanceTrackerTools(self.db)
        self.server = Server("finance-tracker-mcp")

        # Register handlers
        self.server.list_tools()(self.list_tools)
        self.server.call_tool()(self.call_tool)

    async def list_tools(self) -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name=schema["name"],
                description=schema["description"],
                inputSchema=schema["inputSchema"],
            )
            for schema in create_tool_schemas()
        ]

    async def call_tool(
        self, name: str, arguments: Optional[dict[str, Any]]
    ) -> list[TextContent]:
        """Handle tool calls."""
        return [TextContent(type="text", text=self.dispatch(name, arguments or {}))]

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Run one command and render its outcome as text.

        Returns:
            JSON for a successful result, otherwise a one-line error message
        """
        if name not in COMMANDS:
            return f"Unknown tool: {name}"

        handler = getattr(self.tools, name)
        try:
            result = handler(**arguments)
        except CommandError as e:
            return f"Error: {e.message}"
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return f"Error executing tool: {str(e)}"

        return json.dumps(result if result is not None else {}, indent=2)

    async def run(self) -> None:  # pragma: no cover
        """Run the MCP server using stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server(db_path: Optional[Path] = None) -> None:  # pragma: no cover
    """
    Run the Finance Tracker MCP server.

    Args:
        db_path: Optional path to the SQLite database.
                If None, uses ~/finances.db.
    """
    server = FinanceTrackerServer(db_path)
    try:
        await server.run()
    finally:
        server.db.close()
