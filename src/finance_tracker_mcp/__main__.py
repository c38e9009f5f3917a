"""
CLI entry point for Finance Tracker MCP server.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from finance_tracker_mcp.core.database import default_db_path
from finance_tracker_mcp.core.exceptions import SchemaInitError
from finance_tracker_mcp.server import run_server

logger = logging.getLogger("finance_tracker_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finance-tracker-mcp",
        description=(
            "Finance Tracker MCP Server - Manage categories, subcategories "
            "and operations through MCP"
        ),
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        default=None,
        help=f"Path to SQLite database (default: {default_db_path()})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every command and no-op update/delete",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parse arguments, configure logging and serve until stopped.

    Exit status is 1 when the database cannot be opened or initialized,
    and for any other server failure.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # stdout carries the MCP protocol
    )

    db_path = args.db_path or default_db_path()
    try:
        asyncio.run(run_server(db_path=db_path))
    except SchemaInitError as e:
        logger.error("Cannot start: %s (database: %s)", e, db_path)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        sys.exit(0)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
