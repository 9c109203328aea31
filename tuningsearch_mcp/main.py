"""TuningSearch MCP server - process entrypoint.

Serves the search/quota tools over stdio by default: python -m tuningsearch_mcp.main
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

from tuningsearch_mcp.utils.logger import get_logger
from tuningsearch_mcp.utils.config import load_settings
from tuningsearch_mcp.search.errors import ConfigurationError
from tuningsearch_mcp.search.server import SearchMCPServer


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the server entrypoint"""
    p = argparse.ArgumentParser(
        description="TuningSearch MCP server",
        epilog="Requires TUNINGSEARCH_API_KEY in the environment or a .env file",
    )
    p.add_argument("--transport", choices=("stdio", "sse"), default="stdio", help="MCP transport (default: stdio)")
    p.add_argument("--log-level", type=str, default=None, help="Override LOG_LEVEL, e.g. DEBUG")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level.upper()
    logger = get_logger("tuningsearch")
    logger.info("Starting TuningSearch MCP server...")

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    try:
        server = SearchMCPServer(settings)
        server.run(transport=args.transport)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.error(f"Server connection error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
