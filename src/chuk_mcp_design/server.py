#!/usr/bin/env python3
"""
Entry point for the CHUK Design MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).

Project definitions are read from ``<base>/design-systems`` and
artifacts are written to ``<base>/output``. The base defaults to the
current directory; ``--base-path`` or the ``CHUK_MCP_DESIGN_HOME``
environment variable point it elsewhere.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_design.constants import BASE_PATH_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the server argument parser."""
    parser = argparse.ArgumentParser(description="CHUK Design MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--base-path",
        type=Path,
        default=None,
        help=f"Directory holding design-systems/ and output/ (default: ${BASE_PATH_ENV} or cwd)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def configure_base_path(base_path: Path | None) -> Path:
    """
    Export the base path for the server module to pick up.

    Args:
        base_path: Explicit base directory, or None to keep the
            environment variable (or the current directory)

    Returns:
        The base path the server will use

    Raises:
        NotADirectoryError: If the base path is not an existing directory
    """
    if base_path is None:
        return Path(os.environ.get(BASE_PATH_ENV, Path.cwd()))

    resolved = base_path.expanduser().resolve()
    if not resolved.is_dir():
        raise NotADirectoryError(f"Base path is not a directory: {resolved}")
    os.environ[BASE_PATH_ENV] = str(resolved)
    return resolved


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        base_path = configure_base_path(args.base_path)
    except NotADirectoryError as e:
        parser.error(str(e))

    # The server module reads the base path when it is first imported
    from chuk_mcp_design.async_server import mcp

    logger.info(f"Using base path {base_path}")
    if args.transport == "stdio":
        logger.info("Starting CHUK Design MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Design MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
