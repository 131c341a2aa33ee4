from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import get_settings
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings().server
    parser = argparse.ArgumentParser(description="Toy Cal contacts and calendar tool server.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server (streamable HTTP).")
    mcp_parser.add_argument("--host", default=settings.mcp_host)
    mcp_parser.add_argument("--port", type=int, default=settings.mcp_port)

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the same tools.")
    api_parser.add_argument("--host", default=settings.api_host)
    api_parser.add_argument("--port", type=int, default=settings.api_port)

    subparsers.add_parser("init-db", help="Create the database schema at the configured path.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging(get_settings().logging)
    logger = logging.getLogger(__name__)
    parser = build_parser()
    args = parser.parse_args(argv)

    from .api import api_state

    try:
        if args.command == "mcp":
            from .services.mcp import run_mcp_server

            run_mcp_server(host=args.host, port=args.port)
        elif args.command == "api":
            from .services.http import run_local_server

            run_local_server(host=args.host, port=args.port)
        elif args.command == "init-db":
            api_state.context.database.ensure_schema()
            logger.info("Schema ready at %s", api_state.context.database.path)
        else:  # pragma: no cover - argparse enforces choices
            parser.print_help()
    finally:
        api_state.context.close()


if __name__ == "__main__":
    main()
