#!/usr/bin/env python3
"""
Command line entry point for the dyads MCP server.

Transport is stdio (for MCP clients that spawn the server) or http.
Directory options are handed to the server module through the
environment, because it builds its tools at import time.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

INSTRUMENTS_DIR_ENV = "CHUK_DYADS_INSTRUMENTS_DIR"
OUTPUT_DIR_ENV = "CHUK_DYADS_OUTPUT_DIR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-dyads",
        description="MCP server for bar-playable dyads on lap steel and other fretted instruments",
    )
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (http transport only)")
    parser.add_argument(
        "--instruments-dir",
        help=f"Project instrument presets (default ./instruments, or ${INSTRUMENTS_DIR_ENV})",
    )
    parser.add_argument(
        "--output-dir",
        help=f"Where MIDI files are written (default ./output, or ${OUTPUT_DIR_ENV})",
    )
    parser.add_argument("--debug", action="store_true", help="Log every query at DEBUG level")
    return parser


def main() -> None:
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.instruments_dir:
        os.environ[INSTRUMENTS_DIR_ENV] = args.instruments_dir
    if args.output_dir:
        os.environ[OUTPUT_DIR_ENV] = args.output_dir

    from chuk_mcp_dyads.async_server import mcp

    if args.transport == "http":
        logger.info(f"Serving dyads over http on port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))
    else:
        logger.info("Serving dyads over stdio")
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
