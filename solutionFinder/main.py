"""Coding Challenges solution finder - MCP stdio entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from mcp.server.stdio import stdio_server

from solutionFinder.config.settings import Settings, get_settings
from solutionFinder.errors import SolutionFinderError
from solutionFinder.fetcher import ResourceFetcher
from solutionFinder.finder import SolutionFinder
from solutionFinder.server import build_server
from solutionFinder.utils import log_error, setup_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="coding-challenges-mcp",
        description="Serve the CodingChallengesSolutionFinder tool over MCP stdio.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (overrides LOG_LEVEL)",
    )
    parser.add_argument(
        "--once",
        metavar="CHALLENGE",
        default=None,
        help="Look up a single challenge, print the JSON result and exit",
    )
    return parser.parse_args(argv)


def build_finder(settings: Settings) -> SolutionFinder:
    fetcher = ResourceFetcher(settings.fetcher)
    return SolutionFinder(fetcher, settings.fetcher.source_url)


async def run_once(finder: SolutionFinder, challenge: str) -> int:
    """Print the lookup result for one challenge; return the exit status."""
    try:
        response = await finder.find(challenge)
    except SolutionFinderError as e:
        print(f"{e.kind.value}: {e}", file=sys.stderr)
        return 1
    print(json.dumps(response.model_dump(), ensure_ascii=False, indent=2))
    return 0


async def async_main(argv: Optional[Sequence[str]] = None) -> int:
    """Async entrypoint: one-shot lookup or stdio server until disconnect."""
    args = parse_args(argv)
    settings = get_settings()

    logger = setup_logging(
        args.log_level or settings.observability.log_level,
        settings.observability.log_dir,
    )
    finder = build_finder(settings)

    if args.once is not None:
        return await run_once(finder, args.once)

    app = build_server(
        finder,
        settings.server,
        log_result_max_length=settings.observability.log_result_max_length,
    )
    logger.info(f"Serving {settings.server.tool_name} ({settings.server.name} {settings.server.version}) on stdio")
    logger.info(f"  Source: {settings.fetcher.source_url}")

    try:
        async with stdio_server() as (read_stream, write_stream):
            await app.run(
                read_stream,
                write_stream,
                app.create_initialization_options()
            )
    except Exception as e:
        log_error(logger, e, context="stdio server")
        raise

    logger.info("Client disconnected, shutting down")
    return 0


def main():
    """Entry point that runs the async main function."""
    sys.exit(asyncio.run(async_main()))


if __name__ == "__main__":
    main()
