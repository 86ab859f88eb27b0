"""Command line interface for outline2html."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from outline2html.exceptions import Outline2htmlError
from outline2html.pipeline import build_page, write_page
from outline2html.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="outline2html",
        description="Render an outline XML document into a complete HTML page.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  outline2html projects.xml                 # print the page to stdout
  outline2html projects.xml projects.html   # write the page to a file
  outline2html music.xml music.html --year 2024
""",
    )
    parser.add_argument("source", help="Outline XML file path")
    parser.add_argument("output", nargs="?", help="Output HTML file (default: stdout)")
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="End year of the footer copyright notice (default: current year)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def _run_async(args: argparse.Namespace) -> int:
    if args.output:
        await write_page(args.source, Path(args.output), year=args.year)
    else:
        page = await build_page(args.source, year=args.year)
        print(page)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = _parse_args(argv)
    configure_logging(args.verbose)

    try:
        return asyncio.run(_run_async(args))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except (Outline2htmlError, OSError) as exc:
        logger.error("Error: %s", exc)
        if args.verbose:
            logger.exception("Full traceback:")
        return 1
