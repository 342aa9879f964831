"""
Command line entry point.

    searchdocs "rust programming" --output-dir ./exports
    searchdocs "machine learning" --text-only --log-level DEBUG
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace

from searchdocs.config import Settings
from searchdocs.container import ApplicationContainer
from searchdocs.shared.exceptions import SearchDocsError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="searchdocs",
        description="Search reference sources and export generated documentation",
    )
    parser.add_argument("query", help="Topic to document")
    parser.add_argument("--output-dir", default=None, help="Directory for the exported file")
    parser.add_argument("--text-only", action="store_true", help="Export plain text instead of PDF")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: SEARCHDOCS_LOG_LEVEL or INFO)",
    )
    return parser


async def run(settings: Settings, query: str, text_only: bool = False) -> str:
    """Search, export and save; returns the written path."""
    container = ApplicationContainer()
    container.config.from_dict(settings.to_container_config())
    workflow = container.workflow()
    try:
        outcome, document = await workflow.run(query, text_only=text_only)
    finally:
        await workflow.close()

    path = document.save(settings.output_dir)
    logger.info(
        f"{len(outcome.response.results)} results, "
        f"{'text fallback' if document.degraded else f'{document.page_count} pages'} → {path}"
    )
    return str(path)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    if args.output_dir:
        settings = replace(settings, output_dir=args.output_dir)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        path = asyncio.run(run(settings, args.query, text_only=args.text_only))
    except SearchDocsError as e:
        logger.error(e.to_agent_message())
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
