"""
List stored collections.

Prints one line per readable collection file and marks the collection the
editor reopens on launch.
"""

import argparse
import logging
from pathlib import Path

from tintthat.config import settings
from tintthat.store import StoreLocation, list_collections, read_open_collection_id

logger = logging.getLogger(__name__)


def run_listing(location: StoreLocation) -> list[str]:
    """Format the stored collections as printable lines."""
    summaries = list_collections(location)
    current = read_open_collection_id(location)
    logger.info("Found %d collections in %s", len(summaries), location.collections_dir)

    lines = []
    for summary in summaries:
        marker = "*" if summary.id == current else " "
        lines.append(
            f"{marker} {summary.id}  {summary.title}  "
            f"({summary.palette_count} palettes, {summary.color_count} colors)"
        )
    return lines


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="List stored palette collections.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Application data directory (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    for line in run_listing(StoreLocation(root=args.data_dir)):
        print(line)


if __name__ == "__main__":
    main()
