# File: flattener/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from flattener.core.common.enums import FlattenStatus
from flattener.core.config.settings import settings
from flattener.core.logging_config import setup_logging
from flattener.features.flatten.domain.models import FileSummary, FlattenRequest
from flattener.features.flatten.service.api import flatten_service

logger = logging.getLogger(__name__)


def _parse_patterns(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [p.strip() for p in value.split(",") if p.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rflatten",
        description="Flatten subdirectories by moving all files to the root directory",
    )
    parser.add_argument("directory", type=Path, help="Directory to flatten")
    parser.add_argument("-n", "--depth", dest="max_depth", type=int, default=None,
                        help="Maximum depth to traverse (default: unlimited)")
    parser.add_argument("-y", "--yes", dest="skip_confirmation", action="store_true",
                        help="Skip confirmation prompt")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Suppress all non-error output (implies --yes)")
    parser.add_argument("-i", "--include", default=None,
                        help="Only flatten top-level directories starting with these patterns (comma-separated)")
    parser.add_argument("-e", "--exclude", default=None,
                        help="Skip top-level directories starting with these patterns (comma-separated)")
    return parser


def ask_confirmation() -> bool:
    try:
        answer = input("Proceed with flatten? (Y/n): ")
    except EOFError:
        return False
    return answer.strip().casefold() in settings.CONFIRM_ANSWERS


def show_summary(root: Path, summary: FileSummary) -> None:
    logger.info(f"Found {summary.file_count} file(s) to move to '{root}'")
    if summary.top_level_dirs:
        logger.info("Top-level directories to be flattened:")
        for name in summary.sorted_dirs():
            logger.info(f"  - {name}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(args=argv)

    setup_logging(quiet=args.quiet)

    # 1. Validate usage before touching anything
    try:
        request = FlattenRequest(
            root_path=args.directory,
            max_depth=args.max_depth,
            include=_parse_patterns(args.include),
            exclude=_parse_patterns(args.exclude),
        )
    except (ValueError, OSError) as e:
        logger.error(f"Error: {e}")
        return 1

    # 2. Summary + confirmation hook
    def confirm(summary: FileSummary) -> bool:
        if args.quiet:
            return True
        show_summary(request.root_path, summary)
        if args.skip_confirmation:
            return True
        return ask_confirmation()

    try:
        outcome = flatten_service.run(request, confirm=confirm)
    except OSError as e:
        logger.error(f"Error: {e}")
        return 1

    if outcome.status == FlattenStatus.NOTHING_TO_DO:
        logger.info("No files found in subdirectories to flatten.")
    elif outcome.status == FlattenStatus.CANCELLED:
        logger.info("Flatten cancelled.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
