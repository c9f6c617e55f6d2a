"""Command-line entry point for the play tracker."""

import argparse
import logging
from typing import List, Optional

from ..core.models import TrackerMode, config_for_mode
from .console import TrackerConsole

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playbook-tracker",
        description="Track flag football play attempts and completions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  playbook-tracker                          # Practice sessions (up to 7)
  playbook-tracker --mode plays             # Per-play stats with best plays (up to 10)
  playbook-tracker --report-file week3.txt  # Save reports somewhere else
        """
    )
    parser.add_argument("--mode", "-m", default=TrackerMode.SESSIONS.value,
                        choices=[m.value for m in TrackerMode],
                        help="What to track (default: sessions)")
    parser.add_argument("--report-file", "-o", default=None,
                        help="Report file written by 'Save report to file' (default: report.txt)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    logger = logging.getLogger("playbook_tracker")

    config = config_for_mode(TrackerMode(args.mode))
    if args.report_file:
        config = config.model_copy(update={"report_filename": args.report_file})

    logger.info(f"Starting tracker in {config.mode.value} mode (capacity {config.capacity})")
    TrackerConsole(config).run()


if __name__ == "__main__":
    main()
