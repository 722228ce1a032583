"""Command-line interface for generating pairing schedules.

This module provides the ``pairing-rounds`` command: it generates a schedule
from participant names or a JSON configuration file and prints it as JSON or
as the plain text listing.
"""

# Pairing Rounds
# Copyright (C) 2025  Pairing Rounds developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional

from dateutil import parser as date_parser

from pairingrounds.constants import (
    FORMAT_JSON,
    FORMAT_TEXT,
    OUTPUT_FORMATS,
)
from pairingrounds.exceptions import PairingRoundsException
from pairingrounds.models import Schedule, ScheduleConfig
from pairingrounds.pairing import generate_schedule
from pairingrounds.utils import set_package_level, setup_logger
from pairingrounds.utils.participants import parse_participants
from pairingrounds.utils.print import schedule_to_text
from pairingrounds.validation import create_schedule_validator

logger = setup_logger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_INVALID_INPUT = 2


def parse_heading_date(value: str) -> date:
    """Parse the ``--date`` option.

    Accepts anything python-dateutil understands, e.g. ``2026-01-05`` or
    ``5 Jan 2026``.

    Raises:
        argparse.ArgumentTypeError: If the value is not a recognizable date
    """
    try:
        return date_parser.parse(value).date()
    except (ValueError, OverflowError) as e:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}': {e}")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="pairing-rounds",
        description="Generate randomized pairing rounds that avoid repeat opponents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Three rounds for the demo group
  pairing-rounds

  # Five rounds for named participants
  pairing-rounds --rounds 5 Alice Bob Carol Dave

  # Comma separated names, plain text listing with a dated heading
  pairing-rounds --players "Alice, Bob, Carol" --format text --group Seed

  # Use configuration file
  pairing-rounds --config group.json --validate
        """,
    )

    parser.add_argument(
        "participants",
        nargs="*",
        help="Participant names (default: Alice Bob Carol Dave Eve)",
    )

    parser.add_argument(
        "--players",
        help="Comma separated participant names (not combined with positional names)",
    )

    parser.add_argument(
        "--rounds",
        type=int,
        help="Number of rounds to generate (default: 3)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")

    # Output options
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=FORMAT_JSON,
        help="Output format (default: json)",
    )

    parser.add_argument("--group", help="Group label for the plain text heading")

    parser.add_argument(
        "--date",
        type=parse_heading_date,
        help="Date for the plain text heading (default: today)",
    )

    parser.add_argument("--config", help="Load configuration from JSON file")

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the generated schedule and exit with 1 on violations",
    )

    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def build_config(args: argparse.Namespace) -> ScheduleConfig:
    """Merge the configuration file (if any) with command line overrides."""
    config = ScheduleConfig.load(args.config) if args.config else ScheduleConfig()

    if args.players is not None:
        config.participants = parse_participants(args.players)
    elif args.participants:
        config.participants = list(args.participants)

    if args.rounds is not None:
        config.num_rounds = args.rounds
    if args.seed is not None:
        config.seed = args.seed
    if args.group is not None:
        config.group = args.group
    return config


def render(schedule: Schedule, config: ScheduleConfig, args: argparse.Namespace) -> str:
    if args.format == FORMAT_TEXT:
        return schedule_to_text(schedule, group=config.group, day=args.date)
    return json.dumps(schedule.to_list(), indent=2)


def run(args: argparse.Namespace) -> int:
    """Generate, print and optionally validate a schedule.

    Returns:
        Exit code
    """
    config = build_config(args)
    if args.date is not None and (args.format != FORMAT_TEXT or config.group is None):
        logger.warning(
            "--date is only used by the text heading (--format text with a group); "
            "ignoring it"
        )
    logger.info(
        "Generating %s rounds for %s players...",
        config.num_rounds,
        len(config.participants),
    )
    schedule = generate_schedule(
        config.participants, config.num_rounds, seed=config.seed
    )
    print(render(schedule, config, args))

    if args.validate:
        report = create_schedule_validator(config.participants).validate_schedule(
            schedule, expected_rounds=config.num_rounds
        )
        for warning in report.warnings:
            logger.warning("Round %s: %s", warning.round_number, warning.description)
        if not report.is_valid:
            for violation in report.violations:
                logger.error(
                    "Round %s: %s", violation.round_number, violation.description
                )
            return EXIT_VALIDATION_FAILED
        logger.info("Validation passed: %s", report.summary)

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.players is not None and args.participants:
        parser.error(
            "give participant names either positionally or with --players, not both"
        )

    # Configure logging
    if args.verbose:
        set_package_level(logging.DEBUG)

    try:
        return run(args)
    except PairingRoundsException as e:
        logger.error("Cannot generate pairings: %s", e)
        return EXIT_INVALID_INPUT
    except KeyboardInterrupt:
        logger.info("Generation interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
