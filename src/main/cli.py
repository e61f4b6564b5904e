#!/usr/bin/env python3
"""
Command Line Entry Point - Main Layer

Runs the flyover pipeline once for the current location and prints one
line per upcoming pass. Logs go to stderr, pass lines to stdout.
"""

import argparse
import asyncio
import sys
from typing import List, Optional, Sequence

from pydantic import ValidationError

from src.domain.entities.errors import DomainError
from src.domain.services.pass_time_formatter import PassTimeFormatter
from src.main.config import AppSettings, get_settings
from src.main.container import init_container
from src.presentation.console import format_error, format_passes
from src.shared import get_logger, update_logging_from_settings

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PIPELINE_FAILED = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="iss-flyover",
        description="Print the next ISS passes over your current location.",
    )
    parser.add_argument(
        "--timezone",
        help="IANA time zone for rise times (default: system local time)",
    )
    parser.add_argument(
        "--time-format",
        help="strftime format for rise times",
    )
    return parser.parse_args(argv)


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    if args.timezone:
        settings.display.timezone = args.timezone
    if args.time_format:
        settings.display.time_format = args.time_format
    return settings


async def run(settings: AppSettings) -> List[str]:
    """Run the pipeline once and return the lines to print."""
    container = init_container(settings)
    use_case = container.get_next_passes_use_case()
    passes = await use_case.execute()
    return format_passes(passes)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = apply_overrides(get_settings(), args)
    except ValidationError as e:
        print(f"It didn't work! Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE
    update_logging_from_settings(settings, stream=sys.stderr)

    try:
        PassTimeFormatter(settings.display.timezone, settings.display.time_format)
    except ValueError as e:
        print(f"It didn't work! {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        lines = asyncio.run(run(settings))
    except DomainError as e:
        logger.debug("cli.failed", stage=e.stage, error=str(e))
        print(format_error(e), file=sys.stderr)
        return EXIT_PIPELINE_FAILED

    for line in lines:
        print(line)
    return EXIT_OK
