"""
Console entry point.

Usage:
    twilio-calls list-calls
    twilio-calls list-calls --short-date
    twilio-calls --config config.json list-calls --locale de_DE
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .shared.config import load_config, VALID_LOG_LEVELS
from .shared.models import ExitCode
from .shared.utils import setup_logging
from .call_service.console import Console
from .call_service.reporter import CallListReporter

SERVICE_NAME = "twilio_calls"


def list_calls(args: argparse.Namespace, console: Console) -> ExitCode:
    setup_logging(SERVICE_NAME, log_level=getattr(logging, args.log_level or "WARNING"))

    try:
        config = load_config(args.config)
    except ValidationError:
        console.error("Unable to retrieve calls from your account: the Twilio configuration is missing or invalid")
        return ExitCode.FAILURE

    logger = setup_logging(SERVICE_NAME, log_level=getattr(logging, args.log_level or config.reporter.log_level))

    reporter = CallListReporter.from_config(config, console=console, locale=args.locale, logger=logger)
    return reporter.run(short_date=args.short_date)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twilio", description="Twilio account commands")
    parser.add_argument(
        "--config",
        help="Path to a JSON configuration file (environment variables take precedence)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Diagnostics verbosity (default: from configuration, WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    list_parser = subparsers.add_parser(
        "list-calls",
        help="List calls on your Twilio account",
        description="List calls on your Twilio account",
    )
    list_parser.add_argument(
        "--short-date",
        action="store_true",
        help="Display all dates in the short form",
    )
    list_parser.add_argument(
        "--locale",
        help="Locale used to format prices (default: from configuration, en_US)",
    )
    list_parser.set_defaults(handler=list_calls)

    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    return int(args.handler(args, console or Console()))


if __name__ == "__main__":
    sys.exit(main())
