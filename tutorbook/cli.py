"""
CLI (Command Line Interface).

This module provides terminal entry points, e.g.:

    tutorbook parse edit 1 n/John Doe p/98765432
    tutorbook parse lesson 2 l/15/4/2025 0900-1100
    tutorbook interactive

Note:
- `parse` only parses; it prints the resulting command object
- The interactive session lives in tutorbook/interactive.py
"""

from __future__ import annotations

import argparse
import logging

from tutorbook.clock import Clock
from tutorbook.config import CLOCK_MODES, LOG_LEVELS, Settings, configure_logging
from tutorbook.errors import ParseError
from tutorbook.parser import parse_command

logger = logging.getLogger(__name__)


def _cmd_parse(args: argparse.Namespace, clock: Clock) -> int:
    """
    Parse one command line and print the command (or the error message).
    """
    text = " ".join(args.text).strip()
    if not text:
        print("Please provide a command to parse.")
        return 1

    try:
        command = parse_command(text, clock=clock)
    except ParseError as e:
        print(e.message)
        return 1

    print(repr(command))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="tutorbook", description="TutorBook CLI")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level (default WARNING)")
    parser.add_argument("--clock", choices=CLOCK_MODES, help="Clock used to validate lessons (default live)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse a command line and print the command")
    p_parse.add_argument("text", nargs="*", help="Command line (e.g. edit 1 n/John Doe)")

    sub.add_parser("interactive", help="Interactive session on an in-memory address book")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().override(log_level=args.log_level, clock_mode=args.clock)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(settings)
    clock = settings.make_clock()
    logger.debug("Settings: %s", settings)

    if args.command == "parse":
        raise SystemExit(_cmd_parse(args, clock))

    if args.command == "interactive":
        from tutorbook.book import AddressBook
        from tutorbook.interactive import run_interactive

        run_interactive(AddressBook(), clock=clock)
        raise SystemExit(0)

    raise SystemExit(2)
