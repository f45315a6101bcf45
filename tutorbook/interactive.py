"""
Interactive session: read a command line, parse it, run it, print feedback.

The address book only lives in memory for the duration of the session.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from tutorbook.book import AddressBook
from tutorbook.clock import Clock, system_clock
from tutorbook.commands import Command, ListCommand
from tutorbook.errors import CommandError, ParseError
from tutorbook.parser import parse_command

logger = logging.getLogger(__name__)

console = Console()


def _person_table(book: AddressBook) -> Table:
    table = Table(title=f"Students ({len(book)})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold cyan")
    table.add_column("Phone")
    table.add_column("Email")
    table.add_column("Subjects", style="magenta")
    table.add_column("Remark")
    table.add_column("Next lesson", style="yellow")

    for i, p in enumerate(book, start=1):
        remark = p.remark_label()
        remark = f"[green]{remark}[/]" if p.remark.value else f"[bold red]{remark}[/]"
        table.add_row(str(i), p.name.value, p.phone.value, p.email.value, p.subjects_label(), remark, str(p.next_lesson))
    return table


def run_command(
    line: str, book: AddressBook, clock: Clock = system_clock
) -> tuple[str, bool, Optional[Command]]:
    """
    Parse and execute one line. Returns (feedback, exit_requested, command);
    command is None when the line was rejected.

    Rejected input is reported as feedback, never raised.
    """
    try:
        command = parse_command(line, clock=clock)
        result = command.execute(book)
    except (ParseError, CommandError) as e:
        logger.info("Rejected input %r: %s", line, e)
        return str(e), False, None
    return result.feedback, result.exit, command


def run_interactive(
    book: AddressBook,
    clock: Clock = system_clock,
    prompt_fn: Optional[Callable[[str], str]] = None,
) -> None:
    """
    Command loop. Ends on "exit" or end of input.
    """
    prompt = prompt_fn or console.input

    console.print("\n=== TutorBook (interactive) ===")
    console.print("Type 'help' for the list of commands.")

    while True:
        try:
            line = prompt("\n> ")
        except EOFError:
            console.print("Bye.")
            return

        if not line.strip():
            continue

        feedback, should_exit, command = run_command(line, book, clock)

        if isinstance(command, ListCommand):
            console.print(_person_table(book))
        else:
            console.print(feedback, markup=False)

        if should_exit:
            return
