"""
Command objects produced by the parsers.

Each command is an immutable dataclass holding fully validated arguments.
execute(book) applies it to an AddressBook and returns the feedback text
for the user; it raises CommandError when the book cannot take the change
(index out of range, duplicate person).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tutorbook.book import AddressBook
from tutorbook.descriptor import EditPersonDescriptor
from tutorbook.messages import MESSAGE_PERSONS_LISTED
from tutorbook.model import Index, NextLesson, Person, Remark


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    exit: bool = False


class Command:
    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    def execute(self, book: AddressBook) -> CommandResult:
        raise NotImplementedError


@dataclass(frozen=True)
class AddCommand(Command):
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [s/SUBJECT]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 s/Math s/Physics"
    )

    person: Person

    def execute(self, book: AddressBook) -> CommandResult:
        book.add(self.person)
        return CommandResult(f"New person added: {self.person.summary()}")


@dataclass(frozen=True)
class EditCommand(Command):
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number used in the displayed "
        "person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [s/SUBJECT]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditPersonDescriptor

    def execute(self, book: AddressBook) -> CommandResult:
        target = book.get(self.index)
        edited = self.descriptor.apply_to(target)
        book.set_person(self.index, edited)
        return CommandResult(f"Edited Person: {edited.summary()}")


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )

    index: Index

    def execute(self, book: AddressBook) -> CommandResult:
        removed = book.remove(self.index)
        return CommandResult(f"Deleted Person: {removed.summary()}")


@dataclass(frozen=True)
class RemarkCommand(Command):
    COMMAND_WORD: ClassVar[str] = "remark"
    MESSAGE_USAGE: ClassVar[str] = (
        "remark: Edits the remark of the person identified by the index number used in the displayed "
        "person list. An empty remark marks the person as not paid.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: remark 1 r/Paid for March"
    )

    index: Index
    remark: Remark

    def execute(self, book: AddressBook) -> CommandResult:
        target = book.get(self.index)
        edited = target.with_changes(remark=self.remark)
        book.set_person(self.index, edited)
        if self.remark.value:
            return CommandResult(f"Added remark to Person: {edited.name}")
        return CommandResult(f"Removed remark from Person: {edited.name}")


@dataclass(frozen=True)
class NextLessonCommand(Command):
    COMMAND_WORD: ClassVar[str] = "lesson"
    MESSAGE_USAGE: ClassVar[str] = (
        "lesson: Sets the next lesson of the person identified by the index number used in the "
        "displayed person list. An empty value removes the next lesson.\n"
        "Parameters: INDEX (must be a positive integer) l/[D/M/YYYY HHMM-HHMM]\n"
        "Example: lesson 1 l/15/4/2025 0900-1100"
    )

    index: Index
    lesson: NextLesson

    def execute(self, book: AddressBook) -> CommandResult:
        target = book.get(self.index)
        edited = target.with_changes(next_lesson=self.lesson)
        book.set_person(self.index, edited)
        if self.lesson.is_empty:
            return CommandResult(f"Removed next lesson from Person: {edited.name}")
        return CommandResult(f"Next lesson of {edited.name} set to {self.lesson}")


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all persons in the address book."

    def execute(self, book: AddressBook) -> CommandResult:
        lines = [MESSAGE_PERSONS_LISTED % len(book)]
        for i, person in enumerate(book, start=1):
            lines.append(f"{i}. {person.summary()}")
        return CommandResult("\n".join(lines))


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Removes all persons from the address book."

    def execute(self, book: AddressBook) -> CommandResult:
        book.clear()
        return CommandResult("Address book has been cleared!")


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows the usage of every command."

    def execute(self, book: AddressBook) -> CommandResult:
        return CommandResult(
            "\n\n".join(
                cmd.MESSAGE_USAGE
                for cmd in (
                    AddCommand,
                    EditCommand,
                    DeleteCommand,
                    RemarkCommand,
                    NextLessonCommand,
                    ListCommand,
                    ClearCommand,
                    ExitCommand,
                )
            )
        )


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program."

    def execute(self, book: AddressBook) -> CommandResult:
        return CommandResult("Bye.", exit=True)
