"""
Error types raised while parsing and executing commands.

Parsing failures all derive from ParseError so callers can catch one type
and show ``str(error)`` to the user verbatim. Chained failures keep the
low-level error as ``__cause__`` (raise ... from ...).
"""

from __future__ import annotations

from typing import Iterable


class ParseError(Exception):
    """
    Base class for rejected user input.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatError(ParseError):
    """Input does not have the expected shape (bad index, bad grammar, ...)."""


class ConstraintError(ParseError):
    """Well-formed input that violates a value constraint."""


class CalendarError(ConstraintError):
    """Numbers that do not name a real date (e.g. 31/2/2025)."""


class DuplicateFieldError(ParseError):
    """
    A prefix that may appear at most once was given several times.
    """

    def __init__(self, message: str, prefixes: Iterable[str]) -> None:
        super().__init__(message)
        self.prefixes = tuple(prefixes)


class RangeError(ParseError):
    """Well-formed input that breaks a business rule."""


class InvalidTimeError(RangeError):
    pass


class YearRangeError(RangeError):
    pass


class StartEqualsEndError(RangeError):
    pass


class StartNotBeforeEndError(RangeError):
    pass


class PastLessonError(RangeError):
    pass


class NotEditedError(ParseError):
    """An edit command that would not change anything."""


class CommandError(Exception):
    """
    A parsed command that cannot be applied to the address book
    (index out of range, duplicate person).
    """
