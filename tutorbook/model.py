"""
Central data model definitions used across the project.

This module defines the value objects stored for every student so that:
- parsers and commands share the same field names
- every value is validated once, when it is constructed
- all objects are immutable and can be compared and hashed safely
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import date, time
from typing import ClassVar, FrozenSet, Optional


@dataclass(frozen=True)
class Index:
    """
    A 1-based position in the displayed person list.
    """

    one_based: int

    def __post_init__(self) -> None:
        if self.one_based < 1:
            raise ValueError(f"Index must be >= 1, got {self.one_based}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)


@dataclass(frozen=True)
class _TextValue:
    """
    Shared behaviour of the single-string fields (name, phone, ...).

    Subclasses set PATTERN (matched against the whole value) and
    MESSAGE_CONSTRAINTS (shown to the user when the value is rejected).
    """

    value: str

    PATTERN: ClassVar[re.Pattern]
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return cls.PATTERN.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(_TextValue):
    PATTERN: ClassVar[re.Pattern] = re.compile(r"[^\W_](?:[^\W_]| )*", re.ASCII)
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )


@dataclass(frozen=True)
class Phone(_TextValue):
    PATTERN: ClassVar[re.Pattern] = re.compile(r"[0-9]{3,}")
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )


@dataclass(frozen=True)
class Email(_TextValue):
    # local-part@domain, domain labels separated by periods, last label >= 2 chars
    PATTERN: ClassVar[re.Pattern] = re.compile(
        r"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*"
        r"@(?:[A-Za-z0-9](?:[-A-Za-z0-9]*[A-Za-z0-9])?\.)*"
        r"[A-Za-z0-9](?:[-A-Za-z0-9]*[A-Za-z0-9])"
    )
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )


@dataclass(frozen=True)
class Address(_TextValue):
    PATTERN: ClassVar[re.Pattern] = re.compile(r"\S.*", re.DOTALL)
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"


@dataclass(frozen=True)
class Subject(_TextValue):
    PATTERN: ClassVar[re.Pattern] = re.compile(r"[^\W_](?:[^\W_]| )*", re.ASCII)
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Subject names should only contain alphanumeric characters and spaces, and it should not be blank"
    )


@dataclass(frozen=True)
class Remark(_TextValue):
    """
    Free text, typically the payment status. Empty means not paid yet.
    """

    PATTERN: ClassVar[re.Pattern] = re.compile(r".*", re.DOTALL)


@dataclass(frozen=True)
class NextLesson:
    """
    The next scheduled lesson: a date plus a start/end time of day.

    All three fields are None for the "no lesson" value returned by empty().
    Range rules (future date, start before end) are checked by
    tutorbook.lesson when parsing user input, not here.
    """

    lesson_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    def __post_init__(self) -> None:
        parts = (self.lesson_date, self.start_time, self.end_time)
        if any(p is None for p in parts) and any(p is not None for p in parts):
            raise ValueError("NextLesson needs a date, start and end, or none of them")

    @classmethod
    def empty(cls) -> "NextLesson":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.lesson_date is None

    def __str__(self) -> str:
        if self.is_empty:
            return ""
        return (
            f"{self.lesson_date.strftime('%d %b %Y')} "
            f"{self.start_time.strftime('%H:%M')}-{self.end_time.strftime('%H:%M')}"
        )


@dataclass(frozen=True)
class Person:
    """
    Represents one student in the address book.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    subjects: FrozenSet[Subject] = frozenset()
    remark: Remark = Remark("")
    next_lesson: NextLesson = field(default_factory=NextLesson.empty)

    def is_same_person(self, other: "Person") -> bool:
        # identity is the name, case-insensitive
        return self.name.value.casefold() == other.name.value.casefold()

    def with_changes(self, **changes) -> "Person":
        return replace(self, **changes)

    def subjects_label(self) -> str:
        return " | ".join(sorted(s.value for s in self.subjects))

    def remark_label(self) -> str:
        return self.remark.value if self.remark.value else "NOT PAID"

    def summary(self) -> str:
        bits = [self.name.value, self.phone.value, self.email.value, self.address.value]
        subjects = self.subjects_label()
        if subjects:
            bits.append(subjects)
        bits.append(self.remark_label())
        if not self.next_lesson.is_empty:
            bits.append(f"next: {self.next_lesson}")
        return " | ".join(bits)
