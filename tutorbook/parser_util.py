"""
Field parsers: one raw string in, one validated value out.

Every parser trims its input and raises a ParseError subclass carrying a
user-facing message when the value is not acceptable.
"""

from __future__ import annotations

import logging
import re
from typing import FrozenSet, Iterable, Optional, Type, TypeVar

from tutorbook.errors import ConstraintError, FormatError
from tutorbook.messages import MESSAGE_INVALID_INDEX
from tutorbook.model import Address, Email, Index, Name, Phone, Remark, Subject

logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"[0-9]+")

# largest index a user can type (signed 32-bit range)
MAX_INDEX = 2**31 - 1

T = TypeVar("T", Name, Phone, Email, Address, Subject, Remark)


def parse_index(raw: str) -> Index:
    """
    Parse a 1-based index such as "3".

    Signs, decimals, embedded spaces, zero and values above MAX_INDEX
    are all rejected.
    """
    trimmed = raw.strip()
    if (
        not _UNSIGNED_INT.fullmatch(trimmed)
        or len(trimmed) > len(str(MAX_INDEX))
        or not 1 <= int(trimmed) <= MAX_INDEX
    ):
        raise FormatError(MESSAGE_INVALID_INDEX)
    return Index(int(trimmed))


def _parse_value(cls: Type[T], raw: str) -> T:
    trimmed = raw.strip()
    if not cls.is_valid(trimmed):
        raise ConstraintError(cls.MESSAGE_CONSTRAINTS)
    return cls(trimmed)


def parse_name(raw: str) -> Name:
    return _parse_value(Name, raw)


def parse_phone(raw: str) -> Phone:
    return _parse_value(Phone, raw)


def parse_email(raw: str) -> Email:
    return _parse_value(Email, raw)


def parse_address(raw: str) -> Address:
    return _parse_value(Address, raw)


def parse_remark(raw: str) -> Remark:
    return _parse_value(Remark, raw)


def parse_subject(raw: str) -> Subject:
    return _parse_value(Subject, raw)


def parse_subjects(raws: Iterable[str]) -> FrozenSet[Subject]:
    return frozenset(parse_subject(r) for r in raws)


def parse_subjects_for_edit(raws: Iterable[str]) -> Optional[FrozenSet[Subject]]:
    """
    Subjects of an edit command.

    - no s/ at all       -> None (leave the subjects alone)
    - exactly one "s/"   -> empty set (remove all subjects)
    - anything else      -> the parsed set
    """
    values = list(raws)
    logger.debug("Parsing subjects for edit: %s", values)

    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parse_subjects(values)
