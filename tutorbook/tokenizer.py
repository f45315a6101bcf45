"""
Tokenizer (command arguments -> prefix map).

Splits the argument part of a command line, e.g.

    1 n/John Doe p/98765432 s/Math s/Physics

into
- a preamble: "1"
- values per prefix: {"n/": ["John Doe"], "p/": ["98765432"], "s/": ["Math", "Physics"]}

Rules:
- a prefix only counts when it starts the text or follows whitespace,
  so "15/4/2025" never looks like a prefix
- values are trimmed, all occurrences are kept in input order
- contents are NOT validated here
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from tutorbook.errors import DuplicateFieldError
from tutorbook.messages import MESSAGE_DUPLICATE_FIELDS


class ArgumentMultimap:
    """
    Read-only result of tokenize(): preamble + ordered values per prefix.
    """

    def __init__(self, preamble: str, values: Mapping[str, Iterable[str]]) -> None:
        self._preamble = preamble
        frozen: Dict[str, Tuple[str, ...]] = {p: tuple(v) for p, v in values.items()}
        self._values = MappingProxyType(frozen)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: str) -> Optional[str]:
        """
        Return the last value given for prefix, or None if it is absent.
        """
        values = self._values.get(prefix, ())
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, ()))

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._values

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """
        Raise DuplicateFieldError if any of the given prefixes occurs more than once.
        """
        duplicated = [p for p in prefixes if len(self._values.get(p, ())) > 1]
        if duplicated:
            raise DuplicateFieldError(MESSAGE_DUPLICATE_FIELDS + " ".join(duplicated), duplicated)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentMultimap):
            return NotImplemented
        return self._preamble == other._preamble and dict(self._values) == dict(other._values)

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={dict(self._values)!r})"


def _find_prefix_positions(text: str, prefixes: Iterable[str]) -> List[Tuple[int, str]]:
    """
    Return (start offset, prefix) for every prefix occurrence, sorted by offset.
    """
    found: List[Tuple[int, str]] = []
    for prefix in set(prefixes):
        if not prefix:
            raise ValueError("Prefixes must be non-empty")
        for m in re.finditer(r"(?<!\S)" + re.escape(prefix), text):
            found.append((m.start(), prefix))
    found.sort()
    return found


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """
    Split args into preamble and prefixed values. Pure function.
    """
    positions = _find_prefix_positions(args, prefixes)

    first = positions[0][0] if positions else len(args)
    preamble = args[:first].strip()

    values: Dict[str, List[str]] = {}
    for i, (start, prefix) in enumerate(positions):
        value_start = start + len(prefix)
        value_end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        values.setdefault(prefix, []).append(args[value_start:value_end].strip())

    return ArgumentMultimap(preamble, values)
