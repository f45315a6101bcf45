"""
In-memory address book that commands are executed against.

Nothing is persisted: the book lives as long as the interactive session.
Persons are kept in insertion order and addressed by Index (1-based).
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from tutorbook.errors import CommandError
from tutorbook.messages import MESSAGE_DUPLICATE_PERSON, MESSAGE_INVALID_PERSON_INDEX
from tutorbook.model import Index, Person


class AddressBook:
    def __init__(self, persons: List[Person] | None = None) -> None:
        self._persons: List[Person] = []
        for p in persons or []:
            self.add(p)

    @property
    def persons(self) -> Tuple[Person, ...]:
        return tuple(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(tuple(self._persons))

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def get(self, index: Index) -> Person:
        if index.zero_based >= len(self._persons):
            raise CommandError(MESSAGE_INVALID_PERSON_INDEX)
        return self._persons[index.zero_based]

    def add(self, person: Person) -> None:
        if self.has_person(person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        self._persons.append(person)

    def set_person(self, index: Index, edited: Person) -> None:
        """
        Replace the person at index. The edited person may not clash with
        anyone else in the book.
        """
        target = self.get(index)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        self._persons[index.zero_based] = edited

    def remove(self, index: Index) -> Person:
        target = self.get(index)
        del self._persons[index.zero_based]
        return target

    def clear(self) -> None:
        self._persons.clear()
