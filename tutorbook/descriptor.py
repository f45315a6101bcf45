"""
Partial updates for the edit command.

Each editable field carries a FieldUpdate in one of three states:

    ABSENT   -> field was not mentioned, keep the current value
    CLEARED  -> field was given empty, reset it (only subjects allow this)
    SET(v)   -> replace the current value with v
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, FrozenSet, Generic, List, Optional, TypeVar

from tutorbook.model import Address, Email, Name, Person, Phone, Subject

V = TypeVar("V")


class UpdateState(Enum):
    ABSENT = "absent"
    CLEARED = "cleared"
    SET = "set"


@dataclass(frozen=True)
class FieldUpdate(Generic[V]):
    state: UpdateState = UpdateState.ABSENT
    value: Optional[V] = None

    @classmethod
    def absent(cls) -> "FieldUpdate[V]":
        return cls()

    @classmethod
    def cleared(cls) -> "FieldUpdate[V]":
        return cls(UpdateState.CLEARED)

    @classmethod
    def set_to(cls, value: V) -> "FieldUpdate[V]":
        return cls(UpdateState.SET, value)

    @property
    def is_absent(self) -> bool:
        return self.state is UpdateState.ABSENT

    def apply(self, current: Any, empty: Any = None) -> Any:
        if self.state is UpdateState.SET:
            return self.value
        if self.state is UpdateState.CLEARED:
            return empty
        return current

    def __repr__(self) -> str:
        if self.state is UpdateState.SET:
            return f"SET({self.value!r})"
        return self.state.name


@dataclass(frozen=True)
class EditPersonDescriptor:
    """
    What an edit command changes. Fields not mentioned stay ABSENT.
    """

    name: FieldUpdate[Name] = FieldUpdate()
    phone: FieldUpdate[Phone] = FieldUpdate()
    email: FieldUpdate[Email] = FieldUpdate()
    address: FieldUpdate[Address] = FieldUpdate()
    subjects: FieldUpdate[FrozenSet[Subject]] = FieldUpdate()

    def edited_fields(self) -> List[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name).is_absent]

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())

    def apply_to(self, person: Person) -> Person:
        """
        Return a copy of person with every non-absent field applied.
        """
        return person.with_changes(
            name=self.name.apply(person.name),
            phone=self.phone.apply(person.phone),
            email=self.email.apply(person.email),
            address=self.address.apply(person.address),
            subjects=self.subjects.apply(person.subjects, frozenset()),
        )
