"""
Tests for executing parsed commands against the in-memory address book.
"""

import unittest
from datetime import date, datetime

from tutorbook.book import AddressBook
from tutorbook.clock import FixedClock
from tutorbook.errors import CommandError
from tutorbook.messages import MESSAGE_INVALID_PERSON_INDEX
from tutorbook.model import Address, Email, Name, Person, Phone, Subject
from tutorbook.parser import parse_command

CLOCK = FixedClock(datetime(2025, 1, 10, 12, 0))


def _book() -> AddressBook:
    return AddressBook(
        [
            Person(
                name=Name("Alice Pauline"),
                phone=Phone("94351253"),
                email=Email("alice@example.com"),
                address=Address("123, Jurong West Ave 6"),
                subjects=frozenset({Subject("Math"), Subject("Physics")}),
            ),
            Person(
                name=Name("Benson Meier"),
                phone=Phone("98765432"),
                email=Email("johnd@example.com"),
                address=Address("311, Clementi Ave 2"),
            ),
        ]
    )


def _run(line: str, book: AddressBook) -> str:
    return parse_command(line, clock=CLOCK).execute(book).feedback


class TestAddDelete(unittest.TestCase):
    def test_add(self) -> None:
        book = _book()
        msg = _run("add n/Carl Kurz p/95352563 e/heinz@example.com a/wall street s/English", book)
        self.assertEqual(len(book), 3)
        self.assertIn("Carl Kurz", msg)

    def test_add_duplicate_name(self) -> None:
        book = _book()
        with self.assertRaises(CommandError):
            _run("add n/alice pauline p/123 e/a@example.com a/x", book)

    def test_delete(self) -> None:
        book = _book()
        _run("delete 1", book)
        self.assertEqual([p.name.value for p in book], ["Benson Meier"])

    def test_delete_out_of_range(self) -> None:
        with self.assertRaises(CommandError) as ctx:
            _run("delete 3", _book())
        self.assertEqual(str(ctx.exception), MESSAGE_INVALID_PERSON_INDEX)


class TestEdit(unittest.TestCase):
    def test_edit_changes_only_given_fields(self) -> None:
        book = _book()
        _run("edit 1 n/John Doe p/98765432", book)
        p = book.persons[0]
        self.assertEqual(p.name, Name("John Doe"))
        self.assertEqual(p.phone, Phone("98765432"))
        self.assertEqual(p.email, Email("alice@example.com"))
        self.assertEqual(p.subjects, frozenset({Subject("Math"), Subject("Physics")}))

    def test_clear_subjects(self) -> None:
        book = _book()
        _run("edit 1 s/", book)
        self.assertEqual(book.persons[0].subjects, frozenset())

    def test_absent_subjects_untouched(self) -> None:
        book = _book()
        _run("edit 1 a/New Street 5", book)
        self.assertEqual(book.persons[0].subjects, frozenset({Subject("Math"), Subject("Physics")}))

    def test_edit_to_existing_name(self) -> None:
        with self.assertRaises(CommandError):
            _run("edit 1 n/Benson Meier", _book())

    def test_edit_out_of_range(self) -> None:
        with self.assertRaises(CommandError):
            _run("edit 5 n/Nobody", _book())


class TestRemarkAndLesson(unittest.TestCase):
    def test_remark(self) -> None:
        book = _book()
        self.assertEqual(book.persons[0].remark_label(), "NOT PAID")
        _run("remark 1 r/Paid", book)
        self.assertEqual(book.persons[0].remark_label(), "Paid")
        msg = _run("remark 1 r/", book)
        self.assertIn("Removed", msg)
        self.assertEqual(book.persons[0].remark_label(), "NOT PAID")

    def test_lesson_set_and_clear(self) -> None:
        book = _book()
        _run("lesson 2 l/15/4/2025 0900-1100", book)
        self.assertEqual(book.persons[1].next_lesson.lesson_date, date(2025, 4, 15))
        self.assertIn("next: 15 Apr 2025 09:00-11:00", book.persons[1].summary())
        _run("lesson 2 l/", book)
        self.assertTrue(book.persons[1].next_lesson.is_empty)


class TestOtherCommands(unittest.TestCase):
    def test_list(self) -> None:
        msg = _run("list", _book())
        self.assertIn("2 persons listed!", msg)
        self.assertIn("1. Alice Pauline", msg)
        self.assertIn("Math | Physics", msg)

    def test_clear(self) -> None:
        book = _book()
        _run("clear", book)
        self.assertEqual(len(book), 0)

    def test_help_lists_usages(self) -> None:
        msg = _run("help", _book())
        for word in ("add:", "edit:", "delete:", "remark:", "lesson:"):
            self.assertIn(word, msg)

    def test_exit(self) -> None:
        result = parse_command("exit").execute(_book())
        self.assertTrue(result.exit)


if __name__ == "__main__":
    unittest.main()
