import unittest
from datetime import date, datetime, time

from tutorbook.clock import FixedClock
from tutorbook.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    NextLessonCommand,
    RemarkCommand,
)
from tutorbook.errors import (
    DuplicateFieldError,
    FormatError,
    NotEditedError,
    PastLessonError,
    StartEqualsEndError,
)
from tutorbook.messages import MESSAGE_UNKNOWN_COMMAND
from tutorbook.model import Index, Name, NextLesson, Remark, Subject
from tutorbook.parser import parse_command, parse_next_lesson_command

CLOCK = FixedClock(datetime(2025, 1, 10, 12, 0))


class CountingClock:
    def __init__(self, now: datetime) -> None:
        self.now = now
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.now


class TestNextLessonCommand(unittest.TestCase):
    def test_schedule(self) -> None:
        cmd = parse_next_lesson_command("1 l/15/4/2025 0900-1100", CLOCK)
        self.assertEqual(cmd.index, Index(1))
        self.assertEqual(cmd.lesson, NextLesson(date(2025, 4, 15), time(9, 0), time(11, 0)))

    def test_empty_value_clears(self) -> None:
        cmd = parse_next_lesson_command("2 l/", CLOCK)
        self.assertTrue(cmd.lesson.is_empty)
        self.assertEqual(cmd.lesson, NextLesson.empty())

    def test_missing_prefix(self) -> None:
        with self.assertRaises(FormatError) as ctx:
            parse_next_lesson_command("1", CLOCK)
        self.assertIn(NextLessonCommand.MESSAGE_USAGE, ctx.exception.message)

    def test_bad_index(self) -> None:
        with self.assertRaises(FormatError) as ctx:
            parse_next_lesson_command("0 l/15/4/2025 0900-1100", CLOCK)
        self.assertIsNotNone(ctx.exception.__cause__)

    def test_duplicate_lesson(self) -> None:
        with self.assertRaises(DuplicateFieldError):
            parse_next_lesson_command("1 l/15/4/2025 0900-1100 l/16/4/2025 0900-1100", CLOCK)

    def test_rule_errors_surface(self) -> None:
        with self.assertRaises(StartEqualsEndError):
            parse_next_lesson_command("1 l/15/4/2025 0900-0900", CLOCK)
        with self.assertRaises(PastLessonError):
            parse_next_lesson_command("1 l/15/4/2024 0900-1100", CLOCK)

    def test_clock_read_once_per_parse(self) -> None:
        clock = CountingClock(datetime(2025, 1, 10, 12, 0))
        parse_next_lesson_command("1 l/15/4/2025 0900-1100", clock)
        self.assertEqual(clock.calls, 1)

    def test_clock_not_read_for_empty_lesson(self) -> None:
        clock = CountingClock(datetime(2025, 1, 10, 12, 0))
        parse_next_lesson_command("1 l/", clock)
        self.assertEqual(clock.calls, 0)

    def test_same_text_same_clock_equal_commands(self) -> None:
        a = parse_next_lesson_command("1 l/15/4/2025 0900-1100", CLOCK)
        b = parse_next_lesson_command("1 l/15/4/2025 0900-1100", CLOCK)
        self.assertEqual(a, b)


class TestParseCommand(unittest.TestCase):
    def test_add(self) -> None:
        cmd = parse_command("add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 s/Math")
        self.assertIsInstance(cmd, AddCommand)
        self.assertEqual(cmd.person.name, Name("John Doe"))
        self.assertEqual(cmd.person.subjects, frozenset({Subject("Math")}))
        self.assertEqual(cmd.person.remark, Remark(""))
        self.assertTrue(cmd.person.next_lesson.is_empty)

    def test_add_missing_field(self) -> None:
        with self.assertRaises(FormatError):
            parse_command("add n/John Doe p/98765432 a/311, Clementi Ave 2")

    def test_add_with_preamble(self) -> None:
        with self.assertRaises(FormatError):
            parse_command("add 1 n/John Doe p/98765432 e/johnd@example.com a/Street 1")

    def test_add_duplicate_field(self) -> None:
        with self.assertRaises(DuplicateFieldError):
            parse_command("add n/John n/Jon p/98765432 e/johnd@example.com a/Street 1")

    def test_edit(self) -> None:
        cmd = parse_command("edit 1 n/John Doe p/98765432")
        self.assertIsInstance(cmd, EditCommand)
        with self.assertRaises(NotEditedError):
            parse_command("edit 1")

    def test_delete(self) -> None:
        self.assertEqual(parse_command("delete 2"), DeleteCommand(Index(2)))
        with self.assertRaises(FormatError):
            parse_command("delete x")
        with self.assertRaises(FormatError):
            parse_command("delete")

    def test_remark(self) -> None:
        self.assertEqual(parse_command("remark 1 r/Paid for March"), RemarkCommand(Index(1), Remark("Paid for March")))
        self.assertEqual(parse_command("remark 1 r/"), RemarkCommand(Index(1), Remark("")))
        with self.assertRaises(FormatError):
            parse_command("remark 1")

    def test_lesson_uses_given_clock(self) -> None:
        cmd = parse_command("lesson 1 l/15/4/2025 0900-1100", clock=CLOCK)
        self.assertIsInstance(cmd, NextLessonCommand)
        self.assertEqual(cmd.lesson.lesson_date, date(2025, 4, 15))

    def test_no_argument_commands(self) -> None:
        self.assertIsInstance(parse_command("list"), ListCommand)
        self.assertIsInstance(parse_command("LIST"), ListCommand)
        self.assertIsInstance(parse_command("clear"), ClearCommand)
        self.assertIsInstance(parse_command("help"), HelpCommand)
        self.assertIsInstance(parse_command("exit now"), ExitCommand)

    def test_unknown_command(self) -> None:
        with self.assertRaises(FormatError) as ctx:
            parse_command("frobnicate 1")
        self.assertEqual(ctx.exception.message, MESSAGE_UNKNOWN_COMMAND)

    def test_blank_input(self) -> None:
        with self.assertRaises(FormatError):
            parse_command("   ")

    def test_extra_whitespace_after_command_word(self) -> None:
        self.assertEqual(parse_command("delete\t 3"), DeleteCommand(Index(3)))


if __name__ == "__main__":
    unittest.main()
