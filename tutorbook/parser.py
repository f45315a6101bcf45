"""
Command builders (user text -> Command).

Every builder follows the same steps:
1. tokenize the arguments with the command's prefixes
2. parse the index preamble (a bad index becomes "invalid command format")
3. reject repeated single-valued prefixes
4. parse each field
5. check command-specific postconditions

The first error is raised; a half-built command is never returned.
parse_command() reads the clock once per call and passes that reading to
the lesson validation.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from tutorbook.clock import Clock, system_clock
from tutorbook.commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    HelpCommand,
    ListCommand,
    NextLessonCommand,
    RemarkCommand,
)
from tutorbook.descriptor import EditPersonDescriptor, FieldUpdate
from tutorbook.errors import FormatError, NotEditedError, ParseError
from tutorbook.lesson import parse_next_lesson
from tutorbook.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from tutorbook.model import Index, NextLesson, Person, Remark
from tutorbook.parser_util import (
    parse_address,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_remark,
    parse_subjects,
    parse_subjects_for_edit,
)
from tutorbook.syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NEXT_LESSON,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_SUBJECT,
)
from tutorbook.tokenizer import ArgumentMultimap, tokenize

logger = logging.getLogger(__name__)


def _invalid_format(usage: str) -> FormatError:
    return FormatError(MESSAGE_INVALID_COMMAND_FORMAT % usage)


def _parse_preamble_index(arg_map: ArgumentMultimap, usage: str) -> Index:
    try:
        index = parse_index(arg_map.preamble)
    except ParseError as pe:
        logger.warning("Failed to parse index: %s", pe.message)
        raise _invalid_format(usage) from pe
    logger.info("Parsed index: %d", index.one_based)
    return index


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def parse_add_command(args: str) -> AddCommand:
    arg_map = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_SUBJECT)

    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if not all(p in arg_map for p in required) or arg_map.preamble:
        raise _invalid_format(AddCommand.MESSAGE_USAGE)

    arg_map.verify_no_duplicate_prefixes_for(*required)

    person = Person(
        name=parse_name(arg_map.get_value(PREFIX_NAME)),
        phone=parse_phone(arg_map.get_value(PREFIX_PHONE)),
        email=parse_email(arg_map.get_value(PREFIX_EMAIL)),
        address=parse_address(arg_map.get_value(PREFIX_ADDRESS)),
        subjects=parse_subjects(arg_map.get_all_values(PREFIX_SUBJECT)),
    )
    return AddCommand(person)


def parse_edit_command(args: str) -> EditCommand:
    """
    Parse "INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [s/SUBJECT]...".

    Only the fields that are given are changed. A single empty "s/" removes
    all subjects; no "s/" at all leaves them untouched.
    """
    logger.info("Parsing edit command with arguments: %s", args)
    arg_map = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_SUBJECT)

    index = _parse_preamble_index(arg_map, EditCommand.MESSAGE_USAGE)

    arg_map.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)

    updates: Dict[str, FieldUpdate] = {}
    single_valued = (
        ("name", PREFIX_NAME, parse_name),
        ("phone", PREFIX_PHONE, parse_phone),
        ("email", PREFIX_EMAIL, parse_email),
        ("address", PREFIX_ADDRESS, parse_address),
    )
    for field_name, prefix, parse_fn in single_valued:
        raw = arg_map.get_value(prefix)
        if raw is not None:
            updates[field_name] = FieldUpdate.set_to(parse_fn(raw))

    subjects = parse_subjects_for_edit(arg_map.get_all_values(PREFIX_SUBJECT))
    if subjects is not None:
        updates["subjects"] = FieldUpdate.set_to(subjects) if subjects else FieldUpdate.cleared()

    descriptor = EditPersonDescriptor(**updates)
    if not descriptor.is_any_field_edited():
        logger.warning("No fields edited in edit command")
        raise NotEditedError(EditCommand.MESSAGE_NOT_EDITED)

    logger.info("Successfully created EditCommand with index: %d", index.one_based)
    return EditCommand(index, descriptor)


def parse_delete_command(args: str) -> DeleteCommand:
    try:
        index = parse_index(args)
    except ParseError as pe:
        raise _invalid_format(DeleteCommand.MESSAGE_USAGE) from pe
    return DeleteCommand(index)


def parse_remark_command(args: str) -> RemarkCommand:
    arg_map = tokenize(args, PREFIX_REMARK)
    index = _parse_preamble_index(arg_map, RemarkCommand.MESSAGE_USAGE)

    raw = arg_map.get_value(PREFIX_REMARK)
    if raw is None:
        raise _invalid_format(RemarkCommand.MESSAGE_USAGE)
    arg_map.verify_no_duplicate_prefixes_for(PREFIX_REMARK)

    remark: Remark = parse_remark(raw)
    return RemarkCommand(index, remark)


def parse_next_lesson_command(args: str, clock: Clock = system_clock) -> NextLessonCommand:
    """
    Parse "INDEX l/[D/M/YYYY HHMM-HHMM]".

    An empty l/ value clears the next lesson. The clock is read once here.
    """
    arg_map = tokenize(args, PREFIX_NEXT_LESSON)
    index = _parse_preamble_index(arg_map, NextLessonCommand.MESSAGE_USAGE)

    raw = arg_map.get_value(PREFIX_NEXT_LESSON)
    if raw is None:
        raise _invalid_format(NextLessonCommand.MESSAGE_USAGE)
    arg_map.verify_no_duplicate_prefixes_for(PREFIX_NEXT_LESSON)

    if not raw:
        return NextLessonCommand(index, NextLesson.empty())

    return NextLessonCommand(index, parse_next_lesson(raw, clock()))


# ---------------------------------------------------------------------------
# Dispatch by command word
# ---------------------------------------------------------------------------


_NO_ARGUMENT_COMMANDS: Dict[str, Callable[[], Command]] = {
    ListCommand.COMMAND_WORD: ListCommand,
    ClearCommand.COMMAND_WORD: ClearCommand,
    HelpCommand.COMMAND_WORD: HelpCommand,
    ExitCommand.COMMAND_WORD: ExitCommand,
}

_ARGUMENT_COMMANDS: Dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: parse_add_command,
    EditCommand.COMMAND_WORD: parse_edit_command,
    DeleteCommand.COMMAND_WORD: parse_delete_command,
    RemarkCommand.COMMAND_WORD: parse_remark_command,
}


def parse_command(user_input: str, clock: Optional[Clock] = None) -> Command:
    """
    Parse one full command line, e.g. "edit 1 n/John Doe".
    """
    text = user_input.strip()
    if not text:
        raise _invalid_format(HelpCommand.MESSAGE_USAGE)

    parts = text.split(None, 1)
    word = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""

    if word in _NO_ARGUMENT_COMMANDS:
        return _NO_ARGUMENT_COMMANDS[word]()
    if word in _ARGUMENT_COMMANDS:
        return _ARGUMENT_COMMANDS[word](args)
    if word == NextLessonCommand.COMMAND_WORD:
        return parse_next_lesson_command(args, clock or system_clock)

    raise FormatError(MESSAGE_UNKNOWN_COMMAND)
