"""
Lesson window parsing ("15/4/2025 0900-1100" -> NextLesson).

The input goes through ordered stages; the first failing stage decides the
error so the user always gets the most specific message:

1. grammar        D/M/YYYY HHMM-HHMM          -> FormatError
2. numbers        int conversion of groups    -> FormatError
3. time of day    hour 0-23, minute 0-59      -> InvalidTimeError
4. calendar       real date (no 31/2)         -> CalendarError
5. business rules against one "now" reading:
   a. date < today + 1 year                   -> YearRangeError
   b. start != end                            -> StartEqualsEndError
   c. start < end                             -> StartNotBeforeEndError
   d. today, but start already passed         -> PastLessonError
   e. date before today                       -> PastLessonError

The empty string ("no lesson") is not handled here; callers map it to
NextLesson.empty() before calling parse_next_lesson().
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time
from typing import Tuple

from tutorbook.commands import NextLessonCommand
from tutorbook.errors import (
    CalendarError,
    FormatError,
    InvalidTimeError,
    PastLessonError,
    StartEqualsEndError,
    StartNotBeforeEndError,
    YearRangeError,
)
from tutorbook.messages import MESSAGE_INVALID_COMMAND_FORMAT
from tutorbook.model import NextLesson
from tutorbook.syntax import LESSON_PATTERN

logger = logging.getLogger(__name__)

MESSAGE_CONSTRAINTS = (
    "Invalid date or time format. Expected: 'd/M/yyyy HHmm-HHmm' (e.g., 15/4/2025 0900-1100)"
)
MESSAGE_INVALID_TIME = "Time must be between 00:00 and 23:59."
MESSAGE_INVALID_DATE_TIME = (
    "Invalid date or time entered. Please ensure you have entered a valid date or time."
)
MESSAGE_INVALID_START_BEFORE_END = "Start time must be before end time."
MESSAGE_INVALID_START_END_TIME = "Start and end time cannot be the same."
MESSAGE_INVALID_PAST_LESSON = "Lesson cannot be in the past."
MESSAGE_INVALID_YEAR = "Lesson must be less than 1 year from now."

_LESSON_RE = re.compile(LESSON_PATTERN, re.ASCII)


def _split_hhmm(hhmm: str) -> Tuple[int, int]:
    return int(hhmm[:2]), int(hhmm[2:4])


def _one_year_after(day: date) -> date:
    # 29 Feb has no counterpart in a non-leap year; fall back to 28 Feb
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        return day.replace(year=day.year + 1, day=28)


def parse_next_lesson(raw: str, now: datetime) -> NextLesson:
    """
    Parse a non-empty lesson string, validating it against ``now``.
    """
    match = _LESSON_RE.fullmatch(raw)
    if not match:
        raise FormatError(MESSAGE_CONSTRAINTS)

    # the ASCII grammar only lets digits through here; int() failing is its own stage
    try:
        day, month, year = int(match.group(1)), int(match.group(2)), int(match.group(3))
        start_h, start_m = _split_hhmm(match.group(4))
        end_h, end_m = _split_hhmm(match.group(5))
    except ValueError as e:
        raise FormatError(MESSAGE_INVALID_COMMAND_FORMAT % NextLessonCommand.MESSAGE_USAGE) from e

    if start_h > 23 or start_m > 59 or end_h > 23 or end_m > 59:
        raise InvalidTimeError(MESSAGE_INVALID_TIME)

    try:
        lesson_date = date(year, month, day)
    except ValueError as e:
        raise CalendarError(MESSAGE_INVALID_DATE_TIME) from e
    start = time(start_h, start_m)
    end = time(end_h, end_m)

    today = now.date()
    current_time = now.time()

    if not lesson_date < _one_year_after(today):
        raise YearRangeError(MESSAGE_INVALID_YEAR)

    if start == end:
        raise StartEqualsEndError(MESSAGE_INVALID_START_END_TIME)

    if not start < end:
        raise StartNotBeforeEndError(MESSAGE_INVALID_START_BEFORE_END)

    if lesson_date == today and start < current_time:
        raise PastLessonError(MESSAGE_INVALID_PAST_LESSON)

    if lesson_date < today:
        raise PastLessonError(MESSAGE_INVALID_PAST_LESSON)

    logger.debug("Parsed lesson %s %s-%s (now=%s)", lesson_date, start, end, now)
    return NextLesson(lesson_date, start, end)
