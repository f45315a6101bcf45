"""
Clock sources for time-dependent validation.

A clock is any zero-argument callable returning a naive local datetime.
Parsers call it once per parse and hand the reading down, so every check of
one command sees the same "now".
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now()


class FixedClock:
    """
    Always returns the same reading (tests, or the "startup" clock mode).
    """

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def __repr__(self) -> str:
        return f"FixedClock({self.now.isoformat()})"


def startup_clock() -> FixedClock:
    """
    Freeze the current reading. Lessons are then validated against the
    moment the process started, however long it runs.
    """
    return FixedClock(system_clock())
