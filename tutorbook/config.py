"""
Runtime settings.

Values come from the environment and can be overridden by CLI flags:

    TUTORBOOK_LOG_LEVEL   DEBUG / INFO / WARNING / ERROR   (default WARNING)
    TUTORBOOK_CLOCK       live | startup                   (default live)

Clock modes:
- live:    every parse reads the current time again
- startup: the time is read once, when make_clock() is called, and reused
           for every later parse of the session
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from rich.logging import RichHandler

from tutorbook.clock import Clock, startup_clock, system_clock

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
CLOCK_MODES = ("live", "startup")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    clock_mode: str = "live"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level!r} (expected one of {', '.join(LOG_LEVELS)})")
        if self.clock_mode not in CLOCK_MODES:
            raise ValueError(f"Invalid clock mode: {self.clock_mode!r} (expected one of {', '.join(CLOCK_MODES)})")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("TUTORBOOK_LOG_LEVEL", "WARNING").strip().upper(),
            clock_mode=env.get("TUTORBOOK_CLOCK", "live").strip().lower(),
        )

    def override(self, log_level: Optional[str] = None, clock_mode: Optional[str] = None) -> "Settings":
        changes = {}
        if log_level:
            changes["log_level"] = log_level.upper()
        if clock_mode:
            changes["clock_mode"] = clock_mode.lower()
        return replace(self, **changes)

    def make_clock(self) -> Clock:
        if self.clock_mode == "startup":
            return startup_clock()
        return system_clock


def configure_logging(settings: Settings) -> None:
    """
    Route log records through rich so they share the console with the REPL.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
