"""Adapters that discard entries."""

from __future__ import annotations

import sys
import threading
from typing import Any

from yala.entry import Entry, Level, level_name


class NoopAdapter:
    """Adapter that drops every entry, keeping only a count of what it dropped."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._dropped = 0

    @property
    def dropped(self) -> int:
        """Number of entries discarded so far."""
        with self._lock:
            return self._dropped

    def log(self, ctx: Any, entry: Entry) -> None:
        """Discard the entry."""
        with self._lock:
            self._dropped += 1


class InitialGlobalNoopAdapter:
    """Adapter used by an unconfigured global logger.

    Entries are dropped, but the first warning or error prints a single
    notice saying where the message came from and that logging is not set up.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._reported = False

    def log(self, ctx: Any, entry: Entry) -> None:
        """Drop the entry, reporting the first warning or error once."""
        if entry.level not in (Level.WARN, Level.ERROR):
            return
        with self._lock:
            if self._reported:
                return
            self._reported = True
        try:
            frame = sys._getframe(entry.skipped_caller_frames + 1)
            location = f"{frame.f_code.co_filename}:{frame.f_lineno}"
        except ValueError:
            location = "???:0"
        print(
            f"{location} cannot log message with level "
            f"{level_name(entry.level)}. Please configure the global logger."
        )