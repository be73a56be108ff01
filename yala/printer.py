"""Adapter that renders entries as text lines and hands them to a printer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from yala.entry import Entry, Field, level_name
from yala.logfmt import format_field, format_fields


@runtime_checkable
class Printer(Protocol):
    """Something that prints lines."""

    def println(self, skip_caller_frames: int, msg: str) -> None:
        """Print one line; ``skip_caller_frames`` can locate the caller."""


@dataclass(frozen=True)
class PrinterAdapter:
    """Adapter printing ``LEVEL message key=value error=...`` lines.

    Fields and the error are rendered in logfmt format. Without a printer
    nothing is logged.
    """

    printer: Optional[Printer] = None

    def log(self, ctx: Any, entry: Entry) -> None:
        """Render the entry and pass it to the printer."""
        if self.printer is None:
            return
        parts = [level_name(entry.level), entry.message]
        if entry.fields:
            parts.append(format_fields(entry.fields))
        if entry.error is not None:
            parts.append(format_field(Field("error", entry.error)))
        self.printer.println(entry.skipped_caller_frames + 1, " ".join(parts))