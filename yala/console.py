"""Minimal console adapters meant for development.

Lines have the form ``LEVEL message key=value key=value error=error``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from yala.printer import PrinterAdapter


@dataclass(frozen=True)
class WriterPrinter:
    """Printer writing lines to a text stream. Write errors are discarded."""

    writer: Optional[TextIO] = None

    def println(self, skip_caller_frames: int, msg: str) -> None:
        """Write ``msg`` followed by a newline, ignoring any write error."""
        if self.writer is None:
            return
        try:
            self.writer.write(msg + "\n")
        except (OSError, ValueError):
            pass


def stdout_adapter() -> PrinterAdapter:
    """Return an adapter printing entries to standard output."""
    return PrinterAdapter(WriterPrinter(sys.stdout))


def stderr_adapter() -> PrinterAdapter:
    """Return an adapter printing entries to standard error."""
    return PrinterAdapter(WriterPrinter(sys.stderr))