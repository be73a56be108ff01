"""Adapter writing entries through a standard library ``logging.Logger``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from yala.entry import Adapter
from yala.noop import NoopAdapter
from yala.printer import PrinterAdapter


@dataclass(frozen=True)
class LoggingPrinter:
    """Printer emitting each line as a record of a ``logging.Logger``.

    The record points at the original caller, located with the skipped frames.
    """

    logger: logging.Logger
    level: int = logging.INFO

    def println(self, skip_caller_frames: int, msg: str) -> None:
        """Emit ``msg`` as one log record."""
        self.logger.log(self.level, msg, stacklevel=skip_caller_frames + 2)


def adapter(logger: Optional[logging.Logger]) -> Adapter:
    """Return an adapter logging through ``logger``; None yields a no-op adapter."""
    return NoopAdapter() if logger is None else PrinterAdapter(LoggingPrinter(logger))