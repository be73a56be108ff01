"""Immutable logger bound to one adapter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from yala.entry import Adapter, Entry, Field, Level


@dataclass(frozen=True)
class Logger:
    """Immutable logger. Derived loggers are created with the ``with_*`` methods.

    A logger without an adapter logs nothing. Safe to share between threads.
    """

    adapter: Optional[Adapter] = None
    entry: Entry = field(default_factory=Entry)

    def _log(
        self,
        ctx: Any,
        level: Union[Level, int],
        msg: str,
        cause: Optional[BaseException],
        fields: Optional[Mapping[str, Any]],
    ) -> None:
        if self.adapter is None:
            return
        new_entry = replace(
            self.entry.with_fields(fields),
            level=level,
            message=msg,
            error=cause,
            skipped_caller_frames=self.entry.skipped_caller_frames + 2,
        )
        self.adapter.log(ctx, new_entry)

    def debug(self, ctx: Any, msg: str) -> None:
        """Log a message at DEBUG level."""
        self._log(ctx, Level.DEBUG, msg, self.entry.error, None)

    def debug_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at DEBUG level with fields."""
        self._log(ctx, Level.DEBUG, msg, self.entry.error, fields)

    def info(self, ctx: Any, msg: str) -> None:
        """Log a message at INFO level."""
        self._log(ctx, Level.INFO, msg, self.entry.error, None)

    def info_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at INFO level with fields."""
        self._log(ctx, Level.INFO, msg, self.entry.error, fields)

    def warn(self, ctx: Any, msg: str) -> None:
        """Log a message at WARN level."""
        self._log(ctx, Level.WARN, msg, self.entry.error, None)

    def warn_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at WARN level with fields."""
        self._log(ctx, Level.WARN, msg, self.entry.error, fields)

    def error(self, ctx: Any, msg: str) -> None:
        """Log a message at ERROR level."""
        self._log(ctx, Level.ERROR, msg, self.entry.error, None)

    def error_cause(self, ctx: Any, msg: str, cause: Optional[BaseException]) -> None:
        """Log a message at ERROR level with the given cause."""
        self._log(ctx, Level.ERROR, msg, cause, None)

    def error_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at ERROR level with fields."""
        self._log(ctx, Level.ERROR, msg, self.entry.error, fields)

    def error_cause_fields(
        self,
        ctx: Any,
        msg: str,
        cause: Optional[BaseException],
        fields: Optional[Mapping[str, Any]],
    ) -> None:
        """Log a message at ERROR level with cause and fields."""
        self._log(ctx, Level.ERROR, msg, cause, fields)

    def with_field(self, key: str, value: Any) -> "Logger":
        """Return a new logger with one more field."""
        return replace(self, entry=self.entry.with_field(Field(key, value)))

    def with_fields(self, fields: Optional[Mapping[str, Any]]) -> "Logger":
        """Return a new logger with additional fields."""
        return replace(self, entry=self.entry.with_fields(fields))

    def with_error(self, err: Optional[BaseException]) -> "Logger":
        """Return a new logger carrying ``err``."""
        return replace(self, entry=replace(self.entry, error=err))

    def with_skipped_caller_frame(self) -> "Logger":
        """Return a new logger that skips one more caller frame."""
        return replace(
            self,
            entry=replace(
                self.entry,
                skipped_caller_frames=self.entry.skipped_caller_frames + 1,
            ),
        )


def with_adapter(adapter: Optional[Adapter]) -> Logger:
    """Create a logger that sends entries to ``adapter``."""
    return Logger(adapter=adapter)