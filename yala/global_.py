"""Global logger whose adapter can be swapped at any time."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Optional, Union

from yala.entry import Adapter, Entry, Field, Level
from yala.noop import InitialGlobalNoopAdapter, NoopAdapter


class _AdapterCell:
    """Holds the adapter shared by a root global logger and all its children."""

    __slots__ = ("_adapter", "_lock")

    def __init__(self) -> None:
        self._adapter: Optional[Adapter] = None
        self._lock = threading.Lock()

    def set(self, adapter: Adapter) -> None:
        with self._lock:
            self._adapter = adapter

    def get(self) -> Adapter:
        adapter = self._adapter
        if adapter is None:
            with self._lock:
                if self._adapter is None:
                    self._adapter = InitialGlobalNoopAdapter()
                adapter = self._adapter
        return adapter


class Global:
    """Logger meant to be shared globally, e.g. as a module-level variable.

    Nothing is logged until an adapter is set; until then the first warning
    or error prints a notice that the logger is not configured. Child loggers
    made with the ``with_*`` methods share the adapter of their root, so
    setting the adapter on any of them updates all. Safe to use from threads.
    """

    __slots__ = ("_entry", "_cell")

    def __init__(self) -> None:
        self._entry = Entry()
        self._cell = _AdapterCell()

    @classmethod
    def _child(cls, entry: Entry, cell: _AdapterCell) -> "Global":
        child = cls.__new__(cls)
        child._entry = entry
        child._cell = cell
        return child

    def set_adapter(self, adapter: Optional[Adapter]) -> None:
        """Replace the adapter of this logger, its root and all its children.

        Passing None disables logging.
        """
        self._cell.set(NoopAdapter() if adapter is None else adapter)

    def _log(
        self,
        ctx: Any,
        level: Union[Level, int],
        msg: str,
        cause: Optional[BaseException],
        fields: Optional[Mapping[str, Any]],
    ) -> None:
        new_entry = replace(
            self._entry.with_fields(fields),
            level=level,
            message=msg,
            error=cause,
            skipped_caller_frames=self._entry.skipped_caller_frames + 2,
        )
        self._cell.get().log(ctx, new_entry)

    def debug(self, ctx: Any, msg: str) -> None:
        """Log a message at DEBUG level."""
        self._log(ctx, Level.DEBUG, msg, self._entry.error, None)

    def debug_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at DEBUG level with fields."""
        self._log(ctx, Level.DEBUG, msg, self._entry.error, fields)

    def info(self, ctx: Any, msg: str) -> None:
        """Log a message at INFO level."""
        self._log(ctx, Level.INFO, msg, self._entry.error, None)

    def info_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at INFO level with fields."""
        self._log(ctx, Level.INFO, msg, self._entry.error, fields)

    def warn(self, ctx: Any, msg: str) -> None:
        """Log a message at WARN level."""
        self._log(ctx, Level.WARN, msg, self._entry.error, None)

    def warn_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at WARN level with fields."""
        self._log(ctx, Level.WARN, msg, self._entry.error, fields)

    def error(self, ctx: Any, msg: str) -> None:
        """Log a message at ERROR level."""
        self._log(ctx, Level.ERROR, msg, self._entry.error, None)

    def error_cause(self, ctx: Any, msg: str, cause: Optional[BaseException]) -> None:
        """Log a message at ERROR level with the given cause."""
        self._log(ctx, Level.ERROR, msg, cause, None)

    def error_fields(self, ctx: Any, msg: str, fields: Optional[Mapping[str, Any]]) -> None:
        """Log a message at ERROR level with fields."""
        self._log(ctx, Level.ERROR, msg, self._entry.error, fields)

    def error_cause_fields(
        self,
        ctx: Any,
        msg: str,
        cause: Optional[BaseException],
        fields: Optional[Mapping[str, Any]],
    ) -> None:
        """Log a message at ERROR level with cause and fields."""
        self._log(ctx, Level.ERROR, msg, cause, fields)

    def with_field(self, key: str, value: Any) -> "Global":
        """Return a child logger with one more field."""
        return self._child(self._entry.with_field(Field(key, value)), self._cell)

    def with_fields(self, fields: Optional[Mapping[str, Any]]) -> "Global":
        """Return a child logger with additional fields."""
        return self._child(self._entry.with_fields(fields), self._cell)

    def with_error(self, err: Optional[BaseException]) -> "Global":
        """Return a child logger carrying ``err``."""
        return self._child(replace(self._entry, error=err), self._cell)

    def with_skipped_caller_frame(self) -> "Global":
        """Return a child logger that skips one more caller frame."""
        return self._child(
            replace(self._entry, skipped_caller_frames=self._entry.skipped_caller_frames + 1),
            self._cell,
        )