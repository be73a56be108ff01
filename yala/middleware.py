"""Middleware adapters that alter or filter entries before passing them on."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from yala.entry import Adapter, Entry, Field, Level


class _Forwarding:
    """Passes entries to ``next_adapter``, skipping one more caller frame."""

    next_adapter: Adapter

    def _forward(self, ctx: Any, entry: Entry) -> None:
        self.next_adapter.log(
            ctx, replace(entry, skipped_caller_frames=entry.skipped_caller_frames + 1)
        )


@dataclass(frozen=True)
class FilterOutMessages(_Forwarding):
    """Drops entries whose message starts with ``prefix``."""

    prefix: str
    next_adapter: Adapter

    def log(self, ctx: Any, entry: Entry) -> None:
        """Pass the entry on unless its message has the prefix."""
        if not entry.message.startswith(self.prefix):
            self._forward(ctx, entry)


@dataclass(frozen=True)
class FilterByLevel(_Forwarding):
    """Drops entries less severe than ``min_level``."""

    min_level: Level
    next_adapter: Adapter

    def log(self, ctx: Any, entry: Entry) -> None:
        """Pass the entry on if it is at least as severe as ``min_level``."""
        if not Level(self.min_level).more_severe_than(entry.level):
            self._forward(ctx, entry)


@dataclass(frozen=True)
class RenameFieldsAdapter(_Forwarding):
    """Renames every field whose key equals ``from_`` to ``to``."""

    from_: str
    to: str
    next_adapter: Adapter

    def log(self, ctx: Any, entry: Entry) -> None:
        """Pass on a copy of the entry with matching fields renamed."""
        fields = tuple(
            Field(self.to if f.key == self.from_ else f.key, f.value) for f in entry.fields
        )
        self._forward(ctx, replace(entry, fields=fields))


@dataclass(frozen=True)
class AddFieldFromContextAdapter(_Forwarding):
    """Appends a field whose value is looked up under ``key`` in the context.

    The context is expected to be a mapping; otherwise the value is None.
    """

    next_adapter: Adapter
    key: str = "tag"

    def log(self, ctx: Any, entry: Entry) -> None:
        """Pass on the entry with the context value appended as a field."""
        value = ctx.get(self.key) if isinstance(ctx, Mapping) else None
        self._forward(ctx, entry.with_fields({self.key: value}))


@dataclass(frozen=True)
class ReportCallerAdapter:
    """Adds ``file`` and ``line`` fields naming the code that logged the entry."""

    next_adapter: Adapter

    def log(self, ctx: Any, entry: Entry) -> None:
        """Pass on the entry with caller information appended."""
        entry = replace(entry, skipped_caller_frames=entry.skipped_caller_frames + 1)
        try:
            caller = sys._getframe(entry.skipped_caller_frames)
        except ValueError:
            caller = None
        if caller is not None:
            entry = entry.with_fields(
                {"file": caller.f_code.co_filename, "line": caller.f_lineno}
            )
        self.next_adapter.log(ctx, entry)