"""Log entries, severity levels, fields and the adapter protocol."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Optional, Protocol, Tuple, Union, runtime_checkable


class Level(enum.IntEnum):
    """Severity of a message. Compare levels with :meth:`more_severe_than`."""

    DEBUG = -1
    INFO = 0
    WARN = 1
    ERROR = 2

    def more_severe_than(self, other: Union["Level", int]) -> bool:
        """Return True if this level is more severe than ``other``."""
        return int(self) > int(other)

    def __str__(self) -> str:
        return self.name


def level_name(level: Union[Level, int]) -> str:
    """Return the name of a level, or its number when the level is unknown."""
    try:
        return Level(level).name
    except ValueError:
        return str(int(level))


@dataclass(frozen=True)
class Field:
    """A key-value pair attached to an entry."""

    key: str
    value: Any


@dataclass(frozen=True)
class Entry:
    """A logging entry created by a logger and handed to an adapter.

    ``fields`` holds all accumulated fields in the order they were added.
    ``skipped_caller_frames`` lets adapters find the original caller.
    """

    level: Union[Level, int] = Level.INFO
    message: str = ""
    fields: Tuple[Field, ...] = ()
    error: Optional[BaseException] = None
    skipped_caller_frames: int = 0

    def with_field(self, field: Field) -> "Entry":
        """Return a new entry with ``field`` appended."""
        return replace(self, fields=self.fields + (field,))

    def with_fields(self, fields: Optional[Mapping[str, Any]]) -> "Entry":
        """Return a new entry with the given fields appended, not replaced."""
        if not fields:
            return self
        extra = tuple(Field(key, value) for key, value in fields.items())
        return replace(self, fields=self.fields + extra)


@runtime_checkable
class Adapter(Protocol):
    """Something that receives entries and writes them somewhere."""

    def log(self, ctx: Any, entry: Entry) -> None:
        """Handle one entry; ``ctx`` is whatever context the caller passed."""