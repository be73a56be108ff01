"""Render fields in logfmt format, for example ``key=value``."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from yala.entry import Field


def _format_value(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, str) and value == "nil":
        return '"nil"'
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    if " " in text or "=" in text:
        return f'"{text}"'
    return text


def format_field(field: Field) -> str:
    """Return the field as ``key=value``, quoting and escaping the value as needed."""
    return f"{field.key}={_format_value(field.value)}"


def format_fields(fields: Iterable[Field]) -> str:
    """Return the fields in logfmt format, separated by single spaces."""
    return " ".join(format_field(field) for field in fields)