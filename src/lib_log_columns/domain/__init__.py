"""Domain entities and value objects used by the column renderer."""

from __future__ import annotations

from .events import LogEvent
from .levels import LogLevel
from .settings import DEFAULT_PALETTE, FormatterConfig
from .values import format_field_value

__all__ = [
    "DEFAULT_PALETTE",
    "FormatterConfig",
    "LogEvent",
    "LogLevel",
    "format_field_value",
]
