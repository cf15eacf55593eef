"""Adapters binding the renderer to Rich, streams and stdlib logging."""

from __future__ import annotations

from .colorizer import RichColorizer
from .command_hooks import COMMAND_RESULT, COMMAND_START, command_result, command_start
from .console.stream_console import StreamConsoleAdapter, is_interactive
from .hook_registry import HookRegistry
from .logging_bridge import ColumnFormatter, ColumnHandler, event_from_record
from .renderer import render_event

__all__ = [
    "COMMAND_RESULT",
    "COMMAND_START",
    "ColumnFormatter",
    "ColumnHandler",
    "HookRegistry",
    "RichColorizer",
    "StreamConsoleAdapter",
    "command_result",
    "command_start",
    "event_from_record",
    "is_interactive",
    "render_event",
]
