"""Static package metadata surfaced by the CLI ``info`` command.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_columns"
title = "Column-aligned, colourised log lines with field hooks"
version = "0.1.0"
shell_command = "lib_log_columns"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer``.

    Every emitted chunk ends with a newline so callers can join them.
    """

    write = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    write(f"Info for {name}:\n\n")
    for label, value in fields:
        write(f"    {label:<{pad}} = {value}\n")


__all__ = [
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
