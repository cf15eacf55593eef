"""Use case rendering a single log event and handing it to a console.

Purpose
-------
Tie the renderer to a :class:`ConsolePort`: ask the destination whether it is
interactive, render the event once with that answer, and perform exactly one
write.

Contents
--------
* :data:`RenderCallable` - signature of the injected renderer.
* :func:`create_emit_event` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator used by the logging bridge and the CLI. I/O
errors raised by the console propagate unchanged; nothing is retried or
buffered beyond the one rendered line.
"""

from __future__ import annotations

from collections.abc import Callable

from lib_log_columns.application.ports import ConsolePort
from lib_log_columns.domain import LogEvent

RenderCallable = Callable[[LogEvent, bool], bytes]


def create_emit_event(
    *,
    console: ConsolePort,
    render: RenderCallable,
    force_interactive: bool = False,
) -> Callable[[LogEvent], bytes]:
    """Build the callable that renders and writes one event.

    Parameters
    ----------
    console:
        Destination implementing :class:`ConsolePort`.
    render:
        Callable taking ``(event, interactive)`` and returning the rendered
        line, typically a partial over :func:`render_event`.
    force_interactive:
        Treat the destination as a terminal even when it reports otherwise.

    Returns
    -------
    Callable[[LogEvent], bytes]
        Function returning the bytes it wrote.
    """

    def emit(event: LogEvent) -> bytes:
        interactive = force_interactive or console.is_interactive()
        data = render(event, interactive)
        console.write(data)
        return data

    return emit


__all__ = ["RenderCallable", "create_emit_event"]
