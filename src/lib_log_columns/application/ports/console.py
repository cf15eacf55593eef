"""Console port describing the destination of rendered lines.

Purpose
-------
Define the abstraction for adapters that receive rendered log lines, letting
the emit use case depend on a narrow protocol.

Contents
--------
* :class:`ConsolePort` - runtime-checkable protocol with ``is_interactive``
  and ``write``.

System Role
-----------
Keeps terminal detection and stream handling at the adapter edge; the use
case only asks whether colour is possible and hands over bytes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Receive one rendered, newline-terminated line at a time."""

    def is_interactive(self) -> bool:
        """Return ``True`` when the destination is an interactive terminal."""

    def write(self, data: bytes) -> None:
        """Write ``data`` in a single operation, propagating I/O errors."""


__all__ = ["ConsolePort"]
