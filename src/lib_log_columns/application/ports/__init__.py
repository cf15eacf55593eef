"""Protocols describing the collaborators of the rendering use cases."""

from __future__ import annotations

from .console import ConsolePort
from .hooks import ColorizerPort, FieldHook

__all__ = ["ColorizerPort", "ConsolePort", "FieldHook"]
