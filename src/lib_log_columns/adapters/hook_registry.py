"""Thread-safe registry mapping field names to rendering hooks.

Purpose
-------
Let callers replace the default ``key=value`` rendering of specific fields
while renders are in flight on other threads.

Contents
--------
* :class:`HookRegistry` - name to :class:`FieldHook` mapping guarded by a lock.

System Role
-----------
Consulted by the renderer once per field. The lock guards each individual
map access only; it is never held while a hook runs, so hooks may add or
delete hooks themselves without deadlocking.
"""

from __future__ import annotations

import logging
from threading import Lock

from lib_log_columns.application.ports.hooks import FieldHook

from .command_hooks import BUILTIN_HOOKS

logger = logging.getLogger(__name__)


class HookRegistry:
    """Mapping of field name to hook with at most one hook per name.

    Examples
    --------
    >>> registry = HookRegistry()
    >>> sorted(registry.names())
    ['COMMAND_RESULT', 'COMMAND_START']
    >>> registry.delete_hook("COMMAND_START")
    >>> registry.lookup("COMMAND_START") is None
    True
    """

    def __init__(self, *, builtins: bool = True) -> None:
        self._lock = Lock()
        self._hooks: dict[str, FieldHook] = dict(BUILTIN_HOOKS) if builtins else {}

    def add_hook(self, name: str, hook: FieldHook) -> None:
        """Insert or replace the hook for ``name``."""
        with self._lock:
            self._hooks[name] = hook
        logger.debug("field hook registered", extra={"fields": {"hook": name}})

    def delete_hook(self, name: str) -> None:
        """Remove the hook for ``name``; unknown names are ignored."""
        with self._lock:
            removed = self._hooks.pop(name, None)
        if removed is not None:
            logger.debug("field hook removed", extra={"fields": {"hook": name}})

    def lookup(self, name: str) -> FieldHook | None:
        """Return the hook registered for ``name`` or ``None``."""
        with self._lock:
            return self._hooks.get(name)

    def names(self) -> tuple[str, ...]:
        """Return a snapshot of the registered field names."""
        with self._lock:
            return tuple(self._hooks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._hooks

    def __len__(self) -> int:
        with self._lock:
            return len(self._hooks)


__all__ = ["HookRegistry"]
