"""Hook and colouriser ports consumed by the renderer.

Purpose
-------
Describe the two collaborators a field hook interacts with: the colouriser
token that knows whether escape sequences may be written, and the hook
callable itself.

Contents
--------
* :class:`ColorizerPort` - colour-capability token resolved per render call.
* :class:`FieldHook` - callable rendering one field value into the sink.

System Role
-----------
Lets custom hooks be written against narrow protocols instead of the Rich
adapter or the renderer internals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from lib_log_columns.domain.settings import FormatterConfig


@runtime_checkable
class ColorizerPort(Protocol):
    """Apply a style to text when colour output is enabled for this call."""

    enabled: bool

    def colorize(self, text: object, style: str) -> str:
        """Return ``text`` wrapped in the escape sequences for ``style``."""


@runtime_checkable
class FieldHook(Protocol):
    """Render the value of one special field.

    Hooks own everything they write to ``sink`` and may write nothing at all.
    They run outside the registry lock and must not raise.
    """

    def __call__(
        self,
        config: "FormatterConfig",
        sink: TextIO,
        value: Any,
        colorizer: ColorizerPort,
    ) -> None:
        """Write the rendering of ``value`` to ``sink``."""


__all__ = ["ColorizerPort", "FieldHook"]
