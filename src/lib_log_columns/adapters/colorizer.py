"""Rich-powered colouriser implementing :class:`ColorizerPort`.

Purpose
-------
Turn style strings from :class:`FormatterConfig` into ANSI escape sequences
using Rich, or leave text untouched when colour is disabled for the call.

Contents
--------
* :data:`_COLOR_SYSTEMS` - mapping of config names to Rich colour systems.
* :class:`RichColorizer` - the colour-capability token handed to hooks.
* :func:`validate_style` - parse-check used by the configuration loader.

System Role
-----------
Created once per render call by :func:`lib_log_columns.adapters.renderer.render_event`
so the colour decision is never cached between destinations.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Mapping

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from lib_log_columns.application.ports.hooks import ColorizerPort

_COLOR_SYSTEMS: Mapping[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}

_ATTRIBUTES = (
    "bold",
    "dim",
    "italic",
    "underline",
    "blink",
    "blink2",
    "reverse",
    "conceal",
    "strike",
    "underline2",
    "frame",
    "encircle",
    "overline",
)


@lru_cache(maxsize=1024)
def _resolve_style(style: str, color_system: ColorSystem) -> Style:
    """Return a private :class:`Style` with colours downgraded to ``color_system``.

    ``Style.parse`` hands out shared instances that memoise their escape codes
    for whichever colour system rendered them first, so each system gets its
    own copy here.
    """

    parsed = Style.parse(style)
    color = parsed.color.downgrade(color_system) if parsed.color is not None else None
    bgcolor = parsed.bgcolor.downgrade(color_system) if parsed.bgcolor is not None else None
    attributes = {name: getattr(parsed, name) for name in _ATTRIBUTES}
    return Style(color=color, bgcolor=bgcolor, link=parsed.link, **attributes)


class RichColorizer(ColorizerPort):
    """Apply Rich styles to text when ``enabled`` is true."""

    def __init__(self, enabled: bool, *, color_system: str = "256") -> None:
        self.enabled = enabled
        self._color_system = _COLOR_SYSTEMS[color_system]

    def colorize(self, text: object, style: str) -> str:
        """Return ``text`` styled with ``style``.

        Escape sequences are only added when the colouriser is enabled and
        the style is non-empty; otherwise the plain text comes back.

        Examples
        --------
        >>> RichColorizer(False).colorize("msg", "bold red")
        'msg'
        >>> RichColorizer(True).colorize("msg", "red")
        '\\x1b[31mmsg\\x1b[0m'
        """

        rendered = text if isinstance(text, str) else str(text)
        if not self.enabled or not style:
            return rendered
        return _resolve_style(style, self._color_system).render(rendered, color_system=self._color_system)


def validate_style(style: str) -> str:
    """Return ``style`` unchanged or raise :class:`ValueError` when Rich rejects it."""

    if not style:
        return style
    try:
        Style.parse(style)
    except StyleSyntaxError as exc:
        raise ValueError(f"Invalid style {style!r}: {exc}") from exc
    return style


__all__ = ["RichColorizer", "validate_style"]
