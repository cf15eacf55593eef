"""Textual representation of field values used by the default field renderer."""

from __future__ import annotations

import json
from typing import Any


def format_field_value(value: Any) -> str:
    """Return the literal form of ``value`` as shown after ``key=``.

    Strings are double-quoted and escaped, booleans and ``None`` use the
    lowercase ``true``/``false``/``nil`` spellings, everything else renders
    through :func:`repr`.

    Examples
    --------
    >>> format_field_value("v1")
    '"v1"'
    >>> format_field_value('say "hi"\\n')
    '"say \\\\"hi\\\\"\\\\n"'
    >>> format_field_value(42)
    '42'
    >>> format_field_value(True)
    'true'
    >>> format_field_value(None)
    'nil'
    """

    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    return repr(value)


__all__ = ["format_field_value"]
