"""Escaping tables for text and attribute positions.

Character data only needs ``&``, ``<`` and ``>`` replaced. Attribute values
are always written inside double quotes, so ``"`` is escaped as well, and
``'`` optionally for dialects that want it.

The translation tables are built once at import time and never mutated,
so any number of builders may share them.

Example:
    >>> from xmlbuilder.escape import escape_attr, escape_text
    >>> escape_text('a < b & "c"')
    'a &lt; b &amp; "c"'
    >>> escape_attr('say "hi"')
    'say &#34;hi&#34;'
"""

from __future__ import annotations

from types import MappingProxyType

TEXT_ESCAPES = MappingProxyType(
    str.maketrans(
        {
            "&": "&amp;",
            "<": "&lt;",
            ">": "&gt;",
        }
    )
)

ATTR_ESCAPES = MappingProxyType(
    str.maketrans(
        {
            "&": "&amp;",
            "<": "&lt;",
            ">": "&gt;",
            '"': "&#34;",
        }
    )
)

ATTR_ESCAPES_APOS = MappingProxyType({**ATTR_ESCAPES, ord("'"): "&#39;"})


def escape_text(value: str) -> str:
    """Escape a string for use as character data.

    Quotes are left alone; they carry no meaning between tags.

    Args:
        value: Raw text

    Returns:
        Text with ``&``, ``<`` and ``>`` replaced by entity references
    """
    return value.translate(TEXT_ESCAPES)


def escape_attr(value: str, apostrophe: bool = False) -> str:
    """Escape a string for use inside a double-quoted attribute value.

    Args:
        value: Raw attribute value
        apostrophe: Also escape ``'`` as ``&#39;``

    Returns:
        Escaped attribute value (without the surrounding quotes)
    """
    return value.translate(ATTR_ESCAPES_APOS if apostrophe else ATTR_ESCAPES)


__all__ = [
    "ATTR_ESCAPES",
    "ATTR_ESCAPES_APOS",
    "TEXT_ESCAPES",
    "escape_attr",
    "escape_text",
]
