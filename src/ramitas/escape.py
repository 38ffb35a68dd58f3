"""Escaping policy for Ramitas.

Text is entity-escaped if and only if escaping is enabled AND the value is
not marked safe. A value is safe when it is a ``SafeText`` node or any object
implementing the ``__html__`` protocol (``markupsafe.Markup``, Django's
``SafeString``), which is how host template engines mark trusted markup.

Example:
    >>> from ramitas.escape import maybe_escape
    >>> maybe_escape('<a href="x">', escape=True)
    '&lt;a href=&quot;x&quot;&gt;'
    >>> maybe_escape("<b>", escape=True, is_safe=True)
    '<b>'
"""

from __future__ import annotations

import html
from typing import Any


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts & < > " ' to entities (``&amp;`` ``&lt;`` ``&gt;`` ``&quot;``
    ``&#x27;``). Safe for both text content and double-quoted attributes.
    """
    return html.escape(text, quote=True)


def is_safe(value: Any) -> bool:
    """Return True if value is already-trusted markup."""
    return hasattr(value, "__html__")


def maybe_escape(text: str, escape: bool, is_safe: bool = False) -> str:
    """Escape text unless escaping is off or the text is marked safe."""
    if escape and not is_safe:
        return escape_html(text)
    return text


def to_text(value: Any, escape: bool) -> str:
    """Stringify a scalar or safe value and apply the escaping policy.

    Safe values are unwrapped via ``__html__()`` and returned verbatim.
    """
    if is_safe(value):
        return str(value.__html__())
    return maybe_escape(str(value), escape)


__all__ = ["escape_html", "is_safe", "maybe_escape", "to_text"]
