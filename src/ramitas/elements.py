"""HTML element tables.

Void elements never have children and are written self-closing
(``<br/>``). Children attached to a void element are dropped.
"""

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_void(tag: str) -> bool:
    """Return True if tag names a void element (case-insensitive)."""
    return tag.lower() in VOID_ELEMENTS


__all__ = ["VOID_ELEMENTS", "is_void"]
