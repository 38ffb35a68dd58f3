"""
Ramitas — HTML from plain Python data

Converts a nested, data-only description of markup (tags, attributes, text
and children as lists, tuples and dicts) into a well-formed HTML string.
One-directional and stateless: no parsing, no diffing, no template syntax.

Quick Start:
    >>> from ramitas import render
    >>> render(["p", {"class": "lead"}, "Hello ", ["strong", "World"]])
    '<p class="lead">Hello <strong>World</strong></p>'

    >>> # Attribute flattening
    >>> render(["div", {"data": {"id": 7}, "class": ["a", None, "b"]}])
    '<div data-id="7" class="a b"></div>'

    >>> # Safe strings pass through unescaped
    >>> from ramitas import SafeText
    >>> render(["p", SafeText("<em>ok</em>"), " & <more>"])
    '<p><em>ok</em> &amp; &lt;more&gt;</p>'

Typed Trees:
    >>> from ramitas import h
    >>> render(h("ul", [h("li", "one"), h("li", "two")]))
    '<ul><li>one</li><li>two</li></ul>'

Installation:
    pip install ramitas
"""

from markupsafe import Markup

from ramitas.attributes import render_attributes, serialize_attributes
from ramitas.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from ramitas.elements import VOID_ELEMENTS, is_void
from ramitas.errors import DepthLimitError, MalformedNodeError, RamitasError
from ramitas.escape import escape_html, maybe_escape
from ramitas.integration import (
    Renderable,
    adapt,
    adapt_fragments,
    is_markup_tree,
    markup_view,
    render_markup,
)
from ramitas.nodes import (
    EMPTY,
    Element,
    Empty,
    Fragment,
    MarkupNode,
    Node,
    SafeText,
    Text,
)
from ramitas.renderers.html import HtmlRenderer
from ramitas.renderers.protocol import MarkupRenderer
from ramitas.tree import Shape, build, classify, h

__version__ = "0.1.0"


def render(node: object, escape: bool | None = None) -> str:
    """Render a markup tree to an HTML string.

    Args:
        node: Typed node or raw nested data
        escape: Escape text and attribute values not marked safe. None uses
            the active RenderConfig (escaping on by default).

    Returns:
        HTML string

    Raises:
        MalformedNodeError: A tag position holds a non-scalar
        DepthLimitError: The tree is nested deeper than the configured limit

    Example:
        >>> render([["div", "foo"], ["strong", "bar"]])
        '<div>foo</div><strong>bar</strong>'
        >>> render(["p", "<b>"], escape=False)
        '<p><b></p>'
    """
    config = get_render_config()
    if escape is None:
        escape = config.escape
    return HtmlRenderer(escape=escape, max_depth=config.max_depth).render(node)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    "render_markup",
    "build",
    "classify",
    "h",
    "Shape",
    # Nodes
    "EMPTY",
    "Element",
    "Empty",
    "Fragment",
    "MarkupNode",
    "Node",
    "SafeText",
    "Text",
    # Attributes and escaping
    "render_attributes",
    "serialize_attributes",
    "escape_html",
    "maybe_escape",
    "VOID_ELEMENTS",
    "is_void",
    # Renderer
    "HtmlRenderer",
    "MarkupRenderer",
    # Host integration
    "Markup",
    "Renderable",
    "adapt",
    "adapt_fragments",
    "is_markup_tree",
    "markup_view",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "RamitasError",
    "MalformedNodeError",
    "DepthLimitError",
]
