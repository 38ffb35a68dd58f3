"""HTML renderer using StringBuilder pattern.

Renders markup trees to HTML with O(n) performance using StringBuilder.
Raw nested data is converted to typed nodes with ``ramitas.tree.build``
first; the walk itself is a single match over node variants.

Thread Safety:
The renderer holds only immutable settings. Multiple threads can safely
share a single HtmlRenderer instance and call render() concurrently.
"""

from typing import Any

from ramitas.attributes import render_attributes
from ramitas.config import DEFAULT_MAX_DEPTH, RenderConfig
from ramitas.elements import is_void
from ramitas.errors import DepthLimitError, MalformedNodeError
from ramitas.escape import to_text
from ramitas.nodes import Element, Empty, Fragment, Node, SafeText, Text
from ramitas.stringbuilder import StringBuilder
from ramitas.tree import build


class HtmlRenderer:
    """Render markup trees to HTML using StringBuilder pattern.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.render(["p", {"class": "foo"}, "bar"])
        '<p class="foo">bar</p>'

        >>> HtmlRenderer(escape=False).render(["p", "<b>x</b>"])
        '<p><b>x</b></p>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call uses its own StringBuilder.
    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        escape: bool = True,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize renderer.

        Args:
            escape: Escape text and attribute values not marked safe
            max_depth: Nesting limit; None disables the guard
        """
        self._config = RenderConfig(escape=escape, max_depth=max_depth)

    def render(self, node: Any) -> str:
        """Render a markup tree to an HTML string.

        Args:
            node: Typed node or raw nested data

        Returns:
            HTML string; nothing is returned if rendering fails part way

        Raises:
            MalformedNodeError: The tree contains an unrenderable shape
            DepthLimitError: The tree is nested deeper than max_depth
        """
        if not isinstance(node, Node):
            node = build(node, config=self._config)
        sb = StringBuilder()
        self._render_node(node, sb, 0)
        return sb.build()

    # =========================================================================
    # Node rendering
    # =========================================================================

    def _render_node(self, node: Any, sb: StringBuilder, depth: int) -> None:
        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            raise DepthLimitError(max_depth)

        match node:
            case Empty():
                pass
            case Text():
                sb.append(to_text(node.value, self._config.escape))
            case SafeText():
                sb.append(node.html)
            case Fragment():
                for child in node.children:
                    self._render_node(child, sb, depth + 1)
            case Element():
                self._render_element(node, sb, depth)
            case Node():
                raise MalformedNodeError(f"unknown node type {type(node).__name__}", node=node)
            case _:
                # Raw data placed inside a hand-built typed node
                self._render_node(build(node, config=self._config), sb, depth)

    def _render_element(self, node: Element, sb: StringBuilder, depth: int) -> None:
        tag = node.tag
        if not isinstance(tag, str) or not tag:
            raise MalformedNodeError(f"tag must be a non-empty string, got {tag!r}", node=node)

        attrs = render_attributes(node.attrs, self._config.escape)
        head = f"{tag} {attrs}" if attrs else tag

        if is_void(tag):
            sb.append(f"<{head}/>")
            return

        sb.append(f"<{head}>")
        for child in node.children:
            self._render_node(child, sb, depth + 1)
        sb.append(f"</{tag}>")
