"""MarkupRenderer protocol — stable interface for markup tree renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from ramitas.renderers.protocol import MarkupRenderer

    def render_page(renderer: MarkupRenderer, tree: MarkupNode) -> str:
        return renderer.render(tree)

"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MarkupRenderer(Protocol):
    """Protocol for markup tree renderers.

    Implementations must accept a markup tree (typed or raw) and return a
    rendered string.

    """

    def render(self, node: Any) -> str:
        """Render a markup tree to a string."""
        ...
