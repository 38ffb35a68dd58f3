"""Ramitas renderers.

Renderers convert typed markup tree nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders markup trees to HTML using StringBuilder pattern

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from ramitas.renderers.html import HtmlRenderer
from ramitas.renderers.protocol import MarkupRenderer

__all__ = ["HtmlRenderer", "MarkupRenderer"]
