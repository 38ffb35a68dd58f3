"""Structure classification and typed building for raw markup trees.

Raw markup trees are plain Python data::

    ["p", {"class": "lead"}, "Hello ", ["strong", "world"]]

``classify`` names the shape of one raw value. ``build`` walks a whole raw
tree and returns typed nodes (``ramitas.nodes``), so the renderer only ever
matches on node variants.

Classification rules, in order:

1. Mapping: an attribute map. Directly after a tag it holds the element's
   attributes; anywhere else it renders as ``name="value"`` text.
2. List or tuple:
   a. empty: ``Empty``
   b. first item is itself nested (list, tuple, node, iterable): ``Fragment``
   c. otherwise ``Element``; the first item is the tag, a mapping in second
      position is the attribute map, everything else is children.
3. ``None`` or ``False``: ``Empty``
4. Other non-string iterables (generators, ``map``): ``Fragment``
5. Marked safe (``SafeText`` or ``__html__``): ``SafeText``
6. Anything else: ``Text``

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from ramitas.attributes import render_attributes
from ramitas.config import RenderConfig, get_render_config
from ramitas.errors import DepthLimitError, MalformedNodeError
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
from ramitas.utils.logger import get_logger

logger = get_logger(__name__)

_TAG_TYPES = (str, int, float)


class Shape(StrEnum):
    """Shapes a raw markup tree value can take."""

    ATTRIBUTES = "attributes"
    EMPTY = "empty"
    FRAGMENT = "fragment"
    ELEMENT = "element"
    SAFE_TEXT = "safe_text"
    TEXT = "text"


def _is_nested(value: Any) -> bool:
    """True if value opens a sibling list rather than naming a tag."""
    if isinstance(value, (list, tuple, Node)):
        return True
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def classify(value: Any) -> Shape:
    """Return the shape of one raw markup tree value.

    Typed nodes are classified by their variant. ``build`` dispatches on
    this result, so a value always renders as the shape reported here.

    Raises:
        MalformedNodeError: value is a Node of no known variant

    Example:
        >>> classify(["p", {"class": "x"}, "hi"])
        <Shape.ELEMENT: 'element'>
        >>> classify([["p"], ["p"]])
        <Shape.FRAGMENT: 'fragment'>
    """
    match value:
        case Empty() | None | False:
            return Shape.EMPTY
        case Fragment():
            return Shape.FRAGMENT
        case Element():
            return Shape.ELEMENT
        case SafeText():
            return Shape.SAFE_TEXT
        case Text():
            return Shape.TEXT
        case Node():
            raise MalformedNodeError(f"unknown node type {type(value).__name__}", node=value)
        case Mapping():
            return Shape.ATTRIBUTES
        case list() | tuple():
            if not value:
                return Shape.EMPTY
            if _is_nested(value[0]):
                return Shape.FRAGMENT
            return Shape.ELEMENT
        case _ if hasattr(value, "__html__"):
            return Shape.SAFE_TEXT
        case _ if _is_nested(value):
            return Shape.FRAGMENT
        case _:
            return Shape.TEXT


def _tag_name(value: Any, path: tuple[int, ...]) -> str:
    if isinstance(value, bool) or not isinstance(value, _TAG_TYPES):
        raise MalformedNodeError(
            f"tag must be a string, got {type(value).__name__}", node=value, path=path
        )
    tag = str(value)
    if not tag:
        raise MalformedNodeError("tag must not be empty", node=value, path=path)
    return tag


class _Builder:
    """Depth-tracking walk from raw data to typed nodes."""

    __slots__ = ("_max_depth",)

    def __init__(self, max_depth: int | None) -> None:
        self._max_depth = max_depth

    def build(self, value: Any, path: tuple[int, ...]) -> MarkupNode:
        if self._max_depth is not None and len(path) > self._max_depth:
            raise DepthLimitError(self._max_depth, path)

        match classify(value):
            case Shape.EMPTY:
                return EMPTY
            case Shape.SAFE_TEXT:
                if isinstance(value, SafeText):
                    return value
                return SafeText(str(value.__html__()))
            case Shape.TEXT:
                if isinstance(value, Text):
                    return value
                return Text(value if isinstance(value, _TAG_TYPES) else str(value))
            case Shape.ATTRIBUTES:
                # Stray mapping outside tag position renders as name="value" text
                logger.debug("Rendering attribute mapping at %s as text", list(path))
                return Text(render_attributes(value, escape=False))
            case Shape.FRAGMENT:
                if isinstance(value, Fragment):
                    return value
                return self._build_children(value, path, 0)
            case Shape.ELEMENT:
                if isinstance(value, Element):
                    return value
                return self._build_element(value, path)

    def _build_element(
        self, value: list[Any] | tuple[Any, ...], path: tuple[int, ...]
    ) -> Element:
        tag = _tag_name(value[0], (*path, 0))
        if len(value) > 1 and isinstance(value[1], Mapping):
            attrs: Mapping[Any, Any] | None = value[1]
            start = 2
        else:
            attrs = None
            start = 1
        children = self._build_children(value[start:], path, start).children
        return Element(tag=tag, attrs=attrs, children=children)

    def _build_children(self, items: Iterable[Any], path: tuple[int, ...], offset: int) -> Fragment:
        return Fragment(
            tuple([self.build(item, (*path, i)) for i, item in enumerate(items, offset)])
        )


def build(value: Any, *, config: RenderConfig | None = None) -> MarkupNode:
    """Convert a raw markup tree into typed nodes.

    Args:
        value: Raw nested data, a typed node, or a mix of both
        config: Render configuration supplying max_depth (uses the active
            context config if None)

    Returns:
        Typed markup node

    Raises:
        MalformedNodeError: A tag position holds a non-scalar
        DepthLimitError: The tree is nested deeper than max_depth

    Example:
        >>> build(["p", {"class": "x"}, "hi"])
        Element(tag='p', attrs=mappingproxy({'class': 'x'}), children=(Text(value='hi'),))
    """
    config = config or get_render_config()
    return _Builder(config.max_depth).build(value, ())


def h(tag: str, *args: Any) -> Element:
    """Build a typed Element from a tag, optional attributes and children.

    Example:
        >>> h("a", {"href": "/"}, "Home")
        Element(tag='a', attrs=mappingproxy({'href': '/'}), children=(Text(value='Home'),))
    """
    _tag_name(tag, (0,))
    node = build([tag, *args])
    assert isinstance(node, Element)
    return node


__all__ = ["Shape", "build", "classify", "h"]
