"""Typed markup tree nodes for Ramitas.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: the renderer dispatches with a single match statement

Node Hierarchy:
Node (base)
├── Fragment  (sibling list, no wrapping tag)
├── Element   (tag + optional attributes + children)
├── Text      (scalar, escaped on output)
├── SafeText  (trusted markup, never escaped)
└── Empty     (absent value, renders nothing)

Raw nested data (``["p", {"class": "x"}, "hi"]``) is converted into these
nodes by ``ramitas.tree.build``.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads. Element
copies its attribute map, so later changes to the caller's dict are not seen.

"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

Scalar: TypeAlias = str | int | float | bool

# Attribute values: scalar, nested mapping (dash-joined names), or list of scalars.
AttributeValue: TypeAlias = Any
AttributeMap: TypeAlias = Mapping[str, AttributeValue]


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all markup tree nodes."""


@dataclass(frozen=True, slots=True)
class Empty(Node):
    """An absent value.

    Contributes nothing to output and never adds a separator.

    """


EMPTY = Empty()


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Scalar text content.

    Stringified with ``str()`` and escaped when escaping is enabled.

    """

    value: Scalar

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class SafeText(Node):
    """Trusted markup that is never escaped.

    Implements the ``__html__`` protocol, so it is interchangeable with
    ``markupsafe.Markup`` in template engines that honour it.

    """

    html: str

    def __html__(self) -> str:
        return self.html

    def __str__(self) -> str:
        return self.html


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An HTML element.

    ``attrs=None`` and ``attrs={}`` render identically. The top-level attribute
    map is copied into a read-only mapping; nested values are not copied.
    Elements compare by value but are not hashable.

    """

    __hash__ = None  # type: ignore[assignment]

    tag: str
    attrs: AttributeMap | None = None
    children: tuple[Node, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any sequence of children but store a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        if self.attrs is not None:
            object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))


@dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Ordered sibling nodes with no wrapping tag."""

    children: tuple[Node, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


MarkupNode: TypeAlias = Fragment | Element | Text | SafeText | Empty


__all__ = [
    "EMPTY",
    "AttributeMap",
    "AttributeValue",
    "Element",
    "Empty",
    "Fragment",
    "MarkupNode",
    "Node",
    "SafeText",
    "Scalar",
    "Text",
]
