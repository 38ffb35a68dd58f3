"""Host framework integration for Ramitas.

Lets template engines and view layers accept markup trees wherever they
accept strings. Rendered output is returned as ``markupsafe.Markup`` so
engines that honour the ``__html__`` protocol (Jinja2, Flask, Django) do not
escape it a second time.

Example — a view helper that returns a tree:

    @markup_view
    def user_card(user):
        return ["div", {"class": "card"}, ["h2", user.name]]

    user_card(user)  # Markup('<div class="card"><h2>Ada</h2></div>')

Example — lazy rendering inside a template context:

    context["sidebar"] = Renderable(build_sidebar, request)
    # {{ sidebar }} calls build_sidebar(request) and renders the tree

Thread Safety:
    All functions are pure. Renderable instances render on every access and
    hold no cached output.

"""

import functools
from collections.abc import Callable, Iterable
from typing import Any, ParamSpec

from markupsafe import Markup

from ramitas.config import get_render_config
from ramitas.nodes import Node
from ramitas.renderers.html import HtmlRenderer
from ramitas.utils.logger import get_logger

logger = get_logger(__name__)

P = ParamSpec("P")


def render_markup(node: Any, escape: bool | None = None) -> Markup:
    """Render a markup tree and mark the result safe for host templates."""
    config = get_render_config()
    if escape is None:
        escape = config.escape
    renderer = HtmlRenderer(escape=escape, max_depth=config.max_depth)
    return Markup(renderer.render(node))


def is_markup_tree(value: Any) -> bool:
    """Return True if value should be rendered rather than passed through.

    Typed nodes and raw lists/tuples are markup trees. Strings, including
    host-marked safe strings, are not.
    """
    return isinstance(value, (Node, list, tuple))


def adapt(value: Any, *, escape: bool | None = None) -> Any:
    """Render value if it is a markup tree, otherwise return it unchanged."""
    if not is_markup_tree(value):
        return value
    logger.debug("Rendering %s returned to host", type(value).__name__)
    return render_markup(value, escape)


def adapt_fragments(fragments: Iterable[Any], *, escape: bool | None = None) -> list[Any]:
    """Adapt each output fragment of a host templating call, preserving order."""
    return [adapt(fragment, escape=escape) for fragment in fragments]


def markup_view(func: Callable[P, Any]) -> Callable[P, Any]:
    """Decorate a view helper so a returned markup tree is rendered."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        return adapt(func(*args, **kwargs))

    return wrapper


class Renderable:
    """Deferred markup tree produced by a callable.

    The callable runs when the host asks for HTML, so it sees the context
    (config, request-local state) active at render time rather than at
    construction time.

    """

    __slots__ = ("_func", "_args", "_kwargs")

    format = "html"

    def __init__(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self._func = func
        self._args = args
        self._kwargs = kwargs

    def render(self, *, escape: bool | None = None) -> Markup:
        content = self._func(*self._args, **self._kwargs)
        if isinstance(content, Markup):
            return content
        return render_markup(content, escape)

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return self.__html__()

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"Renderable({name})"


__all__ = [
    "Renderable",
    "adapt",
    "adapt_fragments",
    "is_markup_tree",
    "markup_view",
    "render_markup",
]
