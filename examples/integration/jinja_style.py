"""Hand markup trees to a template engine that honours __html__."""

from markupsafe import escape

from ramitas import Renderable, adapt_fragments, markup_view


@markup_view
def user_badge(name: str, admin: bool) -> list:
    return ["span", {"class": ["badge", admin and "badge-admin"]}, name]


def sidebar(items: list[str]) -> list:
    return ["aside", ["ul", [["li", item] for item in items]]]


# A view helper returns Markup, so escaping it again is a no-op
print(escape(user_badge("Ada <admin>", admin=True)))

# Deferred rendering: the tree is built only when the host asks for HTML
lazy = Renderable(sidebar, ["Inbox", "Drafts"])
print(escape(lazy))

# Post-process the output fragments of a host templating call
print("".join(adapt_fragments(["<main>", ["p", "body & soul"], "</main>"])))
