"""Compose a page from small functions that return markup trees."""

from ramitas import SafeText, render


def nav(links: list[tuple[str, str]], current: str) -> list:
    items = []
    for href, label in links:
        attrs = {"href": href, "aria": {"current": "page"}} if href == current else {"href": href}
        items.append(["li", ["a", attrs, label]])
    return ["nav", ["ul", items]]


def article(title: str, body_html: str, tags: list[str]) -> list:
    return [
        "article",
        {"class": ["post", not tags and "untagged"], "data": {"tag-count": len(tags)}},
        ["h1", title],
        SafeText(body_html),
        tags and ["footer", [["span", {"class": "tag"}, t] for t in tags]],
    ]


page = [
    nav([("/", "Home"), ("/about", "About")], current="/"),
    article("Trees & <Tags>", "<p>Already <em>trusted</em> HTML.</p>", ["python", "html"]),
    ["hr"],
]

print(render(page))
