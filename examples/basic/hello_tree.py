"""Render HTML from plain data in 3 lines — zero templates."""

from ramitas import render

html = render(["p", {"class": "greeting"}, "Hello ", ["strong", "World"]])
print(html)
