"""HTML5 page with inline paragraphs and scoped elements.

Uses open-tag empty elements (``<br>``) and inline regions so that mixed
content like ``<li>Hello <b>there</b></li>`` stays on one line.
"""

from xmlbuilder import DOCTYPE_HTML5, BuilderConfig, render


def page(html):
    html.doctype(DOCTYPE_HTML5)
    with html.open("html", lang="en"):
        with html.open("head"):
            html.tag("meta", charset="utf-8")
            html.tag("title", "Shopping list")
        with html.open("body"):
            html.tag("h1", "Shopping list")
            with html.open("ul", "class", "items"):
                for item, note in [("Bread", "whole grain"), ("Milk", "2 L"), ("Eggs", None)]:
                    with html.inline_region(), html.open("li"):
                        html.chars(item)
                        if note:
                            html.chars(" ").tag("em", note)
            html.tag("br")
            html.tag("p", "Prices & availability < guaranteed")


print(render(page, config=BuilderConfig(self_closing=False)), end="")
