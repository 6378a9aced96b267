"""Render content units into parsed HTML documents."""

from __future__ import annotations

from html import escape

from bs4 import BeautifulSoup
from markdown import Markdown

from .config import SiteConfig
from .core.content import ContentUnit


PAGE_SHELL = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def render_body(unit: ContentUnit, config: SiteConfig) -> str:
    """Return the HTML body of *unit*, converting Markdown sources."""
    if unit.source.ext == ".md":
        md = Markdown(extensions=list(config.markdown_extensions), output_format="html")
        return md.convert(unit.content)
    return unit.content


def render_document(unit: ContentUnit, config: SiteConfig) -> BeautifulSoup:
    """Return the rendered page of *unit* as a BeautifulSoup document.

    HTML sources that already contain an ``<html>`` element are parsed as-is;
    everything else is wrapped in a minimal page shell.
    """
    body = render_body(unit, config)
    if "<html" in body.lower():
        markup = body
    else:
        title = unit.data.get("title")
        markup = PAGE_SHELL.format(
            title=escape(str(title)) if title is not None else "",
            body=body,
        )
    return BeautifulSoup(markup, config.parser)


__all__ = ["PAGE_SHELL", "render_body", "render_document"]
