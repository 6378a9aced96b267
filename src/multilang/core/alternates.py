"""Inject ``<link rel="alternate">`` markup into rendered pages."""

from __future__ import annotations

from collections.abc import Mapping
import logging

from bs4 import BeautifulSoup, NavigableString, Tag

from .content import ContentUnit


logger = logging.getLogger(__name__)


def _ensure_head(document: BeautifulSoup, root: Tag) -> Tag:
    head = document.head
    if head is not None:
        return head
    head = document.new_tag("head")
    root.insert(0, head)
    return head


def inject_alternates(unit: ContentUnit) -> None:
    """Annotate the rendered document of *unit* with its language alternates.

    The ``lang`` attribute of ``<html>`` is only set when missing. One link is
    appended to ``<head>`` per alternate language other than the page's own,
    in the order of the alternates registry. Running twice appends the links
    twice.
    """
    document = unit.document
    alternates = unit.data.get("alternates")
    lang = unit.data.get("lang")

    if document is None or not isinstance(alternates, Mapping) or not alternates:
        return
    if not isinstance(lang, str) or not lang:
        return

    root = document.find("html")
    if not isinstance(root, Tag):
        logger.debug("No <html> element in %s, skipping alternates.", unit.source.path)
        return

    if not root.get("lang"):
        root["lang"] = lang

    head = _ensure_head(document, root)
    for alt_lang, alt_unit in alternates.items():
        if alt_lang == lang:
            continue
        link = document.new_tag(
            "link",
            attrs={"rel": "alternate", "hreflang": alt_lang, "href": alt_unit.data.get("url", "")},
        )
        head.append(link)
        head.append(NavigableString("\n"))


__all__ = ["inject_alternates"]
