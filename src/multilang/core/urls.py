"""Slug and URL conventions of language siblings (``about.md`` / ``about_gl.md``)."""

from __future__ import annotations

from .content import ContentUnit


def strip_language_suffix(slug: str, language: str) -> str | None:
    """Return *slug* without its ``_<language>`` suffix, or ``None`` when absent."""
    suffix = f"_{language}"
    if not slug.endswith(suffix):
        return None
    return slug[: -len(suffix)]


def parse_slug(unit: ContentUnit, language: str) -> str | None:
    """Return the base slug shared by the language siblings of *unit*."""
    return strip_language_suffix(unit.source.slug, language)


def language_url(url: str, language: str) -> str:
    """Move the ``_<language>`` marker of a sibling URL into a ``/<language>`` prefix.

    >>> language_url("/blog/post_fr.html", "fr")
    '/fr/blog/post.html'
    >>> language_url("/docs/index_de/", "de")
    '/de/docs/'
    """
    if url.endswith(f"/index_{language}/"):
        return f"/{language}{url[: -len(language) - 8]}/"
    if url.endswith(f"_{language}/"):
        return f"/{language}{url[: -len(language) - 2]}/"
    if url.endswith(f"_{language}.html"):
        return f"/{language}{url[: -len(language) - 6]}.html"
    return url


__all__ = ["language_url", "parse_slug", "strip_language_suffix"]
