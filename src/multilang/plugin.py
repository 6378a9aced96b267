"""Multilingual plugin: split, link and cross-reference language variants.

Pages can declare their languages in two ways:

`Explicit list`
: ``lang: [en, gl]`` with qualified fields (``title.en``, ``title.gl``) or
  per-language blocks (``gl: {title: ...}``). The page is expanded into one
  page per language, published under ``/<lang>/...``.

`Sibling files`
: ``about.md`` (``lang: en``) next to ``about_gl.md`` (``lang: gl``). The
  siblings are linked together and their URLs move the ``_<lang>`` marker into
  a ``/<lang>`` prefix.

Every page of a language group references the same read-only alternates
registry, used after rendering to add ``<link rel="alternate">`` elements.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .config import MultilanguageConfig
from .core.alternates import inject_alternates
from .core.content import Alternates, ContentUnit, splice_replace
from .core.extraction import extract_language_data
from .core.helpers import merge_languages
from .core.urls import language_url, parse_slug


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .site import Site


logger = logging.getLogger(__name__)


def expand_unit(site: Site, unit: ContentUnit, units: list[ContentUnit]) -> list[ContentUnit]:
    """Replace a page declaring a list of languages by one page per language.

    The new pages take the position of *unit* in *units* and in its parent
    group. Pages whose ``lang`` is not a list of codes are left untouched and
    an empty list is returned.
    """
    languages = unit.data.get("lang")
    if not isinstance(languages, (list, tuple)) or not languages:
        return []
    if not all(isinstance(language, str) and language for language in languages):
        site.emitter.warning(
            f"Ignoring malformed language list {list(languages)!r} in '{unit.source.path}'."
        )
        return []

    original_url = unit.url or "/"
    fragments = extract_language_data(list(languages), unit)
    registry: dict[str, ContentUnit] = {}
    alternates: Alternates = MappingProxyType(registry)
    created: list[ContentUnit] = []

    for language, fragment in fragments.items():
        data = fragment.data
        data["alternates"] = alternates
        data["lang"] = language

        variant = unit.duplicate(language)
        variant.data = data
        if fragment.has_custom_url:
            variant.url = site.resolve_url(variant, original_url)
        else:
            variant.url = f"/{language}{original_url}"

        registry[language] = variant
        created.append(variant)

    splice_replace(units, unit, created)
    parent = unit.parent
    if parent is not None and parent.units is not units:
        parent.replace(unit, created)

    site.emitter.event(
        "units_expanded",
        {"source": unit.source.path, "languages": list(registry)},
    )
    return created


def link_siblings(site: Site, unit: ContentUnit) -> Alternates | None:
    """Link *unit* with the language siblings found in its directory.

    Siblings share a base slug: ``about_gl`` and ``about_en`` or the
    unsuffixed ``about``. Returns the shared alternates registry, sorted by
    language code, or ``None`` when no group of two or more pages is found.
    """
    lang = unit.data.get("lang")
    if unit.data.get("alternates") or not isinstance(lang, str):
        return None

    base_slug = parse_slug(unit, lang)
    parent = unit.parent
    if base_slug is None or parent is None:
        return None

    members: dict[str, ContentUnit] = {}
    for sibling in parent.units:
        sibling_lang = sibling.data.get("lang")
        if not isinstance(sibling_lang, str):
            continue
        if not (
            parse_slug(sibling, sibling_lang) == base_slug
            or sibling.source.path.endswith(f"/{base_slug}")
        ):
            continue
        claimed = members.get(sibling_lang)
        if claimed is not None and (claimed.alternates or sibling.alternates):
            # A language belongs to at most one group.
            site.emitter.warning(
                f"Not linking '{unit.source.path}': language '{sibling_lang}' of "
                f"'{base_slug}' is provided by both '{claimed.source.path}' and "
                f"'{sibling.source.path}'."
            )
            return None
        members[sibling_lang] = sibling

    if len(members) < 2:
        return None

    languages = list(members)
    for language, sibling in members.items():
        fragment = extract_language_data(languages, sibling, only=language)[language]
        original_url = sibling.url
        sibling.data = fragment.data
        if fragment.has_custom_url:
            sibling.url = site.resolve_url(sibling, original_url)
        elif sibling.url:
            sibling.url = language_url(sibling.url, language)

    alternates: Alternates = MappingProxyType(
        {language: members[language] for language in sorted(members)}
    )
    for sibling in alternates.values():
        sibling.data["alternates"] = alternates
    logger.debug("Linked %s siblings of %s.", len(alternates), parent.path)

    site.emitter.event(
        "siblings_linked",
        {"slug": base_slug, "languages": list(alternates)},
    )
    return alternates


class MultilanguagePlugin:
    """Register the multilingual hooks and helper on a :class:`Site`."""

    def __init__(self, config: MultilanguageConfig | None = None) -> None:
        self.config = config or MultilanguageConfig()

    def __call__(self, site: Site) -> None:
        site.data(self.config.name, merge_languages)
        site.preprocess(
            self.config.extensions,
            lambda unit, units: expand_unit(site, unit, units),
        )
        site.preprocess("*", lambda unit, units: link_siblings(site, unit))
        site.process(self.config.extensions, inject_alternates)


def multilanguage(
    options: MultilanguageConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> MultilanguagePlugin:
    """Return a plugin configured from *options* merged with *overrides*."""
    if isinstance(options, MultilanguageConfig):
        payload = options.model_dump()
    else:
        payload = dict(options or {})
    payload.update(overrides)
    return MultilanguagePlugin(MultilanguageConfig(**payload))


__all__ = [
    "MultilanguagePlugin",
    "expand_unit",
    "link_siblings",
    "multilanguage",
]
