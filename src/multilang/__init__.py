"""Primary public API for multilang."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from multilang.config import MultilanguageConfig, SiteConfig
from multilang.core import (
    Alternates,
    ContentLoadError,
    ContentUnit,
    MultilangError,
    TranslatedFragment,
    UnitGroup,
    UnitSource,
    UrlResolutionError,
    extract_language_data,
    filter_language,
    inject_alternates,
    language_url,
    merge_languages,
    parse_slug,
)
from multilang.loader import load_site
from multilang.plugin import MultilanguagePlugin, expand_unit, link_siblings, multilanguage
from multilang.site import Site


try:
    __version__ = _pkg_version("multilang")
except PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "Alternates",
    "ContentLoadError",
    "ContentUnit",
    "MultilangError",
    "MultilanguageConfig",
    "MultilanguagePlugin",
    "Site",
    "SiteConfig",
    "TranslatedFragment",
    "UnitGroup",
    "UnitSource",
    "UrlResolutionError",
    "__version__",
    "expand_unit",
    "extract_language_data",
    "filter_language",
    "inject_alternates",
    "language_url",
    "link_siblings",
    "load_site",
    "merge_languages",
    "multilanguage",
    "parse_slug",
]
