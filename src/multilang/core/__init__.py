"""Core data transformations of the multilingual pipeline."""

from __future__ import annotations

from .alternates import inject_alternates
from .content import Alternates, ContentData, ContentUnit, UnitGroup, UnitSource, splice_replace
from .exceptions import ContentLoadError, MultilangError, UrlResolutionError
from .extraction import TranslatedFragment, extract_language_data, has_custom_url
from .filtering import filter_language, split_qualified_key
from .helpers import merge_languages
from .urls import language_url, parse_slug, strip_language_suffix


__all__ = [
    "Alternates",
    "ContentData",
    "ContentLoadError",
    "ContentUnit",
    "MultilangError",
    "TranslatedFragment",
    "UnitGroup",
    "UnitSource",
    "UrlResolutionError",
    "extract_language_data",
    "filter_language",
    "has_custom_url",
    "inject_alternates",
    "language_url",
    "merge_languages",
    "parse_slug",
    "splice_replace",
    "split_qualified_key",
    "strip_language_suffix",
]
