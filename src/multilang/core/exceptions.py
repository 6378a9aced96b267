"""Exception hierarchy for the multilingual content pipeline."""

from __future__ import annotations


class MultilangError(RuntimeError):
    """Base exception for content pipeline failures."""


class UrlResolutionError(MultilangError):
    """Raised when a URL cannot be resolved or published for a content unit."""


class ContentLoadError(MultilangError):
    """Raised when a source file cannot be read or its front matter is invalid."""


__all__ = ["ContentLoadError", "MultilangError", "UrlResolutionError"]
