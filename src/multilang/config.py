"""Configuration models used by the multilingual pipeline.

MultilanguageConfig

`extensions` (`list[str]`)
: Output extensions handled by the page expander and the alternate link
  injector. Sibling detection always runs over every page.

`name` (`str`)
: Name under which the `mergeLanguages` helper is exposed to templates.

SiteConfig

`pretty_urls` (`bool`)
: Emit directory URLs (`/about/`) instead of file URLs (`/about.html`) for
  pages loaded from disk.

`parser` (`str`)
: BeautifulSoup parser used to build rendered documents.

`markdown_extensions` (`list[str]`)
: Python-Markdown extensions enabled while rendering page bodies.

`multilanguage` (`MultilanguageConfig`)
: Nested configuration of the multilingual plugin.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_EXTENSIONS = [".html"]
DEFAULT_HELPER_NAME = "mergeLanguages"
DEFAULT_MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]


class MultilanguageConfig(BaseModel):
    """Options accepted by the multilingual plugin."""

    model_config = ConfigDict(extra="forbid")

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    name: str = DEFAULT_HELPER_NAME

    @field_validator("extensions")
    @classmethod
    def normalise_extensions(cls, value: list[str]) -> list[str]:
        """Ensure every extension carries its leading dot."""
        normalised: list[str] = []
        for extension in value:
            cleaned = extension.strip()
            if not cleaned:
                continue
            if cleaned != "*" and not cleaned.startswith("."):
                cleaned = f".{cleaned}"
            normalised.append(cleaned)
        return normalised


class SiteConfig(BaseModel):
    """Configuration of the in-memory site pipeline."""

    model_config = ConfigDict(extra="forbid")

    pretty_urls: bool = True
    parser: str = "html.parser"
    markdown_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS)
    )
    multilanguage: MultilanguageConfig = Field(default_factory=MultilanguageConfig)


__all__ = [
    "DEFAULT_EXTENSIONS",
    "DEFAULT_HELPER_NAME",
    "DEFAULT_MARKDOWN_EXTENSIONS",
    "MultilanguageConfig",
    "SiteConfig",
]
