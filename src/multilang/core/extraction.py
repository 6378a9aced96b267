"""Split the data of a page into one independent snapshot per language."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .filtering import filter_language


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .content import ContentUnit


@dataclass(frozen=True, slots=True)
class TranslatedFragment:
    """Data of a page resolved for a single language."""

    data: dict[str, Any]
    has_custom_url: bool


def has_custom_url(data: Mapping[str, Any], language: str) -> bool:
    """Return whether *data* declares a URL override for *language*.

    Overrides are written either as ``url.<lang>`` or as a ``url`` field inside
    the ``<lang>`` block.
    """
    if data.get(f"url.{language}"):
        return True
    block = data.get(language)
    return isinstance(block, dict) and bool(block.get("url"))


def extract_language_data(
    languages: Sequence[str],
    unit: ContentUnit,
    only: str | None = None,
) -> dict[str, TranslatedFragment]:
    """Return the data of *unit* grouped by language.

    One fragment is produced per entry of *languages*, in order, or only the
    one for *only* when given. Top-level blocks named after a language are
    merged into the data of that language (their fields win) and dropped from
    the others; qualified keys are then resolved by :func:`filter_language`.
    """
    known = set(languages)
    fragments: dict[str, TranslatedFragment] = {}

    for language in languages:
        if only is not None and language != only:
            continue

        working = dict(unit.data)
        custom_url = has_custom_url(working, language)

        overrides: Any = None
        for name in list(working):
            if name in known:
                value = working.pop(name)
                if name == language:
                    overrides = value
        if isinstance(overrides, Mapping):
            working.update(overrides)

        fragments[language] = TranslatedFragment(
            data=filter_language(known, language, working),
            has_custom_url=custom_url,
        )

    return fragments


__all__ = ["TranslatedFragment", "extract_language_data", "has_custom_url"]
