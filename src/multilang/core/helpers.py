"""Template helpers exposed by the multilingual plugin."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def merge_languages(
    pages: Mapping[str, Sequence[Mapping[str, Any] | None]],
) -> list[dict[str, Any]]:
    """Zip per-language result lists into records with qualified keys.

    Item ``i`` of the result merges item ``i`` of every language, renaming each
    key to ``<key>.<lang>``. Languages with fewer items contribute nothing to
    the trailing positions::

        >>> merge_languages({"en": [{"title": "Hi"}], "fr": [{"title": "Salut"}, {"title": "Re"}]})
        [{'title.en': 'Hi', 'title.fr': 'Salut'}, {'title.fr': 'Re'}]
    """
    limit = max((len(results) for results in pages.values()), default=0)
    merged: list[dict[str, Any]] = []

    for index in range(limit):
        record: dict[str, Any] = {}
        for lang, results in pages.items():
            if index >= len(results):
                continue
            item = results[index]
            if not item:
                continue
            for key, value in item.items():
                record[f"{key}.{lang}"] = value
        merged.append(record)

    return merged


__all__ = ["merge_languages"]
