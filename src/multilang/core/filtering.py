"""Language filtering of nested page data.

Page data may carry language-qualified keys such as ``title.en`` or
``title.gl``. Filtering the data for one language keeps the values qualified
for that language under their base name (``title``) and drops the values of
every other known language. Unqualified keys are kept as-is.

The transformation is applied depth-first to nested dictionaries and to the
dictionaries found inside lists. It never mutates its input: every nested
``dict`` and ``list`` is rebuilt, scalar values are shared.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
import re
from typing import Any


QUALIFIED_KEY = re.compile(r"^(.*)\.([^.]+)$")


def split_qualified_key(key: str, languages: Collection[str]) -> tuple[str, str] | None:
    """Return ``(base, language)`` when *key* is qualified with a known language."""
    match = QUALIFIED_KEY.match(key)
    if match is None:
        return None
    base, language = match.group(1), match.group(2)
    if language not in languages:
        return None
    return base, language


def _filter_value(languages: Collection[str], target: str, value: Any) -> Any:
    if isinstance(value, dict):
        return filter_language(languages, target, value)
    if isinstance(value, (list, tuple)):
        items = [
            filter_language(languages, target, item) if isinstance(item, dict) else item
            for item in value
        ]
        return type(value)(items) if isinstance(value, tuple) else items
    return value


def filter_language(
    languages: Collection[str],
    target: str,
    data: Mapping[str, Any],
) -> dict[str, Any]:
    """Return a copy of *data* resolved for the *target* language.

    Qualified keys of other languages are dropped and the ones qualified with
    *target* overwrite their base key. Promotions are applied once every
    unqualified key has been copied, so the result does not depend on the key
    order of *data*.
    """
    result: dict[str, Any] = {}
    promoted: list[tuple[str, Any]] = []

    for key, value in data.items():
        filtered = _filter_value(languages, target, value)
        qualified = split_qualified_key(key, languages) if isinstance(key, str) else None
        if qualified is None:
            result[key] = filtered
            continue
        base, language = qualified
        if language == target:
            promoted.append((base, filtered))

    for base, value in promoted:
        result[base] = value

    return result


__all__ = ["QUALIFIED_KEY", "filter_language", "split_qualified_key"]
