"""Content units and the directory collections they are loaded in."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import copy
from dataclasses import dataclass, field
import posixpath
from typing import TYPE_CHECKING, Any
import weakref


if TYPE_CHECKING:  # pragma: no cover - typing only
    from bs4 import BeautifulSoup


ContentData = dict[str, Any]
Alternates = Mapping[str, "ContentUnit"]


@dataclass(frozen=True, slots=True)
class UnitSource:
    """Location of the file a unit was loaded from.

    ``path`` is the site-relative path without extension (``/blog/post_fr``).
    """

    path: str
    ext: str = ".md"

    @property
    def slug(self) -> str:
        """Return the file name without extension, independent of the URL."""
        return posixpath.basename(self.path)


@dataclass(eq=False)
class UnitGroup:
    """Collection of the units found in one source directory."""

    path: str = "/"
    units: list[ContentUnit] = field(default_factory=list)

    def add(self, unit: ContentUnit) -> ContentUnit:
        """Append *unit* and make this group its parent."""
        unit.parent = self
        self.units.append(unit)
        return unit

    def replace(self, unit: ContentUnit, replacements: Iterable[ContentUnit]) -> bool:
        """Splice *replacements* in place of *unit*, keeping its position."""
        return splice_replace(self.units, unit, replacements)


class ContentUnit:
    """A single page with its data, source location and rendered document."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        source: UnitSource,
        content: str = "",
        output_extension: str = ".html",
        parent: UnitGroup | None = None,
    ) -> None:
        self.data: ContentData = dict(data or {})
        self.source = source
        self.content = content
        self.output_extension = output_extension
        self.document: BeautifulSoup | None = None
        self.discriminator: str | None = None
        self._parent: weakref.ReferenceType[UnitGroup] | None = None
        self.parent = parent

    @property
    def parent(self) -> UnitGroup | None:
        """Return the directory group the unit was loaded alongside."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, group: UnitGroup | None) -> None:
        self._parent = weakref.ref(group) if group is not None else None

    @property
    def url(self) -> str | None:
        value = self.data.get("url")
        return value if isinstance(value, str) else None

    @url.setter
    def url(self, value: str) -> None:
        self.data["url"] = value

    @property
    def alternates(self) -> Alternates | None:
        value = self.data.get("alternates")
        return value if isinstance(value, Mapping) else None

    def duplicate(self, discriminator: str | None = None) -> ContentUnit:
        """Return a copy sharing the source and parent with an independent data map."""
        clone = ContentUnit(
            copy.copy(self.data),
            source=self.source,
            content=self.content,
            output_extension=self.output_extension,
            parent=self.parent,
        )
        clone.discriminator = discriminator
        return clone

    def __repr__(self) -> str:
        suffix = f"#{self.discriminator}" if self.discriminator else ""
        return f"ContentUnit({self.source.path}{suffix}, url={self.url!r})"


def splice_replace(
    units: list[ContentUnit],
    unit: ContentUnit,
    replacements: Iterable[ContentUnit],
) -> bool:
    """Replace *unit* inside *units* by *replacements*, in place.

    Units are matched by identity. Returns ``False`` when *unit* is absent.
    """
    for index, candidate in enumerate(units):
        if candidate is unit:
            units[index : index + 1] = list(replacements)
            return True
    return False


__all__ = [
    "Alternates",
    "ContentData",
    "ContentUnit",
    "UnitGroup",
    "UnitSource",
    "splice_replace",
]
