"""In-memory site pipeline hosting content units and their processing hooks.

Lifecycle

`preprocess`
: Hooks registered with :meth:`Site.preprocess` run over the unit list before
  anything is rendered. They may mutate unit data or splice units in and out
  of the list; each hook sees the changes made by the previous ones.

`render`
: Every unit body is converted to HTML and parsed into a BeautifulSoup
  document.

`process`
: Hooks registered with :meth:`Site.process` annotate the rendered documents.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import posixpath
from typing import Any

from .config import SiteConfig
from .core.content import ContentUnit, UnitGroup
from .core.diagnostics import DiagnosticEmitter, LoggingEmitter
from .core.exceptions import UrlResolutionError
from .render import render_document


logger = logging.getLogger(__name__)

PreprocessHook = Callable[[ContentUnit, list[ContentUnit]], Any]
ProcessHook = Callable[[ContentUnit], Any]
Extensions = str | Sequence[str]


def _normalise_extensions(extensions: Extensions) -> tuple[str, ...]:
    if isinstance(extensions, str):
        return (extensions,)
    return tuple(extensions)


@dataclass(slots=True)
class _Hook:
    extensions: tuple[str, ...]
    handler: Callable[..., Any]

    def matches(self, unit: ContentUnit) -> bool:
        return "*" in self.extensions or unit.output_extension in self.extensions


class Site:
    """Collection of content units and the hooks that transform them."""

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.config = config or SiteConfig()
        self.emitter: DiagnosticEmitter = emitter or LoggingEmitter()
        self.units: list[ContentUnit] = []
        self.groups: dict[str, UnitGroup] = {}
        self.globals: dict[str, Any] = {}
        self._preprocessors: list[_Hook] = []
        self._processors: list[_Hook] = []

    # -- Registration ------------------------------------------------------

    def use(self, plugin: Callable[[Site], Any]) -> Site:
        """Install *plugin* and return the site for chaining."""
        plugin(self)
        return self

    def data(self, name: str, value: Any) -> None:
        """Expose *value* to templates under *name*."""
        self.globals[name] = value

    def preprocess(self, extensions: Extensions, handler: PreprocessHook) -> None:
        """Register *handler* to run on matching units before rendering."""
        self._preprocessors.append(_Hook(_normalise_extensions(extensions), handler))

    def process(self, extensions: Extensions, handler: ProcessHook) -> None:
        """Register *handler* to run on matching units once rendered."""
        self._processors.append(_Hook(_normalise_extensions(extensions), handler))

    def group(self, path: str = "/") -> UnitGroup:
        """Return the unit group of a source directory, creating it on demand."""
        group = self.groups.get(path)
        if group is None:
            group = UnitGroup(path=path)
            self.groups[path] = group
        return group

    def add(self, unit: ContentUnit, group: str | UnitGroup | None = None) -> ContentUnit:
        """Register *unit* with the site and its directory group."""
        if isinstance(group, UnitGroup):
            target = group
        else:
            directory = group if group is not None else posixpath.dirname(unit.source.path)
            target = self.group(directory or "/")
        target.add(unit)
        self.units.append(unit)
        return unit

    # -- URLs ----------------------------------------------------------------

    def resolve_url(self, unit: ContentUnit, original_url: str | None) -> str:
        """Return the final URL declared by *unit*.

        Callables are invoked with the unit. Absolute paths are kept; ``./``
        and ``../`` paths are resolved against the directory of
        *original_url*.
        """
        url = unit.data.get("url")
        if callable(url):
            url = url(unit)
        if not isinstance(url, str) or not url:
            raise UrlResolutionError(
                f"Invalid url {url!r} declared by '{unit.source.path}'."
            )
        if url.startswith("/"):
            return url
        if url.startswith(("./", "../")):
            base = original_url or "/"
            directory = base if base.endswith("/") else posixpath.dirname(base) + "/"
            resolved = posixpath.normpath(posixpath.join(directory, url))
            if url.endswith("/") and not resolved.endswith("/"):
                resolved += "/"
            return resolved
        raise UrlResolutionError(
            f"Relative url '{url}' declared by '{unit.source.path}' must start with "
            "'/', './' or '../'."
        )

    # -- Phases --------------------------------------------------------------

    def run_preprocessors(self) -> None:
        """Run every preprocess hook, in registration order, over all units."""
        for hook in self._preprocessors:
            for unit in list(self.units):
                if hook.matches(unit):
                    hook.handler(unit, self.units)

    def render(self) -> None:
        """Build the HTML document of every unit."""
        for unit in self.units:
            unit.document = render_document(unit, self.config)

    def run_processors(self) -> None:
        """Run every process hook over the rendered units."""
        for hook in self._processors:
            for unit in self.units:
                if unit.document is not None and hook.matches(unit):
                    hook.handler(unit)

    def build(self) -> list[ContentUnit]:
        """Run the whole pipeline and return the resulting units."""
        self.run_preprocessors()
        self.render()
        self.run_processors()
        logger.debug("Built %d units.", len(self.units))
        return list(self.units)

    def write(self, destination: Path) -> list[Path]:
        """Serialise rendered units below *destination* following their URLs."""
        written: list[Path] = []
        for unit in self.units:
            if unit.document is None or not unit.url:
                continue
            target = output_path(destination, unit.url)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(str(unit.document), encoding="utf-8")
            self.emitter.event("page_written", {"url": unit.url, "path": str(target)})
            written.append(target)
        return written


def output_path(destination: Path, url: str) -> Path:
    """Return the file a URL is served from (``/x/`` maps to ``x/index.html``).

    Raises :class:`UrlResolutionError` when the URL escapes *destination*.
    """
    relative = url.lstrip("/")
    if not relative or relative.endswith("/"):
        relative = f"{relative}index.html"
    target = destination.joinpath(*relative.split("/"))
    root = destination.resolve()
    if not target.resolve().is_relative_to(root):
        raise UrlResolutionError(f"URL '{url}' points outside of '{destination}'.")
    return target


def iter_units(site: Site, extensions: Iterable[str] | None = None) -> Iterable[ContentUnit]:
    """Yield the site units whose output extension is in *extensions*."""
    wanted = None if extensions is None else set(extensions)
    for unit in site.units:
        if wanted is None or unit.output_extension in wanted:
            yield unit


__all__ = ["Site", "iter_units", "output_path"]
