"""Load a directory of Markdown/HTML sources into a :class:`~multilang.site.Site`."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path
import posixpath
import re
from typing import Any

import yaml

from .config import SiteConfig
from .core.content import ContentUnit, UnitSource
from .core.diagnostics import DiagnosticEmitter
from .core.exceptions import ContentLoadError
from .site import Site


logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = (".md", ".html")


class _FrontMatterLoader(yaml.SafeLoader):
    """Safe loader reading only ``true``/``false`` as booleans (YAML 1.2).

    Language codes such as ``no`` (Norwegian) or ``on`` must stay strings.
    """


_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def split_front_matter(source: str, *, origin: str = "<string>") -> tuple[dict[str, Any], str]:
    """Split a leading YAML block delimited by ``---`` from the document body."""
    candidate = source.lstrip("\ufeff")
    lines = candidate.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, source

    front_matter_lines: list[str] = []
    closing_index: int | None = None
    for idx, line in enumerate(lines[1:], start=1):
        stripped = line.strip()
        if stripped in {"---", "..."}:
            closing_index = idx
            break
        front_matter_lines.append(line)

    if closing_index is None:
        return {}, source

    raw_block = "\n".join(front_matter_lines)
    try:
        metadata = yaml.load(raw_block, Loader=_FrontMatterLoader) or {}
    except yaml.YAMLError as exc:
        raise ContentLoadError(f"Invalid YAML front matter in '{origin}': {exc}") from exc

    if not isinstance(metadata, dict):
        raise ContentLoadError(f"Front matter of '{origin}' must be a mapping.")

    body = "\n".join(lines[closing_index + 1 :])
    if source.endswith("\n"):
        body += "\n"
    return metadata, body


def source_url(path: str, *, pretty_urls: bool = True) -> str:
    """Return the default URL of a source path given without extension."""
    directory, slug = posixpath.split(path)
    directory = directory.rstrip("/")
    if slug == "index":
        return f"{directory}/"
    if pretty_urls:
        return f"{path}/"
    return f"{path}.html"


def _iter_sources(root: Path) -> Iterator[Path]:
    for candidate in sorted(root.rglob("*")):
        if not candidate.is_file() or candidate.suffix not in SOURCE_EXTENSIONS:
            continue
        relative = candidate.relative_to(root)
        if any(part.startswith(("_", ".")) for part in relative.parts):
            continue
        yield candidate


def load_unit(site: Site, root: Path, path: Path) -> ContentUnit:
    """Read *path* and register the resulting unit with *site*."""
    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentLoadError(f"Failed to read source '{path}': {exc}") from exc

    relative = path.relative_to(root).with_suffix("")
    source = UnitSource(path="/" + relative.as_posix(), ext=path.suffix)
    data, body = split_front_matter(payload, origin=str(path))

    unit = ContentUnit(data, source=source, content=body)
    default_url = source_url(source.path, pretty_urls=site.config.pretty_urls)
    if "url" in data:
        directory = posixpath.dirname(source.path).rstrip("/") + "/"
        unit.url = site.resolve_url(unit, directory)
    else:
        unit.url = default_url

    site.add(unit)
    logger.debug("Loaded %s (%s).", source.path, unit.url)
    return unit


def load_site(
    root: Path,
    config: SiteConfig | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> Site:
    """Create a site holding every source found below *root*."""
    if not root.is_dir():
        raise ContentLoadError(f"Source directory '{root}' does not exist.")

    site = Site(config, emitter=emitter)
    for path in _iter_sources(root):
        load_unit(site, root, path)
    return site


__all__ = ["SOURCE_EXTENSIONS", "load_site", "load_unit", "source_url", "split_front_matter"]
