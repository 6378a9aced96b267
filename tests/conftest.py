from collections.abc import Callable, Mapping
from typing import Any

import pytest

from multilang.core.content import ContentUnit, UnitSource
from multilang.loader import source_url
from multilang.site import Site


AddPage = Callable[..., ContentUnit]


class RecordingEmitter:
    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


@pytest.fixture
def emitter() -> RecordingEmitter:
    return RecordingEmitter()


@pytest.fixture
def site(emitter: RecordingEmitter) -> Site:
    return Site(emitter=emitter)


@pytest.fixture
def add_page(site: Site) -> AddPage:
    def _add(
        path: str,
        data: Mapping[str, Any] | None = None,
        *,
        content: str = "",
        ext: str = ".md",
        output_extension: str = ".html",
    ) -> ContentUnit:
        payload = dict(data or {})
        payload.setdefault("url", source_url(path))
        unit = ContentUnit(
            payload,
            source=UnitSource(path=path, ext=ext),
            content=content,
            output_extension=output_extension,
        )
        return site.add(unit)

    return _add
