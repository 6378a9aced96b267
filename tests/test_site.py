from pathlib import Path

import pytest

from multilang.core.content import ContentUnit, UnitSource
from multilang.core.exceptions import UrlResolutionError
from multilang.site import Site, output_path


def _unit(url: object) -> ContentUnit:
    return ContentUnit({"url": url}, source=UnitSource(path="/about"))


@pytest.mark.parametrize(
    ("declared", "original", "expected"),
    [
        ("/sobre/", "/about/", "/sobre/"),
        ("./gl/", "/about/", "/about/gl/"),
        ("../sobre/", "/docs/about/", "/docs/sobre/"),
        ("./sobre.html", "/docs/about.html", "/docs/sobre.html"),
    ],
)
def test_resolve_url(declared: str, original: str, expected: str) -> None:
    assert Site().resolve_url(_unit(declared), original) == expected


def test_resolve_url_calls_callables() -> None:
    unit = _unit(lambda page: f"/custom{page.source.path}/")

    assert Site().resolve_url(unit, "/about/") == "/custom/about/"


@pytest.mark.parametrize("declared", ["sobre", "", None, 42])
def test_resolve_url_rejects_unresolvable_values(declared: object) -> None:
    with pytest.raises(UrlResolutionError):
        Site().resolve_url(_unit(declared), "/about/")


def test_preprocessors_see_earlier_splices(site: Site, add_page) -> None:
    seen: list[str] = []
    source = add_page("/source", {"title": "Source"})

    def split(unit: ContentUnit, units: list[ContentUnit]) -> None:
        if unit is source:
            index = units.index(unit)
            units[index : index + 1] = [unit.duplicate("a"), unit.duplicate("b")]

    def record(unit: ContentUnit, units: list[ContentUnit]) -> None:
        seen.append(unit.discriminator or "")

    site.preprocess("*", split)
    site.preprocess([".html"], record)
    site.run_preprocessors()

    assert seen == ["a", "b"]


def test_hooks_filter_on_output_extension(site: Site, add_page) -> None:
    calls: list[str] = []
    add_page("/page", {"title": "Page"})
    add_page("/feed", {"title": "Feed"}, output_extension=".xml")

    site.preprocess([".xml"], lambda unit, units: calls.append(unit.source.path))
    site.process(".html", lambda unit: calls.append(f"process:{unit.source.path}"))
    site.build()

    assert calls == ["/feed", "process:/page"]


def test_build_renders_markdown(site: Site, add_page) -> None:
    unit = add_page("/page", {"title": "A & B"}, content="# Heading\n\nBody *text*.\n")

    site.build()

    assert unit.document is not None
    assert unit.document.title.string == "A & B"
    assert unit.document.find("h1").get_text() == "Heading"
    assert unit.document.find("em").get_text() == "text"


def test_html_sources_with_full_documents_are_kept(site: Site, add_page) -> None:
    markup = '<html lang="es"><head></head><body><p>Hola</p></body></html>'
    unit = add_page("/hola", {}, content=markup, ext=".html")

    site.build()

    assert unit.document is not None
    assert unit.document.html["lang"] == "es"


def test_output_path(tmp_path: Path) -> None:
    assert output_path(tmp_path, "/") == tmp_path / "index.html"
    assert output_path(tmp_path, "/gl/about/") == tmp_path / "gl" / "about" / "index.html"
    assert output_path(tmp_path, "/fr/blog/post.html") == tmp_path / "fr" / "blog" / "post.html"


@pytest.mark.parametrize("url", ["/../../escape.html", "/gl/../../x/", "/../"])
def test_output_path_rejects_urls_leaving_the_destination(tmp_path: Path, url: str) -> None:
    with pytest.raises(UrlResolutionError):
        output_path(tmp_path / "out", url)


def test_write_refuses_traversing_urls(site: Site, add_page, tmp_path: Path) -> None:
    add_page("/evil", {"url": "/../evil.html"})
    site.build()

    with pytest.raises(UrlResolutionError):
        site.write(tmp_path / "out")
    assert not (tmp_path / "evil.html").exists()


def test_write_serialises_rendered_units(site: Site, add_page, tmp_path: Path) -> None:
    add_page("/about", {"title": "About"}, content="Hello")
    site.build()

    written = site.write(tmp_path)

    assert written == [tmp_path / "about" / "index.html"]
    assert "<p>Hello</p>" in written[0].read_text(encoding="utf-8")
