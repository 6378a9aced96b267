from multilang.core.content import ContentUnit, UnitSource
from multilang.core.extraction import extract_language_data, has_custom_url


def _unit(data: dict) -> ContentUnit:
    return ContentUnit(data, source=UnitSource(path="/about"))


def test_one_fragment_per_language_in_order() -> None:
    unit = _unit({"lang": ["gl", "en"], "title.en": "About", "title.gl": "Sobre", "layout": "page"})

    fragments = extract_language_data(["gl", "en"], unit)

    assert list(fragments) == ["gl", "en"]
    assert fragments["gl"].data["title"] == "Sobre"
    assert fragments["en"].data["title"] == "About"
    assert fragments["en"].data["layout"] == "page"


def test_fragments_never_carry_other_language_keys() -> None:
    unit = _unit(
        {
            "title.en": "About",
            "title.gl": "Sobre",
            "summary.gl": "Resumo",
            "layout": "page",
        }
    )

    fragments = extract_language_data(["en", "gl"], unit)

    for fragment in fragments.values():
        assert not any(key.endswith((".en", ".gl")) for key in fragment.data)
    assert fragments["en"].data == {"layout": "page", "title": "About"}
    assert fragments["gl"].data == {"layout": "page", "title": "Sobre", "summary": "Resumo"}
    union = set(fragments["en"].data) | set(fragments["gl"].data)
    assert union == {"layout", "title", "summary"}


def test_only_restricts_to_a_single_language() -> None:
    unit = _unit({"title.en": "About", "title.gl": "Sobre"})

    fragments = extract_language_data(["en", "gl"], unit, only="gl")

    assert list(fragments) == ["gl"]
    assert fragments["gl"].data == {"title": "Sobre"}


def test_language_blocks_are_merged_and_removed() -> None:
    unit = _unit(
        {
            "title": "About",
            "gl": {"title": "Sobre", "menu.gl": "Menú"},
            "en": {"menu": "Menu"},
        }
    )

    fragments = extract_language_data(["en", "gl"], unit)

    assert fragments["gl"].data == {"title": "Sobre", "menu": "Menú"}
    assert fragments["en"].data == {"title": "About", "menu": "Menu"}


def test_custom_url_detection() -> None:
    assert has_custom_url({"url.gl": "/sobre/"}, "gl") is True
    assert has_custom_url({"gl": {"url": "/sobre/"}}, "gl") is True
    assert has_custom_url({"gl": {"title": "Sobre"}}, "gl") is False
    assert has_custom_url({"url": "/about/"}, "gl") is False

    unit = _unit({"url": "/about/", "url.gl": "/sobre/"})
    fragments = extract_language_data(["en", "gl"], unit)

    assert fragments["en"].has_custom_url is False
    assert fragments["en"].data["url"] == "/about/"
    assert fragments["gl"].has_custom_url is True
    assert fragments["gl"].data["url"] == "/sobre/"


def test_fragments_do_not_share_mutable_data() -> None:
    shared = {"label": "Home", "label.gl": "Inicio"}
    unit = _unit({"nav": shared, "tags": ["a", "b"]})

    fragments = extract_language_data(["en", "gl"], unit)
    fragments["en"].data["nav"]["label"] = "Changed"
    fragments["en"].data["tags"].append("c")

    assert fragments["gl"].data["nav"] == {"label": "Inicio"}
    assert fragments["gl"].data["tags"] == ["a", "b"]
    assert unit.data["nav"] is shared
    assert shared == {"label": "Home", "label.gl": "Inicio"}
    assert unit.data["tags"] == ["a", "b"]
