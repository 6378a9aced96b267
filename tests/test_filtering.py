from itertools import permutations
from types import MappingProxyType

from multilang.core.filtering import filter_language, split_qualified_key


LANGS = {"en", "gl"}


def test_promotes_target_language_and_drops_others() -> None:
    data = {"title.en": "Hello", "title.gl": "Ola", "draft": False}

    assert filter_language(LANGS, "en", data) == {"draft": False, "title": "Hello"}
    assert filter_language(LANGS, "gl", data) == {"draft": False, "title": "Ola"}


def test_unknown_suffixes_are_not_qualifiers() -> None:
    data = {"image.png": "cover", "version.2": "x", "title.fr": "Bonjour"}

    assert filter_language(LANGS, "en", data) == data


def test_qualified_value_overrides_unqualified_base() -> None:
    before = {"title": "Default", "title.gl": "Ola"}
    after = {"title.gl": "Ola", "title": "Default"}

    assert filter_language(LANGS, "gl", before)["title"] == "Ola"
    assert filter_language(LANGS, "gl", after)["title"] == "Ola"
    assert filter_language(LANGS, "en", after)["title"] == "Default"


def test_recurses_into_mappings_and_lists() -> None:
    data = {
        "meta": {"description.en": "Docs", "description.gl": "Documentos"},
        "links": [
            {"label.en": "Home", "label.gl": "Inicio", "href": "/"},
            "plain",
            3,
        ],
    }

    result = filter_language(LANGS, "gl", data)

    assert result == {
        "meta": {"description": "Documentos"},
        "links": [{"href": "/", "label": "Inicio"}, "plain", 3],
    }


def test_promoted_nested_value_is_filtered() -> None:
    data = {"nav.gl": {"label.gl": "Inicio", "label.en": "Home"}}

    assert filter_language(LANGS, "gl", data) == {"nav": {"label": "Inicio"}}


def test_input_is_not_mutated() -> None:
    nested = {"label.en": "Home", "label.gl": "Inicio"}
    items = [nested]
    data = {"nav": nested, "items": items, "title.en": "Hello"}

    result = filter_language(LANGS, "en", data)

    assert data == {"nav": nested, "items": items, "title.en": "Hello"}
    assert nested == {"label.en": "Home", "label.gl": "Inicio"}
    assert result["nav"] is not nested
    assert result["items"] is not items


def test_result_is_independent_of_key_order() -> None:
    data = {
        "title": "Default",
        "title.en": "Hello",
        "title.gl": "Ola",
        "meta": {"summary.gl": "Resumo", "summary": "Summary"},
        "tags": [{"name.en": "news"}],
    }
    expected = filter_language(LANGS, "gl", data)

    for order in permutations(data):
        shuffled = {key: data[key] for key in order}
        assert filter_language(LANGS, "gl", shuffled) == expected


def test_non_dict_mappings_are_opaque() -> None:
    registry = MappingProxyType({"title.en": "kept"})

    result = filter_language(LANGS, "gl", {"alternates": registry})

    assert result["alternates"] is registry


def test_split_qualified_key_uses_last_dot() -> None:
    assert split_qualified_key("seo.title.gl", LANGS) == ("seo.title", "gl")
    assert split_qualified_key("title", LANGS) is None
    assert split_qualified_key("title.fr", LANGS) is None
