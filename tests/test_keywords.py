# tests/test_keywords.py
import pytest

from catalog_autocompleter.catalog.keywords import generate_search_keywords, strip_accents, to_safe_id


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Pão de Queijo", ["pão", "pao", "queijo"]),
        ("Coca-Cola 2L", ["cocacola"]),
        ("Arroz arroz ARROZ", ["arroz"]),
        ("Feijão Preto", ["feijão", "feijao", "preto"]),
        ("a b c", []),
        ("", []),
        ("   ", []),
        (None, []),
    ],
)
def test_generate_search_keywords(name, expected):
    assert generate_search_keywords(name) == expected


def test_strip_accents():
    assert strip_accents("Sabão em Pó") == "Sabao em Po"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Pão Caseiro", "paocaseiro"),
        ("Coca-Cola 2L", "cocacola2l"),
        ("  Maçã ", "maca"),
        ("", ""),
        (None, None),
    ],
)
def test_to_safe_id(text, expected):
    assert to_safe_id(text) == expected
