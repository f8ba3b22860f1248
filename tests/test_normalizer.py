# tests/test_normalizer.py
import pytest

from catalog_autocompleter.core.normalizer import normalize, normalize_key

SAMPLES = [
    None,
    "",
    "   ",
    "Maçã",
    "  MAÇÁ ",
    "Pão de Queijo",
    "crème brûlée",
    "a ́",  # mark after a space
    "́",
    "İstanbul",
    "ÅNGSTRÖM",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_empty_and_none():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize("   ") == ""
    assert normalize_key(None) == ""


def test_accents_are_folded():
    assert normalize("Maçã") == "maca"
    assert normalize("  MAÇÁ ") == "maca"
    assert normalize("crème brûlée") == "creme brulee"


def test_storage_key_keeps_accents():
    assert normalize_key("  Maçã ") == "maçã"
    assert normalize_key("Maçã") != normalize_key("Maca")
