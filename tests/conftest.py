# tests/conftest.py
# shared catalog fixtures

from pathlib import Path

import pytest

from catalog_autocompleter.catalog.models import Category, Keyword, Product
from catalog_autocompleter.core.autocompleter import AutoCompleter

SAMPLE_CATALOG = Path(__file__).parents[1] / "data" / "catalog.json"


@pytest.fixture
def categories():
    return [
        Category("ALIMENTOS", 1, "Alimentação", "MERCEARIA"),
        Category("BEBIDAS", 2, "Bebidas", "MERCEARIA"),
        Category("SAUDE", 3, "Saúde", "CUIDADOS"),
        Category("LIMPEZA", 4, "Limpeza", "CUIDADOS"),
        Category("OUTROS", 99, "Outros", "OUTROS"),
    ]


@pytest.fixture
def ac():
    return AutoCompleter()


@pytest.fixture
def sample_catalog_path():
    return SAMPLE_CATALOG


def kw(term, category_id):
    return Keyword(term=term, category_id=category_id)


def product(pid, category_id, *terms, name=None, official=True):
    return Product(id=pid, name=name or pid, category_id=category_id, is_official=official, search_terms=tuple(terms))
