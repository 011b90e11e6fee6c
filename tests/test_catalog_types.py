"""Catalog taxonomy lookups."""

from __future__ import annotations

import pytest

from app.catalog_types import CATALOG_TYPES, CatalogDefinition, get_catalog_definition


def test_lookup_ignores_provider_prefix() -> None:
    assert get_catalog_definition("tmdb.top") is CATALOG_TYPES["tmdb"]["top"]
    assert get_catalog_definition("anything.top") is CATALOG_TYPES["tmdb"]["top"]


def test_lookup_finds_auth_catalogs() -> None:
    definition = get_catalog_definition("tmdb.favorites")

    assert definition is not None
    assert definition.requires_auth is True


@pytest.mark.parametrize("catalog_id", ["tmdb.nope", "tmdb", "", "tmdb."])
def test_lookup_returns_none_for_unknown_ids(catalog_id: str) -> None:
    assert get_catalog_definition(catalog_id) is None


def test_first_category_wins_on_duplicate_types() -> None:
    first = CatalogDefinition(name_key="first")
    second = CatalogDefinition(name_key="second")
    taxonomy = {"a": {"dup": first}, "b": {"dup": second}}

    assert get_catalog_definition("x.dup", taxonomy) is first


def test_taxonomy_is_read_only() -> None:
    with pytest.raises(TypeError):
        CATALOG_TYPES["tmdb"]["top"] = CatalogDefinition(name_key="other")  # type: ignore[index]
