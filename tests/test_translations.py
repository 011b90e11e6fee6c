"""Catalog name translation overlays."""

from __future__ import annotations

from app.translations import TRANSLATIONS, load_translations


def test_active_language_overrides_default_keys() -> None:
    translations = load_translations("pt-BR")

    assert translations["popular"] == "Populares"
    # Keys missing from the overlay keep the default text.
    assert translations["nfx"] == "Netflix"


def test_unknown_language_returns_default_mapping() -> None:
    assert load_translations("xx-XX") == dict(TRANSLATIONS["en-US"])


def test_load_translations_is_idempotent() -> None:
    first = load_translations("de-DE")
    first["popular"] = "changed"

    assert load_translations("de-DE")["popular"] == "Beliebt"
    assert load_translations("de-DE") == load_translations("de-DE")
