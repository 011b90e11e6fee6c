"""Configuration settings behaviour tests."""

from __future__ import annotations

from app.config import Settings


def test_defaults_describe_the_addon() -> None:
    settings = Settings(_env_file=None)

    assert settings.addon_id == "tmdb-addon"
    assert settings.addon_name == "The Movie Database Addon"
    assert str(settings.logo_url).endswith("/images/logo.png")
    assert settings.tmdb_api_key is None


def test_blank_api_key_is_treated_as_missing() -> None:
    settings = Settings(_env_file=None, TMDB_API_KEY="   ")

    assert settings.tmdb_api_key is None


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "secret")
    monkeypatch.setenv("ADDON_VERSION", "9.9.9")

    settings = Settings(_env_file=None)

    assert settings.tmdb_api_key == "secret"
    assert settings.addon_version == "9.9.9"
