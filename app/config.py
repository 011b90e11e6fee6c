"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_LANGUAGE = "en-US"
BRANDING_BASE_URL = "https://github.com/mrcanelas/tmdb-addon/raw/main/images"


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="TMDB Addon", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="HOST")
    server_port: int = Field(default=1337, alias="PORT")

    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_api_url: HttpUrl = Field(
        default="https://api.themoviedb.org/3", alias="TMDB_API_URL"
    )

    addon_id: str = Field(default="tmdb-addon", alias="ADDON_ID")
    addon_version: str = Field(default="3.1.0", alias="ADDON_VERSION")
    addon_name: str = Field(default="The Movie Database Addon", alias="ADDON_NAME")
    addon_description: str = Field(
        default="Metadata provided by TMDB",
        alias="ADDON_DESCRIPTION",
    )

    favicon_url: HttpUrl = Field(
        default=f"{BRANDING_BASE_URL}/favicon.png", alias="FAVICON_URL"
    )
    logo_url: HttpUrl = Field(default=f"{BRANDING_BASE_URL}/logo.png", alias="LOGO_URL")
    background_url: HttpUrl = Field(
        default=f"{BRANDING_BASE_URL}/background.png", alias="BACKGROUND_URL"
    )

    environment: Literal["development", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def _strip_blank(cls, value: object) -> object:
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
