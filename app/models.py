"""Pydantic models describing manifest inputs and payloads."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import unquote

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

ContentType = Literal["movie", "series"]

PAGE_SIZE = 20


class CatalogRequest(BaseModel):
    """A catalog the user enabled on the configuration page."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    type: ContentType
    show_in_home: bool = Field(
        default=False,
        validation_alias=AliasChoices("showInHome", "show_in_home"),
    )

    @field_validator("show_in_home", mode="before")
    @classmethod
    def _default_show_in_home(cls, value: object) -> object:
        return False if value is None else value


class ManifestConfig(BaseModel):
    """Normalized view of the user configuration embedded in the manifest URL."""

    model_config = ConfigDict(populate_by_name=True)

    language: str | None = None
    tmdb_prefix: str | None = Field(
        default=None,
        validation_alias=AliasChoices("tmdbPrefix", "tmdb_prefix"),
    )
    provide_imdb_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("provideImdbId", "provide_imdb_id"),
    )
    session_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("sessionId", "session_id"),
    )
    catalogs: list[CatalogRequest] = Field(default_factory=list)

    @classmethod
    def from_path_segment(cls, segment: str) -> "ManifestConfig":
        """Decode the configuration segment of ``/{config}/manifest.json``.

        Accepts URL-encoded JSON or URL-safe base64 JSON.
        """

        raw = unquote(segment).strip()
        if not raw:
            return cls()
        if raw.startswith("{"):
            text = raw
        else:
            padded = raw + "=" * (-len(raw) % 4)
            try:
                text = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
            except (binascii.Error, UnicodeError, ValueError) as exc:
                raise ValueError("Configuration is not valid base64") from exc
        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as exc:
            raise ValueError("Configuration is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ValueError("Configuration must be a JSON object")
        return cls.model_validate(payload)

    @field_validator("language", mode="before")
    @classmethod
    def _strip_blank(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return value

    @field_validator("session_id", mode="before")
    @classmethod
    def _empty_session(cls, value: object) -> object:
        return None if value == "" else value

    @field_validator("tmdb_prefix", "provide_imdb_id", mode="before")
    @classmethod
    def _string_flag(cls, value: object) -> object:
        """Only string flags count; ``"true"`` is the sole enabling value."""

        return value if isinstance(value, str) else None

    @field_validator("catalogs", mode="before")
    @classmethod
    def _default_catalogs(cls, value: object) -> object:
        return [] if value is None else value

    @property
    def use_tmdb_prefix(self) -> bool:
        return self.tmdb_prefix == "true"

    @property
    def use_imdb_ids(self) -> bool:
        return self.provide_imdb_id == "true"


@dataclass(frozen=True, slots=True)
class OptionPools:
    """Selectable values computed once per manifest build."""

    years: tuple[str, ...]
    genres_movie: tuple[str, ...]
    genres_series: tuple[str, ...]
    filter_languages: tuple[str, ...]

    def genres_for(self, media_type: str) -> tuple[str, ...]:
        return self.genres_movie if media_type == "movie" else self.genres_series


class CatalogExtra(BaseModel):
    """A filter capability declared on a catalog."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    options: list[str] | None = None
    is_required: bool | None = Field(default=None, alias="isRequired")


class CatalogDescriptor(BaseModel):
    """A single catalog entry of the manifest."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    type: ContentType
    name: str
    page_size: int = Field(default=PAGE_SIZE, alias="pageSize")
    extra: list[CatalogExtra] = Field(default_factory=list)
    extra_supported: list[str] = Field(default_factory=list, alias="extraSupported")
    extra_required: list[str] | None = Field(default=None, alias="extraRequired")

    def to_manifest_entry(self) -> dict[str, Any]:
        """Return the catalog as it appears in ``manifest.json``."""

        return self.model_dump(by_alias=True, exclude_none=True)


class BehaviorHints(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    configurable: bool = True
    configuration_required: bool = Field(default=False, alias="configurationRequired")


class Manifest(BaseModel):
    """The addon manifest consumed by Stremio."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    version: str
    favicon: str
    logo: str
    background: str
    name: str
    description: str
    resources: list[str] = Field(default_factory=lambda: ["catalog", "meta"])
    types: list[str] = Field(default_factory=lambda: ["movie", "series"])
    id_prefixes: list[str] = Field(default_factory=lambda: ["tmdb:"], alias="idPrefixes")
    behavior_hints: BehaviorHints = Field(
        default_factory=BehaviorHints, alias="behaviorHints"
    )
    catalogs: list[CatalogDescriptor] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready manifest."""

        return self.model_dump(by_alias=True, exclude_none=True)
