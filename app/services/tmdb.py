"""Genre and language providers backed by The Movie Database (TMDB)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)

_GENRE_ENDPOINTS = {"movie": "/genre/movie/list", "series": "/genre/tv/list"}


class TMDBError(RuntimeError):
    """Raised when TMDB cannot be reached or rejects a request."""


class TMDBClient:
    """Client fetching the reference lists used to build the manifest."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        if not settings.tmdb_api_key:
            raise ValueError("TMDB API key is required when initialising TMDBClient")
        self._settings = settings
        self._client = http_client

    async def get_genre_list(self, language: str, media_type: str) -> list[dict[str, Any]]:
        """Return TMDB genre records (``{"id", "name"}``) for a media type."""

        endpoint = _GENRE_ENDPOINTS["movie" if media_type == "movie" else "series"]
        payload = await self._get(endpoint, {"language": language})
        genres = payload.get("genres") if isinstance(payload, dict) else None
        if not isinstance(genres, list):
            raise TMDBError(f"Unexpected TMDB genre payload for {media_type} ({language})")
        return [genre for genre in genres if isinstance(genre, dict) and genre.get("name")]

    async def get_languages(self) -> list[dict[str, str]]:
        """Return the translations TMDB supports with their English names.

        Each entry carries the full translation code (``pt-BR``) under
        ``iso_639_1`` and the base language's English name under ``name``, so
        regional variants share a name.
        """

        primary, languages = await asyncio.gather(
            self._get("/configuration/primary_translations"),
            self._get("/configuration/languages"),
        )
        if not isinstance(primary, list) or not isinstance(languages, list):
            raise TMDBError("Unexpected TMDB language configuration payload")

        english_names = {
            entry.get("iso_639_1"): entry.get("english_name")
            for entry in languages
            if isinstance(entry, dict)
        }
        result: list[dict[str, str]] = []
        for code in primary:
            if not isinstance(code, str) or not code:
                continue
            base = code.split("-", 1)[0]
            name = english_names.get(base)
            if not name:
                logger.debug("No English name for TMDB language %s", code)
                name = code
            result.append({"iso_639_1": code, "name": name})
        return result

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        query = {"api_key": self._settings.tmdb_api_key, **(params or {})}
        try:
            response = await self._client.get(path, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "TMDB request %s failed with status %s", path, exc.response.status_code
            )
            raise TMDBError(
                f"TMDB request {path} failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("TMDB request %s failed: %s", path, exc)
            raise TMDBError(f"TMDB request {path} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise TMDBError(f"TMDB returned invalid JSON for {path}") from exc
