"""Tests for the TMDB genre and language providers."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from app.config import Settings
from app.services.tmdb import TMDBClient, TMDBError


def build_settings(**overrides: Any) -> Settings:
    """Return a settings object with defaults suitable for tests."""

    base = {"TMDB_API_KEY": "tmdb-key"}
    base.update(overrides)
    return Settings(_env_file=None, **base)  # type: ignore[arg-type]


def build_client(handler) -> tuple[TMDBClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(
        base_url="https://api.themoviedb.org/3",
        transport=httpx.MockTransport(handler),
    )
    return TMDBClient(build_settings(), http_client), http_client


def test_client_requires_api_key() -> None:
    with pytest.raises(ValueError, match="TMDB API key is required"):
        TMDBClient(Settings(_env_file=None), httpx.AsyncClient())


@pytest.mark.anyio
async def test_genre_list_uses_tv_endpoint_for_series() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200, json={"genres": [{"id": 1, "name": "Drama"}, {"id": 2, "name": ""}]}
        )

    client, http_client = build_client(handler)
    async with http_client:
        genres = await client.get_genre_list("de-DE", "series")

    assert genres == [{"id": 1, "name": "Drama"}]
    assert requests[0].url.path == "/3/genre/tv/list"
    assert requests[0].url.params["language"] == "de-DE"
    assert requests[0].url.params["api_key"] == "tmdb-key"


@pytest.mark.anyio
async def test_languages_join_translations_with_english_names() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/primary_translations"):
            return httpx.Response(200, json=["pt-BR", "pt-PT", "en-US", "xx-YY"])
        return httpx.Response(
            200,
            json=[
                {"iso_639_1": "pt", "english_name": "Portuguese"},
                {"iso_639_1": "en", "english_name": "English"},
            ],
        )

    client, http_client = build_client(handler)
    async with http_client:
        languages = await client.get_languages()

    assert languages == [
        {"iso_639_1": "pt-BR", "name": "Portuguese"},
        {"iso_639_1": "pt-PT", "name": "Portuguese"},
        {"iso_639_1": "en-US", "name": "English"},
        {"iso_639_1": "xx-YY", "name": "xx-YY"},
    ]


@pytest.mark.anyio
async def test_http_errors_raise_tmdb_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"status_message": "Invalid API key"})

    client, http_client = build_client(handler)
    async with http_client:
        with pytest.raises(TMDBError, match="status 401"):
            await client.get_genre_list("en-US", "movie")


@pytest.mark.anyio
async def test_transport_errors_raise_tmdb_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    client, http_client = build_client(handler)
    async with http_client:
        with pytest.raises(TMDBError):
            await client.get_languages()


@pytest.mark.anyio
async def test_genre_payload_without_genres_raises_tmdb_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status_message": "maintenance"})

    client, http_client = build_client(handler)
    async with http_client:
        with pytest.raises(TMDBError, match="Unexpected TMDB genre payload"):
            await client.get_genre_list("en-US", "movie")
