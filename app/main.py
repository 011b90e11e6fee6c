"""Entry point for the FastAPI-powered Stremio addon."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .config import settings
from .manifest import build_manifest
from .models import ManifestConfig
from .services.tmdb import TMDBClient, TMDBError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app: FastAPI


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    exit_stack = AsyncExitStack()
    tmdb_http_client = await exit_stack.enter_async_context(
        httpx.AsyncClient(
            base_url=str(settings.tmdb_api_url),
            timeout=httpx.Timeout(15.0, connect=5.0),
        )
    )
    fastapi_app.state.tmdb_client = TMDBClient(settings, tmdb_http_client)

    try:
        yield
    finally:  # pragma: no cover - teardown path exercised at runtime
        await exit_stack.aclose()


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="TMDB catalogs for Stremio",
        version=settings.addon_version,
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_routes(fastapi_app)
    return fastapi_app


def get_tmdb_client(app: FastAPI) -> TMDBClient:
    client = getattr(app.state, "tmdb_client", None)
    if client is None:
        raise RuntimeError("TMDB client not initialised")
    return client


def register_routes(fastapi_app: FastAPI) -> None:
    async def _manifest_endpoint(config: ManifestConfig) -> dict[str, Any]:
        client = get_tmdb_client(fastapi_app)
        try:
            manifest = await build_manifest(
                config,
                genre_provider=client.get_genre_list,
                language_provider=client.get_languages,
                settings=settings,
            )
        except TMDBError as exc:
            logger.warning("Manifest build aborted: %s", exc)
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return manifest.to_payload()

    @fastapi_app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @fastapi_app.get("/manifest.json")
    async def manifest() -> dict[str, Any]:
        return await _manifest_endpoint(ManifestConfig())

    @fastapi_app.get("/{config_segment:path}/manifest.json")
    async def manifest_with_config(config_segment: str) -> dict[str, Any]:
        try:
            config = ManifestConfig.from_path_segment(config_segment)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=exc.errors()) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return await _manifest_endpoint(config)


app = create_app()
