"""Catalog construction pipeline producing the addon manifest."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Awaitable, Literal, Mapping, Protocol, Sequence

from .catalog_types import (
    CATALOG_TYPES,
    EXTRA_ORDER,
    CatalogDefinition,
    get_catalog_definition,
)
from .config import DEFAULT_LANGUAGE, Settings
from .models import (
    BehaviorHints,
    CatalogDescriptor,
    CatalogExtra,
    CatalogRequest,
    Manifest,
    ManifestConfig,
    OptionPools,
)
from .translations import TRANSLATIONS, load_translations

logger = logging.getLogger(__name__)

YEARS_HORIZON = 20
TOP_OPTION = "Top"
TMDB_NAME_PREFIX = "TMDB - "
MISSING_TRANSLATION = "undefined"


class GenreProvider(Protocol):
    def __call__(self, language: str, media_type: str) -> Awaitable[Sequence[Mapping[str, Any]]]:
        ...


class LanguageProvider(Protocol):
    def __call__(self) -> Awaitable[Sequence[Mapping[str, Any]]]:
        ...


class LanguageNotFoundError(LookupError):
    """Raised when the active language is missing from the TMDB language list."""


SkipReason = Literal["unknown_catalog", "requires_auth"]


@dataclass(frozen=True, slots=True)
class SkippedCatalog:
    id: str
    reason: SkipReason


@dataclass(slots=True)
class CatalogSelection:
    """Catalogs accepted for the manifest and those dropped along the way."""

    accepted: list[CatalogDescriptor] = field(default_factory=list)
    skipped: list[SkippedCatalog] = field(default_factory=list)


def generate_years(max_years: int) -> list[str]:
    """Return ``max_years + 1`` year strings counting down from this year."""

    current = date.today().year
    return [str(year) for year in range(current, current - max_years - 1, -1)]


def order_languages(language: str, languages: Sequence[Mapping[str, Any]]) -> list[str]:
    """Return unique language names with ``language`` first, the rest sorted.

    Raises :class:`LanguageNotFoundError` when no entry carries the code.
    """

    active = next(
        (entry for entry in languages if entry.get("iso_639_1") == language), None
    )
    if active is None:
        raise LanguageNotFoundError(f"Language {language!r} is not a TMDB translation")

    remaining = sorted(
        (entry for entry in languages if entry is not active),
        key=lambda entry: str(entry.get("name")),
    )
    names: list[str] = []
    for entry in (active, *remaining):
        name = str(entry.get("name"))
        if name not in names:
            names.append(name)
    return names


def options_for_catalog(
    definition: CatalogDefinition,
    media_type: str,
    show_in_home: bool,
    pools: OptionPools,
) -> list[str]:
    """Pick the option list a catalog's genre filter exposes."""

    if definition.default_options is not None:
        return list(definition.default_options)
    if definition.name_key == "year":
        return list(pools.years)
    if definition.name_key == "language":
        return list(pools.filter_languages)

    genres = list(pools.genres_for(media_type))
    if show_in_home:
        return genres
    return [TOP_OPTION, *genres]


def create_catalog(
    catalog_id: str,
    media_type: str,
    definition: CatalogDefinition,
    options: Sequence[str],
    tmdb_prefix: bool,
    translations: Mapping[str, str],
    show_in_home: bool = False,
) -> CatalogDescriptor:
    """Assemble the manifest entry for one catalog."""

    extra: list[CatalogExtra] = []
    for extra_name in EXTRA_ORDER:
        if not definition.supports(extra_name):
            continue
        if extra_name == "genre":
            extra.append(
                CatalogExtra(
                    name="genre",
                    options=list(options),
                    is_required=None if show_in_home else True,
                )
            )
        else:
            extra.append(CatalogExtra(name=extra_name))

    translated = translations.get(definition.name_key)
    if translated is None:
        logger.debug("No translation for catalog name key %s", definition.name_key)
        translated = MISSING_TRANSLATION
    prefix = TMDB_NAME_PREFIX if tmdb_prefix else ""

    return CatalogDescriptor(
        id=catalog_id,
        type=media_type,
        name=f"{prefix}{translated}",
        extra=extra,
        extra_supported=list(definition.extra_supported),
        extra_required=None if show_in_home else ["genre"],
    )


def select_catalogs(
    requests: Sequence[CatalogRequest],
    *,
    session_id: str | None,
    pools: OptionPools,
    translations: Mapping[str, str],
    tmdb_prefix: bool,
    taxonomy: Mapping[str, Mapping[str, CatalogDefinition]] = CATALOG_TYPES,
) -> CatalogSelection:
    """Build descriptors for the usable requests, in request order."""

    selection = CatalogSelection()
    for request in requests:
        definition = get_catalog_definition(request.id, taxonomy)
        if definition is None:
            selection.skipped.append(SkippedCatalog(request.id, "unknown_catalog"))
            continue
        if definition.requires_auth and not session_id:
            selection.skipped.append(SkippedCatalog(request.id, "requires_auth"))
            continue
        options = options_for_catalog(definition, request.type, request.show_in_home, pools)
        selection.accepted.append(
            create_catalog(
                request.id,
                request.type,
                definition,
                options,
                tmdb_prefix,
                translations,
                request.show_in_home,
            )
        )
    return selection


async def _sorted_genre_names(
    genre_provider: GenreProvider, language: str, media_type: str
) -> tuple[str, ...]:
    genres = await genre_provider(language, media_type)
    return tuple(sorted(str(genre["name"]) for genre in genres))


async def build_option_pools(
    language: str,
    *,
    genre_provider: GenreProvider,
    language_provider: LanguageProvider,
) -> OptionPools:
    """Fetch genres and languages concurrently and derive the option pools."""

    genres_movie, genres_series, languages = await asyncio.gather(
        _sorted_genre_names(genre_provider, language, "movie"),
        _sorted_genre_names(genre_provider, language, "series"),
        language_provider(),
    )
    try:
        filter_languages = order_languages(language, languages)
    except LanguageNotFoundError:
        if language == DEFAULT_LANGUAGE:
            raise
        logger.warning(
            "Language %s missing from TMDB translations, ordering by %s",
            language,
            DEFAULT_LANGUAGE,
        )
        filter_languages = order_languages(DEFAULT_LANGUAGE, languages)

    return OptionPools(
        years=tuple(generate_years(YEARS_HORIZON)),
        genres_movie=genres_movie,
        genres_series=genres_series,
        filter_languages=tuple(filter_languages),
    )


async def build_manifest(
    config: ManifestConfig,
    *,
    genre_provider: GenreProvider,
    language_provider: LanguageProvider,
    settings: Settings,
    taxonomy: Mapping[str, Mapping[str, CatalogDefinition]] = CATALOG_TYPES,
    translation_table: Mapping[str, Mapping[str, str]] = TRANSLATIONS,
) -> Manifest:
    """Return the manifest for a user configuration.

    Provider failures propagate to the caller. Requests naming an unknown
    catalog, or an authenticated catalog without a session id, are left out.
    """

    language = config.language or DEFAULT_LANGUAGE
    translations = load_translations(language, translation_table)
    pools = await build_option_pools(
        language,
        genre_provider=genre_provider,
        language_provider=language_provider,
    )

    selection = select_catalogs(
        config.catalogs,
        session_id=config.session_id,
        pools=pools,
        translations=translations,
        tmdb_prefix=config.use_tmdb_prefix,
        taxonomy=taxonomy,
    )
    for skipped in selection.skipped:
        logger.info("Skipping catalog %s: %s", skipped.id, skipped.reason)

    suffix = f" with {language} language." if language != DEFAULT_LANGUAGE else "."
    return Manifest(
        id=settings.addon_id,
        version=settings.addon_version,
        favicon=str(settings.favicon_url),
        logo=str(settings.logo_url),
        background=str(settings.background_url),
        name=settings.addon_name,
        description=f"{settings.addon_description}{suffix}",
        resources=["catalog", "meta"],
        types=["movie", "series"],
        id_prefixes=["tmdb:", "tt"] if config.use_imdb_ids else ["tmdb:"],
        behavior_hints=BehaviorHints(configurable=True, configuration_required=False),
        catalogs=selection.accepted,
    )
