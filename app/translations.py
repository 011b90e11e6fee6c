"""Catalog name translations keyed by TMDB language code."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .config import DEFAULT_LANGUAGE

_STREAMING_NAMES: dict[str, str] = {
    "nfx": "Netflix",
    "nfk": "Netflix Kids",
    "hbm": "HBO Max",
    "dnp": "Disney+",
    "amp": "Prime Video",
    "atp": "Apple TV+",
    "pmp": "Paramount+",
    "hlu": "Hulu",
    "cts": "Curiosity Stream",
    "mgl": "MagellanTV",
    "cru": "Crunchyroll",
    "hay": "Hayu",
    "clv": "Clarovideo",
    "gop": "Globoplay",
    "hst": "Hotstar",
    "zee": "Zee5",
    "nlz": "NLZIET",
    "vil": "Videoland",
    "sst": "SkyShowtime",
    "bbo": "BluTV",
    "icq": "iQIYI",
    "dpe": "Discovery+",
}

_RAW_TRANSLATIONS: dict[str, dict[str, str]] = {
    DEFAULT_LANGUAGE: {
        "popular": "Popular",
        "year": "Year",
        "language": "Language",
        "trending": "Trending",
        "favorites": "Favorites",
        "watchlist": "Watchlist",
        **_STREAMING_NAMES,
    },
    "pt-BR": {
        "popular": "Populares",
        "year": "Ano",
        "language": "Idioma",
        "trending": "Em Alta",
        "favorites": "Favoritos",
        "watchlist": "Para Assistir",
    },
    "pt-PT": {
        "popular": "Populares",
        "year": "Ano",
        "language": "Idioma",
        "trending": "Tendências",
        "favorites": "Favoritos",
        "watchlist": "Lista para Ver",
    },
    "es-ES": {
        "popular": "Populares",
        "year": "Año",
        "language": "Idioma",
        "trending": "Tendencias",
        "favorites": "Favoritos",
        "watchlist": "Pendientes",
    },
    "fr-FR": {
        "popular": "Populaires",
        "year": "Année",
        "language": "Langue",
        "trending": "Tendances",
        "favorites": "Favoris",
        "watchlist": "À regarder",
    },
    "de-DE": {
        "popular": "Beliebt",
        "year": "Jahr",
        "language": "Sprache",
        "trending": "Im Trend",
        "favorites": "Favoriten",
        "watchlist": "Merkliste",
    },
    "it-IT": {
        "popular": "Popolari",
        "year": "Anno",
        "language": "Lingua",
        "trending": "Di tendenza",
        "favorites": "Preferiti",
        "watchlist": "Da guardare",
    },
}

TRANSLATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {language: MappingProxyType(entries) for language, entries in _RAW_TRANSLATIONS.items()}
)


def load_translations(
    language: str,
    table: Mapping[str, Mapping[str, str]] = TRANSLATIONS,
) -> dict[str, str]:
    """Return default-language names overlaid with ``language`` entries."""

    merged = dict(table.get(DEFAULT_LANGUAGE, {}))
    merged.update(table.get(language, {}))
    return merged
