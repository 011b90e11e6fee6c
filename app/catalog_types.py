"""Static catalog taxonomy advertised in the addon manifest."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping


ExtraName = Literal["genre", "search", "skip"]
EXTRA_ORDER: tuple[ExtraName, ...] = ("genre", "search", "skip")


@dataclass(frozen=True)
class CatalogDefinition:
    """Describes the fixed capabilities of one catalog type."""

    name_key: str
    requires_auth: bool = False
    extra_supported: tuple[ExtraName, ...] = ("genre", "skip")
    default_options: tuple[str, ...] | None = None

    def supports(self, extra: ExtraName) -> bool:
        return extra in self.extra_supported


CatalogCategory = Literal["tmdb", "auth", "streaming"]

_STREAMING_PROVIDERS: tuple[str, ...] = (
    "nfx",
    "nfk",
    "hbm",
    "dnp",
    "amp",
    "atp",
    "pmp",
    "hlu",
    "cts",
    "mgl",
    "cru",
    "hay",
    "clv",
    "gop",
    "hst",
    "zee",
    "nlz",
    "vil",
    "sst",
    "bbo",
    "icq",
    "dpe",
)


def _freeze(
    categories: Mapping[CatalogCategory, Mapping[str, CatalogDefinition]],
) -> Mapping[CatalogCategory, Mapping[str, CatalogDefinition]]:
    return MappingProxyType(
        {category: MappingProxyType(dict(types)) for category, types in categories.items()}
    )


# Categories are scanned in this order; the first one defining a type wins.
CATALOG_TYPES: Mapping[CatalogCategory, Mapping[str, CatalogDefinition]] = _freeze(
    {
        "tmdb": {
            "top": CatalogDefinition(
                name_key="popular",
                extra_supported=("genre", "search", "skip"),
            ),
            "year": CatalogDefinition(name_key="year"),
            "language": CatalogDefinition(name_key="language"),
            "trending": CatalogDefinition(
                name_key="trending",
                default_options=("Day", "Week"),
            ),
        },
        "auth": {
            "favorites": CatalogDefinition(
                name_key="favorites",
                requires_auth=True,
                default_options=("Added Date", "Popularity", "Release Date"),
            ),
            "watchlist": CatalogDefinition(
                name_key="watchlist",
                requires_auth=True,
                default_options=("Added Date", "Popularity", "Release Date"),
            ),
        },
        "streaming": {
            provider: CatalogDefinition(name_key=provider)
            for provider in _STREAMING_PROVIDERS
        },
    }
)


def get_catalog_definition(
    catalog_id: str,
    taxonomy: Mapping[str, Mapping[str, CatalogDefinition]] = CATALOG_TYPES,
) -> CatalogDefinition | None:
    """Resolve ``"<provider>.<type>"`` to its definition.

    The provider prefix is not consulted: categories are scanned in taxonomy
    order and the first one containing the type is returned. ``None`` means
    no category knows the type.
    """

    _, separator, catalog_type = catalog_id.partition(".")
    if not separator or not catalog_type:
        return None
    for category in taxonomy.values():
        definition = category.get(catalog_type)
        if definition is not None:
            return definition
    return None
