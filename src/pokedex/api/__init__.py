"""PokeAPI access and response caching."""

from .base import (
    AreaEncounters,
    LocationAreaPage,
    NamedResource,
    PokeAPIDecodeException,
    PokeAPIException,
    PokeAPIRequestException,
    Pokemon,
)
from .cache import CacheEntry, ReaperState, ResponseCache
from .client import DEFAULT_BASE_URL, PokeAPIClient

__all__ = [
    "AreaEncounters",
    "LocationAreaPage",
    "NamedResource",
    "PokeAPIException",
    "PokeAPIRequestException",
    "PokeAPIDecodeException",
    "Pokemon",
    "CacheEntry",
    "ReaperState",
    "ResponseCache",
    "DEFAULT_BASE_URL",
    "PokeAPIClient",
]
