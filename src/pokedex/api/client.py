"""PokeAPI client with cache-aside lookups."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import httpx

from ..utils.logger import Logger
from .base import (
    AreaEncounters,
    LocationAreaPage,
    PokeAPIRequestException,
    Pokemon,
    decode_body,
)
from .cache import ResponseCache

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"

T = TypeVar("T")


class PokeAPIClient:
    """Fetches PokeAPI resources, serving repeat requests from the response cache."""

    def __init__(
        self,
        cache: ResponseCache,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        page_size: int = 20,
        logger: Optional[Logger] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.logger = logger or Logger()
        self.transport = transport

    # URL builders. Keys must be stable: they double as cache keys.
    def first_page_url(self) -> str:
        return f"{self.base_url}/location-area/?offset=0&limit={self.page_size}"

    def location_area_url(self, name: str) -> str:
        return f"{self.base_url}/location-area/{name}"

    def pokemon_url(self, name: str) -> str:
        return f"{self.base_url}/pokemon/{name}"

    async def get_location_areas(self, url: Optional[str] = None) -> LocationAreaPage:
        """Fetch one page of location areas (the first page by default)."""
        return await self._get(url or self.first_page_url(), LocationAreaPage.from_dict)

    async def get_location_area(self, name: str) -> AreaEncounters:
        return await self._get(self.location_area_url(name), AreaEncounters.from_dict)

    async def get_pokemon(self, name: str) -> Pokemon:
        return await self._get(self.pokemon_url(name), Pokemon.from_dict)

    async def _get(self, url: str, parse: Callable[[Any], T]) -> T:
        cached, found = self.cache.get(url)
        if found:
            self.logger.log_cache_hit(url)
            return parse(decode_body(cached))

        self.logger.log_cache_miss(url)
        body = await self._fetch(url)
        result = parse(decode_body(body))
        self.cache.add(url, body)
        self.logger.log_cache_store(url, len(body))
        return result

    async def _fetch(self, url: str) -> bytes:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.get(url)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                self.logger.log_fetch_failed(url, str(exc))
                raise PokeAPIRequestException(
                    f"request to {url} failed with status {exc.response.status_code}"
                ) from exc
            except httpx.HTTPError as exc:
                self.logger.log_fetch_failed(url, str(exc))
                raise PokeAPIRequestException(f"request to {url} failed: {exc}") from exc
        return resp.content
