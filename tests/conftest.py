import json
from typing import Dict, List

import httpx
import pytest

from pokedex.api.cache import ResponseCache
from pokedex.api.client import PokeAPIClient

BASE_URL = "https://pokeapi.test/api/v2"


def area_page(names: List[str], next_url=None, previous_url=None) -> Dict:
    return {
        "count": 100,
        "next": next_url,
        "previous": previous_url,
        "results": [{"name": n, "url": f"{BASE_URL}/location-area/{n}/"} for n in names],
    }


def pokemon_body(name: str, base_experience=64) -> Dict:
    return {
        "name": name,
        "height": 7,
        "weight": 69,
        "base_experience": base_experience,
        "stats": [
            {"base_stat": 45, "stat": {"name": "hp"}},
            {"base_stat": 49, "stat": {"name": "attack"}},
        ],
        "types": [{"slot": 1, "type": {"name": "grass"}}, {"slot": 2, "type": {"name": "poison"}}],
    }


class FakePokeAPI:
    """Routes URLs to canned responses and records every request that reaches it."""

    def __init__(self) -> None:
        self.routes: Dict[str, httpx.Response] = {}
        self.requests: List[str] = []

    def add_json(self, url: str, payload: Dict, status_code: int = 200) -> None:
        self.routes[url] = httpx.Response(status_code, content=json.dumps(payload).encode())

    def add_raw(self, url: str, body: bytes, status_code: int = 200) -> None:
        self.routes[url] = httpx.Response(status_code, content=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        response = self.routes.get(url)
        if response is None:
            return httpx.Response(404, content=b"Not Found")
        return httpx.Response(response.status_code, content=response.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def api() -> FakePokeAPI:
    return FakePokeAPI()


@pytest.fixture
def cache():
    cache = ResponseCache(3600)
    yield cache
    cache.stop()


@pytest.fixture
def client(api: FakePokeAPI, cache: ResponseCache) -> PokeAPIClient:
    return PokeAPIClient(cache, base_url=BASE_URL, page_size=2, transport=api.transport())
