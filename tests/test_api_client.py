import asyncio
import json
from pathlib import Path

import httpx
import pytest

from pokedex.api.base import PokeAPIDecodeException, PokeAPIRequestException
from pokedex.api.client import PokeAPIClient
from pokedex.utils.logger import Logger

from conftest import BASE_URL, area_page, pokemon_body


def test_first_page_url_matches_api_previous_links(client) -> None:
    assert client.first_page_url() == f"{BASE_URL}/location-area/?offset=0&limit=2"


def test_miss_fetches_and_stores_raw_body(api, cache, client) -> None:
    url = client.first_page_url()
    api.add_json(url, area_page(["canalave-city-area", "eterna-city-area"], next_url="next"))

    page = asyncio.run(client.get_location_areas())

    assert [area.name for area in page.results] == ["canalave-city-area", "eterna-city-area"]
    assert page.next == "next"
    assert page.previous is None
    assert api.requests == [url]

    cached, found = cache.get(url)
    assert found
    assert b"canalave-city-area" in cached


def test_hit_skips_network(api, client) -> None:
    url = client.pokemon_url("bulbasaur")
    api.add_json(url, pokemon_body("bulbasaur"))

    first = asyncio.run(client.get_pokemon("bulbasaur"))
    second = asyncio.run(client.get_pokemon("bulbasaur"))

    assert first == second
    assert api.requests == [url]


def test_cached_bytes_are_served_without_network(api, cache, client) -> None:
    url = client.location_area_url("pastoria-city-area")
    cache.add(url, b'{"name": "pastoria-city-area", "pokemon_encounters": [{"pokemon": {"name": "tentacool", "url": ""}}]}')

    area = asyncio.run(client.get_location_area("pastoria-city-area"))

    assert [p.name for p in area.pokemon] == ["tentacool"]
    assert api.requests == []


def test_http_error_is_raised_and_not_cached(api, cache, client) -> None:
    url = client.pokemon_url("missingno")

    with pytest.raises(PokeAPIRequestException, match="404"):
        asyncio.run(client.get_pokemon("missingno"))

    assert cache.get(url) == (None, False)


def test_invalid_json_is_raised_and_not_cached(api, cache, client) -> None:
    url = client.pokemon_url("ditto")
    api.add_raw(url, b"<html>oops</html>")

    with pytest.raises(PokeAPIDecodeException):
        asyncio.run(client.get_pokemon("ditto"))

    assert cache.get(url) == (None, False)


def test_unexpected_shape_is_raised_and_not_cached(api, cache, client) -> None:
    url = client.location_area_url("nowhere")
    api.add_json(url, {"name": "nowhere"})

    with pytest.raises(PokeAPIDecodeException):
        asyncio.run(client.get_location_area("nowhere"))

    assert cache.get(url) == (None, False)


def test_corrupt_cache_entry_surfaces_as_decode_error(api, cache, client) -> None:
    url = client.pokemon_url("eevee")
    cache.add(url, b'{"not": "a pokemon"}')

    with pytest.raises(PokeAPIDecodeException):
        asyncio.run(client.get_pokemon("eevee"))

    assert api.requests == []


def test_pokemon_decoding(api, client) -> None:
    api.add_json(client.pokemon_url("bulbasaur"), pokemon_body("bulbasaur", base_experience=None))

    pokemon = asyncio.run(client.get_pokemon("bulbasaur"))

    assert pokemon.base_experience == 0
    assert pokemon.height == 7
    assert pokemon.weight == 69
    assert pokemon.stats == {"hp": 45, "attack": 49}
    assert pokemon.types == ["grass", "poison"]


def read_events(path: Path):
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_connection_error_is_raised_logged_and_not_cached(cache, tmp_path: Path) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    log_file = tmp_path / "pokedex.log"
    client = PokeAPIClient(
        cache,
        base_url=BASE_URL,
        logger=Logger(log_file, level="debug"),
        transport=httpx.MockTransport(refuse),
    )
    url = client.pokemon_url("snorlax")

    with pytest.raises(PokeAPIRequestException, match="failed: boom"):
        asyncio.run(client.get_pokemon("snorlax"))

    assert cache.get(url) == (None, False)
    failures = [e for e in read_events(log_file) if e["event"] == "fetch_failed"]
    assert failures and failures[0]["url"] == url


def test_miss_then_hit_are_logged(api, cache, tmp_path: Path) -> None:
    log_file = tmp_path / "pokedex.log"
    client = PokeAPIClient(
        cache,
        base_url=BASE_URL,
        logger=Logger(log_file, level="debug"),
        transport=api.transport(),
    )
    url = client.pokemon_url("bulbasaur")
    api.add_json(url, pokemon_body("bulbasaur"))

    asyncio.run(client.get_pokemon("bulbasaur"))
    asyncio.run(client.get_pokemon("bulbasaur"))

    events = [e["event"] for e in read_events(log_file)]
    assert events == ["cache_miss", "cache_store", "cache_hit"]
