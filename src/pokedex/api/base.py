"""Response records and errors for the PokeAPI client."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class PokeAPIException(Exception):
    """Base exception for PokeAPI errors."""


class PokeAPIRequestException(PokeAPIException):
    """Raised when a request fails or returns a non-success status."""


class PokeAPIDecodeException(PokeAPIException):
    """Raised when a response body does not match the expected shape."""


def decode_body(body: bytes) -> Any:
    """Parse a raw response body as JSON."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise PokeAPIDecodeException(f"error decoding JSON: {exc}") from exc


@dataclass
class NamedResource:
    name: str
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NamedResource":
        return cls(name=data["name"], url=data.get("url", ""))


@dataclass
class LocationAreaPage:
    count: int
    next: Optional[str]
    previous: Optional[str]
    results: List[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LocationAreaPage":
        try:
            return cls(
                count=int(data.get("count") or 0),
                next=data.get("next"),
                previous=data.get("previous"),
                results=[NamedResource.from_dict(item) for item in data["results"]],
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise PokeAPIDecodeException(f"unexpected location area listing: {exc!r}") from exc


@dataclass
class AreaEncounters:
    name: str
    pokemon: List[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AreaEncounters":
        try:
            return cls(
                name=data["name"],
                pokemon=[NamedResource.from_dict(enc["pokemon"]) for enc in data["pokemon_encounters"]],
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise PokeAPIDecodeException(f"unexpected location area: {exc!r}") from exc


@dataclass
class Pokemon:
    name: str
    height: int = 0
    weight: int = 0
    base_experience: int = 0
    stats: Dict[str, int] = field(default_factory=dict)
    types: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pokemon":
        try:
            return cls(
                name=data["name"],
                height=int(data.get("height") or 0),
                weight=int(data.get("weight") or 0),
                # Some forms report a null base experience.
                base_experience=int(data.get("base_experience") or 0),
                stats={s["stat"]["name"]: int(s["base_stat"]) for s in data.get("stats", [])},
                types=[t["type"]["name"] for t in data.get("types", [])],
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise PokeAPIDecodeException(f"unexpected pokemon: {exc!r}") from exc
