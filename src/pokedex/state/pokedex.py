"""Caught Pokemon for the current session."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..api.base import Pokemon


class Pokedex:
    """In-memory collection of caught Pokemon, keyed by name."""

    def __init__(self) -> None:
        self._caught: Dict[str, Pokemon] = {}

    def add(self, pokemon: Pokemon) -> None:
        """Record a catch; catching the same Pokemon again refreshes its data."""
        self._caught[pokemon.name] = pokemon

    def get(self, name: str) -> Optional[Pokemon]:
        return self._caught.get(name)

    def list_all(self) -> List[Pokemon]:
        return list(self._caught.values())

    def __contains__(self, name: object) -> bool:
        return name in self._caught

    def __len__(self) -> int:
        return len(self._caught)
