"""Catch probability model."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .api.base import Pokemon


@dataclass
class CatchPolicy:
    """
    Decides whether a thrown Pokeball catches a Pokemon.

    Difficulty scales with base experience: ``base_experience // difficulty_divisor``,
    capped at ``max_chance``. A roll in ``[0, 100)`` strictly above the difficulty
    is a catch, so stronger Pokemon escape more often.
    """

    max_chance: int = 100
    difficulty_divisor: int = 5
    rng: random.Random = field(default_factory=random.Random)

    def difficulty(self, pokemon: Pokemon) -> int:
        return min(pokemon.base_experience // self.difficulty_divisor, self.max_chance)

    def attempt(self, pokemon: Pokemon) -> bool:
        roll = self.rng.randrange(100)
        return roll > self.difficulty(pokemon)
