"""State management modules."""

from .pokedex import Pokedex
from .session import Session

__all__ = ["Pokedex", "Session"]
