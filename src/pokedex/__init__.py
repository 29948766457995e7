"""Pokedex - PokeAPI console explorer."""

__version__ = "0.1.0"
__author__ = "Pokedex Contributors"

from .api.cache import ResponseCache
from .config import Config
from .state.session import Session

__all__ = ["Config", "ResponseCache", "Session"]
