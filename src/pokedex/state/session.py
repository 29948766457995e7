"""REPL session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .pokedex import Pokedex


@dataclass
class Session:
    """Pagination cursors and caught Pokemon for one console session."""

    next_url: Optional[str] = None
    previous_url: Optional[str] = None
    # False until the first page of location areas has been shown.
    started: bool = False
    pokedex: Pokedex = field(default_factory=Pokedex)

    def advance(self, next_url: Optional[str], previous_url: Optional[str]) -> None:
        """Move the cursors to the page that was just shown."""
        self.next_url = next_url
        self.previous_url = previous_url
        self.started = True
