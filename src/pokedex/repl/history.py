"""Persistent REPL input history."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List


class InputHistory:
    """JSON-backed list of previously entered command lines."""

    def __init__(self, path: Path, max_entries: int = 500) -> None:
        self.path = path
        self.max_entries = max_entries

    def load(self) -> List[str]:
        """Load lines from disk."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return []
        if isinstance(data, list):
            return [str(line) for line in data]
        return []

    def append(self, line: str) -> List[str]:
        """Append a line and persist, keeping only the newest entries."""
        lines = self.load()
        lines.append(line)
        lines = lines[-self.max_entries :]
        self._save(lines)
        return lines

    def clear(self) -> None:
        """Remove stored history."""
        if self.path.exists():
            self.path.unlink()

    def _save(self, lines: List[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(lines, indent=2), encoding="utf-8")
