"""Simple JSON-lines event logger."""

from __future__ import annotations

import json
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


class Logger:
    """Minimal logger that appends session events to a log file."""

    def __init__(self, log_file: Optional[Path] = None, level: str = "info") -> None:
        self.log_file = log_file
        self.level = LEVELS.get(str(level).lower(), LEVELS["info"])
        # The cache reaper logs from its own thread.
        self._lock = threading.Lock()
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, level: str, event: str, **payload: Any) -> None:
        if not self.log_file or LEVELS[level] < self.level:
            return
        entry = {"timestamp": datetime.utcnow().isoformat(), "level": level, "event": event, **payload}
        with self._lock:
            with self.log_file.open("a", encoding="utf-8") as fp:
                fp.write(json.dumps(entry) + "\n")

    def log_cache_hit(self, url: str) -> None:
        self._write("debug", "cache_hit", url=url)

    def log_cache_miss(self, url: str) -> None:
        self._write("debug", "cache_miss", url=url)

    def log_cache_store(self, url: str, size: int) -> None:
        self._write("debug", "cache_store", url=url, bytes=size)

    def log_fetch_failed(self, url: str, reason: str) -> None:
        self._write("warning", "fetch_failed", url=url, reason=reason)

    def log_reap(self, removed: int, interval: float) -> None:
        self._write("debug", "cache_reap", removed=removed, interval=interval)

    def log_command(self, name: str, args: list) -> None:
        self._write("info", "command", command=name, args=args)

    def log_command_failed(self, name: str, reason: str) -> None:
        self._write("error", "command_failed", command=name, reason=reason)
