"""Plain console REPL for the Pokedex."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

try:
    import readline  # type: ignore
except ImportError:  # pragma: no cover - platform dependent
    readline = None

import click

from ..api.base import PokeAPIException
from ..api.cache import ResponseCache
from ..api.client import PokeAPIClient
from ..catching import CatchPolicy
from ..config import Config
from ..state.session import Session
from ..utils.logger import Logger
from .commands import CommandError, CommandHandler
from .history import InputHistory

PROMPT = "Pokedex > "


def clean_input(text: str) -> List[str]:
    """Lower-case a line and split it into words, dropping empty tokens."""
    return text.lower().split()


class ConsoleREPL:
    """Sequential read-eval-print loop over the command registry."""

    def __init__(
        self,
        config: Optional[Config] = None,
        reap_interval: Optional[float] = None,
        max_age: Optional[float] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self.config = config or Config()
        self.logger = Logger(
            self.config.get_path("general.log_file"),
            level=self.config.get("general.log_level", "info"),
        )

        # Every config value is read before the cache starts its reaper thread,
        # so a bad value cannot leave an unreachable thread behind.
        reap_interval = reap_interval or self.config.get_float("cache.reap_interval_seconds", 30.0)
        max_age = max_age or self.config.get_float("cache.max_age_seconds", 86400.0)
        timeout = self.config.get_float("api.timeout_seconds", 10.0)
        page_size = self.config.get_int("api.page_size", 20)
        catch_policy = CatchPolicy(
            max_chance=self.config.get_int("catch.max_chance", 100),
            difficulty_divisor=self.config.get_int("catch.difficulty_divisor", 5),
        )
        self._history = InputHistory(self._history_path())

        self.cache = ResponseCache(reap_interval, max_age=max_age, logger=self.logger)
        self.client = PokeAPIClient(
            self.cache,
            base_url=base_url or self.config.get("api.base_url", "https://pokeapi.co/api/v2"),
            timeout=timeout,
            page_size=page_size,
            logger=self.logger,
        )
        self.session = Session()
        self.handler = CommandHandler(
            self.client,
            session=self.session,
            catch_policy=catch_policy,
            logger=self.logger,
        )

    async def run(self) -> None:
        """Start the REPL and stop the cache reaper when it ends."""
        self._load_history()
        try:
            await self._loop()
        except KeyboardInterrupt:
            click.echo("\nClosing the Pokedex... Goodbye!")
        finally:
            self.shutdown()

    async def _loop(self) -> None:
        while True:
            try:
                click.echo(click.style(PROMPT, fg="bright_cyan"), nl=False)
                line = input()
            except EOFError:
                click.echo()
                return

            words = clean_input(line)
            if not words:
                continue
            self._append_history(line.strip())

            if not await self.execute(words):
                return

    async def execute(self, words: List[str]) -> bool:
        """Dispatch one command, printing failures without ending the session."""
        try:
            return await self.handler.handle(words)
        except (CommandError, PokeAPIException) as exc:
            self.logger.log_command_failed(words[0], str(exc))
            click.echo(click.style(f"Error: {exc}", fg="bright_yellow"))
            return True

    def shutdown(self) -> None:
        """Stop the background reaper."""
        self.cache.stop()

    # History helpers
    def _history_path(self) -> Path:
        return self.config.global_dir / "history.json"

    def _load_history(self) -> None:
        if readline is None:
            return
        readline.clear_history()
        for line in self._history.load():
            readline.add_history(line)

    def _append_history(self, line: str) -> None:
        if readline is None:
            return
        try:
            self._history.append(line)
        except OSError:
            # Read-only config dir.
            return


async def run_console(
    reap_interval: Optional[float] = None,
    max_age: Optional[float] = None,
    base_url: Optional[str] = None,
) -> None:
    """Helper to run a console session."""
    session = ConsoleREPL(reap_interval=reap_interval, max_age=max_age, base_url=base_url)
    await session.run()
