"""Command registry and handlers for the console REPL."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List, Optional

import click

from ..api.client import PokeAPIClient
from ..catching import CatchPolicy
from ..state.session import Session
from ..utils.logger import Logger


class CommandError(Exception):
    """Raised for bad usage or a request the session cannot satisfy."""


@dataclass(frozen=True)
class Command:
    name: str
    usage: str
    description: str
    handler: Callable[[List[str]], Awaitable[None]]


class CommandHandler:
    """Resolves command names and runs them against the session."""

    def __init__(
        self,
        client: PokeAPIClient,
        session: Optional[Session] = None,
        catch_policy: Optional[CatchPolicy] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.client = client
        self.session = session or Session()
        self.catch_policy = catch_policy or CatchPolicy()
        self.logger = logger or Logger()
        self.exit_requested = False

        commands = [
            Command("help", "help", "Displays a help message", self.cmd_help),
            Command("exit", "exit", "Exit the Pokedex", self.cmd_exit),
            Command("map", "map", "Displays the next page of location areas", self.cmd_map),
            Command("mapb", "mapb", "Displays the previous page of location areas", self.cmd_mapb),
            Command("explore", "explore <area_name>", "Lists the Pokemon found in a location area", self.cmd_explore),
            Command("catch", "catch <pokemon>", "Throws a Pokeball at a Pokemon", self.cmd_catch),
            Command("inspect", "inspect <pokemon>", "Shows details of a caught Pokemon", self.cmd_inspect),
            Command("pokedex", "pokedex", "Lists every Pokemon you have caught", self.cmd_pokedex),
        ]
        self.commands: Dict[str, Command] = {command.name: command for command in commands}

    async def handle(self, words: List[str]) -> bool:
        """Run one command line. Returns False once the session should end."""
        if not words:
            return True

        name, args = words[0], words[1:]
        command = self.commands.get(name)
        if command is None:
            click.echo("Unknown command")
            return True

        self.logger.log_command(name, args)
        await command.handler(args)
        return not self.exit_requested

    async def cmd_help(self, args: List[str]) -> None:
        lines = ["", "Welcome to the Pokedex!", "Usage:", ""]
        for command in self.commands.values():
            lines.append(f"{command.usage}: {command.description}")
        click.echo("\n".join(lines))

    async def cmd_exit(self, args: List[str]) -> None:
        click.echo("Closing the Pokedex... Goodbye!")
        self.exit_requested = True

    async def cmd_map(self, args: List[str]) -> None:
        session = self.session
        if session.started and session.next_url is None:
            click.echo("You're on the last page")
            return
        page = await self.client.get_location_areas(session.next_url)
        session.advance(page.next, page.previous)
        for area in page.results:
            click.echo(area.name)

    async def cmd_mapb(self, args: List[str]) -> None:
        session = self.session
        if session.previous_url is None:
            click.echo("You're on the first page")
            return
        page = await self.client.get_location_areas(session.previous_url)
        session.advance(page.next, page.previous)
        for area in page.results:
            click.echo(area.name)

    async def cmd_explore(self, args: List[str]) -> None:
        area_name = self._single_arg(args, "explore")
        area = await self.client.get_location_area(area_name)
        click.echo(f"Exploring {area_name}...")
        click.echo("Found Pokemon:")
        for pokemon in area.pokemon:
            click.echo(f" - {pokemon.name}")

    async def cmd_catch(self, args: List[str]) -> None:
        name = self._single_arg(args, "catch")
        pokemon = await self.client.get_pokemon(name)
        click.echo(f"Throwing a Pokeball at {pokemon.name}...")
        if self.catch_policy.attempt(pokemon):
            self.session.pokedex.add(pokemon)
            click.echo(f"{pokemon.name} was caught!")
            click.echo("You may now inspect it with the inspect command.")
        else:
            click.echo(f"{pokemon.name} escaped!")

    async def cmd_inspect(self, args: List[str]) -> None:
        name = self._single_arg(args, "inspect")
        pokemon = self.session.pokedex.get(name)
        if pokemon is None:
            raise CommandError("you have not caught that pokemon")

        lines = [
            f"Name: {pokemon.name}",
            f"Height: {pokemon.height}",
            f"Weight: {pokemon.weight}",
            f"Base Experience: {pokemon.base_experience}",
            "Stats:",
        ]
        lines.extend(f"  -{stat}: {value}" for stat, value in pokemon.stats.items())
        lines.append("Types:")
        lines.extend(f"  - {type_name}" for type_name in pokemon.types)
        click.echo("\n".join(lines))

    async def cmd_pokedex(self, args: List[str]) -> None:
        caught = self.session.pokedex.list_all()
        if not caught:
            raise CommandError("you have not caught any pokemon")
        click.echo("Your Pokedex:")
        for pokemon in caught:
            click.echo(f" - {pokemon.name}")

    def _single_arg(self, args: List[str], name: str) -> str:
        if len(args) != 1:
            raise CommandError(f"usage: {self.commands[name].usage}")
        return args[0]
