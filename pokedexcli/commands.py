"""The commands available at the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TextIO

from .models import Pokemon, ResourceList

CATCH_THRESHOLD = 40


class CommandError(Exception):
    """A command was used wrongly or could not do its work."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Any
    next_location_url: str | None = None
    prev_location_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    out: TextIO = field(default_factory=lambda: sys.stdout)
    rng: random.Random = field(default_factory=random.Random)

    def say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.out)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by the word that starts it."""
    return {
        "exit": Command("exit", "Exit the Pokedex", command_exit),
        "help": Command("help", "Displays a help message", command_help),
        "map": Command("map", "Get the next page of locations", command_mapf),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "explore": Command("explore <area-name>", "Explore a location", command_explore),
        "catch": Command(
            "catch <pokemon-name>", "Attempt to catch a pokemon", command_catch
        ),
        "inspect": Command(
            "inspect <pokemon-name>",
            "View details about a caught Pokemon",
            command_inspect,
        ),
        "pokedex": Command(
            "pokedex", "See all the pokemon you've caught", command_pokedex
        ),
    }


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and end the program."""
    cfg.say("Closing the Pokedex... Goodbye!\n")
    raise SystemExit(0)


def command_help(cfg: Config, *args: str) -> None:
    """Print the list of commands."""
    cfg.say("Welcome to the Pokedex!\nUsage: \n")
    for command in get_commands().values():
        cfg.say(f"{command.name}: {command.description}")
    cfg.say()


def _show_page(cfg: Config, page: ResourceList) -> None:
    cfg.next_location_url = page.next
    cfg.prev_location_url = page.previous
    for location in page.results:
        cfg.say(location.name)
    cfg.say()


def command_mapf(cfg: Config, *args: str) -> None:
    """Print the next page of location areas."""
    _show_page(cfg, cfg.client.list_location_areas(cfg.next_location_url))


def command_mapb(cfg: Config, *args: str) -> None:
    """Print the previous page of location areas."""
    if not cfg.prev_location_url:
        cfg.say("You're on the first page\n")
        return
    _show_page(cfg, cfg.client.list_location_areas(cfg.prev_location_url))


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon found in a location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    (name,) = args
    cfg.say(f"Exploring {name}...", end="")
    area = cfg.client.get_location_area(name)
    cfg.say("\nFound Pokemon:")
    for encounter in area.pokemon_encounters:
        cfg.say(f"- {encounter.pokemon.name}")
    cfg.say()


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball; a caught Pokemon goes into the Pokedex."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    (name,) = args
    pokemon = cfg.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name or name} has no base experience")
    score = cfg.rng.randrange(pokemon.base_experience)

    cfg.say(f"Throwing a Pokeball at {name}...")
    if score > CATCH_THRESHOLD:
        cfg.say(f"{pokemon.name} escaped!\n")
        return

    cfg.say(f"{pokemon.name} was caught!")
    cfg.say("You may now inspect it with the inspect command\n")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught Pokemon."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    (name,) = args
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")

    cfg.say(f"Name: {pokemon.name}")
    cfg.say(f"Height: {pokemon.height}")
    cfg.say(f"Weight: {pokemon.weight}")
    cfg.say("Stats:")
    for stat in pokemon.stats:
        cfg.say(f"  -{stat.stat.name}: {stat.base_stat}")
    cfg.say("Types:")
    for slot in pokemon.types:
        cfg.say(f"  - {slot.type.name}")
    cfg.say()


def command_pokedex(cfg: Config, *args: str) -> None:
    """List every Pokemon caught so far."""
    cfg.say("Your Pokedex:")
    for name in cfg.caught_pokemon:
        cfg.say(f" - {name}")
    cfg.say()