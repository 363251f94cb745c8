"""Interactive pokedex shell: browse location areas, explore them and catch pokemon."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from pokedex.api import LocationAreaPage, PokeAPI, PokeAPIError, Pokemon
from pokedex.cache import Cache

PROMPT = "Pokedex > "
CACHE_INTERVAL = 5 * 60

MAX_CHANCE = 100
MIN_CHANCE = 15
ESTIMATED_MAX_BASE_EXPERIENCE = 350


class CommandError(Exception):
    """Raised when a command is used wrongly; the message is shown to the user."""


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    callback: Callable[..., None]


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into whitespace-separated words."""
    return text.lower().split()


def catch_threshold(base_experience: int) -> float:
    """Catch threshold in percent: 100 for no experience, 15 at the estimated maximum."""
    return MAX_CHANCE - (
        base_experience / ESTIMATED_MAX_BASE_EXPERIENCE * (MAX_CHANCE - MIN_CHANCE)
    )


class Session:
    """State of one pokedex session and the commands that act on it."""

    def __init__(
        self,
        api: PokeAPI | None = None,
        cache: Cache | None = None,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.api = api if api is not None else PokeAPI()
        self.cache = cache if cache is not None else Cache(CACHE_INTERVAL)
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout
        self.next_url = ""
        self.previous_url = ""
        self.caught: dict[str, Pokemon] = {}
        self.commands: dict[str, Command] = {
            command.name: command
            for command in (
                Command("exit", "Exit the Pokedex", self.cmd_exit),
                Command("help", "Displays a help message", self.cmd_help),
                Command(
                    "map",
                    "Display the names of 20 location areas in the Pokemon world",
                    self.cmd_map,
                ),
                Command(
                    "mapb",
                    "Display the names of the previous 20 location areas in the Pokemon world",
                    self.cmd_mapb,
                ),
                Command(
                    "explore", "Explore a location area to find Pokemon", self.cmd_explore
                ),
                Command("catch", "Attempt to catch a Pokemon by name", self.cmd_catch),
                Command("inspect", "Inspect Pokemon details", self.cmd_inspect),
                Command(
                    "pokedex", "Display all Pokemon found in Pokedex", self.cmd_pokedex
                ),
            )
        }

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.out)

    def _warn_no_args(self, name: str, args: tuple[str, ...]) -> None:
        if args:
            self._say(
                f"Warning: The {name} command takes no arguments, ignoring extra input"
            )

    def dispatch(self, line: str) -> None:
        """Run the command on one input line, reporting any failure to the user."""
        words = clean_input(line)
        if not words:
            return
        name, *args = words
        command = self.commands.get(name)
        if command is None:
            self._say("Unknown command")
            return
        try:
            command.callback(*args)
        except (CommandError, PokeAPIError) as exc:
            self._say(str(exc))

    def run(self, stdin: Iterable[str]) -> None:
        """Prompt for and run commands until ``stdin`` is exhausted."""
        lines = iter(stdin)
        while True:
            self._say(PROMPT, end="")
            self.out.flush()
            line = next(lines, None)
            if line is None:
                break
            self.dispatch(line)

    def cmd_exit(self, *args: str) -> None:
        self._warn_no_args("exit", args)
        self._say("Closing the Pokedex... Goodbye!")
        raise SystemExit(0)

    def cmd_help(self, *args: str) -> None:
        self._warn_no_args("help", args)
        self._say("Welcome to the Pokedex!")
        self._say("Usage:\n")
        for name in sorted(self.commands):
            self._say(f"{name}: {self.commands[name].description}")

    def _show_page(self, url: str | None) -> None:
        page = self.cache.get(url) if url else None
        if isinstance(page, LocationAreaPage):
            self._say("Using cached data...")
        else:
            page = self.api.location_areas(url)
        self.next_url = page.next
        self.previous_url = page.previous
        for name in page.names:
            self._say(name)

    def cmd_map(self, *args: str) -> None:
        self._warn_no_args("map", args)
        self._show_page(self.next_url or f"{self.api.base_url}/location-area")

    def cmd_mapb(self, *args: str) -> None:
        self._warn_no_args("mapb", args)
        if not self.previous_url:
            self._say("you're on the first page.")
            return
        self._show_page(self.previous_url)

    def cmd_explore(self, *args: str) -> None:
        if len(args) != 1:
            raise CommandError("you must provide a location area name")
        location = args[0]
        self._say(f"Exploring {location}...")
        names = self.cache.get(location)
        if names is None:
            self._say("Fetching data from PokeAPI...")
            try:
                names = self.api.location_pokemon(location)
            except PokeAPIError as exc:
                raise CommandError(f"failed to explore {location}: {exc}") from exc
            self.cache.add(location, list(names))
        self._say("Found Pokemon:")
        for name in names:
            self._say(f" - {name}")

    def cmd_catch(self, *args: str) -> None:
        if len(args) != 1:
            raise CommandError("please specify the name of the Pokemon to catch")
        name = args[0]
        self._say(f"Throwing a Pokeball at {name}...")
        pokemon = self.api.pokemon(name)
        roll = self.rng.randrange(100)
        if roll > int(catch_threshold(pokemon.base_experience)):
            self._say(f"{name} escaped!")
        else:
            self._say(f"{name} was caught!")
            self.caught[name] = pokemon

    def cmd_inspect(self, *args: str) -> None:
        if len(args) != 1:
            raise CommandError("please specify the name of the Pokemon to inspect")
        name = args[0]
        pokemon = self.caught.get(name)
        if pokemon is None:
            self._say(f"You have not caught the Pokemon {name}.")
            return
        self._say(f"Name: {pokemon.name}")
        self._say(f"Height: {pokemon.height}")
        self._say(f"Weight: {pokemon.weight}")
        self._say("Stat:")
        for stat in pokemon.stats:
            self._say(f"  - {stat.name}: {stat.base_stat}")
        self._say("Types:")
        for type_name in pokemon.types:
            self._say(f"  - {type_name}")

    def cmd_pokedex(self, *args: str) -> None:
        if not self.caught:
            self._say("You have not caught any Pokemon yet")
            return
        self._say("Your Pokedex:")
        for pokemon in self.caught.values():
            self._say(f" - {pokemon.name}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive pokedex on standard input."""
    with Cache(CACHE_INTERVAL) as cache:
        session = Session(cache=cache)
        try:
            session.run(sys.stdin)
        except OSError as exc:
            print(f"Error reading input: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())