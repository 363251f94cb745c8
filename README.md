# pokedex

An interactive command-line Pokedex. Browse location areas of the Pokemon
world, explore them to see which Pokemon live there, try to catch them, and
inspect the ones you have caught. Data comes from the public PokeAPI.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
pokedex
```

You get a `Pokedex > ` prompt. Input is lower-cased and split on whitespace;
the first word is the command and the rest are its arguments. An unknown
command prints `Unknown command`. The shell ends at end of input or on `exit`.

| Command              | What it does                                                   |
|----------------------|----------------------------------------------------------------|
| `help`               | Show the list of commands                                      |
| `map`                | Show the next page of location areas                           |
| `mapb`               | Show the previous page of location areas                       |
| `explore <area>`     | List the Pokemon found in a location area                      |
| `catch <pokemon>`    | Throw a Pokeball; stronger Pokemon are harder to catch         |
| `inspect <pokemon>`  | Show height, weight, stats and types of a caught Pokemon       |
| `pokedex`            | List every Pokemon you have caught                             |
| `exit`               | Leave the Pokedex                                              |

`help`, `map`, `mapb` and `exit` take no arguments and print a warning if
given any. `explore`, `catch` and `inspect` take exactly one.

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Fetching data from PokeAPI...
Found Pokemon:
 - tentacool
 - tentacruel
 ...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Pokedex > pokedex
Your Pokedex:
 - tentacool
```

The results of `explore` are kept in an in-memory cache keyed by area name;
entries are dropped after five minutes, and exploring the same area again
within that time skips the request to PokeAPI.

Catching compares a roll from 0 to 99 with a threshold that falls linearly
from 100 at a base experience of 0 to 15 at a base experience of 350
(`pokedex.cli.catch_threshold`); the Pokemon escapes when the roll is above
the whole-number part of the threshold.

## Using it as a library

```python
import io

from pokedex.api import PokeAPI
from pokedex.cache import Cache
from pokedex.cli import Session, clean_input

# Expiring key/value cache with a background reaper thread.
with Cache(300) as cache:
    cache.add("key", b"value")
    print(cache.get("key"))        # b'value'; None once missing or expired

print(clean_input(" Pikachu, I choose you! "))  # ['pikachu,', 'i', 'choose', 'you!']

# HTTP client; failures raise pokedex.api.PokeAPIError.
api = PokeAPI()
page = api.location_areas()        # LocationAreaPage: count, next, previous, names
names = api.location_pokemon(page.names[0])
pikachu = api.pokemon("pikachu")   # Pokemon: name, base_experience, height, weight, stats, types

# Drive the shell programmatically.
out = io.StringIO()
session = Session(api=api, out=out)
session.dispatch("help")
print(out.getvalue())
```

`Session.run` reads lines from any iterable of strings, printing the prompt
before each one. Usage errors are raised as `pokedex.cli.CommandError` by the
`cmd_*` methods and reported as messages by `Session.dispatch`.

## Limitations

- Caught Pokemon live only in the running session; nothing is saved to disk.
- Pages shown by `map` and `mapb` are fetched from PokeAPI each time; only
  `explore` results are cached.

## Running the tests

```
pip install ".[test]"
pytest
```