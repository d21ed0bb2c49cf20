# pokedexcli

An interactive Pokedex for the terminal. It browses location areas from the
PokeAPI, shows which Pokemon live in each area, lets you try to catch them and
keeps the ones you caught in your Pokedex for the rest of the session.
API responses are cached in memory; when run as a command, cached entries are
dropped once they are five minutes old.

## Installing

```
pip install .
```

## Running

```
pokedexcli
```

`pokedexcli --help` prints a short usage line; the command takes no other
options.

You get a `Pokedex > ` prompt. Input is lower-cased and split on whitespace;
the first word is the command and the rest are its arguments. An unknown
command prints `Unknown command`; a command that is used wrongly or whose
request fails prints the error and the prompt comes back. The session ends on
`exit` or at the end of input.

| Command                  | What it does                               |
|--------------------------|--------------------------------------------|
| `help`                   | Displays a help message                    |
| `map`                    | Get the next page of location areas        |
| `mapb`                   | Get the previous page of location areas    |
| `explore <area-name>`    | List the Pokemon found in a location area  |
| `catch <pokemon-name>`   | Attempt to catch a Pokemon                 |
| `inspect <pokemon-name>` | View details about a caught Pokemon        |
| `pokedex`                | See all the Pokemon you've caught          |
| `exit`                   | Exit the Pokedex                           |

`mapb` before any earlier page is known prints `You're on the first page`.
After the last page, `map` starts again from the first one.

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...

Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
- tentacool
- magikarp
...

Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command

Pokedex > inspect magikarp
Name: magikarp
Height: 9
Weight: 100
Stats:
  -hp: 20
  ...
Types:
  - water
```

Catching draws a random number below the Pokemon's base experience; the
Pokemon is caught when that number is 40 or less, so the more base experience
a Pokemon has, the harder it is to catch.

## Using it as a library

The API client and cache can be used on their own:

```python
from pokedexcli.client import ApiError, Client

with Client(timeout=5.0, interval=300.0) as client:
    page = client.list_location_areas(None)
    for area in page.results:
        print(area.name)

    area = client.get_location_area("pastoria-city-area")
    for encounter in area.pokemon_encounters:
        print(encounter.pokemon.name)

    try:
        pokemon = client.get_pokemon("pikachu")
        print(pokemon.name, pokemon.base_experience)
    except ApiError as exc:
        print("failed:", exc, exc.status_code)
```

- `pokedexcli.client.Client` fetches pages and resources, raising `ApiError`
  on network failures, on status codes of 300 and above (with `status_code`
  set) and on responses that cannot be decoded. Successful raw responses are
  kept in its `cache`.
- `pokedexcli.models` holds the frozen dataclasses the client returns:
  `ResourceList`, `NamedResource`, `LocationArea`, `PokemonEncounter`,
  `Pokemon`, `PokemonStat` and `PokemonTypeSlot`, each with a `from_dict`
  class method.
- `pokedexcli.cache.Cache` is a thread-safe in-memory store of byte strings.
  A background thread drops entries once they are at least `interval` seconds
  old; `reap()` does the same on demand, `dump()` writes the entries out and
  `close()` (or leaving a `with` block) stops the thread.
- `pokedexcli.commands` holds the prompt's commands, `Config` (the session
  state) and `get_commands()`; `pokedexcli.repl` holds `clean_input`,
  `start_repl` and `main`.

## What it does not do

Nothing is saved to disk. The caught Pokemon and the response cache live only
for the session and are gone when the program ends.

## Running the tests

```
pip install ".[test]"
pytest
```