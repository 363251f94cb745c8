import io

import pytest
import responses

from pokedex.api import PokeAPI
from pokedex.cache import Cache
from pokedex.cli import Session, catch_threshold, clean_input

BASE = "https://pokeapi.co/api/v2"


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def cache():
    with Cache(300) as c:
        yield c


def make_session(cache, roll=0):
    out = io.StringIO()
    session = Session(api=PokeAPI(), cache=cache, rng=_FixedRng(roll), out=out)
    return session, out


def lines(out):
    return out.getvalue().splitlines()


PIKACHU = {
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [
        {"base_stat": 35, "stat": {"name": "hp"}},
        {"base_stat": 55, "stat": {"name": "attack"}},
    ],
    "types": [{"type": {"name": "electric"}}],
}


@pytest.mark.parametrize(
    "text, expected",
    [
        (" hello world ", ["hello", "world"]),
        ("does this work?", ["does", "this", "work?"]),
        ("Pikachu, I choose you!", ["pikachu,", "i", "choose", "you!"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_catch_threshold_bounds():
    assert catch_threshold(0) == 100
    assert catch_threshold(350) == pytest.approx(15)


def test_help_lists_sorted_commands(cache):
    session, out = make_session(cache)
    session.dispatch("help")
    result = lines(out)
    assert result[0] == "Welcome to the Pokedex!"
    assert result[1] == "Usage:"
    names = [line.split(":")[0] for line in result[3:]]
    assert names == sorted(names)
    assert "catch: Attempt to catch a Pokemon by name" in result


def test_help_with_args_warns(cache):
    session, out = make_session(cache)
    session.dispatch("help me")
    assert lines(out)[0] == (
        "Warning: The help command takes no arguments, ignoring extra input"
    )


def test_unknown_and_empty_input(cache):
    session, out = make_session(cache)
    session.dispatch("   ")
    session.dispatch("fly")
    assert lines(out) == ["Unknown command"]


def test_exit_says_goodbye(cache):
    session, out = make_session(cache)
    with pytest.raises(SystemExit) as info:
        session.dispatch("EXIT")
    assert info.value.code == 0
    assert lines(out) == ["Closing the Pokedex... Goodbye!"]


def test_map_and_mapb_paging(rsps, cache):
    page2 = f"{BASE}/location-area?offset=20&limit=20"
    rsps.get(
        f"{BASE}/location-area",
        json={"count": 40, "next": page2, "previous": None,
              "results": [{"name": "canalave-city-area", "url": "u"}]},
    )
    rsps.get(
        page2,
        json={"count": 40, "next": None, "previous": f"{BASE}/location-area",
              "results": [{"name": "mt-coronet-1f", "url": "u"}]},
    )
    session, out = make_session(cache)
    session.dispatch("mapb")
    session.dispatch("map")
    assert session.next_url == page2
    session.dispatch("map")
    assert session.previous_url == f"{BASE}/location-area"
    session.dispatch("mapb")
    assert lines(out) == [
        "you're on the first page.",
        "canalave-city-area",
        "mt-coronet-1f",
        "canalave-city-area",
    ]


def test_explore_requires_name(cache):
    session, out = make_session(cache)
    session.dispatch("explore")
    assert lines(out) == ["you must provide a location area name"]


def test_explore_fetches_then_uses_cache(rsps, cache):
    rsps.get(
        f"{BASE}/location-area/pastoria-city-area",
        json={"pokemon_encounters": [
            {"pokemon": {"name": "tentacool"}},
            {"pokemon": {"name": "magikarp"}},
        ]},
    )
    session, out = make_session(cache)
    session.dispatch("explore pastoria-city-area")
    session.dispatch("explore pastoria-city-area")
    assert lines(out) == [
        "Exploring pastoria-city-area...",
        "Fetching data from PokeAPI...",
        "Found Pokemon:",
        " - tentacool",
        " - magikarp",
        "Exploring pastoria-city-area...",
        "Found Pokemon:",
        " - tentacool",
        " - magikarp",
    ]
    assert len(rsps.calls) == 1


def test_explore_reports_error_code(rsps, cache):
    rsps.get(f"{BASE}/location-area/nowhere", status=404)
    session, out = make_session(cache)
    session.dispatch("explore nowhere")
    assert lines(out)[-1] == (
        "failed to explore nowhere: PokeAPI returned error code: 404"
    )


def test_catch_inspect_and_pokedex(rsps, cache):
    rsps.get(f"{BASE}/pokemon/pikachu", json=PIKACHU)
    session, out = make_session(cache, roll=0)
    session.dispatch("catch pikachu")
    session.dispatch("inspect pikachu")
    session.dispatch("pokedex")
    assert lines(out) == [
        "Throwing a Pokeball at pikachu...",
        "pikachu was caught!",
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stat:",
        "  - hp: 35",
        "  - attack: 55",
        "Types:",
        "  - electric",
        "Your Pokedex:",
        " - pikachu",
    ]


def test_catch_escape(rsps, cache):
    rsps.get(f"{BASE}/pokemon/mewtwo", json={"name": "mewtwo", "base_experience": 350})
    session, out = make_session(cache, roll=99)
    session.dispatch("catch mewtwo")
    session.dispatch("pokedex")
    session.dispatch("inspect mewtwo")
    assert lines(out) == [
        "Throwing a Pokeball at mewtwo...",
        "mewtwo escaped!",
        "You have not caught any Pokemon yet",
        "You have not caught the Pokemon mewtwo.",
    ]
    assert session.caught == {}


def test_catch_requires_single_name(cache):
    session, out = make_session(cache)
    session.dispatch("catch a b")
    assert lines(out) == ["please specify the name of the Pokemon to catch"]


def test_run_until_eof(cache):
    session, out = make_session(cache)
    session.run(io.StringIO("fly\n\n"))
    assert out.getvalue() == "Pokedex > Unknown command\nPokedex > Pokedex > "


def test_run_stops_on_exit(cache):
    session, out = make_session(cache)
    with pytest.raises(SystemExit):
        session.run(io.StringIO("exit now\nhelp\n"))
    assert out.getvalue() == (
        "Pokedex > Warning: The exit command takes no arguments, ignoring extra input\n"
        "Closing the Pokedex... Goodbye!\n"
    )