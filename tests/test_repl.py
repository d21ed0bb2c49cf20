import io

import pytest

from pokedexcli.client import ApiError
from pokedexcli.commands import Config
from pokedexcli.models import Pokemon
from pokedexcli.repl import PROMPT, clean_input, main, start_repl


class FakeClient:
    def list_location_areas(self, page_url=None):
        raise ApiError("Response failed with status code: 500", 500)

    def get_location_area(self, name):
        raise ApiError("Response failed with status code: 404", 404)

    def get_pokemon(self, name):
        return Pokemon.from_dict({"name": name, "base_experience": 10})


class FixedRng:
    def randrange(self, n):
        return 0


def run(lines):
    cfg = Config(client=FakeClient(), out=io.StringIO(), rng=FixedRng())
    start_repl(cfg, io.StringIO(lines))
    return cfg


@pytest.mark.parametrize(
    "text, expected",
    [
        ("charmander bulbasaur pikachu", ["charmander", "bulbasaur", "pikachu"]),
        ("", []),
        ("GARCHOMP eevEE Vaporeon", ["garchomp", "eevee", "vaporeon"]),
        ("  GARCHOMP eevEE Vaporeon  ", ["garchomp", "eevee", "vaporeon"]),
        ("  GARCHOMP  eevEE   Vaporeon  ", ["garchomp", "eevee", "vaporeon"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_repl_ends_at_end_of_input():
    cfg = run("")
    assert cfg.out.getvalue() == PROMPT


def test_repl_skips_blank_lines():
    cfg = run("\n   \n")
    assert cfg.out.getvalue() == PROMPT * 3


def test_repl_unknown_command():
    cfg = run("fly\n")
    assert cfg.out.getvalue() == PROMPT + "Unknown command\n\n" + PROMPT


def test_repl_runs_help():
    cfg = run("HELP\n")
    assert "Welcome to the Pokedex!" in cfg.out.getvalue()


def test_repl_prints_command_errors():
    cfg = run("catch\ninspect mew\n")
    text = cfg.out.getvalue()
    assert "you must provide a pokemon name\n" in text
    assert "you have not caught that pokemon\n" in text


def test_repl_prints_api_errors():
    cfg = run("map\n")
    assert "Response failed with status code: 500\n" in cfg.out.getvalue()


def test_repl_passes_lowercased_arguments():
    cfg = run("catch Pikachu\npokedex\n")
    assert list(cfg.caught_pokemon) == ["pikachu"]
    assert " - pikachu\n" in cfg.out.getvalue()


def test_repl_exit_command():
    cfg = Config(client=FakeClient(), out=io.StringIO(), rng=FixedRng())
    with pytest.raises(SystemExit) as info:
        start_repl(cfg, io.StringIO("exit\nhelp\n"))
    assert info.value.code == 0
    assert "Welcome" not in cfg.out.getvalue()


def test_main_reads_standard_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pokedex\n"))
    assert main([]) == 0
    assert "Your Pokedex:" in capsys.readouterr().out