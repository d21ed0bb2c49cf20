"""The interactive prompt and the program's entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .client import ApiError, Client
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands from ``stream`` until it ends, running each one."""
    source = sys.stdin if stream is None else stream
    commands = get_commands()
    while True:
        cfg.say(PROMPT, end="")
        cfg.out.flush()
        line = source.readline()
        if not line:
            return

        words = clean_input(line)
        if not words:
            continue

        name, *args = words
        command = commands.get(name)
        if command is None:
            cfg.say("Unknown command\n")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, ApiError) as exc:
            cfg.say(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Pokedex prompt on standard input."""
    parser = argparse.ArgumentParser(
        prog="pokedexcli", description="An interactive Pokedex."
    )
    parser.parse_args(argv)
    with Client(timeout=5.0, interval=300.0) as client:
        start_repl(Config(client=client))
    return 0