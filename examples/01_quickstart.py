#!/usr/bin/env python3
"""Example: Quickstart — textpager

Page a list of players, print page 2 to the terminal, and show the
chat-component JSON a game client would receive for the same page.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install textpager
"""
from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

import textpager
from textpager.render import ConsoleSink, JsonRenderer, RichRenderer
from textpager.text import ClickAction, Colour, Fragment, Style, concat, literal


@dataclass(frozen=True)
class Player:
    name: str
    score: int


def player_line(player: Player) -> Fragment:
    name = literal(
        player.name,
        Style(
            colour=Colour.COMMAND,
            hover=literal(f"Show {player.name}'s profile", Colour.INFO),
            click=ClickAction(f"/profile {player.name}"),
        ),
    )
    return concat(name, literal(f" - {player.score} points", Colour.INFO))


def main() -> None:
    players = [Player(f"player{n:02d}", 1000 - 17 * n) for n in range(1, 24)]
    pager = textpager.paginate(
        players,
        player_line,
        command="/scores",
        header_text="High Scores",
        page_size=8,
    )
    print(f"textpager version: {textpager.__version__}")
    print(f"{len(players)} players over {pager.total_pages} pages\n")

    console = Console()
    pager.send_page(2, ConsoleSink(console, RichRenderer()))

    print("\nSame page as chat-component JSON (truncated):")
    print(JsonRenderer().render(pager.render_page(2))[:400])

    print("\nAsking for a page that does not exist:")
    pager.send_page(9, ConsoleSink(console, RichRenderer()))


if __name__ == "__main__":
    main()
