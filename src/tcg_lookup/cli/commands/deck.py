"""Deck rendering CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.columns import Columns
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tcg_lookup.cli.context import (
    CardsOption,
    ConfigOption,
    DataContext,
    IndexOption,
    JsonOption,
    output_json,
)
from tcg_lookup.cli.formatting import markdown_to_rich
from tcg_lookup.data.loader import load_deck
from tcg_lookup.exceptions import TCGError
from tcg_lookup.tools.deck import render_deck

console = Console()

deck_app = typer.Typer(help="Deck list commands")


@deck_app.command("show")
def show_deck_cmd(
    deck_file: Annotated[Path, typer.Argument(help="Deck JSON file (card id -> entry)")],
    card_files: CardsOption = None,
    index: IndexOption = None,
    config: ConfigOption = None,
    as_json: JsonOption = False,
) -> None:
    """Render a deck list as two balanced columns."""
    ctx = DataContext(card_files, index, config)
    code = deck_file.stem
    try:
        deck = load_deck(deck_file)
        layout = render_deck(deck, ctx.get_table(), ctx.config.deck_config())
    except TCGError as e:
        console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1) from e

    if layout is None:
        console.print(
            f"Deck [bold]{escape(code)}[/] was found, but it contained no entries I can display."
        )
        return

    if as_json:
        output_json({"code": code, **layout.model_dump()})
        return

    share_url = escape(ctx.config.deck_share_base + code)
    console.print(f"\n[bold]Deck {escape(code)}[/]  [dim]{share_url}[/dim]")
    console.print(
        Columns([
            Panel(markdown_to_rich(layout.left), expand=True),
            Panel(markdown_to_rich(layout.right), expand=True),
        ], equal=True, expand=True)
    )
    console.print(f"[dim]{layout.footer_text}[/dim]")
