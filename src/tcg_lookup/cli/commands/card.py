"""Card lookup CLI commands."""

from __future__ import annotations

import random
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tcg_lookup.cli.context import (
    CardsOption,
    ConfigOption,
    DataContext,
    IndexOption,
    JsonOption,
    output_json,
)
from tcg_lookup.cli.formatting import markdown_to_rich, strip_quotes
from tcg_lookup.config import get_settings
from tcg_lookup.data.models.card import Card
from tcg_lookup.data.models.responses import CardLookupResult
from tcg_lookup.exceptions import TCGError
from tcg_lookup.tools import cards
from tcg_lookup.tools.search import match_card_name

console = Console()

card_app = typer.Typer(help="Card lookup commands")


def _card_json(card: Card) -> dict[str, Any]:
    return {**card.properties, "set_name": card.set_name}


def _result_json(result: CardLookupResult) -> dict[str, Any]:
    return {
        "query": result.query,
        "mode": result.mode,
        "count": result.count,
        "fuzzy": result.fuzzy,
        "suggestion": result.suggestion,
        "cards": [_card_json(c) for c in result.cards],
    }


def _no_match_text(ctx: DataContext, query: str, mode: str) -> str:
    if mode == "search":
        return f"No results found for **{query}**."
    text = f"No card named **{query}** found."
    if ctx.config.no_match_messages:
        text += "\n" + random.choice(ctx.config.no_match_messages)
    return text


def _print_card(ctx: DataContext, card: Card, suggestion: str | None) -> None:
    config = ctx.config
    detail = cards.format_card_detail(
        card,
        ctx.get_table(),
        config.image_base_url,
        config.game,
        suggestion=suggestion,
    )
    _, _, body = detail.partition("\n\n")
    console.print(Panel(markdown_to_rich(body), title=f"[bold cyan]{escape(card.name)}[/]"))


def _print_results(ctx: DataContext, result: CardLookupResult) -> None:
    max_results = get_settings().max_results
    table = Table(title=f"Found {result.count} cards")
    table.add_column("Name", style="cyan")
    table.add_column("Set", style="yellow")
    table.add_column("Type", style="green")

    for card in result.cards[:max_results]:
        table.add_row(escape(card.name), escape(card.set_name), escape(card.display_type[:40]))

    console.print(table)
    if result.count > max_results:
        console.print(f"[dim]... and {result.count - max_results} more[/dim]")


@card_app.command("search")
def search_cards_cmd(
    query: Annotated[str, typer.Argument(help="Query, e.g. 'type:spell | !name:beta' or a card name")],
    card_files: CardsOption = None,
    index: IndexOption = None,
    config: ConfigOption = None,
    as_json: JsonOption = False,
) -> None:
    """Search cards with the pipe-delimited query language."""
    ctx = DataContext(card_files, index, config)
    try:
        result = cards.lookup_cards(ctx.get_table(), query, ctx.config.alias_resolver())
    except TCGError as e:
        console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1) from e

    if as_json:
        output_json(_result_json(result))
    elif not result.cards:
        console.print(markdown_to_rich(_no_match_text(ctx, query, result.mode)))
    elif result.count == 1 or result.mode == "name":
        _print_card(ctx, result.cards[0], result.suggestion if result.fuzzy else None)
    else:
        _print_results(ctx, result)


@card_app.command("get")
def get_card_cmd(
    name: Annotated[str, typer.Argument(help="Card name")],
    card_files: CardsOption = None,
    index: IndexOption = None,
    config: ConfigOption = None,
    as_json: JsonOption = False,
) -> None:
    """Look a card up by name, suggesting the closest name on a typo."""
    ctx = DataContext(card_files, index, config)
    name = strip_quotes(name)
    try:
        match = match_card_name(ctx.get_table(), name)
    except TCGError as e:
        console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1) from e

    if as_json:
        output_json({
            "query": name,
            "fuzzy": match.fuzzy,
            "suggestion": match.suggestion,
            "matches": [_card_json(c) for c in match.matches],
        })
    elif not match.matches:
        console.print(markdown_to_rich(_no_match_text(ctx, name, "name")))
    else:
        _print_card(ctx, match.matches[0], match.suggestion if match.fuzzy else None)
