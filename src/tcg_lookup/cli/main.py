"""TCG CLI - card lookup and deck list rendering from local card data."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from tcg_lookup.cli.commands import card_app, deck_app
from tcg_lookup.cli.context import ConfigOption, DataContext, JsonOption, output_json
from tcg_lookup.config import get_settings
from tcg_lookup.exceptions import TCGError
from tcg_lookup.tools.requests import CardQueryRequest, DeckRequest, parse_message

console = Console()

# =============================================================================
# Main CLI app
# =============================================================================

cli = typer.Typer(
    name="tcg",
    help="TCG CLI - trading card lookup and deck list rendering.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

cli.add_typer(card_app, name="card")
cli.add_typer(deck_app, name="deck")


@cli.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (defaults to LOG_LEVEL or INFO)"),
    ] = None,
) -> None:
    """Configure logging for every command."""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )


# =============================================================================
# Top-level commands
# =============================================================================


@cli.command()
def parse(
    message: Annotated[str, typer.Argument(help="Chat message text")],
    config: ConfigOption = None,
    as_json: JsonOption = False,
) -> None:
    """Show which lookup a chat message asks for."""
    ctx = DataContext(config_path=config)
    try:
        request = parse_message(message, ctx.config.game)
    except TCGError as e:
        console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1) from e

    if isinstance(request, DeckRequest):
        data = {"kind": "deck", "code": request.code}
    elif isinstance(request, CardQueryRequest):
        data = {"kind": "card", "query": request.query}
    else:
        data = {"kind": "none"}

    if as_json:
        output_json(data)
    elif data["kind"] == "deck":
        console.print(f"Deck request: [bold]{escape(data['code'])}[/]")
    elif data["kind"] == "card":
        console.print(f"Card query: [bold]{escape(data['query'])}[/]")
    else:
        console.print("[dim]No lookup requested[/dim]")


if __name__ == "__main__":
    cli()
