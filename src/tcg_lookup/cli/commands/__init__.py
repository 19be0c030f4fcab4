"""CLI command modules."""

from tcg_lookup.cli.commands.card import card_app
from tcg_lookup.cli.commands.deck import deck_app

__all__ = ["card_app", "deck_app"]
