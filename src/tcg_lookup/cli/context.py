"""Data context for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from tcg_lookup.config import BotConfig, get_settings, load_bot_config
from tcg_lookup.data.loader import load_card_table, load_set_index
from tcg_lookup.data.models.card import CardTable
from tcg_lookup.exceptions import ValidationError

CardsOption = Annotated[
    list[Path] | None,
    typer.Option("--cards", help="Card set JSON file (repeatable)"),
]
IndexOption = Annotated[
    Path | None,
    typer.Option("--index", help="Set index JSON ({game: [set files]})"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Bot configuration JSON"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output JSON")]


class DataContext:
    """Lazy loader for the bot configuration and card table."""

    def __init__(
        self,
        cards: list[Path] | None = None,
        index: Path | None = None,
        config_path: Path | None = None,
    ) -> None:
        self._cards = cards or []
        self._index = index
        self._config_path = config_path
        self._config: BotConfig | None = None
        self._table: CardTable | None = None

    @property
    def config(self) -> BotConfig:
        """Bot configuration; the default config file is optional."""
        if self._config is None:
            if self._config_path is not None:
                self._config = load_bot_config(self._config_path)
            else:
                default_path = get_settings().config_file
                self._config = load_bot_config(default_path) if default_path.exists() else BotConfig()
        return self._config

    def get_table(self) -> CardTable:
        """Card table, loading set files on first use."""
        if self._table is None:
            paths = list(self._cards)
            if self._index is not None:
                paths.extend(load_set_index(self._index, self.config.game))
            if not paths:
                raise ValidationError("Provide card data with --cards or --index")
            self._table = load_card_table(paths, self.config.game)
        if not len(self._table):
            raise ValidationError("Card database not ready.")
        return self._table


def output_json(data: Any) -> None:
    """Output data as JSON (plain text, no Rich formatting)."""
    if hasattr(data, "model_dump"):
        data = data.model_dump()
    # Use regular print, not rprint, to avoid ANSI codes in JSON output
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
