"""Local JSON loading of card sets, set indexes and decks."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..exceptions import DeckNotFoundError, ValidationError
from .models.card import CardTable

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def load_set_index(index_path: Path, game: str) -> list[Path]:
    """Set files listed for ``game`` in a set index (``{game: [files]}``).

    File names are resolved relative to the index's directory.
    """
    try:
        index = _read_json(index_path)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(f"Cannot read set index {index_path}: {e}") from e

    files = index.get(game) if isinstance(index, dict) else None
    if not files:
        logger.warning("Set index %s has no entry for game %s", index_path, game)
        return []
    return [index_path.parent / str(name) for name in files]


def load_card_files(paths: Iterable[Path]) -> list[dict[str, Any]]:
    """Merge the card arrays of several set files.

    Unreadable files and files that do not hold a JSON array are skipped.
    """
    merged: list[dict[str, Any]] = []
    for path in paths:
        try:
            cards = _read_json(path)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Skipping set file %s: %s", path, e)
            continue
        if not isinstance(cards, list):
            logger.warning("Skipping set file %s: expected a JSON array", path)
            continue
        merged.extend(c for c in cards if isinstance(c, dict))
    return merged


def load_card_table(paths: Iterable[Path], game: str = "") -> CardTable:
    """Load set files into a card table snapshot."""
    table = CardTable.from_records(load_card_files(paths))
    logger.info("[%s] Loaded %d cards. (id map: %d)", game, len(table), table.id_count)
    return table


def load_deck(path: Path) -> dict[str, Any]:
    """Read a deck mapping (card id -> entry)."""
    try:
        deck = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Deck load failed for %s: %s", path, e)
        raise DeckNotFoundError(path.stem) from e
    if not isinstance(deck, dict):
        raise DeckNotFoundError(path.stem)
    return deck
