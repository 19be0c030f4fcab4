"""Pytest fixtures for TCG lookup tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tcg_lookup.config import DeckConfig
from tcg_lookup.data.models.card import Card, CardTable
from tcg_lookup.data.models.deck import Block

# =============================================================================
# Test Data
# =============================================================================


def make_card_records() -> list[dict[str, Any]]:
    """A small card table mixing spells, monsters, traps and a reprint."""
    return [
        {"id": "c1", "name": "Alpha", "type": "Spell", "text": "Draw a card.",
         "image": "alpha.png", "setName": "Core Set"},
        {"id": "c2", "name": "Beta", "type": "Monster", "text": "A beta tester.",
         "image": "beta.png", "setName": "Core Set", "ATK": 1200, "Level": "3"},
        {"id": "DM-01", "name": "Dark Magician", "Type": "Monster", "Text": "The ultimate wizard.",
         "image": "Dark Magician.png", "Set": "Legend of Blue Eyes", "ATK": 2500, "Level": 7},
        {"id": "dmg-01", "name": "Dark Magician Girl", "type": "Monster",
         "image": "dmg.png", "set": "Magician's Force", "ATK": "2000", "Level": "6"},
        {"id": "kuri", "name": "Kuriboh", "type": "Monster", "image": "kuriboh.png", "ATK": "?"},
        {"id": "mf-01", "name": "Mirror Force", "type": "Trap", "image": "mf.png"},
        {"id": "c1-re", "name": "Alpha", "type": "Spell", "text": "Draw a card.",
         "image": "alpha-reprint.png", "setName": "Reprint Pack"},
    ]


def make_small_records() -> list[dict[str, Any]]:
    return [
        {"id": "c1", "name": "Alpha", "type": "Spell"},
        {"id": "c2", "name": "Beta", "type": "Monster"},
    ]


def make_block(title: str, lines: int, role: str = "middle") -> Block:
    """A block whose weight is ``lines + 1`` (title line included)."""
    return Block(
        title=title,
        lines=[f"1x {title} card {i}" for i in range(lines)],
        role=role,  # type: ignore[arg-type]
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def card_table() -> CardTable:
    """Card table built from the sample records."""
    return CardTable.from_records(make_card_records())


@pytest.fixture
def small_table() -> CardTable:
    """Two-card table (Alpha spell, Beta monster)."""
    return CardTable.from_records(make_small_records())


@pytest.fixture
def small_cards(small_table: CardTable) -> list[Card]:
    return list(small_table)


@pytest.fixture
def deck_config() -> DeckConfig:
    """No header/footer pinning and no explicit type order."""
    return DeckConfig()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory with a set index, two set files, a deck and a bot config."""
    records = make_card_records()
    (tmp_path / "set1.json").write_text(json.dumps(records[:4]), encoding="utf-8")
    (tmp_path / "set2.json").write_text(json.dumps(records[4:]), encoding="utf-8")
    (tmp_path / "setsIndex.json").write_text(
        json.dumps({"ygo": ["set1.json", "set2.json"], "other": []}), encoding="utf-8"
    )
    (tmp_path / "ABC123.json").write_text(
        json.dumps({
            "c1": {"group": {"Main": 3}},
            "c2": {"count": 1},
            "mf-01": {"group": {"Side": 2}},
        }),
        encoding="utf-8",
    )
    (tmp_path / "config.json").write_text(
        json.dumps({
            "game": "ygo",
            "footerPile": "Side",
            "typeOrder": ["Monster", "Spell", "Trap"],
            "advancedSearchAliases": {"ATK": ["attack", "atk points"]},
            "noMatchMessages": ["The shadows hold no such card."],
            "imageBaseUrl": "https://img.test/images",
        }),
        encoding="utf-8",
    )
    return tmp_path
