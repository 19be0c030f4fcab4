"""Deck grouping: deck mapping -> ordered piles -> type groups -> text blocks."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from ...config import DeckConfig
from ...data.models.card import UNKNOWN_TYPE, CardTable
from ...data.models.deck import Block, BlockRole, GroupedDeck, Pile, PileItem, TypeGroup
from ...utils.text import format_quantity, normalize

logger = logging.getLogger(__name__)

DEFAULT_PILE = "Main"


def _label_key(label: str) -> tuple[str, str]:
    return (label.casefold(), label)


def coerce_quantity(raw: Any) -> float | None:
    """Positive finite quantity, or None when the value should be dropped."""
    if isinstance(raw, bool):
        qty = float(raw)
    elif isinstance(raw, (int, float)):
        qty = float(raw)
    elif isinstance(raw, str):
        try:
            qty = float(raw.strip()) if raw.strip() else 0.0
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(qty) or qty <= 0:
        return None
    return qty


def entry_groups(info: Any) -> Mapping[str, Any]:
    """Pile -> raw quantity for one deck entry.

    ``{"group": {...}}`` is used as-is; otherwise the entry contributes its
    ``count`` (default 1) to the Main pile.
    """
    if isinstance(info, Mapping):
        group = info.get("group")
        if isinstance(group, Mapping):
            return group
        count = info.get("count")
        return {DEFAULT_PILE: 1 if count is None else count}
    return {DEFAULT_PILE: 1}


def group_deck(deck: Mapping[str, Any], table: CardTable, config: DeckConfig) -> GroupedDeck:
    """Resolve deck entries into piles, keeping first-seen pile order."""
    piles: dict[str, Pile] = {}

    for card_id_raw, info in deck.items():
        card = table.get(card_id_raw)
        if card is None:
            logger.debug("Deck references unknown card %s", card_id_raw)
            label = f"[Missing card: {card_id_raw}]"
            card_type = UNKNOWN_TYPE
        else:
            label = card.name
            card_type = card.display_type

        for pile_name_raw, qty_raw in entry_groups(info).items():
            pile_name = str(pile_name_raw)
            qty = coerce_quantity(qty_raw)
            if qty is None:
                logger.debug("Dropping quantity %r for %s in %s", qty_raw, label, pile_name)
                continue
            pile = piles.setdefault(pile_name, Pile(name=pile_name))
            pile.items.append(PileItem(quantity=qty, label=label, type=card_type))

    header = piles.get(config.header_pile) if config.header_pile else None
    footer = piles.get(config.footer_pile) if config.footer_pile else None
    return GroupedDeck(piles=piles, header=header, footer=footer, unique_count=len(deck))


def _type_rank(type_order: tuple[str, ...]) -> dict[str, int]:
    rank: dict[str, int] = {}
    for index, name in enumerate(type_order):
        rank.setdefault(normalize(name), index)
    return rank


def group_by_type(pile: Pile, type_order: tuple[str, ...] = ()) -> list[TypeGroup]:
    """Split a pile by type; configured types first, the rest alphabetically."""
    by_type: dict[str, list[PileItem]] = {}
    for item in pile.items:
        type_name = item.type.strip() or UNKNOWN_TYPE
        by_type.setdefault(type_name, []).append(item)

    rank = _type_rank(type_order)
    unlisted = len(rank)

    def sort_key(type_name: str) -> tuple[int, str, str]:
        return (rank.get(normalize(type_name), unlisted), *_label_key(type_name))

    return [
        TypeGroup(
            type_name=type_name,
            items=sorted(by_type[type_name], key=lambda i: _label_key(i.label)),
        )
        for type_name in sorted(by_type, key=sort_key)
    ]


def _flat_block(pile: Pile, role: BlockRole) -> Block:
    items = sorted(pile.items, key=lambda i: _label_key(i.label))
    return Block(
        title=f"{pile.name} ({format_quantity(pile.total)})",
        lines=[item.line for item in items],
        role=role,
    )


def build_blocks(grouped: GroupedDeck, config: DeckConfig) -> list[Block]:
    """Header block, type blocks of every other pile, then footer block."""
    blocks: list[Block] = []

    if grouped.header is not None:
        blocks.append(_flat_block(grouped.header, "header"))

    for pile in grouped.middle_piles:
        for group in group_by_type(pile, config.type_order):
            blocks.append(
                Block(
                    title=f"{pile.name} — {group.type_name}",
                    lines=[item.line for item in group.items],
                )
            )

    if grouped.footer is not None:
        blocks.append(_flat_block(grouped.footer, "footer"))

    return blocks
