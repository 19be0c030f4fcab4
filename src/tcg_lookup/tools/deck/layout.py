"""Balanced two-column deck layout.

Blocks are split between a left and a right column so that the columns carry
about the same number of lines. A header block (always first) stays on the
left and a footer block (always last) stays on the right; every other block
keeps its relative order inside whichever column it lands in.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ...config import DeckConfig
from ...data.models.card import CardTable
from ...data.models.deck import Block
from ...data.models.responses import DeckLayout
from .grouping import build_blocks, group_deck

logger = logging.getLogger(__name__)

# Embed field value limit
COLUMN_CAPACITY = 1024
ELLIPSIS = "…"
EMPTY_COLUMN = "—"


def subset_sums(weights: Sequence[int], limit: int) -> dict[int, int | None]:
    """0/1 subset-sum reachability over sums ``0..limit``.

    Maps every reachable sum to the index of the weight that first reached it.
    Sum 0 maps to None. Each weight is used at most once because a round only
    extends sums that were reachable before it started.
    """
    table: dict[int, int | None] = {0: None}
    for index, weight in enumerate(weights):
        for s in sorted(table, reverse=True):
            t = s + weight
            if t <= limit and t not in table:
                table[t] = index
    return table


def reconstruct(table: Mapping[int, int | None], weights: Sequence[int], total: int) -> set[int]:
    """Indices of the weights that add up to ``total``, following the table back to 0."""
    chosen: set[int] = set()
    s = total
    while s:
        index = table[s]
        assert index is not None
        chosen.add(index)
        s -= weights[index]
    return chosen


def _best_sum(sums: Sequence[int], target: int, fixed_left: int, total: int) -> int:
    # Largest sum not above the target, unless a larger one balances strictly better
    best = max(s for s in sums if s <= target)
    imbalance = abs(total - 2 * (fixed_left + best))
    for s in sorted(s for s in sums if s > target):
        if abs(total - 2 * (fixed_left + s)) < imbalance:
            best = s
            imbalance = abs(total - 2 * (fixed_left + s))
    return best


def partition_blocks(blocks: Sequence[Block]) -> tuple[list[Block], list[Block]]:
    """Assign blocks to the left and right columns."""
    if not blocks:
        return [], []

    header = blocks[0] if blocks[0].role == "header" else None
    footer = blocks[-1] if blocks[-1].role == "footer" else None
    start = 1 if header else 0
    end = len(blocks) - 1 if footer else len(blocks)
    middle = list(blocks[start:end])

    fixed_left = header.weight if header else 0
    fixed_right = footer.weight if footer else 0
    weights = [block.weight for block in middle]
    middle_sum = sum(weights)
    total = fixed_left + fixed_right + middle_sum

    target = min(max(0, total // 2 - fixed_left), middle_sum)
    table = subset_sums(weights, middle_sum)
    best = _best_sum(list(table), target, fixed_left, total)
    chosen = reconstruct(table, weights, best)

    left = [header] if header else []
    right: list[Block] = []
    for index, block in enumerate(middle):
        (left if index in chosen else right).append(block)
    if footer:
        right.append(footer)

    logger.debug(
        "Column split: left=%d right=%d lines",
        fixed_left + best,
        total - fixed_left - best,
    )
    return left, right


def render_column(blocks: Sequence[Block]) -> str:
    """Concatenate blocks, cap at the column capacity and trim."""
    text = "".join(block.text for block in blocks)
    if len(text) > COLUMN_CAPACITY:
        text = text[: COLUMN_CAPACITY - 3] + ELLIPSIS
    return text.strip() or EMPTY_COLUMN


def split_blocks(blocks: Sequence[Block]) -> tuple[str, str]:
    """Render blocks into ``(left, right)`` column strings."""
    left, right = partition_blocks(blocks)
    return render_column(left), render_column(right)


def render_deck(
    deck: Mapping[str, Any] | None,
    table: CardTable,
    config: DeckConfig,
) -> DeckLayout | None:
    """Render a deck mapping into two balanced columns.

    Returns None when the deck is empty or nothing survives quantity
    filtering.
    """
    if not deck:
        return None

    grouped = group_deck(deck, table, config)
    blocks = build_blocks(grouped, config)
    if not blocks:
        return None

    left, right = split_blocks(blocks)
    return DeckLayout(
        left=left,
        right=right,
        unique_count=grouped.unique_count,
        total_copies=grouped.total_copies,
    )
