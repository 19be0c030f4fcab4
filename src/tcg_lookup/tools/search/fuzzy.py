"""Exact-then-fuzzy card name matching."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ...data.models.card import Card
from ...data.models.responses import FuzzyMatch
from ...utils.text import compact_key

logger = logging.getLogger(__name__)

# Largest edit distance still offered as a "did you mean" match
FUZZY_MAX_DISTANCE = 2


def levenshtein(a: str, b: str) -> int:
    """Edit distance with unit insertion, deletion and substitution costs.

    Keeps only two rows of the DP table, swapping them per character of ``b``.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(a) + 1))
    current = [0] * (len(a) + 1)
    for j, cb in enumerate(b, start=1):
        current[0] = j
        for i, ca in enumerate(a, start=1):
            cost = 0 if ca == cb else 1
            current[i] = min(
                current[i - 1] + 1,
                previous[i] + 1,
                previous[i - 1] + cost,
            )
        previous, current = current, previous
    return previous[len(a)]


def strict_name_search(cards: Iterable[Card], query: str) -> list[Card]:
    """Cards whose name key equals the query's name key."""
    key = compact_key(query)
    return [card for card in cards if card.name_key == key]


def match_card_name(cards: Iterable[Card], query: str) -> FuzzyMatch:
    """Look a card up by name, falling back to the closest name within 2 edits.

    All printings sharing the best card's name key are returned. Ties on
    distance go to the first card in table order.
    """
    pool = list(cards)
    key = compact_key(query)

    exact = [card for card in pool if card.name_key == key]
    if exact:
        return FuzzyMatch(matches=exact, fuzzy=False)

    best: Card | None = None
    best_score: int | None = None
    for card in pool:
        dist = levenshtein(key, card.name_key)
        if best_score is None or dist < best_score:
            best_score = dist
            best = card

    if best is not None and best_score is not None and best_score <= FUZZY_MAX_DISTANCE:
        logger.debug("Fuzzy match for %r: %r (distance %d)", query, best.name, best_score)
        return FuzzyMatch(
            matches=[card for card in pool if card.name_key == best.name_key],
            fuzzy=True,
            suggestion=best.name,
        )

    return FuzzyMatch()
