"""Data models for cards, decks and lookup results."""

from .card import UNKNOWN_SET, UNKNOWN_TYPE, Card, CardTable
from .deck import Block, BlockRole, GroupedDeck, Pile, PileItem, TypeGroup
from .responses import CardLookupResult, DeckLayout, FuzzyMatch, LookupMode

__all__ = [
    "UNKNOWN_SET",
    "UNKNOWN_TYPE",
    "Block",
    "BlockRole",
    "Card",
    "CardLookupResult",
    "CardTable",
    "DeckLayout",
    "FuzzyMatch",
    "GroupedDeck",
    "LookupMode",
    "Pile",
    "PileItem",
    "TypeGroup",
]
