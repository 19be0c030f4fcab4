"""Response models for lookup and rendering outputs."""

from typing import Literal

from pydantic import BaseModel, Field

from ...utils.text import format_quantity
from .card import Card

LookupMode = Literal["search", "name"]


class FuzzyMatch(BaseModel):
    """Result of an exact-then-fuzzy name lookup."""

    matches: list[Card] = Field(default_factory=list)
    fuzzy: bool = False
    suggestion: str | None = None


class CardLookupResult(BaseModel):
    """Result of a chat card query."""

    query: str
    mode: LookupMode = "search"
    cards: list[Card] = Field(default_factory=list)
    fuzzy: bool = False
    suggestion: str | None = None

    @property
    def count(self) -> int:
        return len(self.cards)


class DeckLayout(BaseModel):
    """Two rendered deck columns plus aggregate counts."""

    left: str
    right: str
    unique_count: int
    total_copies: float

    @property
    def footer_text(self) -> str:
        return f"Cards: {self.unique_count} • Copies: {format_quantity(self.total_copies)}"
