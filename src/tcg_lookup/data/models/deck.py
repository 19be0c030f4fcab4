"""Deck-related models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from ...utils.text import format_quantity

BlockRole = Literal["header", "middle", "footer"]


class PileItem(BaseModel):
    """One card line inside a pile."""

    quantity: float = Field(gt=0)
    label: str
    type: str

    @property
    def line(self) -> str:
        return f"{format_quantity(self.quantity)}x {self.label}"


class Pile(BaseModel):
    """A named grouping of deck cards (Main, Extra, Side, ...)."""

    name: str
    items: list[PileItem] = Field(default_factory=list)

    @property
    def total(self) -> float:
        """Total copies in the pile."""
        return sum(item.quantity for item in self.items)


class TypeGroup(BaseModel):
    """Cards of one type within a pile."""

    type_name: str
    items: list[PileItem] = Field(default_factory=list)


class Block(BaseModel):
    """A rendered title plus card lines; the unit moved between columns."""

    title: str
    lines: list[str] = Field(default_factory=list)
    role: BlockRole = "middle"

    @property
    def text(self) -> str:
        body = "".join(f"{line}\n" for line in self.lines)
        return f"**{self.title}**\n{body}\n"

    @property
    def weight(self) -> int:
        """Non-empty line count, never below 1."""
        return max(1, sum(1 for line in self.text.split("\n") if line.strip()))


class GroupedDeck(BaseModel):
    """A deck mapping resolved into ordered piles."""

    piles: dict[str, Pile] = Field(default_factory=dict)  # first-seen order
    header: Pile | None = None
    footer: Pile | None = None
    unique_count: int = 0

    @property
    def total_copies(self) -> float:
        return sum(pile.total for pile in self.piles.values())

    @property
    def middle_piles(self) -> list[Pile]:
        """Piles that are neither the pinned header nor the pinned footer."""
        pinned = {p.name for p in (self.header, self.footer) if p is not None}
        return [pile for name, pile in self.piles.items() if name not in pinned and pile.items]
