"""Card-related models."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...utils.text import compact_key, normalize, stringify

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "Unknown Type"
UNKNOWN_SET = "Unknown Set"


class Card(BaseModel):
    """A card record from a set file.

    The full record is kept in ``properties`` so queries can reach any field
    the set file carries, not just the ones modelled here.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str
    name_key: str = ""
    properties: dict[str, Any] = Field(default_factory=dict)
    # normalized field name -> first original key with that normalized name
    field_index: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Card:
        """Build a card from a raw JSON record."""
        name = stringify(record.get("name"))
        raw_id = record.get("id")
        field_index: dict[str, str] = {}
        for key in record:
            field_index.setdefault(normalize(key), key)
        return cls(
            id=stringify(raw_id) or None,
            name=name,
            name_key=compact_key(name),
            properties=dict(record),
            field_index=field_index,
        )

    def _first(self, *keys: str) -> Any:
        for key in keys:
            value = self.properties.get(key)
            if value:
                return value
        return None

    @property
    def type(self) -> str | None:
        """Type line (``Type`` wins over ``type``), None when absent or blank."""
        value = stringify(self._first("Type", "type")).strip()
        return value or None

    @property
    def display_type(self) -> str:
        return self.type or UNKNOWN_TYPE

    @property
    def text(self) -> str:
        return stringify(self._first("Text", "text"))

    @property
    def image(self) -> str | None:
        value = self._first("image")
        return stringify(value) if value else None

    @property
    def set_name(self) -> str:
        return stringify(self._first("setName", "Set", "set")) or UNKNOWN_SET

    def has_field(self, prop: str) -> bool:
        """Whether the record has a field whose normalized name is ``prop``."""
        return prop in self.field_index

    def field_value(self, prop: str, default: Any = None) -> Any:
        """Raw value of the field whose normalized name is ``prop``."""
        key = self.field_index.get(prop)
        if key is None:
            return default
        return self.properties[key]


@dataclass(frozen=True)
class CardTable:
    """Immutable snapshot of the loaded card database.

    Cards keep their load order. The id index is case-insensitive; when two
    records share an id the later one wins.
    """

    cards: tuple[Card, ...] = ()
    _by_id: dict[str, Card] = field(default_factory=dict, repr=False)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> CardTable:
        ordered = tuple(cards)
        by_id: dict[str, Card] = {}
        for card in ordered:
            if card.id:
                by_id[card.id.lower()] = card
        return cls(cards=ordered, _by_id=by_id)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> CardTable:
        """Build a table from raw records, skipping ones without a name."""
        cards: list[Card] = []
        skipped = 0
        for record in records:
            if not isinstance(record, Mapping) or not stringify(record.get("name")).strip():
                skipped += 1
                continue
            cards.append(Card.from_record(record))
        if skipped:
            logger.warning("Skipped %d card records without a name", skipped)
        return cls.from_cards(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    @property
    def id_count(self) -> int:
        return len(self._by_id)

    def get(self, card_id: Any) -> Card | None:
        """Look up a card by id, ignoring case."""
        return self._by_id.get(stringify(card_id).lower())

    def same_name(self, card: Card) -> list[Card]:
        """Every card sharing ``card``'s name key, in table order."""
        return [c for c in self.cards if c.name_key == card.name_key]
