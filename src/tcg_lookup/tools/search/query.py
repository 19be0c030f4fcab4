"""Pipe-delimited card query language.

A query is one or more predicates separated by ``|``; every predicate must
hold (there is no OR). Each predicate may start with ``!`` to negate it and is
either a comparison or a bare name term::

    type:spell | atk>=1800 | !name:dragon | magician

Comparison operators are ``:``/``=`` (contains, on normalized text) and the
numeric ``<``, ``>``, ``<=``, ``>=``. Note that ``=`` is a substring test, not
equality: ``type=spell`` also matches "Quick-Play Spell".
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from ...data.models.card import Card
from ...utils.text import compact_key, normalize, stringify
from .aliases import AliasResolver

Operator = Literal["=", "<", ">", "<=", ">="]

COMPARISON_PATTERN = re.compile(r"^([^:<>=]+)\s*(>=|<=|>|<|:|=)\s*(.+)$", re.DOTALL)


@dataclass(frozen=True)
class Predicate:
    """One clause of a query."""

    negated: bool
    # Comparison clauses carry prop/operator/value; bare terms only a term.
    prop: str | None = None
    operator: Operator | None = None
    value: str = ""
    raw_value: str = ""
    term: str = ""
    term_key: str = ""

    @property
    def is_comparison(self) -> bool:
        return self.prop is not None

    def matches(self, card: Card) -> bool:
        """Whether ``card`` passes this predicate, negation included."""
        if self.is_comparison:
            assert self.prop is not None
            # No such field: the card fails, negated or not.
            if not card.has_field(self.prop):
                return False
            raw = card.field_value(self.prop)
            if self.operator == "=":
                is_match = self.value in normalize(raw)
            else:
                is_match = compare_numeric(raw, self.operator, self.raw_value)
        else:
            is_match = self.term in normalize(card.name) or self.term_key in card.name_key
        return not is_match if self.negated else is_match


def to_number(value: Any) -> float | None:
    """Coerce a raw value to float, None if it is not numeric."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    text = stringify(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def compare_numeric(value: Any, operator: Operator | None, target: Any) -> bool:
    """Numeric comparison; False whenever either side is not a number."""
    num = to_number(value)
    tgt = to_number(target)
    if num is None or tgt is None:
        return False
    if operator == ">":
        return num > tgt
    if operator == "<":
        return num < tgt
    if operator == ">=":
        return num >= tgt
    if operator == "<=":
        return num <= tgt
    if operator == "=":
        return num == tgt
    return False


def parse_predicate(part: str, resolver: AliasResolver | None = None) -> Predicate:
    """Parse a single trimmed, non-empty query clause."""
    negated = part.startswith("!")
    clean = part[1:] if negated else part

    match = COMPARISON_PATTERN.match(clean)
    if match:
        prop_raw, operator_raw, value_raw = match.groups()
        prop = normalize(prop_raw)
        if resolver is not None:
            prop = resolver.resolve(prop)
        operator: Operator = "=" if operator_raw == ":" else operator_raw  # type: ignore[assignment]
        return Predicate(
            negated=negated,
            prop=prop,
            operator=operator,
            value=normalize(value_raw),
            raw_value=value_raw.strip(),
        )

    return Predicate(negated=negated, term=normalize(clean), term_key=compact_key(clean))


def parse_query(raw_query: str, resolver: AliasResolver | None = None) -> list[Predicate]:
    """Split a query on ``|`` and parse every non-blank clause."""
    parts = [p.strip() for p in raw_query.split("|")]
    return [parse_predicate(p, resolver) for p in parts if p]


def is_predicate_expression(raw_query: str) -> bool:
    """True when the query is more than a single bare, non-negated name."""
    predicates = parse_query(raw_query)
    if len(predicates) != 1:
        return True
    only = predicates[0]
    return only.negated or only.is_comparison


def advanced_search(
    cards: Iterable[Card],
    raw_query: str,
    resolver: AliasResolver | None = None,
) -> list[Card]:
    """Filter ``cards`` by every predicate in turn, keeping their order."""
    results = list(cards)
    for predicate in parse_query(raw_query, resolver):
        results = [card for card in results if predicate.matches(card)]
    return results
