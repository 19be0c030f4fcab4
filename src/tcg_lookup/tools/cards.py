"""Card lookup tools: query dispatch and reply text."""

from __future__ import annotations

import logging
from urllib.parse import quote

from ..data.models.card import Card, CardTable
from ..data.models.responses import CardLookupResult
from .search import AliasResolver, advanced_search, is_predicate_expression, match_card_name

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5

MORE_RESULTS_NOTICE = (
    "Additional results found. Please narrow your search or visit "
    "[TCGBuilder.net](https://tcgbuilder.net/) for more advanced searching."
)


def is_bare_name(query: str) -> bool:
    """A single, non-negated clause that is not a property comparison."""
    return bool(query.strip()) and not is_predicate_expression(query)


def lookup_cards(
    table: CardTable,
    query: str,
    resolver: AliasResolver | None = None,
) -> CardLookupResult:
    """Run a chat card query.

    The query language runs first. When it finds nothing and the query is a
    plain name, the exact-then-fuzzy name matcher gets a try.
    """
    cards = advanced_search(table, query, resolver)
    if cards or not is_bare_name(query):
        return CardLookupResult(query=query, mode="search", cards=cards)

    match = match_card_name(table, query)
    logger.debug("Name fallback for %r: %d matches", query, len(match.matches))
    return CardLookupResult(
        query=query,
        mode="name",
        cards=match.matches,
        fuzzy=match.fuzzy,
        suggestion=match.suggestion,
    )


def image_url_for(card: Card, base_url: str, game: str) -> str:
    """Public image URL of a card."""
    image = quote(card.image or "", safe="!*'()")
    return f"{base_url.rstrip('/')}/{game}/{image}"


def format_result_lines(
    result: CardLookupResult,
    base_url: str,
    game: str,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> str:
    """Bulleted result list, capped at ``max_results`` entries."""
    lines = [
        f"• [{card.name} ({card.set_name})](<{image_url_for(card, base_url, game)}>)"
        for card in result.cards[:max_results]
    ]
    text = "\n".join(lines)
    if result.count > max_results:
        text += f"\n\n{MORE_RESULTS_NOTICE}"
    return text


def format_card_detail(
    card: Card,
    table: CardTable,
    base_url: str,
    game: str,
    suggestion: str | None = None,
) -> str:
    """Single-card reply: type line, rules text, other printings and suggestion."""
    parts = [card.name, f"{card.display_type}\n\n*{card.text}*"]

    printings = table.same_name(card)
    if len(printings) > 1:
        links = ", ".join(
            f"[{c.set_name}](<{image_url_for(c, base_url, game)}>)" for c in printings[1:]
        )
        parts.append(f"*See also: {links}*")

    if suggestion:
        parts.append(f"Did you mean: {suggestion}?")

    return "\n\n".join(parts)
