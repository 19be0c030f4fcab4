"""Chat message parsing: which lookup does a message ask for?"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..exceptions import GameMismatchError, InvalidDeckCodeError

DECK_PATTERN = re.compile(r"\[deck:\s*(.+?)\]", re.IGNORECASE)
# Share links: https://www.tcgbuilder.net/?game=...&deck=CODE
DECK_QUERY_PARAM = re.compile(r"[?&]deck=([A-Za-z0-9_-]+)", re.IGNORECASE)
DECK_PATH = re.compile(r"/deck/([A-Za-z0-9_-]+)", re.IGNORECASE)
GAME_QUERY_PARAM = re.compile(r"[?&]game=([A-Za-z0-9_-]+)", re.IGNORECASE)
# [query] but not [[query]] and not a markdown link [text](url)
CARD_PATTERN = re.compile(r"(?<!\[)\[(.+?)\](?!\])(?!\()")


@dataclass(frozen=True)
class DeckRequest:
    code: str


@dataclass(frozen=True)
class CardQueryRequest:
    query: str


def extract_deck_code(raw: str) -> str:
    """Deck code from a bare code or a pasted share URL."""
    code = raw.strip()
    match = DECK_QUERY_PARAM.search(code)
    if match:
        code = match.group(1)
    match = DECK_PATH.search(code)
    if match:
        code = match.group(1)
    return code.strip()


def parse_message(content: str, game: str = "") -> DeckRequest | CardQueryRequest | None:
    """Parse a chat message into a deck or card lookup request.

    Raises:
        GameMismatchError: The deck link names a different game.
        InvalidDeckCodeError: A deck tag carries no code.
    """
    content = content.strip()

    deck_match = DECK_PATTERN.search(content)
    if deck_match:
        raw = deck_match.group(1)
        code = extract_deck_code(raw)

        game_match = GAME_QUERY_PARAM.search(raw)
        if game_match and game and game_match.group(1).lower() != game.lower():
            raise GameMismatchError(game_match.group(1), game)

        if not code:
            raise InvalidDeckCodeError(raw)
        return DeckRequest(code=code)

    card_match = CARD_PATTERN.search(content)
    if not card_match:
        return None
    query = card_match.group(1).strip()
    return CardQueryRequest(query=query) if query else None
