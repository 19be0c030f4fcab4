"""Text helpers for console output."""

from __future__ import annotations

import re

from rich.markup import escape

_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)", re.DOTALL)


def markdown_to_rich(text: str) -> str:
    """Turn the chat markdown used in replies (**bold**, *italic*) into Rich markup."""
    result = escape(text)
    result = _BOLD.sub(r"[bold]\1[/bold]", result)
    result = _ITALIC.sub(r"[italic]\1[/italic]", result)
    return result


def strip_quotes(s: str) -> str:
    """Strip surrounding quotes from a string."""
    s = s.strip()
    if (s.startswith('"') and s.endswith('"')) or (s.startswith("'") and s.endswith("'")):
        return s[1:-1]
    return s
