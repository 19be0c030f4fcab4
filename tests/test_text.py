"""Tests for text normalization."""

from __future__ import annotations

import pytest

from tcg_lookup.utils.text import compact_key, format_quantity, normalize, stringify

SAMPLES = [
    "Dark-Magician_Girl",
    "  Blue-Eyes   White  Dragon!! ",
    "Pot of Greed",
    "__--__",
    "Ënchanted Ärmor",
    "",
    "Card #42 (Alt Art)",
]


class TestNormalize:
    """Tests for normalize."""

    def test_separators_and_case(self) -> None:
        """Underscores, hyphens and case don't matter."""
        assert normalize("Dark-Magician_Girl") == normalize("dark magician girl")
        assert normalize("Dark-Magician_Girl") == "dark magician girl"

    def test_strips_punctuation_and_collapses_whitespace(self) -> None:
        assert normalize("  Blue-Eyes   White  Dragon!! ") == "blue eyes white dragon"
        assert normalize("Card #42 (Alt Art)") == "card 42 alt art"

    def test_separator_runs_become_one_space(self) -> None:
        assert normalize("a--__b") == "a b"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text: str) -> None:
        """normalize(normalize(x)) == normalize(x)."""
        once = normalize(text)
        assert normalize(once) == once

    def test_non_string_values(self) -> None:
        """Raw JSON values print the way a record shows them."""
        assert normalize(None) == ""
        assert normalize(3.0) == "3"
        assert normalize(2.5) == "25"
        assert normalize(True) == "true"
        assert normalize(["Dark", "Light"]) == "darklight"


class TestCompactKey:
    """Tests for the space-free name key."""

    def test_spacing_insensitive(self) -> None:
        assert compact_key("Dark Magician") == compact_key("DarkMagician") == "darkmagician"

    def test_punctuation_insensitive(self) -> None:
        assert compact_key("Blue-Eyes White Dragon") == "blueeyeswhitedragon"


class TestHelpers:
    """Tests for stringify and format_quantity."""

    def test_stringify(self) -> None:
        assert stringify(None) == ""
        assert stringify(False) == "false"
        assert stringify(7.0) == "7"
        assert stringify(["a", 1]) == "a,1"
        assert stringify("text") == "text"

    def test_format_quantity(self) -> None:
        assert format_quantity(3.0) == "3"
        assert format_quantity(2.5) == "2.5"
        assert format_quantity(1) == "1"
