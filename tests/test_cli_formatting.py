"""Tests for CLI formatting utilities."""

from __future__ import annotations

from tcg_lookup.cli.formatting import markdown_to_rich, strip_quotes


class TestMarkdownToRich:
    """Tests for markdown_to_rich function."""

    def test_bold(self) -> None:
        """Double asterisks become bold markup."""
        assert markdown_to_rich("No results found for **alpha**.") == (
            "No results found for [bold]alpha[/bold]."
        )

    def test_italic(self) -> None:
        """Single asterisks become italic markup."""
        assert markdown_to_rich("Spell\n\n*Draw a card.*") == "Spell\n\n[italic]Draw a card.[/italic]"

    def test_bold_and_italic_together(self) -> None:
        text = "**Main — Spell**\n3x Alpha\n\n*See also: Core Set*"
        assert markdown_to_rich(text) == (
            "[bold]Main — Spell[/bold]\n3x Alpha\n\n[italic]See also: Core Set[/italic]"
        )

    def test_rich_tags_in_text_are_escaped(self) -> None:
        """Card text that looks like Rich markup is printed literally."""
        assert markdown_to_rich("[red]not red[/red]") == r"\[red]not red\[/red]"

    def test_plain_text_unchanged(self) -> None:
        assert markdown_to_rich("3x Alpha") == "3x Alpha"
        assert markdown_to_rich("") == ""


class TestStripQuotes:
    """Tests for strip_quotes function."""

    def test_strip_double_quotes(self) -> None:
        """Double quotes should be stripped."""
        assert strip_quotes('"hello"') == "hello"
        assert strip_quotes('"Dark Magician"') == "Dark Magician"

    def test_strip_single_quotes(self) -> None:
        """Single quotes should be stripped."""
        assert strip_quotes("'Mirror Force'") == "Mirror Force"

    def test_strip_whitespace(self) -> None:
        """Leading/trailing whitespace should be stripped."""
        assert strip_quotes('  "hello"  ') == "hello"

    def test_mismatched_quotes(self) -> None:
        """Mismatched quotes should not be stripped."""
        assert strip_quotes("\"hello'") == "\"hello'"

    def test_apostrophe_inside_name_kept(self) -> None:
        assert strip_quotes("Magician's Force") == "Magician's Force"

    def test_only_quotes(self) -> None:
        """String of just quotes should return empty."""
        assert strip_quotes('""') == ""
