"""Tests for settings and the bot configuration file."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tcg_lookup.config import BotConfig, Settings, load_bot_config
from tcg_lookup.exceptions import ConfigurationError


class TestBotConfig:
    """Tests for BotConfig and load_bot_config."""

    def test_camel_case_keys(self, data_dir: Path) -> None:
        config = load_bot_config(data_dir / "config.json")
        assert config.game == "ygo"
        assert config.footer_pile == "Side"
        assert config.header_pile is None
        assert config.image_base_url == "https://img.test/images"
        assert config.no_match_messages == ["The shadows hold no such card."]

    def test_deck_config(self, data_dir: Path) -> None:
        deck_config = load_bot_config(data_dir / "config.json").deck_config()
        assert deck_config.footer_pile == "Side"
        assert deck_config.type_order == ("Monster", "Spell", "Trap")

    def test_blank_piles_not_configured(self) -> None:
        config = BotConfig.model_validate({"headerPile": "", "footerPile": ""})
        assert config.deck_config().header_pile is None
        assert config.deck_config().footer_pile is None

    def test_alias_resolver(self, data_dir: Path) -> None:
        resolver = load_bot_config(data_dir / "config.json").alias_resolver()
        assert resolver.resolve("attack") == "atk"
        assert resolver.resolve("atk points") == "atk"

    def test_defaults(self) -> None:
        config = BotConfig()
        assert config.image_base_url == "https://tcgbuilder.net/images"
        assert config.deck_share_base == "https://www.tcgbuilder.net/?deck="
        assert config.advanced_search_aliases == {}

    def test_unknown_keys_ignored(self) -> None:
        config = BotConfig.model_validate({"game": "ygo", "token": "secret"})
        assert config.game == "ygo"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_bot_config(tmp_path / "missing.json")

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_bot_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"typeOrder": "Monster"}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_bot_config(path)


class TestSettings:
    """Tests for environment settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CONFIG", raising=False)
        monkeypatch.delenv("MAX_RESULTS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.config_file == Path("config.json")
        assert settings.max_results == 5

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONFIG", "/etc/tcg/bot.json")
        monkeypatch.setenv("MAX_RESULTS", "8")
        settings = Settings(_env_file=None)
        assert settings.config_file == Path("/etc/tcg/bot.json")
        assert settings.max_results == 8
