"""Configuration management using pydantic-settings."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .tools.search.aliases import AliasResolver


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Bot configuration file (JSON)
    config_file: Path = Field(
        default=Path("config.json"),
        alias="CONFIG",
        description="Path to the bot configuration JSON file",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Search output
    max_results: int = Field(
        default=5,
        ge=1,
        description="Maximum search results listed before asking to narrow the query",
    )


class DeckConfig(BaseModel):
    """Pile and type ordering used when rendering decks."""

    model_config = ConfigDict(frozen=True)

    header_pile: str | None = None
    footer_pile: str | None = None
    type_order: tuple[str, ...] = ()


class BotConfig(BaseModel):
    """Bot configuration file; accepts the camelCase keys of config.json."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    game: str = ""
    header_pile: str | None = Field(default=None, alias="headerPile")
    footer_pile: str | None = Field(default=None, alias="footerPile")
    type_order: list[str] = Field(default_factory=list, alias="typeOrder")
    advanced_search_aliases: dict[str, str | list[str]] = Field(
        default_factory=dict, alias="advancedSearchAliases"
    )
    no_match_messages: list[str] = Field(default_factory=list, alias="noMatchMessages")
    image_base_url: str = Field(default="https://tcgbuilder.net/images", alias="imageBaseUrl")
    deck_share_base: str = Field(
        default="https://www.tcgbuilder.net/?deck=", alias="deckShareBase"
    )

    def deck_config(self) -> DeckConfig:
        # Blank pile names mean "not configured"
        return DeckConfig(
            header_pile=self.header_pile or None,
            footer_pile=self.footer_pile or None,
            type_order=tuple(self.type_order),
        )

    def alias_resolver(self) -> AliasResolver:
        return AliasResolver.from_config(self.advanced_search_aliases)


def load_bot_config(path: Path) -> BotConfig:
    """Read and validate a bot configuration file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    try:
        return BotConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
