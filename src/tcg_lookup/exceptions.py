"""Custom exceptions for the TCG lookup bot."""


class TCGError(Exception):
    """Base exception for TCG lookup errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DeckNotFoundError(TCGError):
    """Raised when a deck cannot be loaded."""

    def __init__(self, code: str):
        super().__init__(f"No deck found for code {code}")
        self.code = code


class InvalidDeckCodeError(TCGError):
    """Raised when a deck request carries no usable code."""

    def __init__(self, raw: str = ""):
        super().__init__("Invalid deck code.")
        self.raw = raw


class GameMismatchError(TCGError):
    """Raised when a deck link points at a different game than the configured one."""

    def __init__(self, game: str, expected: str):
        super().__init__(
            f"That deck link is for game {game}, but this bot is configured for {expected}."
        )
        self.game = game
        self.expected = expected


class ConfigurationError(TCGError):
    """Raised when the bot configuration cannot be loaded."""

    pass


class ValidationError(TCGError):
    """Raised when input validation fails."""

    pass
