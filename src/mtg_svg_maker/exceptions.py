"""Exceptions raised by the card maker."""


class CardMakerError(Exception):
    """Base class for all card maker errors."""


class ConfigurationError(CardMakerError, ValueError):
    """Raised when a card is configured with a value the renderer cannot use."""


class MissingAssetError(CardMakerError):
    """Raised when an asset a layer cannot render without is unavailable."""


class SpriteSheetError(CardMakerError):
    """Raised when a sprite sheet batch cannot be produced."""


class CardFileError(CardMakerError):
    """Raised when a YAML card file cannot be read."""
