"""
Custom exceptions for the dice bot

Ordinary roll and stat-edit conditions (unknown attributes, bad values) are
returned as values; these exceptions cover real failures only.
"""


class BotException(Exception):
    """Base exception for all bot-related errors."""
    pass


class StoreException(BotException):
    """Exception for character store errors."""
    pass


class StoreWriteError(StoreException):
    """Raised when the character store cannot be written to disk."""
    pass


class ConfigurationException(BotException):
    """Exception for configuration-related errors."""
    pass
