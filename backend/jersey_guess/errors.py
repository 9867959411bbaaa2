"""
Exception classes shared by the API, the store and the game session.
"""
from typing import Optional


class JerseyGuessError(Exception):
    """Base exception for Jersey Guess."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __repr__(self):
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details})"


class ValidationError(JerseyGuessError):
    """Raised when a score payload does not match the expected shape."""
    pass


class NameRequired(ValidationError):
    """Raised locally when a score is saved without a player name."""
    pass


class StoreUnavailable(JerseyGuessError):
    """Raised when the backing store cannot be read or written."""
    pass


class SaveFailed(JerseyGuessError):
    """Raised when a score submission does not reach the store."""
    pass
