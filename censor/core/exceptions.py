# censor/core/exceptions.py

"""Custom exception hierarchy for the censorship engine.

This module defines the specific error types used throughout the application
to differentiate between configuration, input, pipeline and moderation-API
errors.
"""

from typing import Optional


class CensorError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(CensorError):
    """Raised when the word list asset or a pattern override is invalid."""

    pass


class ValidationError(CensorError):
    """Raised when input validation fails (e.g., non-string text input)."""

    pass


class ModerationError(CensorError):
    """Base class for failures of the remote moderation API."""

    pass


class MissingCredentialError(ModerationError):
    """Raised before any request when no moderation API key is configured."""

    pass


class ModerationRequestError(ModerationError):
    """Raised when the moderation request fails in transport or response."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
