"""Exception types raised by the language registry and its collaborators."""

from __future__ import annotations


class LanguageError(Exception):
    """Base class for language registry failures."""


class ConfigurationError(LanguageError, ValueError):
    """Raised when a registry is built without exactly one active default language."""


class ResolutionError(LanguageError, LookupError):
    """Raised when the requested current language cannot be resolved."""

    def __init__(self, requested: int | str, message: str = "") -> None:
        super().__init__(message or f"Current language not found: {requested!r}")
        self.requested = requested
