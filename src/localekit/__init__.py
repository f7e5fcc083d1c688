"""Locale registry with multi-key lookup and fallback resolution."""

__version__ = "0.1.0"
