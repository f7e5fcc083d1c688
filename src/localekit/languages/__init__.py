"""Language records, registries and resolution."""

from localekit.languages.areas import AreaLanguages
from localekit.languages.base import (
    ById,
    ByName,
    Identifier,
    Language,
    as_identifier,
    parse_identifier,
)
from localekit.languages.factory import LanguageFactory, create_language
from localekit.languages.registry import LanguageRegistry
from localekit.languages.resolver import CurrentLanguageResolver

__all__ = [
    "AreaLanguages",
    "ById",
    "ByName",
    "CurrentLanguageResolver",
    "Identifier",
    "Language",
    "LanguageFactory",
    "LanguageRegistry",
    "as_identifier",
    "create_language",
    "parse_identifier",
]
