"""Current-language resolution against a registry."""

from __future__ import annotations

from localekit.errors import ResolutionError
from localekit.languages.base import Language, LanguageKey
from localekit.languages.registry import LanguageRegistry
from localekit.logging import get_logger

logger = get_logger(__name__)


class CurrentLanguageResolver:
    """Selects the current language of a registry for one request.

    With ``allow_fallback_to_default`` disabled an unknown or inactive
    language raises :class:`ResolutionError`. Otherwise the requested
    language's declared fallback is selected, and failing that the default.
    """

    def __init__(
        self,
        current_language: LanguageKey,
        allow_fallback_to_default: bool = True,
    ) -> None:
        self.current_language = current_language
        self.allow_fallback_to_default = allow_fallback_to_default

    def resolve(self, languages: LanguageRegistry) -> Language:
        language = languages.get(self.current_language, fallback=False)
        if language is None:
            if not self.allow_fallback_to_default:
                logger.info("current_language_unresolved", requested=self.current_language)
                raise ResolutionError(self.current_language)
            language = languages.get_fallback(self.current_language)
        return languages.select(language)
