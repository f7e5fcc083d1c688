"""Per-area language registries."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from localekit.errors import ConfigurationError
from localekit.languages.base import Language
from localekit.languages.registry import LanguageRegistry
from localekit.logging import get_logger

logger = get_logger(__name__)

RegistryFactory = Callable[..., LanguageRegistry]


class AreaLanguages:
    """Groups languages by their ``area`` tag, one registry per area.

    Every area needs its own active default language.
    """

    def __init__(
        self,
        *languages: Language,
        registry_factory: RegistryFactory = LanguageRegistry,
    ) -> None:
        grouped: dict[str, list[Language]] = {}
        for language in languages:
            grouped.setdefault(language.area, []).append(language)

        self._registries: dict[str, LanguageRegistry] = {}
        for area, members in grouped.items():
            try:
                self._registries[area] = registry_factory(*members)
            except ConfigurationError as exc:
                logger.warning("area_languages_invalid", area=area, error=str(exc))
                raise ConfigurationError(
                    f"No default language found for the {area} area"
                ) from exc

    def __iter__(self) -> Iterator[tuple[str, LanguageRegistry]]:
        return iter(self._registries.items())

    def __len__(self) -> int:
        return len(self._registries)

    def has(self, area: str) -> bool:
        return area in self._registries

    def get(self, area: str) -> LanguageRegistry | None:
        return self._registries.get(area)

    def areas(self) -> list[str]:
        return list(self._registries)
