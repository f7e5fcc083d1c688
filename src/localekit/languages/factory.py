"""Language record construction with locale-derived defaults."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from localekit.languages.base import Direction, Language
from localekit.models import LanguageSpec


class LanguageFactory:
    """Builds :class:`Language` records, deriving unset fields from the locale."""

    def create_language(
        self,
        locale: str,
        *,
        name: str | None = None,
        key: str | None = None,
        id: int = 0,
        iso: str | None = None,
        region: str | None = None,
        slug: str | None = None,
        directory: str | None = None,
        direction: Direction = "ltr",
        area: str = "default",
        domain: str | None = None,
        url: str | None = None,
        fallback: str | None = None,
        default: bool = False,
        active: bool = True,
        editable: bool = True,
        order: int = 0,
    ) -> Language:
        key = key or locale.lower()
        return Language(
            locale=locale,
            iso=iso or locale[:2].lower(),
            region=region or extract_region(locale),
            name=name or locale,
            key=key,
            id=id,
            slug=slug or key,
            directory=directory or key,
            direction=direction,
            area=area,
            domain=domain,
            url=url,
            fallback=fallback,
            default=default,
            active=active,
            editable=editable,
            order=order,
        )

    def create_languages(self, items: Iterable[Mapping[str, Any]]) -> list[Language]:
        """Validate raw definitions and build one record per item."""
        created: list[Language] = []
        for item in items:
            spec = LanguageSpec.model_validate(dict(item))
            created.append(self.create_language(**spec.model_dump()))
        return created


def extract_region(locale: str) -> str | None:
    """Return the part after the first ``-`` (or ``_`` if there is no ``-``)."""
    for separator in ("-", "_"):
        if separator in locale:
            return locale.split(separator, 1)[1] or None
    return None


DEFAULT_FACTORY = LanguageFactory()


def create_language(locale: str, **fields: Any) -> Language:
    """Build a record with the shared default factory."""
    return DEFAULT_FACTORY.create_language(locale, **fields)
