"""Language registry: multi-key lookup, default/current selection and fallbacks."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from dataclasses import fields
from functools import cmp_to_key
from typing import Any

from localekit.errors import ConfigurationError, LanguageError
from localekit.languages.base import (
    INDEX_KEYS,
    NAME_INDEX_KEYS,
    ById,
    ByName,
    Identifier,
    IndexKey,
    Language,
    LanguageKey,
    as_identifier,
)
from localekit.logging import get_logger

logger = get_logger(__name__)

_COLUMNS = frozenset(field.name for field in fields(Language))

Predicate = Callable[[Language], bool]
Transform = Callable[[Language], Language]
Comparator = Callable[[Language, Language], int]


class LanguageRegistry:
    """Immutable set of languages with lazily built lookup indices.

    Records are stored once, in insertion order; every index maps a
    normalized locale, key, slug or id to a position in that sequence. On
    collisions the later record wins. Exactly one active record must be
    flagged ``default``.

    Only the current selection is mutable. It is not synchronized: share an
    instance across threads only if callers never change ``current``.
    """

    def __init__(self, *languages: Language) -> None:
        for language in languages:
            if not isinstance(language, Language):
                raise TypeError(f"expected Language, got {type(language).__name__}")
        self._languages: tuple[Language, ...] = languages
        self._default: Language | None = _find_default(languages)
        self._current: Language | None = None
        self._lock = threading.RLock()
        self._indexes: dict[tuple[bool, IndexKey], dict[LanguageKey, int]] = {}
        self._fallback_pairs: tuple[tuple[int, int], ...] | None = None
        self._fallback_tables: dict[IndexKey, dict[LanguageKey, int]] = {}
        logger.debug(
            "language_registry_built",
            languages=len(languages),
            default=self._default.locale if self._default else None,
        )

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, identifier: object) -> bool:
        try:
            return self.has(identifier)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[language.locale for language in self._languages]!r})"

    # Lookup

    def has(self, identifier: LanguageKey | Identifier, active_only: bool = True) -> bool:
        """Return True if a language matches by locale, key, slug or id."""
        return self.get(identifier, fallback=False, active_only=active_only) is not None

    def get(
        self,
        identifier: LanguageKey | Identifier,
        fallback: bool = True,
        *,
        active_only: bool = True,
    ) -> Language | None:
        """Look up a language by id, or case-insensitively by locale, key then slug.

        When nothing matches and ``fallback`` is set, the declared fallback of
        the requested language (or the default language) is returned instead.
        """
        ident = as_identifier(identifier)
        position = self._find(ident, active_only)
        if position is not None:
            return self._languages[position]
        if fallback:
            return self.get_fallback(ident)
        return None

    def default(self) -> Language:
        if self._default is None:
            raise LanguageError("No default language found")
        return self._default

    def current(self, identifier: LanguageKey | Identifier | None = None) -> Language:
        """Return the current language, switching to ``identifier`` if it exists.

        Unknown identifiers leave the selection unchanged; use :meth:`has` to
        detect them.
        """
        if identifier is not None:
            language = self.get(identifier, fallback=False)
            if language is not None:
                self._current = language
        if self._current is None:
            self._current = self.default()
        return self._current

    # Iteration and projection

    def all(self, active_only: bool = True) -> list[Language]:
        if not active_only:
            return list(self._languages)
        return [language for language in self._languages if language.active]

    def first(self, active_only: bool = True) -> Language | None:
        languages = self.all(active_only)
        return languages[0] if languages else None

    def column(
        self,
        field: str = "locale",
        index_by: str | None = None,
        active_only: bool = True,
    ) -> list[Any] | dict[Any, Any]:
        """Project one attribute across the languages, optionally keyed by another.

        Unknown attribute names yield an empty result.
        """
        languages = self.all(active_only)
        if index_by is None:
            if field not in _COLUMNS:
                return []
            return [getattr(language, field) for language in languages]
        if field not in _COLUMNS or index_by not in _COLUMNS:
            return {}
        return {getattr(language, index_by): getattr(language, field) for language in languages}

    # Transformations

    def filter(self, predicate: Predicate) -> LanguageRegistry:
        return type(self)(*(language for language in self._languages if predicate(language)))

    def map(self, transform: Transform) -> LanguageRegistry:
        return type(self)(*(transform(language) for language in self._languages))

    def sort(self, comparator: Comparator) -> LanguageRegistry:
        """Return a registry ordered by ``comparator(a, b)`` (negative, zero or positive)."""
        return type(self)(*sorted(self._languages, key=cmp_to_key(comparator)))

    def active(self, active: bool = True) -> LanguageRegistry:
        return self.filter(lambda language: language.active == active)

    def domain(self, domain: str | None) -> LanguageRegistry:
        return self.filter(lambda language: language.domain == domain)

    # Fallbacks

    def fallbacks(self, index_by: str = "locale") -> dict[LanguageKey, LanguageKey]:
        """Return ``{language: fallback}`` pairs expressed in the ``index_by`` attribute."""
        if index_by not in INDEX_KEYS:
            return {}
        return {
            getattr(self._languages[source], index_by): getattr(self._languages[target], index_by)
            for source, target in self._resolved_fallbacks()
        }

    def get_fallback(self, identifier: LanguageKey | Identifier) -> Language:
        """Return the declared fallback of ``identifier``, or the default language.

        Never raises for a validly constructed registry.
        """
        self._resolved_fallbacks()
        ident = as_identifier(identifier)
        target: int | None = None
        match ident:
            case ById(value=value):
                target = self._fallback_tables["id"].get(value)
            case ByName(normalized=normalized):
                for index_key in NAME_INDEX_KEYS:
                    target = self._fallback_tables[index_key].get(normalized)
                    if target is not None:
                        break
        if target is None:
            return self.default()

        # Ids and slugs need not be unique, so the target position is used as is.
        resolved = self._languages[target]
        return resolved if resolved.active else self.default()

    def select(self, language: Language) -> Language:
        """Make ``language``, a record of this registry, the current selection."""
        if not language.active or not any(language is record for record in self._languages):
            raise LanguageError(f"Not an active language of this registry: {language.locale}")
        self._current = language
        return language

    # Internals

    def _find(self, identifier: Identifier, active_only: bool) -> int | None:
        match identifier:
            case ById(value=value):
                return self._index(active_only, "id").get(value)
            case ByName(normalized=normalized):
                for index_key in NAME_INDEX_KEYS:
                    position = self._index(active_only, index_key).get(normalized)
                    if position is not None:
                        return position
        return None

    def _index(self, active_only: bool, index_key: IndexKey) -> dict[LanguageKey, int]:
        slot = (active_only, index_key)
        index = self._indexes.get(slot)
        if index is not None:
            return index
        with self._lock:
            index = self._indexes.get(slot)
            if index is None:
                index = {}
                for position, language in enumerate(self._languages):
                    if active_only and not language.active:
                        continue
                    index[_index_value(language, index_key)] = position
                self._indexes[slot] = index
        return index

    def _resolved_fallbacks(self) -> tuple[tuple[int, int], ...]:
        pairs = self._fallback_pairs
        if pairs is not None:
            return pairs
        with self._lock:
            if self._fallback_pairs is None:
                resolved: list[tuple[int, int]] = []
                tables: dict[IndexKey, dict[LanguageKey, int]] = {key: {} for key in INDEX_KEYS}
                for source, language in enumerate(self._languages):
                    if language.fallback is None:
                        continue
                    target = self._find(ByName(language.fallback), active_only=False)
                    if target is None:
                        logger.debug(
                            "dangling_fallback",
                            locale=language.locale,
                            fallback=language.fallback,
                        )
                        continue
                    resolved.append((source, target))
                    for index_key in INDEX_KEYS:
                        tables[index_key][_index_value(language, index_key)] = target
                self._fallback_tables = tables
                self._fallback_pairs = tuple(resolved)
                logger.debug("fallback_tables_built", fallbacks=len(resolved))
        return self._fallback_pairs


def _find_default(languages: tuple[Language, ...]) -> Language:
    defaults = [language for language in languages if language.active and language.default]
    if not defaults:
        raise ConfigurationError("No default language found")
    if len(defaults) > 1:
        locales = ", ".join(language.locale for language in defaults)
        raise ConfigurationError(f"Multiple default languages found: {locales}")
    return defaults[0]


def _index_value(language: Language, index_key: IndexKey) -> LanguageKey:
    if index_key == "id":
        return language.id
    return getattr(language, index_key).lower()
