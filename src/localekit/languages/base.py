"""Language record and identifier types."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Literal

Direction = Literal["ltr", "rtl"]
IndexKey = Literal["locale", "key", "id", "slug"]
LanguageKey = int | str

INDEX_KEYS: tuple[IndexKey, ...] = ("locale", "key", "id", "slug")
NAME_INDEX_KEYS: tuple[IndexKey, ...] = ("locale", "key", "slug")


@dataclass(frozen=True)
class Language:
    """Immutable language record.

    ``direction``, ``editable`` and ``order`` are descriptive only; the registry
    never consults them.
    """

    locale: str
    iso: str
    region: str | None
    name: str
    key: str
    id: int
    slug: str
    directory: str
    direction: Direction = "ltr"
    area: str = "default"
    domain: str | None = None
    url: str | None = None
    fallback: str | None = None
    default: bool = False
    active: bool = True
    editable: bool = True
    order: int = 0

    def replace(self, **changes: Any) -> Language:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def with_name(self, name: str) -> Language:
        return self.replace(name=name)

    def with_active(self, active: bool) -> Language:
        return self.replace(active=active)

    def with_default(self, default: bool) -> Language:
        return self.replace(default=default)

    def with_fallback(self, fallback: str | None) -> Language:
        return self.replace(fallback=fallback)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ById:
    """Numeric language identifier."""

    value: int


@dataclass(frozen=True)
class ByName:
    """Locale, key or slug identifier (matched case-insensitively)."""

    value: str

    @property
    def normalized(self) -> str:
        return self.value.lower()


Identifier = ById | ByName


def as_identifier(value: LanguageKey | Identifier) -> Identifier:
    """Wrap a raw int or str into a tagged identifier."""
    match value:
        case ById() | ByName():
            return value
        case bool():
            raise TypeError("language identifier must be int or str, got bool")
        case int():
            return ById(value)
        case str():
            return ByName(value)
    raise TypeError(f"language identifier must be int or str, got {type(value).__name__}")


def parse_identifier(text: str) -> Identifier:
    """Interpret textual input: all-digit text is an id, anything else a name."""
    stripped = text.strip()
    if stripped.isascii() and stripped.isdigit():
        return ById(int(stripped))
    return ByName(stripped)