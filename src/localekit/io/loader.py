"""Loading language definitions from TOML or JSON files."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from localekit.languages.areas import AreaLanguages
from localekit.languages.base import Language
from localekit.languages.factory import DEFAULT_FACTORY, LanguageFactory


def load_language_items(path: str | Path) -> list[dict[str, Any]]:
    """Read raw language definitions.

    TOML files hold a ``[[languages]]`` array of tables; JSON files hold either
    a list of objects or an object with a ``languages`` list.
    """
    resolved = Path(path)
    suffix = resolved.suffix.lower()
    if suffix == ".toml":
        with resolved.open("rb") as handle:
            payload: Any = tomllib.load(handle)
    elif suffix == ".json":
        payload = json.loads(resolved.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported language definition format: {resolved.name}")

    if isinstance(payload, dict):
        payload = payload.get("languages")
    if not isinstance(payload, list):
        raise ValueError(f"{resolved.name} must define a list of languages")
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValueError(f"{resolved.name}: language #{index} must be a table/object")
    return payload


def load_languages(
    path: str | Path, factory: LanguageFactory = DEFAULT_FACTORY
) -> list[Language]:
    """Build language records from a definition file."""
    return factory.create_languages(load_language_items(path))


def load_area_languages(
    path: str | Path, factory: LanguageFactory = DEFAULT_FACTORY
) -> AreaLanguages:
    """Build per-area registries from a definition file."""
    return AreaLanguages(*load_languages(path, factory))
