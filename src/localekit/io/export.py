"""Language serializers."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from localekit.languages.base import Language
from localekit.models import LanguagePayload


def to_payload(language: Language) -> LanguagePayload:
    return LanguagePayload.model_validate(language)


def language_to_json(language: Language) -> str:
    """Serialize one language to formatted JSON."""
    return to_payload(language).model_dump_json(indent=2)


def to_json(languages: Iterable[Language]) -> str:
    """Serialize languages to a formatted JSON array."""
    return json.dumps([to_payload(language).model_dump() for language in languages], indent=2)


def write_json(languages: Iterable[Language], output_path: str | Path) -> None:
    """Write the serialized languages to disk."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(languages) + "\n", encoding="utf-8")
