"""I/O utilities."""

from localekit.io.export import language_to_json, to_json, to_payload, write_json
from localekit.io.loader import load_area_languages, load_language_items, load_languages

__all__ = [
    "language_to_json",
    "load_area_languages",
    "load_language_items",
    "load_languages",
    "to_json",
    "to_payload",
    "write_json",
]
