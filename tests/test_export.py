import json
from pathlib import Path

from localekit.io import language_to_json, to_json, write_json
from localekit.languages import create_language


def test_to_json_and_write_json(tmp_path: Path) -> None:
    languages = [
        create_language("en-US", id=1, default=True),
        create_language("ar", id=2, direction="rtl"),
    ]

    payload = json.loads(to_json(languages))
    assert [item["locale"] for item in payload] == ["en-US", "ar"]
    assert payload[1]["direction"] == "rtl"
    assert payload[0]["region"] == "US"

    output_path = tmp_path / "out" / "languages.json"
    write_json(languages, output_path)
    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written == payload


def test_language_to_json() -> None:
    payload = json.loads(language_to_json(create_language("de-CH", fallback="en-US")))

    assert payload["key"] == "de-ch"
    assert payload["fallback"] == "en-US"
    assert payload["default"] is False
