from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from localekit.languages import (
    ById,
    ByName,
    Language,
    LanguageFactory,
    as_identifier,
    create_language,
    parse_identifier,
)
from localekit.languages.factory import extract_region


def test_create_language_derives_fields_from_locale() -> None:
    language = create_language("de-CH")

    assert language.locale == "de-CH"
    assert language.name == "de-CH"
    assert language.key == "de-ch"
    assert language.iso == "de"
    assert language.region == "CH"
    assert language.slug == "de-ch"
    assert language.directory == "de-ch"
    assert language.id == 0
    assert language.area == "default"
    assert language.direction == "ltr"
    assert language.fallback is None
    assert language.default is False
    assert language.active is True


def test_slug_and_directory_derive_from_explicit_key() -> None:
    language = create_language("en-US", key="en_us")

    assert language.slug == "en_us"
    assert language.directory == "en_us"


def test_empty_values_are_derived() -> None:
    language = create_language("fr-CH", name="", key="")

    assert language.name == "fr-CH"
    assert language.key == "fr-ch"


def test_create_language_keeps_explicit_fields() -> None:
    language = LanguageFactory().create_language(
        locale="de-CH",
        name="Deutsch",
        key="de_ch",
        id=1,
        iso="de",
        region="CH",
        slug="de-ch",
        directory="dech",
        direction="ltr",
        area="front",
        domain="example.de",
        url="https://example.com",
        fallback="en",
        default=True,
        active=False,
        editable=False,
        order=100,
    )

    assert language.to_dict() == {
        "locale": "de-CH",
        "iso": "de",
        "region": "CH",
        "name": "Deutsch",
        "key": "de_ch",
        "id": 1,
        "slug": "de-ch",
        "directory": "dech",
        "direction": "ltr",
        "area": "front",
        "domain": "example.de",
        "url": "https://example.com",
        "fallback": "en",
        "default": True,
        "active": False,
        "editable": False,
        "order": 100,
    }


def test_extract_region() -> None:
    assert extract_region("en") is None
    assert extract_region("en-US") == "US"
    assert extract_region("en_GB") == "GB"
    assert extract_region("zh-Hant-TW") == "Hant-TW"
    assert extract_region("en-") is None


def test_create_languages_validates_items() -> None:
    languages = LanguageFactory().create_languages(
        [
            {"locale": "en-US", "default": True, "id": 1},
            {"locale": "ar", "direction": "rtl", "fallback": "en-US"},
        ]
    )

    assert [language.locale for language in languages] == ["en-US", "ar"]
    assert languages[0].default is True
    assert languages[1].direction == "rtl"
    assert languages[1].region is None


def test_create_languages_rejects_invalid_items() -> None:
    factory = LanguageFactory()

    with pytest.raises(ValidationError):
        factory.create_languages([{"name": "English"}])
    with pytest.raises(ValidationError):
        factory.create_languages([{"locale": "en", "colour": "blue"}])
    with pytest.raises(ValidationError):
        factory.create_languages([{"locale": ""}])


def test_language_is_immutable() -> None:
    language = create_language("en")

    with pytest.raises(FrozenInstanceError):
        language.name = "English"  # type: ignore[misc]


def test_with_methods_return_copies() -> None:
    language = Language(
        locale="en-US",
        iso="en",
        region="US",
        name="U S",
        key="en-us",
        id=1,
        slug="enus",
        directory="en_us",
        area="front",
    )
    renamed = language.with_name("New Name")

    assert renamed is not language
    assert renamed.name == "New Name"
    assert language.name == "U S"
    assert language.with_active(False).active is False
    assert language.with_default(True).default is True
    assert language.with_fallback("de").fallback == "de"
    assert language.replace(order=5, editable=False).order == 5


def test_identifiers() -> None:
    assert as_identifier(2) == ById(2)
    assert as_identifier("de") == ByName("de")
    assert as_identifier(ById(3)) == ById(3)
    assert ByName("DE-ch").normalized == "de-ch"
    with pytest.raises(TypeError):
        as_identifier(True)
    with pytest.raises(TypeError):
        as_identifier(1.5)  # type: ignore[arg-type]


def test_parse_identifier() -> None:
    assert parse_identifier("42") == ById(42)
    assert parse_identifier(" 7 ") == ById(7)
    assert parse_identifier("de-CH") == ByName("de-CH")
    assert parse_identifier("²") == ByName("²")
