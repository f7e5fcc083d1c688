import pytest

from localekit.errors import ConfigurationError
from localekit.languages import AreaLanguages, LanguageRegistry, create_language


def _areas() -> AreaLanguages:
    return AreaLanguages(
        create_language("en", area="frontend", default=True),
        create_language("de", area="frontend"),
        create_language("en", area="backend"),
        create_language("de", area="backend", default=True),
    )


def test_missing_area_default_raises() -> None:
    with pytest.raises(ConfigurationError, match="backend area") as excinfo:
        AreaLanguages(
            create_language("en", area="frontend", default=True),
            create_language("de", area="frontend"),
            create_language("en", area="backend"),
            create_language("de", area="backend"),
        )

    assert isinstance(excinfo.value.__cause__, ConfigurationError)


def test_get_returns_registry_per_area() -> None:
    areas = _areas()
    frontend = areas.get("frontend")
    backend = areas.get("backend")

    assert isinstance(frontend, LanguageRegistry)
    assert frontend.default().locale == "en"
    assert backend is not None
    assert backend.default().locale == "de"


def test_get_unknown_area_returns_none() -> None:
    assert _areas().get("api") is None


def test_has() -> None:
    areas = _areas()

    assert areas.has("frontend")
    assert not areas.has("api")


def test_areas_keep_first_seen_order() -> None:
    areas = _areas()

    assert areas.areas() == ["frontend", "backend"]
    assert [area for area, _ in areas] == ["frontend", "backend"]
    assert len(areas) == 2


def test_empty_area_languages() -> None:
    areas = AreaLanguages()

    assert areas.areas() == []
    assert not areas.has("default")


def test_custom_registry_factory() -> None:
    class TaggedRegistry(LanguageRegistry):
        pass

    areas = AreaLanguages(
        create_language("en", default=True),
        registry_factory=TaggedRegistry,
    )

    assert isinstance(areas.get("default"), TaggedRegistry)
