from fastapi.testclient import TestClient

from localekit.api import create_app
from localekit.languages import AreaLanguages, create_language


def _client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint() -> None:
    response = _client().get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["version"] == "0.1.0"
    assert payload["env"] == "dev"


def test_areas_endpoint() -> None:
    response = _client().get("/v1/areas")

    assert response.status_code == 200
    assert response.json() == ["default", "backend"]


def test_list_languages() -> None:
    client = _client()

    response = client.get("/v1/areas/default/languages")
    assert response.status_code == 200
    assert [item["locale"] for item in response.json()] == ["en-US", "de-CH"]

    response = client.get("/v1/areas/default/languages", params={"include_inactive": True})
    assert [item["locale"] for item in response.json()] == ["en-US", "de-CH", "fr-CH", "ar"]


def test_unknown_area_returns_404() -> None:
    response = _client().get("/v1/areas/api/languages")

    assert response.status_code == 404
    assert "Unknown area" in response.json()["detail"]


def test_get_language_with_fallback() -> None:
    client = _client()

    assert client.get("/v1/areas/default/languages/de-ch").json()["locale"] == "de-CH"
    assert client.get("/v1/areas/default/languages/3").json()["locale"] == "de-CH"
    assert client.get("/v1/areas/default/languages/it").json()["locale"] == "en-US"


def test_get_language_without_fallback() -> None:
    response = _client().get("/v1/areas/default/languages/3", params={"fallback": False})

    assert response.status_code == 404
    assert "Language not found: 3" in response.json()["detail"]


def test_fallbacks_endpoint() -> None:
    client = _client()

    response = client.get("/v1/areas/default/fallbacks", params={"index_by": "id"})
    assert response.status_code == 200
    assert response.json() == {"2": 1, "3": 2, "4": 1}

    response = client.get("/v1/areas/default/fallbacks", params={"index_by": "name"})
    assert response.status_code == 422


def test_resolve_endpoint() -> None:
    client = _client()

    response = client.get("/v1/areas/default/resolve", params={"language": "fr-CH"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["requested"] == "fr-CH"
    assert payload["matched"] is False
    assert payload["language"]["locale"] == "de-CH"

    response = client.get("/v1/areas/default/resolve", params={"language": "2"})
    payload = response.json()
    assert payload["requested"] == 2
    assert payload["matched"] is True
    assert payload["language"]["locale"] == "de-CH"


def test_resolve_endpoint_strict_failure() -> None:
    response = _client().get(
        "/v1/areas/default/resolve",
        params={"language": "fr-CH", "allow_fallback": False},
    )

    assert response.status_code == 404
    assert "fr-CH" in response.json()["detail"]


def test_resolve_does_not_change_shared_current_language() -> None:
    areas = AreaLanguages(
        create_language("en", default=True),
        create_language("de"),
    )
    client = TestClient(create_app(areas))

    response = client.get("/v1/areas/default/resolve", params={"language": "de"})

    assert response.json()["language"]["locale"] == "de"
    assert areas.get("default").current().locale == "en"
