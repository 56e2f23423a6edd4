"""Tests for the HTTP facade with dependency overrides (no network)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from wayfinder.adapters.places.local_catalog_adapter import LocalCatalogAdapter
from wayfinder.application.use_cases.endpoint_session import EndpointSession
from wayfinder.application.use_cases.resolve_endpoint import ResolveEndpointUseCase
from wayfinder.application.use_cases.resolve_suggestions import ResolveSuggestionsUseCase
from wayfinder.domain.value_objects.enums import SuggestionMode
from wayfinder.domain.value_objects.suggestion_result import SuggestionResult
from wayfinder.infrastructure.api.dependencies import (
    get_endpoint_session,
    get_resolve_suggestions_uc,
    get_settings,
)
from wayfinder.main import create_app


@pytest.fixture
def app(make_provider, make_probe, probe_config):
    app = create_app()
    providers = {
        SuggestionMode.LOCAL: LocalCatalogAdapter(),
        SuggestionMode.REMOTE: make_provider(
            SuggestionResult.configuration_error("GOOGLE_PLACES_API_KEY", "Google Places API key is not configured")
        ),
    }
    session = EndpointSession(ResolveEndpointUseCase(make_probe(reachable={"10.0.2.2"})), probe_config)

    app.dependency_overrides[get_resolve_suggestions_uc] = lambda: ResolveSuggestionsUseCase(
        providers, default_mode=SuggestionMode.LOCAL,
    )
    app.dependency_overrides[get_endpoint_session] = lambda: session
    app.dependency_overrides[get_settings] = lambda: SimpleNamespace(is_production=False)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "OK"


def test_local_suggestions(client):
    response = client.get("/api/suggestions", params={"q": "Sigiriya", "mode": "local"})
    assert response.status_code == 200
    body = response.json()
    assert body["mode"] == "local"
    assert body["total"] == 1
    suggestion = body["suggestions"][0]
    assert suggestion["primary_label"] == "Sigiriya Rock Fortress"
    assert suggestion["icon"] == "tourist_attraction"
    assert suggestion["icon_name"] == "camera-outline"


def test_default_mode_applies(client):
    body = client.get("/api/suggestions", params={"q": "beach"}).json()
    assert body["mode"] == "local"
    assert body["total"] == 2


def test_short_query_is_empty(client):
    body = client.get("/api/suggestions", params={"q": "Ga", "mode": "remote"}).json()
    assert body["total"] == 0
    assert body["suggestions"] == []


def test_configuration_error_is_loud_outside_production(client):
    response = client.get("/api/suggestions", params={"q": "Galle", "mode": "remote"})
    assert response.status_code == 503
    assert response.json()["detail"]["setting"] == "GOOGLE_PLACES_API_KEY"


def test_configuration_error_is_empty_in_production(app):
    app.dependency_overrides[get_settings] = lambda: SimpleNamespace(is_production=True)
    response = TestClient(app).get("/api/suggestions", params={"q": "Galle", "mode": "remote"})
    assert response.status_code == 200
    assert response.json()["total"] == 0


def test_unknown_mode_rejected(client):
    response = client.get("/api/suggestions", params={"q": "Galle", "mode": "satellite"})
    assert response.status_code == 422


def test_icon_endpoint(client):
    body = client.get("/api/icon", params=[("types", "museum"), ("types", "place_of_worship")]).json()
    assert body == {"icon": "place_of_worship", "icon_name": "library-outline"}


def test_icon_endpoint_default(client):
    body = client.get("/api/icon").json()
    assert body == {"icon": "location", "icon_name": "location-outline"}


def test_endpoint_detection(client):
    body = client.get("/api/endpoint").json()
    assert body["base_url"] == "http://10.0.2.2:3001"
    assert body["fallback_used"] is False
    assert [a["host"] for a in body["attempts"]] == ["192.168.8.142", "10.0.2.2"]
    assert body["attempts"][0]["failure"] == "timeout"


def test_endpoint_refresh(client):
    body = client.post("/api/endpoint/refresh").json()
    assert body["host"] == "10.0.2.2"
