"""Tests for the HTTP surface, with fakes wired into app.state."""

import json

import httpx
import pytest
from fakes import BASE_URL, FakeCatalogSource, FakeTextGenerator, pokemon_payload
from fastapi.testclient import TestClient

from pokedex_search.api.app import app
from pokedex_search.handlers import SearchHandler
from pokedex_search.repositories import PokeApiClient
from pokedex_search.services import (
    FeatureExtractor,
    PokedexService,
    RankingService,
    SearchHistoryService,
    SearchService,
)

ELECTRIC_REPLY = json.dumps({"name": {"en": "Pikachu"}, "types": ["Electric"], "abilities": ["Static"]})


def lookup_api(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/pokemon/25"):
        return httpx.Response(200, json=pokemon_payload(25, "pikachu", ("electric",), ("static",)))
    if request.url.path.endswith("/pokemon-species/25"):
        return httpx.Response(
            200, json={"names": [{"language": {"name": "ja"}, "name": "ピカチュウ"}]}
        )
    return httpx.Response(404)


@pytest.fixture
def generator():
    return FakeTextGenerator(reply=ELECTRIC_REPLY)


@pytest.fixture
def wire(make_cache, generator):
    """Install a SearchHandler built from fakes; returns a function taking the catalog source."""
    installed = []

    def _wire(source: FakeCatalogSource) -> SearchHandler:
        cache = make_cache(source)
        history = SearchHistoryService(ttl_seconds=3600, max_entries=10)
        handler = SearchHandler(
            search_service=SearchService(
                extractor=FeatureExtractor(generator=generator),
                ranking=RankingService(cache=cache),
                history=history,
            ),
            cache=cache,
            pokedex_service=PokedexService(
                client=PokeApiClient(base_url=BASE_URL, transport=httpx.MockTransport(lookup_api))
            ),
            history=history,
            generator=generator,
        )
        app.state.search_handler = handler
        installed.append(handler)
        return handler

    yield _wire

    if installed:
        del app.state.search_handler


@pytest.fixture
def client(wire, source):
    wire(source)
    return TestClient(app)


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["endpoints"]["search"] == "/search"


def test_search_returns_ranked_results(client):
    response = client.post("/search", json={"query": "a yellow electric mouse"})

    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["pokemon"]["name"] for r in results] == ["pikachu", "raichu"]
    assert results[0]["confidence"] == pytest.approx(1.0)
    assert results[1]["confidence"] == pytest.approx(0.5)
    assert results[0]["match_reason"].startswith("Type: electric")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": {"query": ""}},
        {"json": {}},
        {"content": b"not json", "headers": {"content-type": "application/json"}},
    ],
    ids=["empty-query", "missing-query", "malformed-body"],
)
def test_search_rejects_invalid_body_with_error_shape(client, kwargs):
    response = client.post("/search", **kwargs)

    assert response.status_code == 422
    body = response.json()
    assert list(body) == ["error"]
    assert body["error"].startswith("Invalid request")


def test_search_with_unavailable_catalog_returns_503(wire, catalog_payloads):
    wire(FakeCatalogSource(catalog_payloads, index_error=ConnectionError("DNS failure")))
    client = TestClient(app)

    response = client.post("/search", json={"query": "a yellow electric mouse"})

    assert response.status_code == 503
    assert "error" in response.json()


def test_search_with_model_failure_returns_empty_results(client, generator):
    generator.error = RuntimeError("quota exceeded")

    response = client.post("/search", json={"query": "a yellow electric mouse"})

    assert response.status_code == 200
    assert response.json() == {"results": []}


def test_unexpected_error_returns_500(client, monkeypatch):
    async def explode(description):
        raise KeyError("boom")

    handler = app.state.search_handler
    monkeypatch.setattr(handler._search, "search", explode)

    response = client.post("/search", json={"query": "anything"})

    assert response.status_code == 500
    assert response.json()["error"].startswith("Search failed")


def test_cache_status_reports_state(client):
    assert client.get("/cache/status").json() == {"state": "empty", "size": 0}

    client.post("/search", json={"query": "a yellow electric mouse"})

    assert client.get("/cache/status").json() == {"state": "ready", "size": 4}


def test_history_records_top_result(client):
    client.post("/search", json={"query": "a yellow electric mouse"})

    body = client.get("/history").json()

    assert [e["result"]["pokemon"]["name"] for e in body["entries"]] == ["pikachu"]
    assert body["ttl_days"] == pytest.approx(3600 / 86400)


def test_clear_history(client):
    client.post("/search", json={"query": "a yellow electric mouse"})

    response = client.delete("/history")

    assert response.json()["deleted_count"] == 1
    assert client.get("/history").json()["entries"] == []


def test_get_pokemon_with_names(client):
    response = client.get("/pokemon/25")

    assert response.status_code == 200
    body = response.json()
    assert body["pokemon"]["name"] == "pikachu"
    assert body["names"] == {"en": "pikachu", "ja": "ピカチュウ"}


def test_get_unknown_pokemon_returns_404(client):
    response = client.get("/pokemon/99999")

    assert response.status_code == 404
    assert "error" in response.json()


def test_health_reports_model_and_catalog(client, generator):
    assert client.get("/health").json() == {
        "status": "healthy",
        "catalog_state": "empty",
        "model_available": True,
    }

    generator.available = False

    assert client.get("/health").json()["status"] == "degraded"
