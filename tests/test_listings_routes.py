"""
Tests for the listing HTTP routes, backed by the in-memory repository.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from listing_catalog.db import get_listing_repository
from listing_catalog.geo import encode
from listing_catalog.main import create_app
from listing_catalog.repositories import InMemoryListingRepository


AUSTIN = (30.2672, -97.7431)


def listing_payload(name, amount, category="Electronics", lat_lon=AUSTIN, municipality="Austin"):
    return {
        "name": name,
        "description": f"{name} in good condition",
        "price": {"currency": "USD", "amount": amount},
        "category": category,
        "location": {
            "country": "US",
            "municipality": municipality,
            "geohash": encode(*lat_lon),
        },
    }


@pytest.fixture
def client():
    repository = InMemoryListingRepository()
    app = create_app()
    app.dependency_overrides[get_listing_repository] = lambda: repository
    return TestClient(app)


@pytest.fixture
def seeded_client(client):
    client.post("/api/listings", json=listing_payload("Far Guitar", "5.00", "Music",
                                                      (40.7128, -74.0060), "New York"))
    client.post("/api/listings", json=listing_payload("Near Laptop", "300.00"))
    client.post("/api/listings", json=listing_payload("Near Drum", "80.00", "Music"))
    return client


def names(response):
    return [item["name"] for item in response.json()["items"]]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_and_get_listing(client):
    created = client.post("/api/listings", json=listing_payload("Camera", "99.99"))

    assert created.status_code == 201
    body = created.json()
    assert Decimal(body["price"]["amount"]) == Decimal("99.99")

    fetched = client.get(f"/api/listings/{body['listing_id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_rejects_invalid_listing(client):
    response = client.post("/api/listings", json=listing_payload("x" * 101, "10.00"))

    assert response.status_code == 422


def test_list_without_reference_sorts_by_price(seeded_client):
    response = seeded_client.get("/api/listings")

    assert response.status_code == 200
    assert names(response) == ["Far Guitar", "Near Drum", "Near Laptop"]
    assert response.json()["total_items"] == 3


def test_list_with_reference_sorts_by_distance_then_price(seeded_client):
    response = seeded_client.get(
        "/api/listings", params={"latitude": AUSTIN[0], "longitude": AUSTIN[1]}
    )

    assert names(response) == ["Near Drum", "Near Laptop", "Far Guitar"]


def test_list_paginates_after_ranking(seeded_client):
    first = seeded_client.get("/api/listings", params={"page": 1, "pageSize": 2})
    second = seeded_client.get("/api/listings", params={"page": 2, "pageSize": 2})

    assert names(first) == ["Far Guitar", "Near Drum"]
    assert names(second) == ["Near Laptop"]
    assert second.json()["page_size"] == 2


@pytest.mark.parametrize("params", [
    {"pageSize": 51},
    {"page": 0},
    {"latitude": 30.0},
    {"latitude": 95.0, "longitude": 0.0},
])
def test_list_rejects_invalid_query(seeded_client, params):
    response = seeded_client.get("/api/listings", params=params)

    assert response.status_code == 400
    assert response.json()["detail"]


def test_page_size_ceiling_ignores_environment(seeded_client, monkeypatch):
    monkeypatch.setenv("MAX_PAGE_SIZE", "100")

    response = seeded_client.get("/api/listings", params={"pageSize": 51})

    assert response.status_code == 400
    assert "cannot exceed 50" in response.json()["detail"]


def test_search_filters_and_ranks(seeded_client):
    response = seeded_client.post("/api/listings/search", json={
        "filters": [{"field": "category", "operator": "equals", "value": "Music"}],
        "latitude": AUSTIN[0],
        "longitude": AUSTIN[1],
        "pageSize": 10,
    })

    assert response.status_code == 200
    body = response.json()
    assert names(response) == ["Near Drum", "Far Guitar"]
    assert body["total_items"] == 2
    assert body["applied_filters"][0]["value"] == "Music"


def test_search_contains_is_case_insensitive(seeded_client):
    response = seeded_client.post("/api/listings/search", json={
        "filters": [{"field": "location.municipality", "operator": "contains", "value": "new york"}],
    })

    assert names(response) == ["Far Guitar"]


@pytest.mark.parametrize("criterion,fragment", [
    ({"field": "price", "operator": "equals", "value": "5"}, "Supported fields"),
    ({"field": "category", "operator": "contains", "value": "Music"}, "equals"),
    ({"field": "name", "operator": "like", "value": "Drum"}, "Supported operators"),
])
def test_search_rejects_invalid_filters(seeded_client, criterion, fragment):
    response = seeded_client.post("/api/listings/search", json={"filters": [criterion]})

    assert response.status_code == 400
    assert fragment in response.json()["detail"]


def test_update_and_delete_listing(client):
    listing_id = client.post("/api/listings", json=listing_payload("Lamp", "15.00")).json()["listing_id"]

    updated = client.put(f"/api/listings/{listing_id}", json=listing_payload("Desk Lamp", "12.00"))
    assert updated.status_code == 200
    assert updated.json()["name"] == "Desk Lamp"
    assert updated.json()["listing_id"] == listing_id

    assert client.delete(f"/api/listings/{listing_id}").status_code == 204
    assert client.get(f"/api/listings/{listing_id}").status_code == 404
    assert client.delete(f"/api/listings/{listing_id}").status_code == 404


def test_update_missing_listing_returns_404(client):
    response = client.put(
        "/api/listings/00000000-0000-0000-0000-000000000000",
        json=listing_payload("Ghost", "1.00")
    )

    assert response.status_code == 404
