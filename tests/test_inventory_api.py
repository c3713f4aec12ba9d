"""End-to-end tests for the inventory API."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from library_inventory.api.v1.deps import get_library_service
from library_inventory.demo import seed_sample_data
from tests.conftest import DICTIONARY_ISBN, ODYSSEY_ISBN


@pytest.fixture
def seeded_client(client: TestClient) -> TestClient:
    seed_sample_data(get_library_service())
    return client


class TestInventoryAPI:
    """Test suite for the inventory endpoints."""

    def test_summary_empty(self, client: TestClient):
        response = client.get("/api/v1/inventory/summary")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"total_titles": 0, "total_borrowed": 0}

    def test_summary_after_borrows(self, seeded_client: TestClient):
        seeded_client.post(f"/api/v1/books/{ODYSSEY_ISBN}/borrow")
        seeded_client.post(f"/api/v1/books/{ODYSSEY_ISBN}/borrow")
        seeded_client.post(f"/api/v1/books/{DICTIONARY_ISBN}/borrow")

        response = seeded_client.get("/api/v1/inventory/summary")

        assert response.json() == {"total_titles": 3, "total_borrowed": 2}

    @pytest.mark.parametrize(
        "params, expected",
        [
            ({"isbn": ODYSSEY_ISBN}, 3),
            ({"title": "the iliad"}, 2),
            ({"author": "Homer"}, 5),
            ({"author": "Nobody"}, 0),
        ],
    )
    def test_remaining(self, seeded_client: TestClient, params: dict, expected: int):
        response = seeded_client.get("/api/v1/inventory/remaining", params=params)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"remaining": expected}

    def test_remaining_unknown_isbn(self, client: TestClient):
        response = client.get("/api/v1/inventory/remaining", params={"isbn": "missing"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remaining_requires_exactly_one_filter(self, client: TestClient):
        response = client.get(
            "/api/v1/inventory/remaining", params={"isbn": ODYSSEY_ISBN, "author": "Homer"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
