from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from virtual_catalog_api.app.core.config import Settings
from virtual_catalog_api.app.main import create_app


class TestItemsEndpoint:

    def test_default_page(self, client):
        response = client.get("/api/items")

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["items"]] == list(range(1, 21))
        assert body["items"][0] == {"id": 1, "text": "Item 1", "selected": False}
        assert body["total"] == 200
        assert body["hasMore"] is True
        assert body["page"] == 1
        assert body["limit"] == 20

    def test_lenient_query_parameters(self, client):
        response = client.get("/api/items", params={"page": "abc", "limit": "5000"})

        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 1
        assert body["limit"] == 100

    def test_search(self, client):
        body = client.get("/api/items", params={"search": " 19 ", "limit": 50}).json()

        assert [item["id"] for item in body["items"]] == [19, 119, 190, 191, 192, 193, 194, 195, 196, 197, 198, 199]
        assert body["total"] == 12
        assert body["hasMore"] is False

    def test_versioned_alias(self, client):
        assert client.get("/api/v1/items", params={"limit": 1}).json()["items"][0]["id"] == 1


class TestOrderEndpoints:

    def test_update_order(self, client):
        response = client.post("/api/update-order", json={"order": [5, 3, 9]})

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "message" in response.json()

        body = client.get("/api/items", params={"limit": 5}).json()
        assert [item["id"] for item in body["items"]] == [5, 3, 9, 1, 2]
        assert client.get("/api/state").json()["hasCustomOrder"] is True

    @pytest.mark.parametrize(
        "order, named",
        [([1, 2, 2], "2"), ([0], "0"), ([201], "201"), (["a"], "'a'")],
    )
    def test_invalid_order_rejected(self, client, order, named):
        response = client.post("/api/update-order", json={"order": order})

        assert response.status_code == 400
        assert named in response.json()["error"]
        assert client.get("/api/state").json()["hasCustomOrder"] is False

    def test_missing_order_is_bad_request(self, client):
        response = client.post("/api/update-order", json={"items": [1]})

        assert response.status_code == 400
        assert "order" in response.json()["error"]

    def test_reset_order(self, client):
        client.post("/api/update-order", json={"order": [10]})
        response = client.post("/api/reset-order")

        assert response.status_code == 200
        assert client.get("/api/state").json()["hasCustomOrder"] is False


class TestSelectionEndpoints:

    def test_select_and_state(self, client):
        response = client.post("/api/update-selection", json={"id": 42, "selected": True})

        assert response.status_code == 200
        assert response.json() == {"success": True, "selected": True, "selectedCount": 1}
        assert client.get("/api/state").json() == {
            "selected": [42],
            "selectedCount": 1,
            "hasCustomOrder": False,
        }

        item = client.get("/api/items", params={"page": 3, "limit": 20}).json()["items"][1]
        assert item == {"id": 42, "text": "Item 42", "selected": True}

        client.post("/api/update-selection", json={"id": 42, "selected": False})
        assert client.get("/api/state").json()["selectedCount"] == 0

    def test_selection_listing(self, client):
        for item_id in (9, 3):
            client.post("/api/update-selection", json={"id": item_id, "selected": True})

        assert client.get("/api/selection").json() == {"selectedIds": [3, 9], "count": 2}

    @pytest.mark.parametrize("bad_id", [0, 201, "x", None])
    def test_invalid_id_rejected(self, client, bad_id):
        response = client.post("/api/update-selection", json={"id": bad_id, "selected": True})

        assert response.status_code == 400
        assert "error" in response.json()


class TestErrorResponses:

    def test_unknown_route(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_internal_error_is_generic(self, client):
        with patch(
            "virtual_catalog_api.app.services.catalog_service.synthesize",
            side_effect=RuntimeError("secret detail"),
        ):
            response = client.get("/api/items")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch items"}

    def test_internal_error_detail_in_debug_mode(self):
        app = create_app(Settings(catalog_size=10, debug=True))
        with TestClient(app) as debug_client:
            with patch(
                "virtual_catalog_api.app.services.catalog_service.synthesize",
                side_effect=RuntimeError("secret detail"),
            ):
                response = debug_client.get("/api/items")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch items", "message": "secret detail"}


def test_apps_do_not_share_state():
    first = TestClient(create_app(Settings(catalog_size=10)))
    second = TestClient(create_app(Settings(catalog_size=10)))

    first.post("/api/update-selection", json={"id": 1, "selected": True})

    assert first.get("/api/state").json()["selectedCount"] == 1
    assert second.get("/api/state").json()["selectedCount"] == 0
