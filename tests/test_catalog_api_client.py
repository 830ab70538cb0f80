from unittest.mock import Mock

import pytest
import requests

from catalog_api import CatalogAPI


def make_response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.content = b"{}" if payload is not None else b""
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return CatalogAPI(base_url="http://catalog.local/", session=session)


class TestCatalogAPI:

    def test_list_items_sends_query(self, api, session):
        payload = {"items": [{"id": 1}], "total": 1, "hasMore": False, "page": 1, "limit": 20}
        session.request.return_value = make_response(payload=payload)

        data, error = api.list_items(page=1, limit=20, search="7")

        assert error is None
        assert data == payload
        session.request.assert_called_once_with(
            method="GET",
            url="http://catalog.local/api/items",
            params={"page": 1, "limit": 20, "search": "7"},
            json=None,
            timeout=15,
        )

    def test_update_order_error_message(self, api, session):
        session.request.return_value = make_response(400, {"error": "Duplicate id in order: 3"})

        data, error = api.update_order([3, 3])

        assert data is None
        assert error == {"status_code": 400, "message": "Duplicate id in order: 3"}
        assert session.request.call_args.kwargs["json"] == {"order": [3, 3]}

    def test_update_selection(self, api, session):
        payload = {"success": True, "selected": True, "selectedCount": 1}
        session.request.return_value = make_response(payload=payload)

        data, error = api.update_selection(42, True)

        assert error is None
        assert data == payload
        assert session.request.call_args.kwargs["url"] == "http://catalog.local/api/update-selection"

    def test_connection_failure(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")

        data, error = api.get_state()

        assert data == {}
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_iter_items_follows_has_more(self, api, session):
        session.request.side_effect = [
            make_response(payload={"items": [{"id": 1}, {"id": 2}], "hasMore": True}),
            make_response(payload={"items": [{"id": 3}], "hasMore": False}),
        ]

        assert [item["id"] for item in api.iter_items(limit=2)] == [1, 2, 3]
        assert session.request.call_count == 2

    def test_get_selection(self, api, session):
        session.request.return_value = make_response(payload={"selectedIds": [3, 9], "count": 2})

        ids, error = api.get_selection()

        assert ids == [3, 9]
        assert error is None

    def test_versioned_prefix(self, session):
        api = CatalogAPI(base_url="http://catalog.local", prefix="api/v1/", session=session)
        session.request.return_value = make_response(payload={"success": True, "message": "Order reset"})

        api.reset_order()

        assert session.request.call_args.kwargs["url"] == "http://catalog.local/api/v1/reset-order"
