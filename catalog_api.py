"""Virtual catalog API client.

This module defines a small client wrapper around the HTTP interface of
the virtual catalog service.  It uses the ``requests`` library and
mirrors the server routes one to one:

* :meth:`CatalogAPI.list_items` – fetch one page of items.
* :meth:`CatalogAPI.iter_items` – walk pages until ``hasMore`` is false.
* :meth:`CatalogAPI.update_order` – replace the custom order.
* :meth:`CatalogAPI.reset_order` – return to natural order.
* :meth:`CatalogAPI.update_selection` – select or deselect one item.
* :meth:`CatalogAPI.get_state` – selected ids and custom order flag.
* :meth:`CatalogAPI.get_selection` – selected ids only.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class CatalogAPI:
    """Client for interacting with the virtual catalog API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3001``.
            prefix: Path prefix under which the catalog routes live.
                Use ``/api/v1`` to target the versioned routes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Route relative to the prefix (e.g. ``/items``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def list_items(
        self, page: int = 1, limit: int = 20, search: str = ""
    ) -> Tuple[Dict[str, Any], Optional[ApiError]]:
        """Retrieve one page of items.

        Returns:
            A tuple ``(page, error)`` where ``page`` has the keys
            ``items``, ``total``, ``hasMore``, ``page`` and ``limit``.
        """
        params: Dict[str, Any] = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        data, error = self._request("GET", "/items", params=params)
        if error:
            return {}, error
        return data or {}, None

    def iter_items(self, search: str = "", limit: int = 100, start_page: int = 1) -> Iterator[Dict[str, Any]]:
        """Yield items page by page until the server reports no more.

        Stops silently on the first failed request after logging it.
        """
        page = start_page
        while True:
            data, error = self.list_items(page=page, limit=limit, search=search)
            if error:
                logger.warning("Stopped paging at page %s: %s", page, error["message"])
                return
            yield from data.get("items", [])
            if not data.get("hasMore"):
                return
            page += 1

    # ------------------------------------------------------------------
    # Order
    # ------------------------------------------------------------------
    def update_order(self, order: Sequence[int]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Replace the custom order.

        A 400 response (duplicate or unknown id) is returned as an
        error whose message names the offending id.
        """
        return self._request("POST", "/update-order", json_body={"order": list(order)})

    def reset_order(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("POST", "/reset-order")

    # ------------------------------------------------------------------
    # Selection and state
    # ------------------------------------------------------------------
    def update_selection(self, item_id: int, selected: bool) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Select or deselect one item."""
        return self._request(
            "POST", "/update-selection", json_body={"id": item_id, "selected": selected}
        )

    def get_state(self) -> Tuple[Dict[str, Any], Optional[ApiError]]:
        data, error = self._request("GET", "/state")
        if error:
            return {}, error
        return data or {}, None

    def get_selection(self) -> Tuple[List[int], Optional[ApiError]]:
        """Retrieve the selected ids in ascending order."""
        data, error = self._request("GET", "/selection")
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("selectedIds"), list):
            return data["selectedIds"], None
        return [], None
