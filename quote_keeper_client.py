"""Quote Keeper API client.

A thin wrapper around the HTTP API served by ``quote_keeper_api``.  It
uses the ``requests`` library and mirrors the server's operations one
method per route:

* authors: :meth:`list_authors`, :meth:`get_author`,
  :meth:`create_author`, :meth:`update_author`, :meth:`delete_author`
* collectors: :meth:`list_collectors`, :meth:`get_collector`,
  :meth:`my_collector`, :meth:`register_collector`,
  :meth:`update_collector`
* quotes: :meth:`list_quotes`, :meth:`get_quote`, :meth:`my_quotes`,
  :meth:`quotes_by_collector_id`, :meth:`quotes_by_author_id`,
  :meth:`quotes_by_author_name`, :meth:`upload_quote`,
  :meth:`update_quote`, :meth:`delete_quote`
* reports: :meth:`authors_with_quotes`, :meth:`total_quote_count`,
  :meth:`oldest_and_newest_quotes`, :meth:`unique_author_names`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message``.  Write operations
need a bearer token (see ``create_token.py``) passed as ``api_key``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote as url_quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class QuoteKeeperAPI:
    """Client for the Quote Keeper API (version 1)."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_key: Optional bearer token identifying the caller.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ...).
            path: Path relative to the API prefix (e.g. ``/quotes/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") if isinstance(err_json, dict) else None
                message = message or str(err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Authors
    # ------------------------------------------------------------------
    def list_authors(self) -> Result:
        return self._request("GET", "/authors/")

    def get_author(self, author_id: str) -> Result:
        return self._request("GET", f"/authors/{url_quote(author_id)}")

    def create_author(self, name: str, birth_year: int) -> Result:
        return self._request("POST", "/authors/", json_body={"name": name, "birth_year": birth_year})

    def update_author(
        self, author_id: str, *, name: Optional[str] = None, birth_year: Optional[int] = None
    ) -> Result:
        """Update an author.  Only the arguments given are sent."""
        body = {key: value for key, value in (("name", name), ("birth_year", birth_year)) if value is not None}
        return self._request("PATCH", f"/authors/{url_quote(author_id)}", json_body=body)

    def delete_author(self, author_id: str) -> Result:
        return self._request("DELETE", f"/authors/{url_quote(author_id)}")

    # ------------------------------------------------------------------
    # Collectors
    # ------------------------------------------------------------------
    def list_collectors(self) -> Result:
        return self._request("GET", "/collectors/")

    def get_collector(self, collector_id: str) -> Result:
        return self._request("GET", f"/collectors/{url_quote(collector_id)}")

    def my_collector(self) -> Result:
        return self._request("GET", "/collectors/me")

    def register_collector(self, collector_name: str) -> Result:
        return self._request("POST", "/collectors/", json_body={"collector_name": collector_name})

    def update_collector(self, collector_id: str, collector_name: str) -> Result:
        return self._request(
            "PUT",
            f"/collectors/{url_quote(collector_id)}",
            json_body={"collector_name": collector_name},
        )

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------
    def list_quotes(self) -> Result:
        return self._request("GET", "/quotes/")

    def get_quote(self, quote_id: str) -> Result:
        return self._request("GET", f"/quotes/{url_quote(quote_id)}")

    def my_quotes(self) -> Result:
        return self._request("GET", "/quotes/mine")

    def quotes_by_collector_id(self, collector_id: str) -> Result:
        return self._request("GET", f"/quotes/by-collector/{url_quote(collector_id)}")

    def quotes_by_author_id(self, author_id: str) -> Result:
        return self._request("GET", f"/quotes/by-author/{url_quote(author_id)}")

    def quotes_by_author_name(self, name: str) -> Result:
        return self._request("GET", "/quotes/by-author-name", params={"name": name})

    def upload_quote(self, content: str, author_id: str, collector_id: str) -> Result:
        return self._request(
            "POST",
            "/quotes/",
            json_body={"content": content, "author_id": author_id, "collector_id": collector_id},
        )

    def update_quote(self, quote_id: str, **changes: str) -> Result:
        """Update a quote with any of ``content``, ``author_id``, ``collector_id``."""
        return self._request("PATCH", f"/quotes/{url_quote(quote_id)}", json_body=changes)

    def delete_quote(self, quote_id: str) -> Result:
        return self._request("DELETE", f"/quotes/{url_quote(quote_id)}")

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def authors_with_quotes(self) -> Result:
        return self._request("GET", "/reports/authors-with-quotes")

    def total_quote_count(self) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/reports/quote-count")
        if error:
            return None, error
        return data["total"], None

    def oldest_and_newest_quotes(self) -> Result:
        return self._request("GET", "/reports/oldest-newest-quotes")

    def unique_author_names(self) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/reports/author-names")
        if error:
            return [], error
        return data, None
