"""Message Board API client.

A thin wrapper around the message board's REST endpoints built on
``requests``.  Each high-level method returns a ``(status_code, body)``
tuple instead of raising on HTTP errors, so callers can assert on error
responses as easily as on successful ones:

* :meth:`health` – ``GET /health``.
* :meth:`list_messages` – ``GET /api/messages``.
* :meth:`create_message` – ``POST /api/messages``.

Network failures (connection refused, timeouts) are logged and raised
as :class:`MessageBoardClientError`.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"


class MessageBoardClientError(Exception):
    """Raised when the API cannot be reached at all."""


class MessageBoardClient:
    """Client for interacting with the message board API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
                Falls back to the ``API_URL`` environment variable and
                then to :data:`DEFAULT_BASE_URL`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or os.getenv("API_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Tuple[int, Any]:
        """Perform an HTTP request and return ``(status_code, body)``.

        ``body`` is the decoded JSON document, or the raw text when the
        response is not JSON, or ``{}`` when it is empty.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            raise MessageBoardClientError(f"{method} {url} failed: {exc}") from exc
        if not response.content:
            return response.status_code, {}
        try:
            return response.status_code, response.json()
        except ValueError:
            return response.status_code, response.text

    def health(self) -> Tuple[int, Any]:
        return self._request("GET", "/health")

    def list_messages(self) -> Tuple[int, Any]:
        """Retrieve every message on the board, oldest first."""
        return self._request("GET", "/api/messages")

    def create_message(self, author: Optional[str] = None, content: Optional[str] = None) -> Tuple[int, Any]:
        """Post a message.

        Fields left as ``None`` are omitted from the payload, which lets
        callers exercise the API's validation of missing fields.
        """
        payload: Dict[str, str] = {}
        if author is not None:
            payload["author"] = author
        if content is not None:
            payload["content"] = content
        return self._request("POST", "/api/messages", json_body=payload)
