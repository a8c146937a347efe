"""News Headlines API client.

A small wrapper around the REST API served by ``news_headlines_api``.
It uses the ``requests`` library and exposes one method per endpoint:

* :meth:`describe` – fetch the endpoint index served at ``/api``.
* :meth:`list_headlines` – return all headlines.
* :meth:`get_random_headline` – return one headline at random.
* :meth:`get_headline` – fetch a single headline by its identifier.
* :meth:`create_headline` – add a headline.
* :meth:`update_headline` – change a headline.
* :meth:`delete_headline` – remove a headline.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message`` keys,
where ``message`` is the server's ``error`` string when it sent one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

# Marks "argument not given" so that ``image_url=None`` can clear an image.
_UNSET: Any = object()


class HeadlinesClient:
    """Client for the News Headlines API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3001",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, without the ``/api`` prefix.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/news``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
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
                    message = err_json.get("error") or str(err_json)
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
    # Headline operations
    # ------------------------------------------------------------------
    def describe(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the API index with its list of endpoints."""
        return self._request("GET", "/api")

    def list_headlines(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all headlines.

        Returns:
            A tuple ``(headlines, error)``.  ``headlines`` is empty on
            failure.
        """
        data, error = self._request("GET", "/api/news")
        if error:
            return [], error
        return data or [], None

    def get_random_headline(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a random headline; fails with 404 when none exist."""
        return self._request("GET", "/api/news/random")

    def get_headline(self, headline_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single headline by ID."""
        return self._request("GET", f"/api/news/{headline_id}")

    def create_headline(
        self,
        title: str,
        *,
        image_url: Optional[str] = _UNSET,
        url: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a headline.

        Args:
            title: Headline text.  Must not be empty.
            image_url: Image for the headline.  Omit it to let clients
                use their fallback image.
            url: Link to the story.  The server uses ``#`` when omitted.
        Returns:
            A tuple ``(headline, error)``.
        """
        payload: Dict[str, Any] = {"title": title}
        if image_url is not _UNSET:
            payload["imageUrl"] = image_url
        if url is not None:
            payload["url"] = url
        return self._request("POST", "/api/news", json_body=payload)

    def update_headline(
        self,
        headline_id: Any,
        *,
        title: Optional[str] = None,
        image_url: Optional[str] = _UNSET,
        url: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update a headline.

        ``title`` and ``url`` are sent only when given.  ``image_url`` is
        sent whenever it is passed, so ``image_url=None`` clears the
        image on the server.
        """
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if image_url is not _UNSET:
            payload["imageUrl"] = image_url
        if url is not None:
            payload["url"] = url
        return self._request("PUT", f"/api/news/{headline_id}", json_body=payload)

    def delete_headline(self, headline_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a headline, returning it as it was before removal."""
        return self._request("DELETE", f"/api/news/{headline_id}")
