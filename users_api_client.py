"""User Registry API client.

A thin wrapper around the ``/users`` resource of a running User
Registry API.  The client uses the ``requests`` library internally and
never raises on HTTP or network failures: every method returns a tuple
``(data, error)`` where ``error`` is ``None`` on success, or a
dictionary with the keys ``status_code`` and ``message``.

* :meth:`UsersAPI.list_users` – return every user.
* :meth:`UsersAPI.get_user` – fetch one user; a missing user is ``None``.
* :meth:`UsersAPI.upsert_user` – insert or replace a user by id.
* :meth:`UsersAPI.create_user` – create a user under a server‑chosen id.
* :meth:`UsersAPI.delete_user` – delete a user by id.

Records are plain dictionaries in the wire format, e.g.
``{"ID": "1", "Name": "Mario", "Age": 35}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UsersAPI:
    """Client for the user resource of the User Registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            prefix: Route prefix the service was started with
                (``API_PREFIX``), e.g. ``/api/v1``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds for every request.
        """
        self.base_url = base_url.rstrip("/") + prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _user_path(user_id: Any) -> str:
        return "/users/" + quote(str(user_id), safe="")

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the decoded JSON
            body (or ``None`` for an empty body) and ``error`` is
            ``None``.  On failure ``data`` is ``None`` and ``error``
            describes the issue.
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
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.  The list is empty on failure."""
        data, error = self._request("GET", "/users/")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user.

        A missing user is not an error: the result is ``(None, None)``.
        """
        data, error = self._request("GET", self._user_path(user_id))
        if error and error["status_code"] == 404:
            return None, None
        return data, error

    def upsert_user(self, user_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Insert or replace the user at ``user_id``.

        Args:
            user_id: Key to store the user under.  Any ``ID`` in
                ``payload`` is ignored by the server.
            payload: ``{"Name": ..., "Age": ...}``.
        """
        return self._request("PUT", self._user_path(user_id), json_body=payload)

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user; the returned record carries the generated ``ID``."""
        return self._request("POST", "/users", json_body=payload)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a user.  Deleting an unknown id succeeds."""
        _, error = self._request("DELETE", self._user_path(user_id))
        return error is None, error
