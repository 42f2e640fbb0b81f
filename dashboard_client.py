"""CRUD Dashboard API client.

This module defines a small client wrapper around the dashboard's REST
API.  The client uses the ``requests`` library internally to make HTTP
calls and exposes one method per HTTP verb (:meth:`DashboardAPI.get`,
:meth:`~DashboardAPI.post`, :meth:`~DashboardAPI.put`,
:meth:`~DashboardAPI.patch`, :meth:`~DashboardAPI.delete`) plus
high‑level helpers for users and posts:

* :meth:`list_users`, :meth:`get_user`, :meth:`create_user`,
  :meth:`update_user`, :meth:`delete_user`
* :meth:`list_posts`, :meth:`list_posts_by_user`, :meth:`get_post`,
  :meth:`create_post`, :meth:`update_post`, :meth:`delete_post`
* :meth:`search_users`, :meth:`search_posts` and
  :meth:`post_count_by_user`, computed on the client from the full
  user or post list.

Every call returns a tuple ``(data, error)``.  On success ``error`` is
``None`` and ``data`` holds the payload: the server wraps payloads as
``{"data": ...}`` and the client unwraps that envelope, returning any
other body unchanged.  On failure ``data`` is ``None`` and ``error`` is
an :class:`ApiError`.  Errors reported by the server keep the HTTP
status; failures where no response arrived at all use status ``0``.

The helpers check payloads against the same rules the server applies
before sending them, and return a status ``400`` error without any
network traffic when a check fails.
"""

from __future__ import annotations

import logging
import os
import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3002/api"

# Status used for failures where the server never answered.
NETWORK_ERROR_STATUS = 0

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_MIN_LENGTH = 3
TITLE_MIN_LENGTH = 5
BODY_MIN_LENGTH = 10
SEARCH_MIN_LENGTH = 2


@dataclass
class ApiError:
    """Normalized error returned by every client call.

    Attributes:
        status: HTTP status code, or ``0`` when no response was received.
        message: Human readable description.
        details: Extra information from the server (e.g. per‑field
            validation errors) or a short explanation for local failures.
    """

    status: int
    message: str
    details: Any = ""


Result = Tuple[Optional[Any], Optional[ApiError]]


def validate_user_data(data: Dict[str, Any], *, partial: bool = False) -> List[str]:
    """Return a list of problems with a user payload.

    With ``partial=True`` only the fields present are checked, as for
    an update.
    """
    errors: List[str] = []
    for field in ("name", "username", "email"):
        if field not in data:
            if not partial:
                errors.append(f"{field} is required")
            continue
        value = data[field]
        if not isinstance(value, str) or not value.strip():
            errors.append(f"{field} cannot be empty")
    username = data.get("username")
    if isinstance(username, str) and username.strip() and len(username.strip()) < USERNAME_MIN_LENGTH:
        errors.append(f"username must be at least {USERNAME_MIN_LENGTH} characters long")
    email = data.get("email")
    if isinstance(email, str) and email.strip() and not EMAIL_PATTERN.match(email):
        errors.append("email must be a valid email address")
    return errors


def validate_post_data(data: Dict[str, Any], *, partial: bool = False) -> List[str]:
    """Return a list of problems with a post payload."""
    errors: List[str] = []
    if "userId" in data:
        user_id = data["userId"]
        # The server accepts numeric strings such as "3".
        if isinstance(user_id, str) and user_id.isdigit():
            user_id = int(user_id)
        if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id <= 0:
            errors.append("userId must be a positive integer")
    elif not partial:
        errors.append("userId is required")

    for field, minimum in (("title", TITLE_MIN_LENGTH), ("body", BODY_MIN_LENGTH)):
        if field not in data:
            if not partial:
                errors.append(f"{field} is required")
            continue
        value = data[field]
        if not isinstance(value, str) or not value.strip():
            errors.append(f"{field} cannot be empty")
        elif len(value.strip()) < minimum:
            errors.append(f"{field} must be at least {minimum} characters long")
    return errors


class DashboardAPI:
    """Client for interacting with the CRUD dashboard API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including its prefix, e.g.
                ``http://localhost:3002/api``.  Defaults to the
                ``DASHBOARD_API_URL`` environment variable, then to
                :data:`DEFAULT_BASE_URL`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each request.
        """
        self.base_url = (base_url or os.getenv("DASHBOARD_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def set_base_url(self, url: str) -> None:
        self.base_url = url.rstrip("/")

    # ------------------------------------------------------------------
    # Verb wrappers
    # ------------------------------------------------------------------
    def get(self, path: str, *, params: Dict[str, Any] | None = None) -> Result:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: Any) -> Result:
        return self._request("POST", path, json_body=payload)

    def put(self, path: str, payload: Any) -> Result:
        return self._request("PUT", path, json_body=payload)

    def patch(self, path: str, payload: Any) -> Result:
        return self._request("PATCH", path, json_body=payload)

    def delete(self, path: str) -> Result:
        return self._request("DELETE", path)

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PUT/PATCH).
        Returns:
            A tuple ``(data, error)``.  ``data`` is the unwrapped payload
            on success (``None`` for an empty body) and ``error`` is
            ``None``.  On failure ``data`` is ``None`` and ``error`` is
            an :class:`ApiError`.
        """
        url = f"{self.base_url}{path}"
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
        except requests.HTTPError as exc:
            error = self._http_error(exc.response)
            logger.error("API request failed (%s): %s", error.status, error.message)
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, ApiError(
                status=NETWORK_ERROR_STATUS,
                message=str(exc) or "Network error occurred",
                details="Request failed due to network issues",
            )

        if not response.content:
            return None, None
        try:
            payload = response.json()
        except ValueError:
            logger.error("Response from %s is not valid JSON", url)
            return None, ApiError(
                status=NETWORK_ERROR_STATUS,
                message="Invalid JSON in response",
                details=response.text[:200],
            )
        if isinstance(payload, dict) and "data" in payload:
            return payload["data"], None
        return payload, None

    @staticmethod
    def _http_error(response: requests.Response) -> ApiError:
        """Build an :class:`ApiError` from a non‑success response.

        The server's JSON ``message`` and ``details`` are used when
        present.  If the body is not JSON the reason phrase (e.g.
        ``"Bad Gateway"``) is used instead.
        """
        status = response.status_code
        message = f"HTTP Error: {status}"
        details: Any = ""
        try:
            body = response.json()
        except ValueError:
            message = response.reason or message
        else:
            if isinstance(body, dict):
                message = body.get("message") or body.get("detail") or message
                details = body.get("details") or ""
        return ApiError(status=status, message=str(message), details=details)

    @staticmethod
    def _invalid(errors: List[str]) -> Result:
        logger.warning("Rejected payload before sending: %s", "; ".join(errors))
        return None, ApiError(status=400, message=errors[0], details=errors)

    @staticmethod
    def _check_id(value: Any, label: str) -> List[str]:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return [f"A valid {label} ID is required"]
        return []

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self.get("/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: int) -> Result:
        errors = self._check_id(user_id, "user")
        if errors:
            return self._invalid(errors)
        return self.get(f"/users/{user_id}")

    def create_user(self, payload: Dict[str, Any]) -> Result:
        """Create a user.

        Args:
            payload: ``name``, ``username`` and ``email`` plus any of
                ``phone``, ``website``, ``address`` and ``company``.
        Returns:
            A tuple ``(user, error)``.
        """
        errors = validate_user_data(payload)
        if errors:
            return self._invalid(errors)
        return self.post("/users", payload)

    def update_user(self, user_id: int, payload: Dict[str, Any]) -> Result:
        """Merge ``payload`` into an existing user."""
        errors = self._check_id(user_id, "user")
        if not payload:
            errors.append("At least one field must be provided")
        errors.extend(validate_user_data(payload, partial=True))
        if errors:
            return self._invalid(errors)
        return self.patch(f"/users/{user_id}", {"id": user_id, **payload})

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        errors = self._check_id(user_id, "user")
        if errors:
            return False, self._invalid(errors)[1]
        _, error = self.delete(f"/users/{user_id}")
        if error:
            return False, error
        logger.info("User %s deleted", user_id)
        return True, None

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self.get("/posts")
        if error:
            return [], error
        return data or [], None

    def list_posts_by_user(self, user_id: int) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve the posts written by one user, oldest first."""
        errors = self._check_id(user_id, "user")
        if errors:
            return [], self._invalid(errors)[1]
        data, error = self.get("/posts", params={"userId": user_id})
        if error:
            return [], error
        return data or [], None

    def get_post(self, post_id: int) -> Result:
        errors = self._check_id(post_id, "post")
        if errors:
            return self._invalid(errors)
        return self.get(f"/posts/{post_id}")

    def create_post(self, payload: Dict[str, Any]) -> Result:
        """Create a post.

        Args:
            payload: ``userId``, ``title`` and ``body``.
        Returns:
            A tuple ``(post, error)``.  An unknown ``userId`` is
            reported by the server as a 400.
        """
        errors = validate_post_data(payload)
        if errors:
            return self._invalid(errors)
        return self.post("/posts", payload)

    def update_post(self, post_id: int, payload: Dict[str, Any]) -> Result:
        """Merge ``payload`` into an existing post.

        The post id is echoed in the request body alongside the
        changed fields.
        """
        errors = self._check_id(post_id, "post")
        if not payload:
            errors.append("At least one field must be provided")
        errors.extend(validate_post_data(payload, partial=True))
        if errors:
            return self._invalid(errors)
        return self.patch(f"/posts/{post_id}", {"id": post_id, **payload})

    def delete_post(self, post_id: int) -> Tuple[bool, Optional[ApiError]]:
        errors = self._check_id(post_id, "post")
        if errors:
            return False, self._invalid(errors)[1]
        _, error = self.delete(f"/posts/{post_id}")
        if error:
            return False, error
        logger.info("Post %s deleted", post_id)
        return True, None

    def search_users(self, term: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Return users whose name, username or email contains ``term``.

        Same rules as :meth:`search_posts`.
        """
        needle = (term or "").strip().lower()
        if len(needle) < SEARCH_MIN_LENGTH:
            return [], self._invalid([f"Search term must be at least {SEARCH_MIN_LENGTH} characters"])[1]
        users, error = self.list_users()
        if error:
            return [], error
        return [
            user
            for user in users
            if any(needle in (user.get(field) or "").lower() for field in ("name", "username", "email"))
        ], None

    def search_posts(self, term: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Return posts whose title or body contains ``term``.

        Matching is case insensitive and done on the client over the
        full post list.  ``term`` must have at least two characters.
        """
        needle = (term or "").strip().lower()
        if len(needle) < SEARCH_MIN_LENGTH:
            return [], self._invalid([f"Search term must be at least {SEARCH_MIN_LENGTH} characters"])[1]
        posts, error = self.list_posts()
        if error:
            return [], error
        return [
            post
            for post in posts
            if needle in post.get("title", "").lower() or needle in post.get("body", "").lower()
        ], None

    def post_count_by_user(self) -> Tuple[Dict[int, int], Optional[ApiError]]:
        """Count posts per ``userId``."""
        posts, error = self.list_posts()
        if error:
            return {}, error
        return dict(Counter(post["userId"] for post in posts)), None
