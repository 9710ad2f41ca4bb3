"""QuickWash API client.

This module defines a small client wrapper around the QuickWash REST
API.  It mirrors the routes one to one and is what front ends and
scripts use to talk to the server:

* :meth:`QuickWashAPI.get_services` – list the service catalogue.
* :meth:`QuickWashAPI.signup` / :meth:`QuickWashAPI.login` – create or
  verify an account.
* :meth:`QuickWashAPI.create_booking` – book a pickup.
* :meth:`QuickWashAPI.get_user_bookings` – a customer's bookings.
* :meth:`QuickWashAPI.get_all_bookings` – every booking (provider view).
* :meth:`QuickWashAPI.update_booking` – change status or add a rating.
* :meth:`QuickWashAPI.get_profile` / :meth:`QuickWashAPI.get_impact` –
  profile and eco impact.
* :meth:`QuickWashAPI.get_stats` – provider dashboard figures.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
list calls) and ``error`` is a dictionary with ``status_code`` and
``message``.  The client uses the ``requests`` library internally.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class QuickWashAPI:
    """Client for the QuickWash API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:5000/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL including the ``/api`` prefix.
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
            method: HTTP method (``GET``, ``POST``, ``PATCH``).
            path: Path relative to :attr:`base_url` (e.g. ``/services``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
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
                    message = err_json.get("detail") or err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Catalogue and accounts
    # ------------------------------------------------------------------
    def get_services(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/services")

    def signup(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: str = "customer",
        address: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register an account.  ``data`` is ``{"success": True, "user": {...}}``."""
        payload = {"name": name, "email": email, "password": password, "role": role, "address": address}
        return self._request("POST", "/signup", json_body=payload)

    def login(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/login", json_body={"email": email, "password": password})

    def get_profile(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/profile/{quote(email)}")

    def get_impact(self, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/profile/{quote(email)}/impact")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def create_booking(
        self,
        *,
        user_id: int,
        service_id: int,
        email: str,
        pickup_date: str,
        pickup_time: str,
        address: str,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Book a pickup.  ``data`` is ``{"success": True, "booking": {...}}``."""
        payload = {
            "user_id": user_id,
            "service_id": service_id,
            "email": email,
            "pickup_date": pickup_date,
            "pickup_time": pickup_time,
            "address": address,
        }
        return self._request("POST", "/bookings", json_body=payload)

    def get_user_bookings(self, email: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list(f"/bookings/{quote(email)}")

    def get_all_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/bookings")

    def update_booking(
        self, booking_id: Any, updates: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Patch a booking, e.g. ``{"status": "accepted"}`` or
        ``{"status": "completed", "rating": 5}``."""
        return self._request("PATCH", f"/bookings/{booking_id}", json_body=updates)

    def get_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/stats")
