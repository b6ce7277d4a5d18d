"""Fundraiser tracker API client.

This module defines a small client wrapper around the fundraiser
tracker REST API, for scripts and bots that drive the event from
somewhere else than the admin page (a lap counter at the pool side, a
payment webhook updating the pot, ...).  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes one method per endpoint:

* :meth:`get_data` – read the whole public state.
* :meth:`verify` – check the admin token.
* :meth:`add_laps`, :meth:`remove_laps`, :meth:`set_laps` – pledged lengths.
* :meth:`add_laps_done`, :meth:`remove_laps_done`, :meth:`set_laps_done` –
  lengths actually swum.
* :meth:`set_cagnotte` and :meth:`update_data` – the pot.
* :meth:`create_donation`, :meth:`update_donation`, :meth:`delete_donation`.
* :meth:`create_goal`, :meth:`update_goal`, :meth:`delete_goal`.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.

Admin methods require the client to be initialised with
``api_key='<admin token>'``; it is sent as a bearer credential.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class FundraiserAPI:
    """Client for the fundraiser tracker API."""

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
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            api_key: Optional admin token.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included in
                all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/data``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _pick(result: Result, key: str) -> Result:
        """Extract ``key`` from a successful response body."""
        data, error = result
        if error:
            return None, error
        if isinstance(data, dict):
            return data.get(key), None
        return None, None

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------
    def get_data(self) -> Result:
        """Return the whole state (counters, pot, tiers)."""
        return self._request("GET", "/api/data")

    def verify(self, token: Optional[str] = None) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Check ``token`` (the client's own key by default) against the server.

        Returns:
            A tuple ``(valid, error)``.  A rate limited caller gets
            ``False`` with ``status_code`` 429.
        """
        data, error = self._request("POST", "/api/admin/verify", json_body={"token": token or self.api_key})
        if error:
            return False, error
        return bool(data and data.get("success")), None

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------
    def _counter(self, resource: str, action: str, key: str, count: Optional[int]) -> Result:
        body: Dict[str, Any] = {}
        if count is not None:
            body["count"] = count
        return self._pick(self._request("POST", f"/api/admin/{resource}/{action}", json_body=body), key)

    def add_laps(self, count: Optional[int] = None) -> Result:
        return self._counter("lap", "add", "lapCount", count)

    def remove_laps(self, count: Optional[int] = None) -> Result:
        return self._counter("lap", "remove", "lapCount", count)

    def set_laps(self, count: int) -> Result:
        return self._counter("lap", "set", "lapCount", count)

    def add_laps_done(self, count: Optional[int] = None) -> Result:
        return self._counter("lapsdone", "add", "lapsDone", count)

    def remove_laps_done(self, count: Optional[int] = None) -> Result:
        return self._counter("lapsdone", "remove", "lapsDone", count)

    def set_laps_done(self, count: int) -> Result:
        return self._counter("lapsdone", "set", "lapsDone", count)

    def set_cagnotte(self, amount: float) -> Result:
        """Overwrite the pot and return the stored value."""
        return self._pick(self._request("POST", "/api/admin/cagnotte", json_body={"amount": amount}), "cagnotte")

    def update_data(self, *, lap_count: Optional[int] = None, cagnotte: Optional[float] = None) -> Result:
        """Set the lap count and/or the pot in one call; returns the new state."""
        body: Dict[str, Any] = {}
        if lap_count is not None:
            body["lapCount"] = lap_count
        if cagnotte is not None:
            body["cagnotte"] = cagnotte
        return self._pick(self._request("POST", "/api/admin/data", json_body=body), "data")

    # ------------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------------
    def create_donation(
        self,
        amount: float,
        description: str,
        *,
        icon: Optional[str] = None,
        special: bool = False,
    ) -> Result:
        """Create a donation tier.

        Returns:
            A tuple ``(response, error)`` where ``response`` holds the
            new ``donation`` and the sorted ``donations`` list.
        """
        body: Dict[str, Any] = {"amount": amount, "description": description, "special": special}
        if icon is not None:
            body["icon"] = icon
        return self._request("POST", "/api/admin/donations", json_body=body)

    def update_donation(self, donation_id: int, **changes: Any) -> Result:
        """Update the given fields (``amount``, ``icon``, ``description``, ``special``)."""
        return self._request("PUT", f"/api/admin/donations/{donation_id}", json_body=changes)

    def delete_donation(self, donation_id: int) -> Result:
        return self._pick(self._request("DELETE", f"/api/admin/donations/{donation_id}"), "donations")

    def create_goal(self, amount: float, description: str, *, icon: Optional[str] = None) -> Result:
        """Create a goal tier; see :meth:`create_donation`."""
        body: Dict[str, Any] = {"amount": amount, "description": description}
        if icon is not None:
            body["icon"] = icon
        return self._request("POST", "/api/admin/goals", json_body=body)

    def update_goal(self, goal_id: int, **changes: Any) -> Result:
        return self._request("PUT", f"/api/admin/goals/{goal_id}", json_body=changes)

    def delete_goal(self, goal_id: int) -> Result:
        return self._pick(self._request("DELETE", f"/api/admin/goals/{goal_id}"), "goals")
