"""
Ohana API client.

Thin wrapper over the Ohana API v1 (https://github.com/codeforamerica/ohana-api):

    GET {endpoint}/search           -> list of locations
    GET {endpoint}/locations        -> list of locations (browse all)
    GET {endpoint}/locations/{id}   -> single location

Non-2xx responses raise the matching OhanaError subclass.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from app.clients.exceptions import ConnectionFailed, OhanaError, error_for_status
from schemas.location import Location, SearchParams

logger = logging.getLogger(__name__)

MEDIA_TYPE = "application/vnd.ohanapi+json; version=1"

Params = Union[SearchParams, Dict[str, Any], None]


def _query(params: Params) -> Dict[str, Any]:
    if params is None:
        return {}
    if isinstance(params, SearchParams):
        return params.to_query()
    return {k: v for k, v in params.items() if v is not None}


def _error_details(resp: requests.Response):
    """Pull the message and error list out of an Ohana error body."""
    try:
        body = resp.json()
    except ValueError:
        return (resp.text or resp.reason or "").strip(), []

    if not isinstance(body, dict):
        return str(body), []

    # Ohana sends e.g. {"error": "bad request", "description": "...is missing."};
    # keep every part so callers can inspect the full wording.
    parts = [body.get(k) for k in ("message", "error", "description")]
    message = ": ".join(str(p) for p in parts if p)
    errors = body.get("errors") or []
    if isinstance(errors, dict):
        errors = [f"{k} {v}" for k, v in errors.items()]
    elif isinstance(errors, str):
        errors = [errors]
    return str(message), [str(e) for e in errors]


class OhanaClient:
    def __init__(
        self,
        api_endpoint: str,
        api_token: Optional[str] = None,
        timeout: Optional[float] = 30.0,
        user_agent: str = "Ohana Web Search",
        session: Optional[requests.Session] = None,
    ):
        self.api_endpoint = api_endpoint.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": MEDIA_TYPE,
            "User-Agent": user_agent,
        })
        if api_token:
            self.session.headers["X-Api-Token"] = api_token

    # ----------------------------------------------------
    #                  UPSTREAM OPERATIONS
    # ----------------------------------------------------
    def search(self, endpoint: str, params: Params = None) -> List[Location]:
        data = self._get(endpoint, _query(params))
        return [Location(**row) for row in data]

    def locations(self, params: Params = None) -> List[Location]:
        data = self._get("locations", _query(params))
        return [Location(**row) for row in data]

    def location(self, location_id: Union[int, str]) -> Location:
        data = self._get(f"locations/{location_id}")
        return Location(**data)

    # ----------------------------------------------------
    #                      TRANSPORT
    # ----------------------------------------------------
    def _get(self, path: str, params: Optional[Dict[str, Any]] = None):
        url = f"{self.api_endpoint}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)

        try:
            resp = self.session.get(url, params=params or None, timeout=self.timeout)
        except requests.RequestException as e:
            raise ConnectionFailed(str(e), method="GET", url=url) from e

        if resp.status_code >= 400:
            message, errors = _error_details(resp)
            error_cls = error_for_status(resp.status_code) or OhanaError
            raise error_cls(
                message,
                status_code=resp.status_code,
                method="GET",
                url=url,
                errors=errors,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise OhanaError(
                "Invalid JSON in response",
                status_code=resp.status_code,
                method="GET",
                url=url,
            ) from e
