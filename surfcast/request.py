"""Thin HTTP requester used by the forecast providers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    status: int
    data: Any


class RequestError(Exception):
    """The server answered with an HTTP error status."""

    def __init__(self, response: HTTPResponse) -> None:
        super().__init__(f"HTTP {response.status}")
        self.response = response


class Request:
    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 10.0) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> HTTPResponse:
        response = self.session.get(url, headers=headers or {}, timeout=self.timeout)
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            logger.debug("GET %s returned %s", response.url, response.status_code)
            raise RequestError(HTTPResponse(response.status_code, _decode(response))) from exc
        return HTTPResponse(response.status_code, response.json())

    @staticmethod
    def is_request_error(error: object) -> bool:
        """Return True when ``error`` carries an HTTP response with a status."""
        response = getattr(error, "response", None)
        if response is None:
            return False
        return getattr(response, "status", None) is not None


def _decode(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


__all__ = ["HTTPResponse", "Request", "RequestError"]
