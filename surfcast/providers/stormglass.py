"""StormGlass point forecast provider."""
from __future__ import annotations

import json
import logging
import math
from typing import Any, List, Mapping, Optional

from .base import ProviderError, RequestConfig, WeatherProvider
from ..entities import FORECAST_FIELDS, WIRE_FIELDS, ForecastPoint
from ..request import Request
from ..settings import StormGlassSettings


class ClientRequestError(ProviderError):
    def __init__(self, message: str) -> None:
        internal_message = "Unexpected error when trying to communicate to StormGlass"
        super().__init__(f"{internal_message}: {message}")


class StormGlassResponseError(ProviderError):
    def __init__(self, status: int, body: Any) -> None:
        internal_message = "Unexpected error returned by the StormGlass service"
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8", errors="replace")
        serialized = json.dumps(body, separators=(",", ":"), default=str)
        super().__init__(
            f"{internal_message}: Error: {serialized} Code: {status}",
            code=status,
            description=serialized,
        )
        self.status = status
        self.body = body


class StormGlassProvider(WeatherProvider):
    """Integration with the StormGlass ``/weather/point`` endpoint."""

    name = "stormglass"
    params = ",".join(WIRE_FIELDS)

    def __init__(
        self,
        settings: Optional[StormGlassSettings] = None,
        request: Optional[Request] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.settings = settings or StormGlassSettings.from_env()
        super().__init__(
            request=request,
            request_config=request_config or RequestConfig(timeout=self.settings.timeout),
        )
        self.source = self.settings.source

    def fetch_points(self, latitude: float, longitude: float) -> List[ForecastPoint]:
        url = (
            f"{self.settings.api_url}/weather/point"
            f"?lat={latitude}&lng={longitude}&params={self.params}&source={self.source}"
        )
        self._log.debug("Requesting %s forecast for %s,%s", self.name, latitude, longitude)
        try:
            response = self.request.get(url, headers={"Authorization": self.settings.api_token})
            return self.normalize_response(response.data)
        except Exception as exc:  # noqa: BLE001 - surfaced as provider errors
            if Request.is_request_error(exc):
                self._log.error("%s returned %s", self.name, exc.response.status, exc_info=exc)
                raise StormGlassResponseError(exc.response.status, exc.response.data) from exc
            self._log.error("%s request failed", self.name, exc_info=exc)
            raise ClientRequestError(str(exc)) from exc

    def normalize_response(self, payload: Any) -> List[ForecastPoint]:
        points = normalize_response(payload, self.source, accept_zero=self.settings.accept_zero)
        if isinstance(payload, Mapping):
            dropped = len(payload.get("hours") or []) - len(points)
            if dropped:
                self._log.debug("Dropped %d incomplete %s samples", dropped, self.name)
        return points


def _reading(point: Mapping[str, Any], field: str, source: str) -> Any:
    readings = point.get(field)
    if not isinstance(readings, Mapping):
        return None
    return readings.get(source)


def is_valid_point(point: Any, source: str, *, accept_zero: bool = False) -> bool:
    if not isinstance(point, Mapping) or not point.get("time"):
        return False
    for field in WIRE_FIELDS:
        value = _reading(point, field, source)
        if isinstance(value, float) and math.isnan(value):
            return False
        if accept_zero and isinstance(value, (int, float)) and not isinstance(value, bool):
            continue
        if not value:
            return False
    return True


def normalize_response(payload: Any, source: str, *, accept_zero: bool = False) -> List[ForecastPoint]:
    if not isinstance(payload, Mapping):
        raise ValueError("StormGlass response must be a JSON object")
    hours = payload.get("hours") or []
    return [
        ForecastPoint(
            time=point["time"],
            **{attribute: point[field][source] for field, attribute in FORECAST_FIELDS.items()},
        )
        for point in hours
        if is_valid_point(point, source, accept_zero=accept_zero)
    ]


__all__ = [
    "ClientRequestError",
    "StormGlassProvider",
    "StormGlassResponseError",
    "is_valid_point",
    "normalize_response",
]
