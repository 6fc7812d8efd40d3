from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Tuple


# Wire name -> attribute name, in the order the API expects them in ``params``.
FORECAST_FIELDS: Dict[str, str] = {
    "swellDirection": "swell_direction",
    "swellHeight": "swell_height",
    "swellPeriod": "swell_period",
    "waveDirection": "wave_direction",
    "waveHeight": "wave_height",
    "windDirection": "wind_direction",
    "windSpeed": "wind_speed",
}

WIRE_FIELDS: Tuple[str, ...] = tuple(FORECAST_FIELDS)


@dataclass(frozen=True)
class ForecastPoint:
    """Normalized forecast sample resolved from a single data source.

    Heights are in metres, periods in seconds, directions in degrees and
    wind speed in metres per second, exactly as the provider reports them.
    """

    time: str
    wave_height: float
    wave_direction: float
    swell_direction: float
    swell_height: float
    swell_period: float
    wind_direction: float
    wind_speed: float

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        result: Dict[str, object] = {"time": payload["time"]}
        for wire_name, attribute in FORECAST_FIELDS.items():
            result[wire_name] = payload[attribute]
        return result


__all__ = ["FORECAST_FIELDS", "WIRE_FIELDS", "ForecastPoint"]
