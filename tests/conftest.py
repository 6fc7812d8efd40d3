from __future__ import annotations

import pytest

from requests_mock import Mocker

from surfcast.settings import StormGlassSettings


API_URL = "https://api.stormglass.test/v2"


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def settings() -> StormGlassSettings:
    return StormGlassSettings(api_token="fake-token", api_url=API_URL)


def make_sample(time: str = "2021-01-01T00:00:00+00:00", source: str = "noaa", **overrides) -> dict:
    readings = {
        "swellDirection": 64.26,
        "swellHeight": 0.15,
        "swellPeriod": 3.89,
        "waveDirection": 231.38,
        "waveHeight": 0.47,
        "windDirection": 299.45,
        "windSpeed": 100,
    }
    readings.update(overrides)
    sample: dict = {"time": time}
    for field, value in readings.items():
        sample[field] = {source: value} if value is not None else {}
    return sample
