"""Configuration for the StormGlass client, read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any


DEFAULT_API_URL = "https://api.stormglass.io/v2"
DEFAULT_SOURCE = "noaa"
DEFAULT_TIMEOUT = 10.0


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ConfigurationError(f"Environment variable {name} is required")
    return value


@dataclass(frozen=True)
class StormGlassSettings:
    api_token: str
    api_url: str = DEFAULT_API_URL
    source: str = DEFAULT_SOURCE
    timeout: float = DEFAULT_TIMEOUT
    accept_zero: bool = False

    def __post_init__(self) -> None:
        if not self.api_token:
            raise ConfigurationError("StormGlass API token must not be empty")
        if not self.source:
            raise ConfigurationError("StormGlass source must not be empty")
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "StormGlassSettings":
        timeout_raw = env("STORMGLASS_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ConfigurationError(f"STORMGLASS_TIMEOUT must be a number, got {timeout_raw!r}") from exc
        return cls(
            api_token=env("STORMGLASS_API_TOKEN"),
            api_url=env("STORMGLASS_API_URL", DEFAULT_API_URL),
            source=env("STORMGLASS_SOURCE", DEFAULT_SOURCE),
            timeout=timeout,
            accept_zero=env("STORMGLASS_ACCEPT_ZERO", "0") == "1",
        )

    def get(self, key: str) -> Any:
        if key not in {item.name for item in fields(self)}:
            raise ConfigurationError(f"Unknown setting {key!r}")
        return getattr(self, key)


__all__ = ["ConfigurationError", "StormGlassSettings", "env"]
