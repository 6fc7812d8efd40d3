from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..request import Request


class ProviderError(RuntimeError):
    """Base provider error."""

    def __init__(self, message: str, code: int = 500, description: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code
        self.description = description


@dataclass
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class for HTTP forecast providers."""

    name = "provider"

    def __init__(
        self,
        request: Optional[Request] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.request = request or Request(timeout=self.request_config.timeout)
        self._log = logging.getLogger(self.__class__.__name__)


__all__ = ["WeatherProvider", "ProviderError", "RequestConfig"]
