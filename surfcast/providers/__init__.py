from .base import ProviderError, RequestConfig, WeatherProvider
from .stormglass import ClientRequestError, StormGlassProvider, StormGlassResponseError

__all__ = [
    "ClientRequestError",
    "ProviderError",
    "RequestConfig",
    "StormGlassProvider",
    "StormGlassResponseError",
    "WeatherProvider",
]
