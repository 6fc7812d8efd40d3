"""StormGlass marine forecast client."""
from .entities import ForecastPoint
from .providers.stormglass import ClientRequestError, StormGlassProvider, StormGlassResponseError
from .settings import ConfigurationError, StormGlassSettings

__all__ = [
    "ClientRequestError",
    "ConfigurationError",
    "ForecastPoint",
    "StormGlassProvider",
    "StormGlassResponseError",
    "StormGlassSettings",
]
