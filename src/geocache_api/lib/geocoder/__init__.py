"""Geocoder library — provider access and namespaced lookup caching.

Public API:
    - BaseGeocodingProvider: Abstract provider interface
    - PositionstackProvider: positionstack.com provider
    - Coordinate: Forward lookup result
    - LookupResponse / LookupRecord: Parsed provider response body
    - NoDataError / InvalidInputError / GeocodingProviderError: Lookup failures
    - LookupCache / CacheRegistry / CacheNamespace: Process-local caching
    - get_provider: Provider factory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from geocache_api.lib.geocoder.base import (
    BaseGeocodingProvider,
    Coordinate,
    GeocodingError,
    GeocodingProviderError,
    InvalidInputError,
    LookupRecord,
    LookupResponse,
    NoDataError,
)
from geocache_api.lib.geocoder.cache import CacheNamespace, CacheRegistry, LookupCache
from geocache_api.lib.geocoder.positionstack import PositionstackProvider

if TYPE_CHECKING:
    from geocache_api.core.config import Settings

# Provider registry — all known providers
_PROVIDERS: dict[str, type[BaseGeocodingProvider]] = {
    "positionstack": PositionstackProvider,
}


def get_provider(settings: Settings, name: str = "positionstack", **kwargs: Any) -> BaseGeocodingProvider:
    """Build a provider instance from application settings.

    Args:
        settings: Application settings supplying URLs, credential and timeout.
        name: Registered provider name.
        **kwargs: Overrides forwarded to the provider constructor.

    Returns:
        A configured provider instance.

    Raises:
        ValueError: If the provider is not registered or is missing configuration.
    """
    cls = _PROVIDERS.get(name)
    if cls is None:
        msg = f"Unknown geocoding provider: {name!r}. Available: {sorted(_PROVIDERS)}"
        raise ValueError(msg)

    options: dict[str, Any] = {
        "api_key": settings.geocoding_api_key,
        "forward_url": settings.geocoding_url,
        "reverse_url": settings.reverse_geocoding_url,
        "timeout": settings.geocoding_timeout,
    }
    options.update(kwargs)
    provider = cls(**options)
    if not provider.is_configured:
        msg = f"Geocoding provider {name!r} is not configured (missing access key)"
        raise ValueError(msg)
    return provider


__all__ = [
    "BaseGeocodingProvider",
    "CacheNamespace",
    "CacheRegistry",
    "Coordinate",
    "GeocodingError",
    "GeocodingProviderError",
    "InvalidInputError",
    "LookupCache",
    "LookupRecord",
    "LookupResponse",
    "NoDataError",
    "PositionstackProvider",
    "get_provider",
]
