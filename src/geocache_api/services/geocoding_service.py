"""Geocoding service — cache-first forward and reverse lookups.

Checks the namespace cache, falls back to the external provider on a miss,
stores the successful result, and returns it. Failures are never cached and
are not retried here.
"""

from loguru import logger

from geocache_api.lib.geocoder.base import (
    BaseGeocodingProvider,
    Coordinate,
    InvalidInputError,
    NoDataError,
)
from geocache_api.lib.geocoder.cache import CacheNamespace, CacheRegistry

# Forward lookups for this address (case-insensitive) always go to the provider.
UNCACHED_ADDRESS = "goa"


def reverse_cache_key(latitude: float, longitude: float) -> str:
    """Build the reverse-namespace cache key for a coordinate pair.

    Uses the default float string form, so ``12.97`` and ``12.970`` share a
    key while ``12.97`` and ``12.9700001`` do not.
    """
    return f"{latitude},{longitude}"


def is_uncached_address(address: str) -> bool:
    """Return True if ``address`` bypasses the forward cache."""
    return address.lower() == UNCACHED_ADDRESS


class GeocodingResolver:
    """Resolve addresses and coordinates through a namespaced cache.

    Args:
        provider: External geocoding provider used on cache misses.
        caches: Shared cache registry holding the forward and reverse namespaces.
    """

    def __init__(self, provider: BaseGeocodingProvider, caches: CacheRegistry) -> None:
        self._provider = provider
        self._caches = caches

    @property
    def provider(self) -> BaseGeocodingProvider:
        return self._provider

    async def resolve_forward(self, address: str) -> Coordinate:
        """Resolve an address to coordinates.

        Args:
            address: Address string; used verbatim as the cache key.

        Returns:
            The resolved Coordinate.

        Raises:
            NoDataError: If the provider returned no body or an empty ``data`` list.
            GeocodingProviderError: If the provider call failed.
        """
        cache = self._caches.get_cache(CacheNamespace.FORWARD)
        bypass = is_uncached_address(address)

        if not bypass:
            cached = cache.get(address)
            if cached is not None:
                logger.info(f"Cache hit for address: {address}")
                return cached

        response = await self._provider.forward_lookup(address)
        if response is None:
            msg = f"No data received for address: {address}"
            raise NoDataError(msg)

        first = response.first
        if first is None or first.latitude is None or first.longitude is None:
            msg = f"No data received for address: {address}"
            raise NoDataError(msg)

        coordinate = Coordinate(latitude=first.latitude, longitude=first.longitude)

        if not bypass:
            cache.put(address, coordinate)
            logger.info(f"Cached coordinates for address: {address} {coordinate.to_dict()}")
        return coordinate

    async def resolve_reverse(self, latitude: float, longitude: float) -> str:
        """Resolve a coordinate pair to an address label.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            The address label of the provider's first result.

        Raises:
            NoDataError: If the provider returned no body.
            InvalidInputError: If the body has no usable ``data`` entry.
            GeocodingProviderError: If the provider call failed.
        """
        cache = self._caches.get_cache(CacheNamespace.REVERSE)
        key = reverse_cache_key(latitude, longitude)

        cached = cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit for coordinates: {latitude}, {longitude}")
            return cached

        response = await self._provider.reverse_lookup(latitude, longitude)
        if response is None:
            msg = f"No data received for coordinates: {latitude}, {longitude}"
            raise NoDataError(msg)

        first = response.first
        if first is None or first.label is None:
            msg = "Invalid coordinates or no data found"
            raise InvalidInputError(msg)

        cache.put(key, first.label)
        logger.info(f"Cached address for coordinates: [{latitude}, {longitude}] -> {first.label}")
        return first.label

    def evict_cache(self, key: str | None = None) -> None:
        """Evict one key from every namespace, or clear every namespace.

        The same literal key is tried against both the forward and reverse
        caches. Missing keys are ignored.

        Args:
            key: Cache key to evict, or None to clear all caches.
        """
        if key is None:
            for cache in self._caches.caches():
                cache.clear()
            logger.info("Evicted all cache entries")
            return

        for cache in self._caches.caches():
            cache.evict(key)
        logger.info(f"Evicted cache entry for key: {key}")

    def cache_stats(self) -> dict[str, int]:
        """Return the number of cached entries per namespace."""
        return {cache.name: len(cache) for cache in self._caches.caches()}
