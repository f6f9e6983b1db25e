"""Geocoding API endpoints — forward lookup, reverse lookup, and cache management."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from geocache_api.core.dependencies import get_resolver
from geocache_api.schemas.geocoding import (
    CacheNamespaceStats,
    CacheStatsResponse,
    CoordinateResponse,
    HealthResponse,
)
from geocache_api.services.geocoding_service import GeocodingResolver

geocoding_router = APIRouter(tags=["geocoding"])


@geocoding_router.get(
    "/geocoding",
    response_model=CoordinateResponse,
)
async def forward_geocoding(
    address: str = Query(  # noqa: B008
        ...,
        min_length=1,
        max_length=500,
        description="Address to resolve to coordinates (1-500 characters)",
    ),
    resolver: GeocodingResolver = Depends(get_resolver),  # noqa: B008
) -> CoordinateResponse:
    """Resolve an address to latitude and longitude."""
    coordinate = await resolver.resolve_forward(address)
    return CoordinateResponse.model_validate(coordinate)


@geocoding_router.get("/reverse-geocoding", response_class=PlainTextResponse)
async def reverse_geocoding(
    latitude: float = Query(..., ge=-90, le=90, description="WGS84 latitude"),  # noqa: B008
    longitude: float = Query(..., ge=-180, le=180, description="WGS84 longitude"),  # noqa: B008
    resolver: GeocodingResolver = Depends(get_resolver),  # noqa: B008
) -> PlainTextResponse:
    """Resolve a coordinate pair to an address, returned as plain text."""
    address = await resolver.resolve_reverse(latitude, longitude)
    return PlainTextResponse(address)


@geocoding_router.delete("/cache", response_class=PlainTextResponse)
async def evict_cache(
    key: str | None = Query(None, description="Cache key to evict; omit to clear every cache"),  # noqa: B008
    resolver: GeocodingResolver = Depends(get_resolver),  # noqa: B008
) -> PlainTextResponse:
    """Evict a key from both caches, or clear both caches."""
    resolver.evict_cache(key)
    return PlainTextResponse("Cache evicted")


@geocoding_router.get(
    "/cache/stats",
    response_model=CacheStatsResponse,
)
async def cache_stats(
    resolver: GeocodingResolver = Depends(get_resolver),  # noqa: B008
) -> CacheStatsResponse:
    """Return entry counts for each cache namespace."""
    stats = resolver.cache_stats()
    return CacheStatsResponse(
        namespaces=[CacheNamespaceStats(name=name, entries=count) for name, count in stats.items()],
    )


@geocoding_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy")
