"""FastAPI dependency injection for the shared geocoding resolver."""

from fastapi import HTTPException, Request, status

from geocache_api.services.geocoding_service import GeocodingResolver


def get_resolver(request: Request) -> GeocodingResolver:
    """Return the resolver created during application startup.

    Raises:
        HTTPException: 503 if the application lifespan has not run.
    """
    resolver: GeocodingResolver | None = getattr(request.app.state, "resolver", None)
    if resolver is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Geocoding resolver is not initialized",
        )
    return resolver
