"""Pydantic v2 schemas for geocoding endpoints."""

from pydantic import BaseModel


class CoordinateResponse(BaseModel):
    """Coordinates resolved for an address."""

    model_config = {"from_attributes": True}

    latitude: float
    longitude: float


class CacheNamespaceStats(BaseModel):
    """Entry count for a single cache namespace."""

    name: str
    entries: int


class CacheStatsResponse(BaseModel):
    """Response for lookup cache statistics."""

    namespaces: list[CacheNamespaceStats]


class HealthResponse(BaseModel):
    status: str
