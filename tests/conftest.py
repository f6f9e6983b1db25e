"""Shared test fixtures: settings, a counting stub provider, caches, and a resolver."""

import pytest

from geocache_api.core.config import Settings
from geocache_api.lib.geocoder.base import BaseGeocodingProvider, LookupResponse
from geocache_api.lib.geocoder.cache import CacheRegistry
from geocache_api.services.geocoding_service import GeocodingResolver


class StubProvider(BaseGeocodingProvider):
    """In-memory provider that records every call and returns canned bodies."""

    def __init__(
        self,
        forward_body: dict | None = None,
        reverse_body: dict | None = None,
    ) -> None:
        self.forward_body = forward_body
        self.reverse_body = reverse_body
        self.forward_calls: list[str] = []
        self.reverse_calls: list[tuple[float, float]] = []

    @property
    def provider_name(self) -> str:
        return "stub"

    async def forward_lookup(self, address: str) -> LookupResponse | None:
        self.forward_calls.append(address)
        if self.forward_body is None:
            return None
        return LookupResponse.model_validate(self.forward_body)

    async def reverse_lookup(self, latitude: float, longitude: float) -> LookupResponse | None:
        self.reverse_calls.append((latitude, longitude))
        if self.reverse_body is None:
            return None
        return LookupResponse.model_validate(self.reverse_body)


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        geocoding_api_key="test-access-key",
        geocoding_url="https://geo.test/v1/forward",
        reverse_geocoding_url="https://geo.test/v1/reverse",
        geocoding_timeout=2.0,
    )


@pytest.fixture
def stub_provider() -> StubProvider:
    """Provider returning Panaji for forward and a label for reverse lookups."""
    return StubProvider(
        forward_body={"data": [{"latitude": 15.4909, "longitude": 73.8278, "label": "Panaji, Goa, India"}]},
        reverse_body={"data": [{"latitude": 12.97, "longitude": 77.59, "label": "MG Road, Bengaluru, India"}]},
    )


@pytest.fixture
def caches() -> CacheRegistry:
    return CacheRegistry()


@pytest.fixture
def resolver(stub_provider: StubProvider, caches: CacheRegistry) -> GeocodingResolver:
    return GeocodingResolver(stub_provider, caches)


@pytest.fixture
def make_provider() -> type[StubProvider]:
    """Factory for stub providers with custom response bodies."""
    return StubProvider
