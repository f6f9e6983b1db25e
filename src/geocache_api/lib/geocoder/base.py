"""Abstract geocoding provider interface, result types, and error hierarchy."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class Coordinate:
    """A resolved latitude/longitude pair."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


class LookupRecord(BaseModel):
    """A single entry of a provider ``data`` list.

    Numeric fields are coerced to ``float`` here so the resolver never deals
    with loosely typed provider JSON.
    """

    model_config = ConfigDict(extra="ignore")

    latitude: float | None = None
    longitude: float | None = None
    label: str | None = None


class LookupResponse(BaseModel):
    """Parsed provider response body."""

    model_config = ConfigDict(extra="ignore")

    data: list[LookupRecord] | None = None

    @property
    def first(self) -> LookupRecord | None:
        """First record of ``data``, or None when the list is absent or empty."""
        if not self.data:
            return None
        return self.data[0]


class GeocodingError(Exception):
    """Base class for geocoding lookup failures.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NoDataError(GeocodingError):
    """Raised when the provider returned no usable body for a lookup."""


class InvalidInputError(GeocodingError):
    """Raised when a reverse lookup body carries an empty or missing ``data`` list."""


class GeocodingProviderError(GeocodingError):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no data.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.provider_name}: {self.message}"


class BaseGeocodingProvider(ABC):
    """Abstract geocoding provider. All providers must implement this."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider."""

    @property
    def is_configured(self) -> bool:
        """Whether this provider has all required configuration (e.g., API keys)."""
        return True

    @abstractmethod
    async def forward_lookup(self, address: str) -> LookupResponse | None:
        """Look up coordinates for an address.

        Args:
            address: Address string exactly as supplied by the caller.

        Returns:
            Parsed response, or None if the provider answered with no body.
        """

    @abstractmethod
    async def reverse_lookup(self, latitude: float, longitude: float) -> LookupResponse | None:
        """Look up an address for a coordinate pair.

        Args:
            latitude: WGS84 latitude.
            longitude: WGS84 longitude.

        Returns:
            Parsed response, or None if the provider answered with no body.
        """
