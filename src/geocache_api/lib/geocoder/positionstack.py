"""Positionstack geocoding provider.

Uses the positionstack API (https://positionstack.com/documentation) for
forward and reverse lookups. Requires an access key passed as the
``access_key`` query parameter alongside ``query``.
"""

import httpx
from loguru import logger
from pydantic import ValidationError

from geocache_api.lib.geocoder.base import BaseGeocodingProvider, GeocodingProviderError, LookupResponse

DEFAULT_FORWARD_URL = "http://api.positionstack.com/v1/forward"
DEFAULT_REVERSE_URL = "http://api.positionstack.com/v1/reverse"
DEFAULT_TIMEOUT = 10.0


class PositionstackProvider(BaseGeocodingProvider):
    """Positionstack provider for forward and reverse geocoding."""

    def __init__(
        self,
        api_key: str,
        forward_url: str = DEFAULT_FORWARD_URL,
        reverse_url: str = DEFAULT_REVERSE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._forward_url = forward_url
        self._reverse_url = reverse_url
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "positionstack"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def forward_lookup(self, address: str) -> LookupResponse | None:
        """Look up coordinates for an address.

        Args:
            address: Address string, sent unmodified as ``query``.

        Returns:
            Parsed response, or None if the provider returned no body.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """
        return await self._request(self._forward_url, address)

    async def reverse_lookup(self, latitude: float, longitude: float) -> LookupResponse | None:
        """Look up the address at a coordinate pair.

        The query is sent with six fixed decimal places per component.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """
        return await self._request(self._reverse_url, f"{latitude:f},{longitude:f}")

    async def _request(self, url: str, query: str) -> LookupResponse | None:
        params = {
            "access_key": self._api_key,
            "query": query,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()

            if not response.content:
                return None
            return self._parse_response(response.json())

        except httpx.TimeoutException as e:
            logger.warning("Positionstack timeout for query (redacted)")
            raise GeocodingProviderError("positionstack", "Geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Positionstack HTTP error {e.response.status_code}")
            raise GeocodingProviderError(
                "positionstack",
                f"Provider returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.ConnectError as e:
            logger.warning("Positionstack connection error")
            raise GeocodingProviderError("positionstack", "Connection to geocoding provider failed") from e
        except GeocodingProviderError:
            raise
        except ValueError as e:
            logger.warning(f"Positionstack returned a non-JSON body: {e}")
            raise GeocodingProviderError("positionstack", "Provider returned a non-JSON body") from e
        except Exception as e:
            # Exception text and traceback locals can carry the request URL with the access key.
            logger.warning(f"Positionstack unexpected error: {type(e).__name__}")
            raise GeocodingProviderError("positionstack", f"Unexpected error: {type(e).__name__}") from e

    def _parse_response(self, body: object) -> LookupResponse | None:
        """Validate a decoded JSON body into a LookupResponse.

        Args:
            body: Decoded JSON from the provider.

        Returns:
            LookupResponse, or None for a JSON ``null`` body.

        Raises:
            GeocodingProviderError: If the body is not an object or fails validation.
        """
        if body is None:
            return None
        if not isinstance(body, dict):
            raise GeocodingProviderError("positionstack", f"Unexpected response type: {type(body).__name__}")
        try:
            return LookupResponse.model_validate(body)
        except ValidationError as e:
            logger.warning(f"Failed to parse positionstack response: {e.error_count()} error(s)")
            raise GeocodingProviderError("positionstack", "Failed to parse response") from e
