"""Unit tests for geocoder result types and errors."""

import dataclasses

import pytest
from pydantic import ValidationError

from geocache_api.lib.geocoder.base import (
    Coordinate,
    GeocodingError,
    GeocodingProviderError,
    InvalidInputError,
    LookupResponse,
    NoDataError,
)


class TestCoordinate:
    def test_is_immutable(self) -> None:
        coordinate = Coordinate(latitude=15.49, longitude=73.82)
        with pytest.raises(dataclasses.FrozenInstanceError):
            coordinate.latitude = 0.0  # type: ignore[misc]

    def test_to_dict(self) -> None:
        assert Coordinate(latitude=1.5, longitude=-2.5).to_dict() == {"latitude": 1.5, "longitude": -2.5}


class TestLookupResponse:
    """Tests for provider body parsing and numeric coercion."""

    def test_missing_data_has_no_first(self) -> None:
        assert LookupResponse.model_validate({}).first is None

    def test_empty_data_has_no_first(self) -> None:
        assert LookupResponse.model_validate({"data": []}).first is None

    def test_numeric_fields_coerced_to_float(self) -> None:
        response = LookupResponse.model_validate({"data": [{"latitude": 15, "longitude": "73.82"}]})
        first = response.first
        assert first is not None
        assert isinstance(first.latitude, float)
        assert first.latitude == 15.0
        assert first.longitude == 73.82

    def test_extra_fields_ignored(self) -> None:
        response = LookupResponse.model_validate(
            {"data": [{"label": "Panaji", "confidence": 1, "region": "Goa"}], "pagination": {}}
        )
        assert response.first is not None
        assert response.first.label == "Panaji"

    def test_non_numeric_latitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LookupResponse.model_validate({"data": [{"latitude": "north"}]})


class TestErrors:
    def test_lookup_errors_share_base(self) -> None:
        assert issubclass(NoDataError, GeocodingError)
        assert issubclass(InvalidInputError, GeocodingError)
        assert issubclass(GeocodingProviderError, GeocodingError)

    def test_provider_error_str_includes_provider(self) -> None:
        err = GeocodingProviderError("positionstack", "Provider returned HTTP 500", status_code=500)
        assert str(err) == "positionstack: Provider returned HTTP 500"
        assert err.message == "Provider returned HTTP 500"
        assert err.status_code == 500
