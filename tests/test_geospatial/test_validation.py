from __future__ import annotations

import pytest

from geospatial.validation import (
    InvalidCoordinateError,
    coordinate_from_record,
    is_valid_coordinate,
    validate_coordinate,
)
from hazard_models.models import GeoCoordinate


def test_valid_coordinates_include_the_range_edges() -> None:
    assert is_valid_coordinate(GeoCoordinate(90.0, 180.0))
    assert is_valid_coordinate(GeoCoordinate(-90.0, -180.0))
    assert is_valid_coordinate(GeoCoordinate(0, 0))


@pytest.mark.parametrize(
    "coord",
    [
        None,
        GeoCoordinate(90.0001, 0.0),
        GeoCoordinate(0.0, 180.0001),
        GeoCoordinate(float("nan"), 0.0),
        GeoCoordinate(0.0, float("inf")),
        GeoCoordinate("13.0", 80.0),
        GeoCoordinate(True, 80.0),
    ],
)
def test_invalid_coordinates(coord) -> None:
    assert is_valid_coordinate(coord) is False
    with pytest.raises(InvalidCoordinateError):
        validate_coordinate(coord)


def test_invalid_coordinate_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_coordinate(None)


def test_coordinate_from_record_accepts_both_key_styles() -> None:
    assert coordinate_from_record({"lat": 19.0, "lng": 72.8}) == GeoCoordinate(19.0, 72.8)
    assert coordinate_from_record({"latitude": 19, "longitude": 72}) == GeoCoordinate(19.0, 72.0)
    assert coordinate_from_record({"lat": 19.0}) is None
    assert coordinate_from_record({"lat": "19.0", "lng": 72.8}) is None


def test_coordinate_from_record_leaves_range_checks_to_validation() -> None:
    coord = coordinate_from_record({"lat": 120.0, "lng": 72.8})
    assert coord is not None
    assert is_valid_coordinate(coord) is False
