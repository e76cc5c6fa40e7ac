from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from hazard_models.models import GeoCoordinate


class InvalidCoordinateError(ValueError):
    """Raised when a latitude/longitude pair is missing, non-finite or out of range."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_coordinate(coord: GeoCoordinate | None) -> bool:
    if not isinstance(coord, GeoCoordinate):
        return False
    lat, lon = coord.latitude, coord.longitude
    if not _is_number(lat) or not _is_number(lon):
        return False
    if not math.isfinite(lat) or not math.isfinite(lon):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def validate_coordinate(coord: GeoCoordinate | None) -> GeoCoordinate:
    if not is_valid_coordinate(coord):
        raise InvalidCoordinateError(f"invalid GPS coordinate: {coord!r}")
    return coord


def coordinate_from_record(record: Mapping[str, Any]) -> GeoCoordinate | None:
    """Build a coordinate from a `{lat, lng}` or `{latitude, longitude}` report record.

    Returns None when either component is absent or not numeric; range checks are
    left to `is_valid_coordinate` so batch callers can skip bad points.
    """
    lat = record.get("lat", record.get("latitude"))
    lon = record.get("lng", record.get("longitude", record.get("lon")))
    if not _is_number(lat) or not _is_number(lon):
        return None
    return GeoCoordinate(latitude=float(lat), longitude=float(lon))
