from __future__ import annotations

import math
from collections.abc import Iterable

from hazard_models.models import BoundingBox, GeoCoordinate

from .distance import EARTH_RADIUS_M
from .validation import is_valid_coordinate, validate_coordinate


def _valid(coords: Iterable[GeoCoordinate | None]) -> list[GeoCoordinate]:
    return [coord for coord in coords if is_valid_coordinate(coord)]


def centroid(coords: Iterable[GeoCoordinate | None]) -> GeoCoordinate | None:
    """Spherical centroid of the valid points, or None when there are none.

    Each point becomes a unit vector (x=cos φ cos λ, y=cos φ sin λ, z=sin φ); the
    mean vector is converted back, so clusters straddling the antimeridian average
    to ±180° instead of 0°.
    """
    valid = _valid(coords)
    if not valid:
        return None
    if len(valid) == 1:
        return valid[0]

    x = y = z = 0.0
    for coord in valid:
        lat = math.radians(coord.latitude)
        lon = math.radians(coord.longitude)
        x += math.cos(lat) * math.cos(lon)
        y += math.cos(lat) * math.sin(lon)
        z += math.sin(lat)

    n = len(valid)
    x, y, z = x / n, y / n, z / n

    lon = math.atan2(y, x)
    lat = math.atan2(z, math.hypot(x, y))
    return GeoCoordinate(latitude=math.degrees(lat), longitude=math.degrees(lon))


def bounding_box(coords: Iterable[GeoCoordinate | None]) -> BoundingBox | None:
    valid = _valid(coords)
    if not valid:
        return None
    latitudes = [coord.latitude for coord in valid]
    longitudes = [coord.longitude for coord in valid]
    return BoundingBox(
        north=max(latitudes),
        south=min(latitudes),
        east=max(longitudes),
        west=min(longitudes),
    )


def is_within_bounding_box(coord: GeoCoordinate, box: BoundingBox) -> bool:
    return box.south <= coord.latitude <= box.north and box.west <= coord.longitude <= box.east


def bounding_box_from_radius(center: GeoCoordinate, radius_m: float) -> BoundingBox:
    # Flat-earth approximation; fine for radii of a few tens of kilometres.
    validate_coordinate(center)
    lat_delta = math.degrees(radius_m / EARTH_RADIUS_M)
    lon_delta = lat_delta / math.cos(math.radians(center.latitude))
    return BoundingBox(
        north=center.latitude + lat_delta,
        south=center.latitude - lat_delta,
        east=center.longitude + lon_delta,
        west=center.longitude - lon_delta,
    )
