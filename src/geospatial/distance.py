from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from hazard_models.models import Accuracy, GeoCoordinate, NearbyCoordinate, ProximityResult

from .config import GeoConfig, get_geo_config
from .validation import InvalidCoordinateError, is_valid_coordinate, validate_coordinate

EARTH_RADIUS_M = 6_371_000.0

_ACCURACY_RANK: dict[Accuracy, int] = {"high": 2, "medium": 1, "low": 0}

logger = logging.getLogger("geospatial")


def distance_m(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Great-circle distance in meters (Haversine on a 6,371 km sphere)."""
    validate_coordinate(a)
    validate_coordinate(b)

    if a.latitude == b.latitude and a.longitude == b.longitude:
        return 0.0

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    h = min(1.0, h)
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def bearing_deg(a: GeoCoordinate, b: GeoCoordinate) -> float:
    """Initial compass bearing from a to b, in [0, 360)."""
    validate_coordinate(a)
    validate_coordinate(b)

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return (math.degrees(math.atan2(y, x)) + 360.0) % 360.0


def assess_accuracy(coord: GeoCoordinate, config: GeoConfig | None = None) -> Accuracy:
    """Rate GPS precision from the fractional-degree remainder of each component.

    This is a proxy for how many decimals the reporting device sent, not a
    measurement of positional error.
    """
    cfg = config or get_geo_config()
    remainder = max(abs(math.fmod(coord.latitude, 1.0)), abs(math.fmod(coord.longitude, 1.0)))
    if remainder >= cfg.high_precision_threshold:
        return "high"
    if remainder >= cfg.medium_precision_threshold:
        return "medium"
    return "low"


def combine_accuracy(first: Accuracy, second: Accuracy) -> Accuracy:
    return first if _ACCURACY_RANK[first] <= _ACCURACY_RANK[second] else second


def proximity(
    a: GeoCoordinate,
    b: GeoCoordinate,
    radius_m: float | None = None,
    config: GeoConfig | None = None,
) -> ProximityResult:
    cfg = config or get_geo_config()
    radius = cfg.default_radius_m if radius_m is None else radius_m
    distance = distance_m(a, b)
    return ProximityResult(
        distance_m=distance,
        bearing_deg=bearing_deg(a, b),
        within_radius=distance <= radius,
        accuracy=combine_accuracy(assess_accuracy(a, cfg), assess_accuracy(b, cfg)),
    )


def find_nearby(
    center: GeoCoordinate,
    candidates: Sequence[GeoCoordinate | None],
    radius_m: float | None = None,
    config: GeoConfig | None = None,
) -> list[NearbyCoordinate]:
    """Candidates within the radius of center, closest first. Invalid candidates are skipped."""
    validate_coordinate(center)
    nearby: list[NearbyCoordinate] = []
    for index, coord in enumerate(candidates):
        if not is_valid_coordinate(coord):
            logger.debug("skipping invalid coordinate index=%d", index)
            continue
        result = proximity(center, coord, radius_m, config)
        if result.within_radius:
            nearby.append(NearbyCoordinate(coordinate=coord, index=index, proximity=result))
    nearby.sort(key=lambda item: item.proximity.distance_m)
    return nearby


def find_closest(
    target: GeoCoordinate,
    candidates: Sequence[GeoCoordinate | None],
) -> tuple[GeoCoordinate, float, int] | None:
    closest: tuple[GeoCoordinate, float, int] | None = None
    shortest = math.inf
    for index, coord in enumerate(candidates):
        try:
            distance = distance_m(target, coord)
        except InvalidCoordinateError:
            continue
        if distance < shortest:
            shortest = distance
            closest = (coord, distance, index)
    return closest


def quick_distance_check(
    a: GeoCoordinate | None,
    b: GeoCoordinate | None,
    max_distance_m: float | None = None,
) -> bool:
    limit = get_geo_config().default_radius_m if max_distance_m is None else max_distance_m
    try:
        return distance_m(a, b) <= limit
    except InvalidCoordinateError:
        return False


def round_half_up(value: float) -> int:
    """Round exact halves up (2.5 -> 3); the builtin `round` goes to the even neighbour."""
    return math.floor(value + 0.5)


def _readable_duration(minutes: int) -> str:
    if minutes < 1:
        return "Less than 1 minute"
    if minutes == 1:
        return "1 minute"
    if minutes < 60:
        return f"{minutes} minutes"

    hours, rest = divmod(minutes, 60)
    head = "1 hour" if hours == 1 else f"{hours} hours"
    return f"{head} {rest} minutes" if rest > 0 else head


def estimate_walking_time(
    a: GeoCoordinate,
    b: GeoCoordinate,
    speed_kmh: float | None = None,
) -> tuple[int, str]:
    speed = get_geo_config().walking_speed_kmh if speed_kmh is None else speed_kmh
    if speed <= 0:
        raise ValueError("speed_kmh must be positive")
    hours = (distance_m(a, b) / 1000.0) / speed
    minutes = round_half_up(hours * 60)
    return minutes, _readable_duration(minutes)
