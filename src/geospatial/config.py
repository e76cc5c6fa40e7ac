from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(slots=True)
class GeoConfig:
    default_radius_m: float
    high_precision_threshold: float
    medium_precision_threshold: float
    walking_speed_kmh: float


@dataclass(slots=True)
class HotspotConfig:
    radius_m: float
    min_points: int
    time_window_hours: float
    evolution_intervals: int
    match_distance_km: float


def load_geo_config() -> GeoConfig:
    return GeoConfig(
        default_radius_m=float(os.getenv("GEO_DEFAULT_RADIUS_M", "100")),
        high_precision_threshold=float(os.getenv("GEO_HIGH_PRECISION_THRESHOLD", "0.00001")),
        medium_precision_threshold=float(os.getenv("GEO_MEDIUM_PRECISION_THRESHOLD", "0.0001")),
        walking_speed_kmh=float(os.getenv("GEO_WALKING_SPEED_KMH", "5")),
    )


def load_hotspot_config() -> HotspotConfig:
    return HotspotConfig(
        radius_m=float(os.getenv("HOTSPOT_RADIUS_M", "55000")),
        min_points=int(os.getenv("HOTSPOT_MIN_POINTS", "3")),
        time_window_hours=float(os.getenv("HOTSPOT_TIME_WINDOW_HOURS", "72")),
        evolution_intervals=int(os.getenv("HOTSPOT_EVOLUTION_INTERVALS", "7")),
        match_distance_km=float(os.getenv("HOTSPOT_MATCH_DISTANCE_KM", "100")),
    )


@lru_cache(maxsize=1)
def get_geo_config() -> GeoConfig:
    return load_geo_config()
