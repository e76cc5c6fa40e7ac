from .centroid import bounding_box, bounding_box_from_radius, centroid, is_within_bounding_box
from .clustering import cluster_coordinates, cluster_density
from .config import GeoConfig, HotspotConfig, load_geo_config, load_hotspot_config
from .distance import (
    EARTH_RADIUS_M,
    assess_accuracy,
    bearing_deg,
    distance_m,
    estimate_walking_time,
    find_closest,
    find_nearby,
    proximity,
    quick_distance_check,
)
from .hotspots import compute_risk_score, detect_evolving_hotspots, detect_hotspots
from .validation import (
    InvalidCoordinateError,
    coordinate_from_record,
    is_valid_coordinate,
    validate_coordinate,
)

__all__ = [
    "EARTH_RADIUS_M",
    "GeoConfig",
    "HotspotConfig",
    "InvalidCoordinateError",
    "assess_accuracy",
    "bearing_deg",
    "bounding_box",
    "bounding_box_from_radius",
    "centroid",
    "cluster_coordinates",
    "cluster_density",
    "compute_risk_score",
    "coordinate_from_record",
    "detect_evolving_hotspots",
    "detect_hotspots",
    "distance_m",
    "estimate_walking_time",
    "find_closest",
    "find_nearby",
    "is_valid_coordinate",
    "is_within_bounding_box",
    "load_geo_config",
    "load_hotspot_config",
    "proximity",
    "quick_distance_check",
    "validate_coordinate",
]
