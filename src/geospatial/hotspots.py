"""
Hotspot analytics over geolocated hazard reports.

A hotspot is a greedy radius cluster (see `clustering.cluster_coordinates`) holding
at least `min_points` recent reports. Each hotspot carries a 0-100 risk score:

    risk = 100 * ( 0.20 * min(count / 20, 1)
                 + 0.25 * avg_severity / 5
                 + 0.20 * min(density / 10, 1)        # reports per km² of bbox
                 + 0.15 * min(intensity / 5, 1)       # reports per day
                 + 0.10 * min(hazard_types / 5, 1)
                 + 0.10 * avg_ai_confidence )

`detect_evolving_hotspots` repeats the detection over consecutive fixed windows and
matches the newest window's hotspots to the previous window's to estimate drift.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import datetime, timedelta

from hazard_models.models import (
    EvolvingHotspots,
    GeoCoordinate,
    HazardReport,
    HotspotMovement,
    HotspotResult,
    HotspotWindow,
)
from hazard_models.timeutils import as_utc, utc_now

from .centroid import bounding_box
from .clustering import cluster_coordinates
from .config import HotspotConfig, load_hotspot_config
from .distance import bearing_deg, distance_m, round_half_up
from .metrics import HOTSPOTS_DETECTED

logger = logging.getLogger("hazard-hotspots")

_W_COUNT = 0.20
_W_SEVERITY = 0.25
_W_DENSITY = 0.20
_W_INTENSITY = 0.15
_W_DIVERSITY = 0.10
_W_CONFIDENCE = 0.10

_COUNT_SCALE = 20.0
_MAX_SEVERITY = 5.0
_DENSITY_SCALE = 10.0
_INTENSITY_SCALE = 5.0
_DIVERSITY_SCALE = 5.0
_CONFIDENCE_SAMPLE_SCALE = 10.0


def compute_risk_score(
    report_count: int,
    avg_severity: float,
    spatial_density: float,
    temporal_intensity: float,
    hazard_diversity: int,
    avg_confidence: float,
) -> int:
    score = (
        min(report_count / _COUNT_SCALE, 1.0) * _W_COUNT
        + (avg_severity / _MAX_SEVERITY) * _W_SEVERITY
        + min(spatial_density / _DENSITY_SCALE, 1.0) * _W_DENSITY
        + min(temporal_intensity / _INTENSITY_SCALE, 1.0) * _W_INTENSITY
        + min(hazard_diversity / _DIVERSITY_SCALE, 1.0) * _W_DIVERSITY
        + avg_confidence * _W_CONFIDENCE
    )
    return max(0, min(100, round_half_up(score * 100)))


def compute_cluster_confidence(reports: Sequence[HazardReport]) -> float:
    avg_ai = sum(r.ai_confidence for r in reports) / len(reports)
    sample = min(len(reports) / _CONFIDENCE_SAMPLE_SCALE, 1.0)
    return avg_ai * 0.7 + sample * 0.3


def _bbox_area_km2(coords: Sequence[GeoCoordinate]) -> tuple[float, list[tuple[float, float]]]:
    box = bounding_box(coords)
    sw = GeoCoordinate(latitude=box.south, longitude=box.west)
    width = distance_m(sw, GeoCoordinate(latitude=box.south, longitude=box.east)) / 1000.0
    height = distance_m(sw, GeoCoordinate(latitude=box.north, longitude=box.west)) / 1000.0
    ring = [
        (box.west, box.south),
        (box.east, box.south),
        (box.east, box.north),
        (box.west, box.north),
        (box.west, box.south),
    ]
    return width * height, ring


def _temporal_intensity(reports: Sequence[HazardReport]) -> float:
    stamps = [as_utc(r.timestamp) for r in reports]
    span_days = (max(stamps) - min(stamps)).total_seconds() / 86400.0
    return len(reports) / span_days if span_days > 0 else float(len(reports))


def _score_clusters(reports: Sequence[HazardReport], config: HotspotConfig) -> list[HotspotResult]:
    if len(reports) < config.min_points:
        return []

    clusters = cluster_coordinates([r.location for r in reports], config.radius_m)

    hotspots: list[HotspotResult] = []
    for cluster_id, cluster in enumerate(clusters):
        if len(cluster.points) < config.min_points:
            continue

        members = [reports[point.source_index] for point in cluster.points]
        coords = [point.coordinate for point in cluster.points]
        count = len(members)

        avg_severity = sum(r.severity for r in members) / count
        avg_confidence = sum(r.ai_confidence for r in members) / count
        hazard_types = list(dict.fromkeys(r.hazard_type for r in members))

        area, ring = _bbox_area_km2(coords)
        density = count / area if area > 0 else float(count)
        intensity = _temporal_intensity(members)

        hotspots.append(
            HotspotResult(
                cluster_id=cluster_id,
                centroid=cluster.centroid,
                report_count=count,
                average_severity=avg_severity,
                risk_score=compute_risk_score(
                    report_count=count,
                    avg_severity=avg_severity,
                    spatial_density=density,
                    temporal_intensity=intensity,
                    hazard_diversity=len(hazard_types),
                    avg_confidence=avg_confidence,
                ),
                hazard_types=hazard_types,
                spatial_density=density,
                temporal_intensity=intensity,
                bounding_box=ring,
                confidence=compute_cluster_confidence(members),
                report_ids=[r.id for r in members],
            )
        )

    hotspots.sort(key=lambda h: h.risk_score, reverse=True)
    HOTSPOTS_DETECTED.inc(len(hotspots))
    return hotspots


def detect_hotspots(
    reports: Sequence[HazardReport],
    config: HotspotConfig | None = None,
    now: datetime | None = None,
) -> list[HotspotResult]:
    """Hotspots among reports newer than `config.time_window_hours`, highest risk first."""
    cfg = config or load_hotspot_config()
    current = as_utc(now) if now else utc_now()
    cutoff = current - timedelta(hours=cfg.time_window_hours)

    recent = [r for r in reports if as_utc(r.timestamp) >= cutoff]
    hotspots = _score_clusters(recent, cfg)
    logger.info(
        "hotspots detected reports=%d recent=%d hotspots=%d",
        len(reports),
        len(recent),
        len(hotspots),
    )
    return hotspots


def _match_movements(
    current: Sequence[HotspotResult],
    previous: Sequence[HotspotResult],
    interval_hours: float,
    match_distance_km: float,
) -> list[HotspotMovement]:
    movements: list[HotspotMovement] = []
    for hotspot in current:
        nearest: HotspotResult | None = None
        nearest_km = math.inf
        for candidate in previous:
            km = distance_m(hotspot.centroid, candidate.centroid) / 1000.0
            if km < nearest_km:
                nearest, nearest_km = candidate, km

        if nearest is None or nearest_km >= match_distance_km:
            continue

        movements.append(
            HotspotMovement(
                hotspot_id=hotspot.cluster_id,
                displacement_km=nearest_km,
                bearing_deg=bearing_deg(nearest.centroid, hotspot.centroid),
                velocity_km_per_day=nearest_km / (interval_hours / 24.0),
            )
        )
    return movements


def detect_evolving_hotspots(
    reports: Sequence[HazardReport],
    interval_hours: float = 24.0,
    config: HotspotConfig | None = None,
    now: datetime | None = None,
) -> EvolvingHotspots:
    """Per-window hotspots for the last `evolution_intervals` windows, newest first."""
    if interval_hours <= 0:
        raise ValueError("interval_hours must be positive")

    cfg = config or load_hotspot_config()
    current = as_utc(now) if now else utc_now()
    width = timedelta(hours=interval_hours)

    trajectory: list[HotspotWindow] = []
    for i in range(cfg.evolution_intervals):
        end = current - i * width
        start = end - width
        in_window = [r for r in reports if start <= as_utc(r.timestamp) < end]
        trajectory.append(
            HotspotWindow(
                window_label=f"{start.isoformat()} to {end.isoformat()}",
                start=start,
                end=end,
                hotspots=_score_clusters(in_window, cfg),
            )
        )

    movements: list[HotspotMovement] = []
    if len(trajectory) >= 2:
        movements = _match_movements(
            trajectory[0].hotspots,
            trajectory[1].hotspots,
            interval_hours,
            cfg.match_distance_km,
        )

    return EvolvingHotspots(
        current_hotspots=trajectory[0].hotspots if trajectory else [],
        historical_trajectory=trajectory,
        movement_vectors=movements,
    )
