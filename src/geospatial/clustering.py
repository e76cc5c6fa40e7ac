from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from hazard_models.models import ClusterPoint, GeoCluster, GeoCoordinate

from .centroid import centroid
from .config import get_geo_config
from .distance import distance_m
from .metrics import CLUSTERING_LATENCY_SECONDS, CLUSTERS_BUILT, INVALID_POINTS_SKIPPED
from .validation import is_valid_coordinate

logger = logging.getLogger("geospatial")


def cluster_density(member_count: int, radius_m: float) -> float:
    """Members per km² of the enclosing circle; the member count itself for a zero radius."""
    radius_km = radius_m / 1000.0
    area_km2 = math.pi * radius_km * radius_km
    return member_count / area_km2 if area_km2 > 0 else float(member_count)


def _finalize(members: list[ClusterPoint]) -> GeoCluster:
    center = centroid(point.coordinate for point in members)
    for point in members:
        point.distance_from_centroid_m = distance_m(center, point.coordinate)
    members.sort(key=lambda point: point.distance_from_centroid_m)

    radius = max(point.distance_from_centroid_m for point in members)
    return GeoCluster(
        centroid=center,
        radius_m=radius,
        points=members,
        density=cluster_density(len(members), radius),
    )


def cluster_coordinates(
    coords: Sequence[GeoCoordinate | None],
    max_radius_m: float | None = None,
) -> list[GeoCluster]:
    """Greedy seed-radius grouping of report coordinates, largest cluster first.

    Walks the input in order; each point not yet claimed seeds a cluster and
    absorbs every unclaimed point within `max_radius_m` of the seed. Membership
    is seed-relative, so the reported radius (measured from the true centroid)
    can exceed `max_radius_m`.

    This is not DBSCAN: there is no core-point or density-reachability notion,
    and permuting the input can move points between clusters. Every valid input
    point lands in exactly one cluster; invalid points are skipped.
    """
    radius = get_geo_config().default_radius_m if max_radius_m is None else max_radius_m
    if radius < 0:
        raise ValueError("max_radius_m must be non-negative")

    with CLUSTERING_LATENCY_SECONDS.time():
        valid: list[tuple[int, GeoCoordinate]] = []
        for index, coord in enumerate(coords):
            if is_valid_coordinate(coord):
                valid.append((index, coord))
            else:
                INVALID_POINTS_SKIPPED.inc()
                logger.debug("skipping invalid coordinate index=%d", index)

        if not valid:
            return []

        processed: set[int] = set()
        clusters: list[GeoCluster] = []

        for i, (_, seed) in enumerate(valid):
            if i in processed:
                continue

            members: list[ClusterPoint] = []
            for j, (source_index, candidate) in enumerate(valid):
                if j in processed:
                    continue
                distance = distance_m(seed, candidate)
                if distance <= radius:
                    members.append(
                        ClusterPoint(
                            coordinate=candidate,
                            source_index=source_index,
                            distance_from_centroid_m=distance,
                        )
                    )
                    processed.add(j)

            clusters.append(_finalize(members))

        clusters.sort(key=lambda cluster: len(cluster.points), reverse=True)

    CLUSTERS_BUILT.inc(len(clusters))
    logger.debug("clustered points=%d clusters=%d radius_m=%.1f", len(valid), len(clusters), radius)
    return clusters
