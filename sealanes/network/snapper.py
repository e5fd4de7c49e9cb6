"""Snapping arbitrary points onto the lane network.

Snapping runs in two phases:

1. Nearest feature: the lane with the smallest point-to-segment distance
   (distance to any position along the polyline, not only its vertices).
2. Nearest vertex: on that lane only, the vertex with the smallest rhumb
   distance to the point.

The vertex found in phase 2 is not guaranteed to be the nearest vertex of the
whole network; restricting the vertex scan to one lane keeps the cost at
O(features) + O(vertices of one lane).
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..errors import NoReachableNetworkError
from ..geometry.measure import (
    length_to_radians,
    point_to_segment_distance,
    radians_to_length,
    rhumb_distance,
)
from ..geometry.points import Point
from ..models.units import DistanceUnit
from .store import LineFeature, Network

if TYPE_CHECKING:
    from .index import NetworkIndex

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_RADIUS = 30000.0


@dataclass(frozen=True)
class SnapResult:
    """A point snapped onto a network vertex."""

    point: Point  # The network vertex
    feature_index: int
    vertex_index: int
    feature_distance: float  # Input point to nearest lane, in `units`
    vertex_distance: float  # Input point to snapped vertex (rhumb), in `units`
    units: DistanceUnit = DistanceUnit.KILOMETERS


def feature_distances(
    point: Point,
    network: Network,
    feature_indices: Sequence[int] | None = None,
) -> np.ndarray:
    """Distance (radians) from a point to each feature of the network.

    Args:
        point: (lon, lat) position
        network: Lane network
        feature_indices: Only measure these features, in the given order

    Returns:
        Array with one distance per measured feature
    """
    if feature_indices is None:
        seg_dist = point_to_segment_distance(
            point, network.segment_starts, network.segment_ends
        )
        return np.minimum.reduceat(seg_dist, network.segment_offsets[:-1])

    return np.array(
        [point_to_segment_distance(point, *network.feature_segments(i)).min() for i in feature_indices],
        dtype=float,
    )


def nearest_feature(
    point: Point,
    network: Network,
    candidates: Sequence[int] | None = None,
) -> tuple[int, float]:
    """Find the lane closest to a point.

    Ties go to the feature that comes first in network order.

    Args:
        point: (lon, lat) position
        network: Lane network
        candidates: Ascending feature indices to restrict the scan to

    Returns:
        Tuple of (feature_index, distance in radians)
    """
    if candidates is None:
        distances = feature_distances(point, network)
        best = int(np.argmin(distances))
        return best, float(distances[best])

    candidates = np.sort(np.asarray(candidates, dtype=np.intp))
    distances = feature_distances(point, network, candidates)
    best = int(np.argmin(distances))
    return int(candidates[best]), float(distances[best])


def nearest_vertex(point: Point, feature: LineFeature) -> tuple[int, float]:
    """Find the vertex of a lane closest to a point by rhumb distance.

    Ties go to the earlier vertex.

    Returns:
        Tuple of (vertex_index, distance in radians)
    """
    distances = rhumb_distance(point, np.asarray(feature.coordinates, dtype=float))
    best = int(np.argmin(distances))
    return best, float(distances[best])


def snap_to_network(
    point: Point,
    network: Network,
    search_radius: float = DEFAULT_SEARCH_RADIUS,
    search_radius_units: DistanceUnit | str = DistanceUnit.KILOMETERS,
    index: "NetworkIndex | None" = None,
) -> SnapResult:
    """Snap a point to the nearest usable network vertex.

    Args:
        point: (lon, lat) position, anywhere on the globe
        network: Lane network
        search_radius: Lanes at or beyond this distance are not considered
        search_radius_units: Unit of search_radius
        index: Optional spatial index to narrow the nearest lane scan

    Returns:
        SnapResult for the chosen vertex

    Raises:
        NoReachableNetworkError: If no lane is within search_radius
    """
    units = DistanceUnit.parse(search_radius_units)
    radius = length_to_radians(search_radius, units)

    candidates = index.candidates(point) if index is not None else None
    feature_index, feature_dist = nearest_feature(point, network, candidates)

    if not feature_dist < radius:
        raise NoReachableNetworkError(
            point,
            search_radius,
            units.value,
            nearest_distance=float(radians_to_length(feature_dist, units)),
        )

    feature = network[feature_index]
    vertex_index, vertex_dist = nearest_vertex(point, feature)
    snapped = feature.coordinates[vertex_index]

    logger.debug(
        f"Snapped ({point[0]:.5f}, {point[1]:.5f}) to feature {feature_index} "
        f"vertex {vertex_index} ({snapped[0]:.5f}, {snapped[1]:.5f})"
    )

    return SnapResult(
        point=snapped,
        feature_index=feature_index,
        vertex_index=vertex_index,
        feature_distance=float(radians_to_length(feature_dist, units)),
        vertex_distance=float(radians_to_length(vertex_dist, units)),
        units=units,
    )
