"""Spatial index that narrows the nearest lane search."""

import logging

import numpy as np
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import box
from shapely.strtree import STRtree

from ..geometry.points import Point
from .snapper import feature_distances
from .store import Network

logger = logging.getLogger(__name__)

# Relative slack on the latitude band so rounding never drops a tied lane
_BAND_SLACK = 1e-9


class NetworkIndex:
    """STRtree over lane envelopes.

    ``candidates`` returns a subset of feature indices that always contains
    the lane a full scan would pick, so snapping with or without the index
    gives identical results.

    The subset is found by measuring the planar-nearest lane exactly, then
    keeping every lane whose envelope reaches the latitude band of that
    distance around the point: a great-circle distance is never shorter than
    the latitude difference it spans.
    """

    def __init__(self, network: Network):
        self.network = network
        self._tree = STRtree([f.to_linestring() for f in network.features])
        self._min_lon, _, self._max_lon, _ = network.bounds
        logger.debug(f"Built spatial index over {len(network)} features")

    def candidates(self, point: Point) -> np.ndarray:
        """Ascending indices of features that may be nearest to `point`."""
        nearest = self._tree.query_nearest(ShapelyPoint(point))
        seed = int(np.min(nearest))
        seed_dist = feature_distances(point, self.network, [seed])[0]

        band = np.degrees(seed_dist) * (1 + _BAND_SLACK) + _BAND_SLACK
        window = box(self._min_lon - 1.0, point[1] - band, self._max_lon + 1.0, point[1] + band)
        found = np.sort(self._tree.query(window))

        logger.debug(
            f"Spatial index kept {len(found)}/{len(self.network)} features "
            f"for ({point[0]:.5f}, {point[1]:.5f})"
        )
        return found
