"""Immutable sea lane network."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

import numpy as np
from shapely.geometry import LineString

from ..errors import NetworkLoadError
from ..geometry.points import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineFeature:
    """One navigable polyline of the network."""

    coordinates: tuple[Point, ...]
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        coords = tuple((float(c[0]), float(c[1])) for c in self.coordinates)
        if len(coords) < 2:
            raise ValueError(f"LineFeature needs at least 2 vertices, got {len(coords)}")
        object.__setattr__(self, "coordinates", coords)
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def num_vertices(self) -> int:
        return len(self.coordinates)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_lon, min_lat, max_lon, max_lat)."""
        lons = [c[0] for c in self.coordinates]
        lats = [c[1] for c in self.coordinates]
        return (min(lons), min(lats), max(lons), max(lats))

    def to_linestring(self) -> LineString:
        """Convert to Shapely LineString."""
        return LineString(self.coordinates)


class Network:
    """Ordered, read-only collection of lane features.

    Segment endpoints are precomputed into read-only arrays so the nearest
    lane search can measure every segment at once. Segments of feature ``i``
    occupy ``segment_offsets[i]:segment_offsets[i + 1]``.
    """

    def __init__(self, features: Iterable[LineFeature]):
        self._features = tuple(features)
        if not self._features:
            raise NetworkLoadError("Network has no line features")

        starts = []
        ends = []
        offsets = [0]
        for feature in self._features:
            coords = np.asarray(feature.coordinates, dtype=float)
            starts.append(coords[:-1])
            ends.append(coords[1:])
            offsets.append(offsets[-1] + len(coords) - 1)

        self._segment_starts = np.concatenate(starts)
        self._segment_ends = np.concatenate(ends)
        self._segment_offsets = np.asarray(offsets, dtype=np.intp)
        for arr in (self._segment_starts, self._segment_ends, self._segment_offsets):
            arr.flags.writeable = False

        logger.info(
            f"Network ready: {len(self._features)} features, "
            f"{len(self._segment_starts)} segments"
        )

    @classmethod
    def from_coordinates(cls, lines: Iterable[Iterable[Iterable[float]]]) -> "Network":
        """Build a network from bare coordinate lists (no properties)."""
        return cls(LineFeature(tuple(tuple(c) for c in line)) for line in lines)

    @property
    def features(self) -> tuple[LineFeature, ...]:
        return self._features

    @property
    def segment_starts(self) -> np.ndarray:
        return self._segment_starts

    @property
    def segment_ends(self) -> np.ndarray:
        return self._segment_ends

    @property
    def segment_offsets(self) -> np.ndarray:
        return self._segment_offsets

    @property
    def num_vertices(self) -> int:
        return sum(f.num_vertices for f in self._features)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_lon, min_lat, max_lon, max_lat) over all features."""
        all_coords = np.concatenate([self._segment_starts, self._segment_ends])
        min_lon, min_lat = all_coords.min(axis=0)
        max_lon, max_lat = all_coords.max(axis=0)
        return (float(min_lon), float(min_lat), float(max_lon), float(max_lat))

    def feature_segments(self, index: int) -> tuple[np.ndarray, np.ndarray]:
        """Segment start and end arrays belonging to feature `index`."""
        lo, hi = self._segment_offsets[index], self._segment_offsets[index + 1]
        return self._segment_starts[lo:hi], self._segment_ends[lo:hi]

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[LineFeature]:
        return iter(self._features)

    def __getitem__(self, index: int) -> LineFeature:
        return self._features[index]

    def __repr__(self) -> str:
        return f"Network(features={len(self._features)}, segments={len(self._segment_starts)})"
