"""Spherical distance and length calculations.

All functions work on (longitude, latitude) degrees and accept either single
positions or numpy arrays of shape (n, 2), so a whole lane network can be
measured in one call. Angular results are in radians of arc; use
``radians_to_length`` to express them in a DistanceUnit.
"""

import math
from typing import Sequence

import numpy as np

from ..models.units import DistanceUnit

# Mean earth radius in meters
EARTH_RADIUS = 6371008.8

# Miles to nautical miles factor applied to "nm" route lengths.
MILES_TO_NAUTICAL_MILES = 1.15078

# Length of one radian of arc in each unit
UNIT_FACTORS: dict[DistanceUnit, float] = {
    DistanceUnit.NAUTICAL_MILES: EARTH_RADIUS / 1852,
    DistanceUnit.KILOMETERS: EARTH_RADIUS / 1000,
    DistanceUnit.MILES: EARTH_RADIUS / 1609.344,
    DistanceUnit.DEGREES: EARTH_RADIUS / 111325,
    DistanceUnit.RADIANS: 1.0,
}


def radians_to_length(radians, units: DistanceUnit | str = DistanceUnit.KILOMETERS):
    """Convert an arc in radians to a length in `units`."""
    return radians * UNIT_FACTORS[DistanceUnit.parse(units)]


def length_to_radians(length, units: DistanceUnit | str = DistanceUnit.KILOMETERS):
    """Convert a length in `units` to an arc in radians."""
    return length / UNIT_FACTORS[DistanceUnit.parse(units)]


def convert_length(
    length,
    from_units: DistanceUnit | str,
    to_units: DistanceUnit | str = DistanceUnit.KILOMETERS,
):
    """Convert a length between units."""
    return radians_to_length(length_to_radians(length, from_units), to_units)


def _lonlat(coords) -> tuple[np.ndarray, np.ndarray]:
    arr = np.asarray(coords, dtype=float)
    return arr[..., 0], arr[..., 1]


def haversine(a, b):
    """Great-circle central angle between positions (radians).

    Broadcasts: `a` and `b` may be a position or an (n, 2) array each.
    """
    lon1, lat1 = _lonlat(a)
    lon2, lat2 = _lonlat(b)

    dlat = np.radians(lat2 - lat1)
    dlon = np.radians(lon2 - lon1)
    lat1 = np.radians(lat1)
    lat2 = np.radians(lat2)

    h = np.sin(dlat / 2) ** 2 + np.sin(dlon / 2) ** 2 * np.cos(lat1) * np.cos(lat2)
    h = np.clip(h, 0.0, 1.0)
    return 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def rhumb_distance(a, b):
    """Angular distance along the rhumb line (constant bearing) from a to b.

    The destination longitude is moved by 360 degrees when that shortens the
    crossing of the antimeridian.
    """
    lon1, lat1 = _lonlat(a)
    lon2, lat2 = _lonlat(b)
    lon2 = np.where(
        lon2 - lon1 > 180, lon2 - 360, np.where(lon1 - lon2 > 180, lon2 + 360, lon2)
    )

    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    dphi = phi2 - phi1
    dlambda = np.radians(np.abs(lon2 - lon1))
    dlambda = np.where(dlambda > math.pi, dlambda - 2 * math.pi, dlambda)

    with np.errstate(divide="ignore", invalid="ignore"):
        dpsi = np.log(np.tan(phi2 / 2 + math.pi / 4) / np.tan(phi1 / 2 + math.pi / 4))
        # East-west lines have no meridional stretch; fall back to cos(phi)
        q = np.where(np.abs(dpsi) > 10e-12, dphi / dpsi, np.cos(phi1))

    return np.sqrt(dphi * dphi + q * q * dlambda * dlambda)


def point_to_segment_distance(point, seg_start, seg_end):
    """Angular distance from a point to the closest position on each segment.

    The point is projected onto the segment in lon/lat space (clamped to the
    segment's endpoints); the great-circle distance to that projection is
    returned.

    Args:
        point: (lon, lat) position
        seg_start: (n, 2) array of segment start positions
        seg_end: (n, 2) array of segment end positions

    Returns:
        (n,) array of distances in radians
    """
    p = np.asarray(point, dtype=float)
    a = np.atleast_2d(np.asarray(seg_start, dtype=float))
    b = np.atleast_2d(np.asarray(seg_end, dtype=float))

    v = b - a
    w = p - a
    c1 = np.einsum("ij,ij->i", w, v)
    c2 = np.einsum("ij,ij->i", v, v)

    before_start = c1 <= 0
    past_end = ~before_start & (c2 <= c1)
    interior = ~before_start & ~past_end

    t = np.zeros_like(c1)
    t[interior] = c1[interior] / c2[interior]
    projected = a + t[:, None] * v
    projected[past_end] = b[past_end]

    return haversine(p, projected)


def line_length(
    coords: Sequence[Sequence[float]],
    units: DistanceUnit | str = DistanceUnit.KILOMETERS,
) -> float:
    """Cumulative great-circle length of a polyline in `units`.

    Returns 0.0 for fewer than two vertices.
    """
    arr = np.asarray(coords, dtype=float)
    if len(arr) < 2:
        return 0.0
    arcs = haversine(arr[:-1], arr[1:])
    return float(radians_to_length(arcs.sum(), units))
