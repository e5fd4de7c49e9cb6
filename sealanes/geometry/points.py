"""Normalization of caller-supplied points to (longitude, latitude) tuples."""

import math
from numbers import Real
from typing import Any

from ..errors import InvalidInputError
from ..models.geojson import GeoJSONPoint

Point = tuple[float, float]


def to_point(value: Any, validate_range: bool = False) -> Point:
    """Normalize a point representation to a (lon, lat) tuple.

    Accepts a bare [lon, lat] pair, a GeoJSON Point or Point Feature dict, a
    GeoJSONPoint model, a Shapely Point, or anything exposing
    ``__geo_interface__`` that resolves to a Point.

    Args:
        value: Point in any supported form
        validate_range: Reject longitudes outside [-180, 180] and latitudes
            outside [-90, 90]

    Returns:
        (lon, lat) tuple of floats

    Raises:
        InvalidInputError: If the value is not a usable 2D point
    """
    coords = _extract_coordinates(value)

    if isinstance(coords, (str, bytes)) or not hasattr(coords, "__len__"):
        raise InvalidInputError(f"Point coordinates must be a [lon, lat] pair, got {coords!r}")
    if len(coords) != 2:
        raise InvalidInputError(
            f"Point must have exactly 2 coordinates (lon, lat), got {len(coords)}"
        )

    lon, lat = (_to_float(c) for c in coords)

    if validate_range:
        if not -180.0 <= lon <= 180.0:
            raise InvalidInputError(f"Longitude {lon} outside [-180, 180]")
        if not -90.0 <= lat <= 90.0:
            raise InvalidInputError(f"Latitude {lat} outside [-90, 90]")

    return (lon, lat)


def _extract_coordinates(value: Any) -> Any:
    """Unwrap geometry containers down to their coordinate sequence."""
    if isinstance(value, GeoJSONPoint):
        return value.coordinates

    if not isinstance(value, dict) and hasattr(value, "__geo_interface__"):
        value = value.__geo_interface__

    if isinstance(value, dict):
        geom_type = value.get("type")
        if geom_type == "Feature":
            geometry = value.get("geometry")
            if not isinstance(geometry, dict):
                raise InvalidInputError("Feature has no geometry")
            return _extract_coordinates(geometry)
        if geom_type != "Point":
            raise InvalidInputError(f"Expected a Point geometry, got {geom_type!r}")
        if "coordinates" not in value:
            raise InvalidInputError("Point geometry has no coordinates")
        return value["coordinates"]

    return value


def _to_float(c: Any) -> float:
    # bool is a Real subclass but never a coordinate
    if isinstance(c, bool) or not isinstance(c, Real):
        raise InvalidInputError(f"Coordinate must be numeric, got {c!r}")
    f = float(c)
    if not math.isfinite(f):
        raise InvalidInputError(f"Coordinate must be finite, got {c!r}")
    return f
