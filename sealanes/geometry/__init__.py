"""Spherical measurement and point normalization."""

from .measure import (
    EARTH_RADIUS,
    MILES_TO_NAUTICAL_MILES,
    convert_length,
    haversine,
    length_to_radians,
    line_length,
    point_to_segment_distance,
    radians_to_length,
    rhumb_distance,
)
from .points import Point, to_point

__all__ = [
    # Measurement
    "haversine",
    "rhumb_distance",
    "point_to_segment_distance",
    "line_length",
    "radians_to_length",
    "length_to_radians",
    "convert_length",
    "EARTH_RADIUS",
    "MILES_TO_NAUTICAL_MILES",
    # Points
    "Point",
    "to_point",
]
