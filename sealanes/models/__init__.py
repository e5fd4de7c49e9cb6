"""Pydantic models for sealanes."""

from .geojson import GeoJSONLineString, GeoJSONPoint
from .route import Route
from .settings import RouterSettings
from .units import DistanceUnit

__all__ = [
    # GeoJSON
    "GeoJSONPoint",
    "GeoJSONLineString",
    # Output
    "Route",
    "DistanceUnit",
    # Settings
    "RouterSettings",
]
