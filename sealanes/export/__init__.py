"""Export utilities for sealanes routes and networks."""

from .geojson import (
    network_to_feature_collection,
    route_to_feature,
    routes_to_feature_collection,
    write_geojson,
)

__all__ = [
    "route_to_feature",
    "routes_to_feature_collection",
    "network_to_feature_collection",
    "write_geojson",
]
