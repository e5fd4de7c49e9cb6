"""GeoJSON export utilities for routes and networks."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.route import Route
from ..network.snapper import SnapResult
from ..network.store import Network

logger = logging.getLogger(__name__)


def route_to_feature(
    route: Route,
    properties: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Convert a route to a GeoJSON Feature.

    Args:
        route: Route to export
        properties: Extra properties merged over `length` and `units`

    Returns:
        GeoJSON Feature dict
    """
    feature = route.to_geojson()
    feature["properties"]["kind"] = "route"
    if properties:
        feature["properties"].update(properties)
    return feature


def routes_to_feature_collection(
    routes: Iterable[Route | None],
    snaps: Iterable[tuple[SnapResult, SnapResult]] | None = None,
) -> dict[str, Any]:
    """Convert routes to a GeoJSON FeatureCollection.

    Args:
        routes: Routes to export; None entries (no route found) are skipped
        snaps: Optional (origin, destination) snap results per route, exported
            as labelled Point features

    Returns:
        GeoJSON FeatureCollection dict
    """
    features = []

    for i, route in enumerate(routes):
        if route is None:
            continue
        features.append(route_to_feature(route, {"id": f"route_{i}"}))

    if snaps:
        for i, (origin, destination) in enumerate(snaps):
            for role, snap in (("origin", origin), ("destination", destination)):
                features.append({
                    "type": "Feature",
                    "geometry": {
                        "type": "Point",
                        "coordinates": list(snap.point),
                    },
                    "properties": {
                        "kind": "snap",
                        "role": role,
                        "route_id": f"route_{i}",
                        "feature_index": snap.feature_index,
                        "vertex_index": snap.vertex_index,
                        "distance": round(snap.vertex_distance, 3),
                        "units": snap.units.value,
                    },
                })

    return {
        "type": "FeatureCollection",
        "features": features,
    }


def network_to_feature_collection(network: Network) -> dict[str, Any]:
    """Convert a network back to a GeoJSON FeatureCollection of LineStrings."""
    features = []
    for i, lane in enumerate(network.features):
        props = dict(lane.properties)
        props.setdefault("index", i)
        features.append({
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [list(c) for c in lane.coordinates],
            },
            "properties": props,
        })

    return {
        "type": "FeatureCollection",
        "features": features,
    }


def write_geojson(data: dict[str, Any], file_path: str | Path, indent: int | None = None) -> Path:
    """Write a GeoJSON dict to disk.

    Returns:
        Path of the written file
    """
    path = Path(file_path)
    with open(path, "w") as f:
        json.dump(data, f, indent=indent)

    logger.info(f"Wrote {len(data.get('features', []))} features to {path}")
    return path
