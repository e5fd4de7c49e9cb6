"""Lane network loading.

Supports loading the navigable network from:
- GeoJSON (.geojson, .json), read directly
- Shapefile, GeoPackage and other OGR formats, read through Fiona

Non-GeoJSON sources are reprojected to EPSG:4326 with PyProj when their CRS
differs.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pyproj import CRS, Transformer
from shapely.errors import ShapelyError
from shapely.geometry import LineString, MultiLineString, shape
from shapely.ops import transform

from ..errors import NetworkLoadError
from ..network.store import LineFeature, Network

logger = logging.getLogger(__name__)

GEOJSON_SUFFIXES = {".geojson", ".json"}
WGS84 = CRS.from_epsg(4326)


def load_network(file_path: str | Path, layer: str | None = None) -> Network:
    """Load a lane network from a file.

    Args:
        file_path: Path to a GeoJSON file or any OGR-readable file
        layer: Layer to read from multi-layer sources (ignored for GeoJSON)

    Returns:
        Network of the file's line features, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ImportError: If the file is not GeoJSON and fiona is not installed
        NetworkLoadError: If the file contains no usable lines
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Network file not found: {file_path}")

    if file_path.suffix.lower() in GEOJSON_SUFFIXES:
        with open(file_path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise NetworkLoadError(f"Invalid GeoJSON in {file_path}: {e}")
        network = network_from_geojson(data)
    else:
        network = _load_with_fiona(file_path, layer)

    logger.info(f"Loaded network from {file_path.name}: {len(network)} features")
    return network


def network_from_geojson(data: dict[str, Any]) -> Network:
    """Build a network from a GeoJSON object.

    Accepts a FeatureCollection, a single Feature, or a bare LineString /
    MultiLineString geometry. Each MultiLineString part becomes its own lane.
    Other geometry types are skipped.

    Raises:
        NetworkLoadError: If no usable line is found
    """
    if not isinstance(data, dict):
        raise NetworkLoadError(f"Expected a GeoJSON object, got {type(data).__name__}")

    kind = data.get("type")
    if kind == "FeatureCollection":
        features = data.get("features") or []
    elif kind == "Feature":
        features = [data]
    elif kind in ("LineString", "MultiLineString"):
        features = [{"type": "Feature", "geometry": data, "properties": {}}]
    else:
        raise NetworkLoadError(f"Unsupported GeoJSON type: {kind!r}")

    return Network(_line_features(features))


def _line_features(features: Iterable[dict[str, Any]], transformer: Transformer | None = None) -> list[LineFeature]:
    """Convert GeoJSON-like features into LineFeatures."""
    lines: list[LineFeature] = []
    skipped = 0

    for i, feature in enumerate(features):
        geometry = feature.get("geometry")
        if not geometry:
            skipped += 1
            continue

        try:
            geom = shape(geometry)
        except (ShapelyError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Skipping feature {i}: invalid geometry ({e})")
            skipped += 1
            continue
        if transformer:
            geom = transform(transformer.transform, geom)

        props = dict(feature.get("properties") or {})

        if isinstance(geom, LineString):
            parts = [geom]
        elif isinstance(geom, MultiLineString):
            parts = list(geom.geoms)
        else:
            logger.warning(f"Skipping feature {i}: {geom.geom_type} is not a line")
            skipped += 1
            continue

        for part in parts:
            coords = [(c[0], c[1]) for c in part.coords]
            if len(set(coords)) < 2:
                logger.warning(f"Skipping feature {i}: fewer than 2 distinct positions")
                skipped += 1
                continue
            lines.append(LineFeature(tuple(coords), props))

    if skipped:
        logger.warning(f"Skipped {skipped} unusable feature(s) while loading network")
    if not lines:
        raise NetworkLoadError("No line features found in network data")
    return lines


def _load_with_fiona(file_path: Path, layer: str | None) -> Network:
    """Read lines from an OGR source, reprojecting to EPSG:4326."""
    try:
        import fiona
    except ImportError:
        raise ImportError(
            "fiona is required to load non-GeoJSON networks. "
            "Install with: pip install 'sealanes[gis]' or pip install fiona"
        )

    with fiona.open(str(file_path), layer=layer) as src:
        transformer = None
        if src.crs:
            source_crs = CRS.from_user_input(src.crs.to_string())
            if source_crs != WGS84:
                transformer = Transformer.from_crs(source_crs, WGS84, always_xy=True)
                logger.info(f"Reprojecting {file_path.name} from {source_crs.to_string()} to EPSG:4326")

        features = [
            {
                "geometry": f["geometry"],
                "properties": dict(f["properties"] or {}),
            }
            for f in src
        ]

    return Network(_line_features(features, transformer))


def list_network_layers(file_path: str | Path) -> list[dict[str, Any]]:
    """List layers of an OGR source with geometry type and feature count.

    Args:
        file_path: Path to the GIS file

    Returns:
        List of dicts with layer name, geometry type, feature count and CRS
    """
    try:
        import fiona
    except ImportError:
        raise ImportError(
            "fiona is required to inspect GIS layers. "
            "Install with: pip install 'sealanes[gis]' or pip install fiona"
        )

    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"GIS file not found: {file_path}")

    results = []
    for layer in fiona.listlayers(str(file_path)):
        with fiona.open(str(file_path), layer=layer) as src:
            results.append({
                "name": layer,
                "geometry_type": src.schema.get("geometry", "Unknown"),
                "feature_count": len(src),
                "crs": src.crs.to_string() if src.crs else None,
            })

    return results
