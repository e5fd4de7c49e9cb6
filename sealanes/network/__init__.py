"""Sea lane network storage, indexing and snapping."""

from .index import NetworkIndex
from .snapper import (
    DEFAULT_SEARCH_RADIUS,
    SnapResult,
    feature_distances,
    nearest_feature,
    nearest_vertex,
    snap_to_network,
)
from .store import LineFeature, Network

__all__ = [
    # Store
    "LineFeature",
    "Network",
    # Index
    "NetworkIndex",
    # Snapping
    "snap_to_network",
    "nearest_feature",
    "nearest_vertex",
    "feature_distances",
    "SnapResult",
    "DEFAULT_SEARCH_RADIUS",
]
