"""sealanes - Approximate maritime routes over a network of sea lanes.

This package provides:
- Two-phase snapping of arbitrary points onto a lane network
- Shortest-path search over the network (NetworkX Dijkstra)
- Route assembly with great-circle length in nm, kilometers, miles,
  degrees or radians
- GeoJSON loading and export

Typical use:
    from sealanes import SeaRouter
    router = SeaRouter.from_file("marnet.geojson")
    route = router.route([121.8, 31.0], [4.5, 51.9], units="nm")

Routes are a visualization heuristic: they do not avoid land or respect
vessel constraints.
"""

__version__ = "0.1.0"

from .errors import (
    InvalidInputError,
    NetworkLoadError,
    NoReachableNetworkError,
    SealanesError,
)
from .loaders import load_network, network_from_geojson
from .models import DistanceUnit, Route, RouterSettings
from .network import LineFeature, Network, SnapResult, snap_to_network
from .routing import NetworkPathFinder, SeaRouter, assemble_route
from .settings import load_settings

__all__ = [
    "__version__",
    # Routing
    "SeaRouter",
    "NetworkPathFinder",
    "assemble_route",
    "snap_to_network",
    "SnapResult",
    # Network
    "Network",
    "LineFeature",
    "load_network",
    "network_from_geojson",
    # Models
    "Route",
    "DistanceUnit",
    "RouterSettings",
    "load_settings",
    # Errors
    "SealanesError",
    "InvalidInputError",
    "NoReachableNetworkError",
    "NetworkLoadError",
]
