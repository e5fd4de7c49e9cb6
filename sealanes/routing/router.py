"""Route orchestration: snap, search, assemble.

Orchestrates one routing request:
1. Normalize origin and destination to (lon, lat)
2. Snap each onto the network independently
3. Ask the path search for a path between the snapped vertices
4. Assemble and measure the route
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Iterable

from ..geometry.points import Point, to_point
from ..loaders.network_loader import load_network
from ..models.route import Route
from ..models.settings import RouterSettings
from ..models.units import DistanceUnit
from ..network.index import NetworkIndex
from ..network.snapper import SnapResult, snap_to_network
from ..network.store import Network
from ..settings.loader import load_settings
from .assembler import assemble_route
from .pathfinder import NetworkPathFinder, PathSearch

logger = logging.getLogger(__name__)


class SeaRouter:
    """Routing context holding a network and its path search.

    The network, spatial index and path graph are built once here and only
    read afterwards, so one router can serve concurrent requests.
    """

    def __init__(
        self,
        network: Network,
        path_finder: PathSearch | None = None,
        settings: RouterSettings | None = None,
    ):
        """Initialize router.

        Args:
            network: Lane network to route over
            path_finder: Path search over the same network
                (default: NetworkPathFinder built from `network`)
            settings: Router settings (default: the 'default' profile)
        """
        self.network = network
        self.settings = settings if settings is not None else load_settings("default")
        if path_finder is None:
            path_finder = NetworkPathFinder(network, precision=self.settings.node_precision)
        self.path_finder = path_finder
        self.index = NetworkIndex(network) if self.settings.use_spatial_index else None

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        settings: RouterSettings | None = None,
        profile: str | Path = "default",
        layer: str | None = None,
    ) -> "SeaRouter":
        """Load a network file and build a router over it.

        Args:
            file_path: Network file (GeoJSON or any fiona-readable format)
            settings: Explicit settings (takes precedence over `profile`)
            profile: Bundled profile name or YAML path, used when `settings` is None
            layer: Layer to read from multi-layer sources
        """
        network = load_network(file_path, layer=layer)
        if settings is None:
            settings = load_settings(profile)
        return cls(network, settings=settings)

    def snap(self, point: Any) -> SnapResult:
        """Snap a point (any supported representation) onto the network.

        Raises:
            InvalidInputError: If the point is malformed
            NoReachableNetworkError: If no lane is within the search radius
        """
        return self._snap_normalized(self._normalize(point))

    def _normalize(self, point: Any) -> Point:
        return to_point(point, validate_range=self.settings.validate_coordinates)

    def _snap_normalized(self, point: Point) -> SnapResult:
        return snap_to_network(
            point,
            self.network,
            search_radius=self.settings.search_radius,
            search_radius_units=self.settings.search_radius_units,
            index=self.index,
        )

    def route(
        self,
        origin: Any,
        destination: Any,
        units: DistanceUnit | str | None = None,
    ) -> Route | None:
        """Find a sea route between two points.

        Args:
            origin: Start point ([lon, lat], GeoJSON Point/Feature, Shapely Point)
            destination: End point, same forms as origin
            units: Unit for the route length (default: settings.default_units)

        Returns:
            Route from the snapped origin to the snapped destination, or None
            if the network has no path between them

        Raises:
            InvalidInputError: If a point or the units are malformed
            NoReachableNetworkError: If a point has no lane within the search radius
        """
        units = DistanceUnit.parse(units) if units is not None else self.settings.default_units
        start_time = time.time()

        # Both points are validated before either is snapped
        origin_point = self._normalize(origin)
        destination_point = self._normalize(destination)

        snapped_origin = self._snap_normalized(origin_point)
        snapped_destination = self._snap_normalized(destination_point)

        path = self.path_finder.find_path(snapped_origin.point, snapped_destination.point)
        if path is None:
            logger.info(
                f"No route found between {snapped_origin.point} and {snapped_destination.point}"
            )
            return None

        route = assemble_route(path, units)

        logger.info(
            f"Route {route.origin} -> {route.destination}: {route.num_vertices} vertices, "
            f"{route.length:.1f} {route.units.value} ({time.time() - start_time:.3f}s)"
        )
        return route

    def route_many(
        self,
        pairs: Iterable[tuple[Any, Any]],
        units: DistanceUnit | str | None = None,
        max_workers: int | None = None,
    ) -> list[Route | None]:
        """Route independent origin/destination pairs in a thread pool.

        Args:
            pairs: (origin, destination) tuples
            units: Unit for every route length
            max_workers: Pool size (default: settings.max_workers)

        Returns:
            One result per pair, in input order (None where no route exists)

        Raises:
            The first InvalidInputError / NoReachableNetworkError encountered
        """
        pairs = list(pairs)
        if not pairs:
            return []

        workers = max_workers or self.settings.max_workers
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.route, o, d, units) for o, d in pairs]
            results = [f.result() for f in futures]

        found = sum(1 for r in results if r is not None)
        logger.info(f"Routed {len(pairs)} pairs with {workers} workers: {found} routes found")
        return results
