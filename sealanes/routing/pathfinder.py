"""Shortest paths over the lane network."""

import logging
from typing import Protocol

import networkx as nx

from ..errors import InvalidInputError
from ..geometry.measure import haversine, radians_to_length
from ..geometry.points import Point
from ..models.units import DistanceUnit
from ..network.store import Network

logger = logging.getLogger(__name__)


class PathSearch(Protocol):
    """Anything that can find a path between two network vertices."""

    def find_path(self, start: Point, end: Point) -> list[Point] | None:
        ...


class NetworkPathFinder:
    """Dijkstra search over a graph built from the lane network.

    Vertices are merged when they agree to `precision` decimal places, which
    is how separate lanes that meet at a shared vertex become connected. Edge
    weights are great-circle kilometers between consecutive vertices.
    """

    def __init__(self, network: Network, precision: int = 5):
        """Build the search graph.

        Args:
            network: Lane network
            precision: Decimal places used to key graph nodes
        """
        self.network = network
        self.precision = precision
        self.graph = self._build_graph()

        logger.info(
            f"Built path graph: {self.graph.number_of_nodes()} nodes, "
            f"{self.graph.number_of_edges()} edges, "
            f"{nx.number_connected_components(self.graph)} connected components"
        )

    def _build_graph(self) -> nx.Graph:
        graph = nx.Graph()

        for feature in self.network.features:
            keys = [self.node_key(c) for c in feature.coordinates]
            for key, coord in zip(keys, feature.coordinates):
                if key not in graph:
                    graph.add_node(key, pos=coord)

            for (k1, c1), (k2, c2) in zip(
                zip(keys, feature.coordinates), zip(keys[1:], feature.coordinates[1:])
            ):
                if k1 == k2:
                    continue
                weight = float(radians_to_length(haversine(c1, c2), DistanceUnit.KILOMETERS))
                # Parallel lanes between the same vertices keep the shorter edge
                if graph.has_edge(k1, k2) and graph[k1][k2]["weight"] <= weight:
                    continue
                graph.add_edge(k1, k2, weight=weight)

        return graph

    def node_key(self, coord: Point) -> tuple[float, float]:
        """Graph key for a coordinate."""
        return (round(coord[0], self.precision), round(coord[1], self.precision))

    def find_path(self, start: Point, end: Point) -> list[Point] | None:
        """Find the shortest path between two network vertices.

        Args:
            start: Network vertex to start from
            end: Network vertex to reach

        Returns:
            Ordered vertices from start to end (exactly `start` and `end` at the
            ends), a single vertex when both are the same node, or None when
            they lie in disconnected parts of the network

        Raises:
            InvalidInputError: If either endpoint is not a network vertex
        """
        start_key = self.node_key(start)
        end_key = self.node_key(end)
        for label, key in (("start", start_key), ("end", end_key)):
            if key not in self.graph:
                raise InvalidInputError(f"Path {label} {key} is not a network vertex")

        try:
            keys = nx.dijkstra_path(self.graph, start_key, end_key, weight="weight")
        except nx.NetworkXNoPath:
            logger.debug(f"No path between {start_key} and {end_key}")
            return None

        if len(keys) == 1:
            return [tuple(start)]

        path = [self.graph.nodes[k]["pos"] for k in keys]

        # Ensure exact start and end points
        path[0] = tuple(start)
        path[-1] = tuple(end)
        return path
