"""Tests for two-phase network snapping.

Phase 1 picks the lane with the smallest point-to-segment distance; phase 2
picks that lane's vertex with the smallest rhumb distance.
"""

import numpy as np
import pytest

from sealanes.errors import NoReachableNetworkError
from sealanes.geometry.measure import EARTH_RADIUS
from sealanes.models.units import DistanceUnit
from sealanes.network.index import NetworkIndex
from sealanes.network.snapper import (
    feature_distances,
    nearest_feature,
    nearest_vertex,
    snap_to_network,
)
from sealanes.network.store import LineFeature, Network

ONE_DEGREE_KM = EARTH_RADIUS / 1000 * np.pi / 180


class TestNearestFeature:
    """Phase 1: nearest lane by distance along the polyline."""

    def test_picks_closest_lane(self, simple_network):
        index, dist = nearest_feature((0.4, 0.5), simple_network)
        assert index == 0
        assert dist == pytest.approx(0.5 * np.pi / 180)

    def test_measures_along_segments_not_vertices(self):
        """A long lane passing close by beats a lane with a nearer vertex."""
        network = Network.from_coordinates([
            [(5.0, 2.0), (5.0, 3.0)],  # vertex 1.1 deg away
            [(0.0, 0.0), (10.0, 0.0)],  # segment 0.9 deg away
        ])
        index, _ = nearest_feature((5.0, 0.9), network)
        assert index == 1

    def test_first_feature_wins_ties(self):
        network = Network.from_coordinates([
            [(0.0, 0.0), (1.0, 0.0)],
            [(0.0, 0.0), (1.0, 0.0)],
        ])
        index, _ = nearest_feature((0.5, 0.5), network)
        assert index == 0

    def test_candidates_restrict_scan(self, simple_network):
        index, _ = nearest_feature((0.4, 0.5), simple_network, candidates=[2, 1])
        assert index == 1

    def test_feature_distances_one_per_feature(self, simple_network):
        distances = feature_distances((2.0, 0.0), simple_network)
        assert distances.shape == (3,)
        assert distances[0] == 0.0
        assert distances[1] == 0.0
        assert distances[2] > 0.0


class TestNearestVertex:
    """Phase 2: nearest vertex of the chosen lane."""

    def test_picks_closest_vertex(self):
        feature = LineFeature(((0.0, 0.0), (1.0, 0.0), (2.0, 0.0)))
        index, _ = nearest_vertex((1.2, 0.3), feature)
        assert index == 1

    def test_zero_distance_vertex_wins_even_when_not_first(self):
        feature = LineFeature(((1.0, 0.0), (0.0, 0.0), (2.0, 0.0)))
        index, dist = nearest_vertex((0.0, 0.0), feature)
        assert index == 1
        assert dist == 0.0

    def test_first_vertex_wins_ties(self):
        feature = LineFeature(((0.0, 0.0), (10.0, 0.0)))
        index, _ = nearest_vertex((5.0, 0.9), feature)
        assert index == 0


class TestSnapToNetwork:
    """Full two-phase snapping."""

    def test_snaps_to_vertex_of_nearest_lane(self, simple_network):
        result = snap_to_network((0.4, 0.5), simple_network)
        assert result.point == (0.0, 0.0)
        assert result.feature_index == 0
        assert result.vertex_index == 0
        assert result.units is DistanceUnit.KILOMETERS
        assert result.feature_distance == pytest.approx(0.5 * ONE_DEGREE_KM)

    def test_vertex_restricted_to_chosen_lane(self):
        """The nearest vertex overall is not considered if its lane lost phase 1."""
        network = Network.from_coordinates([
            [(5.0, 2.0), (5.0, 3.0)],
            [(0.0, 0.0), (10.0, 0.0)],
        ])
        result = snap_to_network((5.0, 0.9), network)
        assert result.feature_index == 1
        assert result.point == (0.0, 0.0)

    def test_snap_is_idempotent_for_every_vertex(self, simple_network):
        for feature in simple_network.features:
            for vertex in feature.coordinates:
                assert snap_to_network(vertex, simple_network).point == vertex

    def test_shared_vertex_resolves_to_first_lane(self, simple_network):
        result = snap_to_network((2.0, 0.0), simple_network)
        assert result.feature_index == 0
        assert result.vertex_index == 2

    def test_no_lane_within_radius(self, simple_network):
        with pytest.raises(NoReachableNetworkError) as exc_info:
            snap_to_network((100.0, 50.0), simple_network, search_radius=100.0)

        err = exc_info.value
        assert err.search_radius == 100.0
        assert err.units == "kilometers"
        assert err.nearest_distance > 100.0
        assert err.point == (100.0, 50.0)

    def test_radius_boundary(self, simple_network):
        """One degree from lane A: excluded just below, included just above."""
        point = (0.5, -1.0)
        with pytest.raises(NoReachableNetworkError):
            snap_to_network(point, simple_network, search_radius=ONE_DEGREE_KM * 0.999)

        result = snap_to_network(point, simple_network, search_radius=ONE_DEGREE_KM * 1.001)
        assert result.feature_index == 0

    def test_radius_in_other_units(self, simple_network):
        with pytest.raises(NoReachableNetworkError):
            snap_to_network((0.5, -1.0), simple_network, search_radius=50, search_radius_units="nm")
        result = snap_to_network((0.5, -1.0), simple_network, search_radius=70, search_radius_units="nm")
        assert result.feature_distance == pytest.approx(60.04, abs=0.01)

    def test_deterministic(self, simple_network):
        first = snap_to_network((1.7, 0.8), simple_network)
        for _ in range(5):
            assert snap_to_network((1.7, 0.8), simple_network) == first


class TestSpatialIndexParity:
    """Snapping through the index matches a full scan."""

    def test_candidates_always_contain_full_scan_winner(self, sample_router):
        network = sample_router.network
        index = NetworkIndex(network)
        rng = np.random.default_rng(42)
        points = np.column_stack([rng.uniform(-30, 130, 200), rng.uniform(-50, 60, 200)])

        for lon, lat in points:
            point = (float(lon), float(lat))
            full, _ = nearest_feature(point, network)
            assert full in index.candidates(point)

    def test_snap_results_identical(self, sample_router):
        network = sample_router.network
        index = NetworkIndex(network)
        rng = np.random.default_rng(7)
        points = np.column_stack([rng.uniform(-30, 130, 100), rng.uniform(-50, 60, 100)])

        for lon, lat in points:
            point = (float(lon), float(lat))
            indexed = snap_to_network(point, network, index=index)
            scanned = snap_to_network(point, network)
            assert indexed.point == scanned.point
            assert indexed.feature_index == scanned.feature_index
            assert indexed.feature_distance == pytest.approx(scanned.feature_distance)

    def test_index_narrows_far_latitudes(self, sample_router):
        """A point beside the Caspian lane does not need the southern lanes."""
        index = NetworkIndex(sample_router.network)
        candidates = index.candidates((50.0, 41.5))
        assert 8 in candidates
        assert len(candidates) < len(sample_router.network)
