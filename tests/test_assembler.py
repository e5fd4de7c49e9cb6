"""Tests for route assembly and length measurement."""

import math

import pytest
from pydantic import ValidationError
from shapely.geometry import LineString

from sealanes.errors import InvalidInputError
from sealanes.geometry.measure import EARTH_RADIUS
from sealanes.models.geojson import GeoJSONLineString
from sealanes.models.route import Route
from sealanes.models.units import DistanceUnit
from sealanes.routing.assembler import assemble_route, measure_length

ONE_DEGREE = math.pi / 180
ONE_DEGREE_KM = EARTH_RADIUS / 1000 * ONE_DEGREE
ONE_DEGREE_MILES = EARTH_RADIUS / 1609.344 * ONE_DEGREE

PATH = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]


class TestMeasureLength:
    """Test unit handling of route lengths."""

    def test_nautical_miles_use_miles_times_factor(self):
        """nm lengths are miles x 1.15078, not kilometers / 1.852."""
        assert measure_length(PATH, "nm") == pytest.approx(2 * ONE_DEGREE_MILES * 1.15078)

    def test_kilometers(self):
        assert measure_length(PATH, "kilometers") == pytest.approx(2 * ONE_DEGREE_KM)

    def test_miles(self):
        assert measure_length(PATH, "miles") == pytest.approx(2 * ONE_DEGREE_MILES)

    def test_degrees(self):
        assert measure_length(PATH, "degrees") == pytest.approx(
            2 * ONE_DEGREE * EARTH_RADIUS / 111325
        )

    def test_radians(self):
        assert measure_length(PATH, "radians") == pytest.approx(2 * ONE_DEGREE)

    def test_kilometers_relate_to_nm_through_miles(self):
        nm = measure_length(PATH, "nm")
        km = measure_length(PATH, "kilometers")
        assert km == pytest.approx(nm / 1.15078 * 1.609344)


class TestAssembleRoute:
    """Test Route construction from raw paths."""

    def test_geometry_is_path_unmodified(self):
        route = assemble_route(PATH, "kilometers")
        assert list(route.coordinates) == PATH
        assert route.origin == PATH[0]
        assert route.destination == PATH[-1]

    def test_units_recorded(self):
        route = assemble_route(PATH, "miles")
        assert route.units is DistanceUnit.MILES

    def test_default_units_are_nautical_miles(self):
        assert assemble_route(PATH).units is DistanceUnit.NAUTICAL_MILES

    def test_single_point_has_zero_length(self):
        route = assemble_route([(-5.0, 48.5)], "nm")
        assert route.length == 0.0
        assert route.is_degenerate

    def test_empty_path_rejected(self):
        with pytest.raises(InvalidInputError):
            assemble_route([], "nm")

    def test_unknown_units_rejected(self):
        with pytest.raises(InvalidInputError):
            assemble_route(PATH, "leagues")

    def test_unit_alias(self):
        assert assemble_route(PATH, "km").units is DistanceUnit.KILOMETERS


class TestRouteModel:
    """Test Route output forms."""

    def test_route_is_immutable(self):
        route = assemble_route(PATH, "nm")
        with pytest.raises(ValidationError):
            route.length = 0.0

    def test_negative_length_rejected(self):
        with pytest.raises(ValidationError):
            Route(coordinates=PATH, length=-1.0, units="nm")

    def test_to_geojson_feature(self):
        route = assemble_route(PATH, "nm")
        feature = route.to_geojson()
        assert feature["type"] == "Feature"
        assert feature["geometry"]["type"] == "LineString"
        assert feature["geometry"]["coordinates"] == [list(c) for c in PATH]
        assert feature["properties"] == {"units": "nm", "length": route.length}

    def test_to_linestring(self):
        line = assemble_route(PATH, "nm").to_linestring()
        assert isinstance(line, LineString)
        assert list(line.coords) == PATH

    def test_single_point_linestring_is_valid(self):
        line = assemble_route([(3.0, 4.0)], "nm").to_linestring()
        assert len(line.coords) == 2
        assert line.length == 0.0

    def test_geo_interface(self):
        route = assemble_route(PATH, "nm")
        assert route.__geo_interface__["type"] == "LineString"

    def test_geometry_model(self):
        geometry = assemble_route(PATH, "nm").geometry
        assert isinstance(geometry, GeoJSONLineString)
        assert geometry.type == "LineString"
        assert geometry.coordinates == PATH

    def test_single_point_geometry_keeps_one_position(self):
        route = assemble_route([(3.0, 4.0)], "nm")
        assert route.geometry.coordinates == [(3.0, 4.0)]
        assert route.to_geojson()["geometry"]["coordinates"] == [[3.0, 4.0]]

    def test_linestring_model_needs_a_position(self):
        with pytest.raises(ValidationError):
            GeoJSONLineString(coordinates=[])
