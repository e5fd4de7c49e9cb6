"""Turning raw network paths into measured routes."""

from typing import Sequence

from ..errors import InvalidInputError
from ..geometry.measure import MILES_TO_NAUTICAL_MILES, line_length
from ..models.route import Route
from ..models.units import DistanceUnit


def measure_length(
    path: Sequence[Sequence[float]],
    units: DistanceUnit | str = DistanceUnit.NAUTICAL_MILES,
) -> float:
    """Great-circle length of a path in `units`.

    Nautical miles are derived from the length in miles with the fixed
    1.15078 factor; every other unit is measured directly.
    """
    units = DistanceUnit.parse(units)
    if units is DistanceUnit.NAUTICAL_MILES:
        return line_length(path, DistanceUnit.MILES) * MILES_TO_NAUTICAL_MILES
    return line_length(path, units)


def assemble_route(
    path: Sequence[Sequence[float]],
    units: DistanceUnit | str = DistanceUnit.NAUTICAL_MILES,
) -> Route:
    """Build a Route from a path returned by the path search.

    The geometry is the path exactly as given (no resampling or
    simplification). A single-vertex path has length 0.

    Raises:
        InvalidInputError: If the path is empty or units are unknown
    """
    units = DistanceUnit.parse(units)
    if len(path) == 0:
        raise InvalidInputError("Cannot assemble a route from an empty path")

    coordinates = tuple((float(c[0]), float(c[1])) for c in path)
    return Route(
        coordinates=coordinates,
        length=measure_length(coordinates, units),
        units=units,
    )
