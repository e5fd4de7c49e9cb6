"""Exceptions raised by sea lane routing.

A missing path between two snapped points is not an error: the router returns
``None`` for that case. Everything here signals a problem the caller must see.
"""

from __future__ import annotations


class SealanesError(Exception):
    """Base exception for sealanes operations."""

    pass


class InvalidInputError(SealanesError, ValueError):
    """Raised for malformed coordinates or unknown distance units."""

    pass


class NoReachableNetworkError(SealanesError):
    """Raised when no lane lies within the snapping search radius."""

    def __init__(
        self,
        point: tuple[float, float],
        search_radius: float,
        units: str,
        nearest_distance: float | None = None,
    ):
        self.point = point
        self.search_radius = search_radius
        self.units = units
        self.nearest_distance = nearest_distance
        msg = (
            f"No network lane within {search_radius:g} {units} "
            f"of ({point[0]:.5f}, {point[1]:.5f})"
        )
        if nearest_distance is not None:
            msg += f": nearest lane is {nearest_distance:.1f} {units} away"
        super().__init__(msg)


class NetworkLoadError(SealanesError):
    """Raised when network data holds no usable line features."""

    pass
