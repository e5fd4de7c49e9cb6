"""Route output model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import LineString

from .geojson import GeoJSONLineString
from .units import DistanceUnit


class Route(BaseModel):
    """A measured path along the sea lane network.

    ``coordinates`` is the path returned by the path search, unmodified. Its
    first and last positions are the snapped origin and destination.
    """

    model_config = ConfigDict(frozen=True)

    coordinates: tuple[tuple[float, float], ...] = Field(
        ..., min_length=1, description="Ordered [longitude, latitude] vertices"
    )
    length: float = Field(..., ge=0.0, description="Route length in `units`")
    units: DistanceUnit = Field(
        default=DistanceUnit.NAUTICAL_MILES, description="Unit of `length`"
    )

    @property
    def origin(self) -> tuple[float, float]:
        return self.coordinates[0]

    @property
    def destination(self) -> tuple[float, float]:
        return self.coordinates[-1]

    @property
    def num_vertices(self) -> int:
        return len(self.coordinates)

    @property
    def is_degenerate(self) -> bool:
        """True when origin and destination snapped to the same vertex."""
        return len(self.coordinates) == 1

    @property
    def geometry(self) -> GeoJSONLineString:
        """Route geometry as a GeoJSON LineString model."""
        return GeoJSONLineString(coordinates=list(self.coordinates))

    def to_linestring(self) -> LineString:
        """Convert to a Shapely LineString.

        A single-vertex route is repeated so the LineString stays valid.
        """
        coords = list(self.coordinates)
        if len(coords) == 1:
            coords = coords * 2
        return LineString(coords)

    def to_geojson(self) -> dict[str, Any]:
        """GeoJSON Feature with `length` and `units` properties."""
        return {
            "type": "Feature",
            "geometry": self.geometry.model_dump(mode="json"),
            "properties": {
                "units": self.units.value,
                "length": self.length,
            },
        }

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.geometry.model_dump(mode="json")
