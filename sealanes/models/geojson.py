"""GeoJSON geometry models for route inputs and outputs."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class GeoJSONPoint(BaseModel):
    """GeoJSON Point geometry."""

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float] = Field(
        ..., description="[longitude, latitude] in decimal degrees"
    )

    @property
    def lon(self) -> float:
        return self.coordinates[0]

    @property
    def lat(self) -> float:
        return self.coordinates[1]


class GeoJSONLineString(BaseModel):
    """GeoJSON LineString geometry.

    A route that starts and ends on the same network vertex is a single
    position, so one position is accepted here even though RFC 7946 asks for
    two. Consumers that need a strict LineString should use
    ``Route.to_linestring()``.
    """

    type: Literal["LineString"] = "LineString"
    coordinates: list[tuple[float, float]] = Field(
        ..., description="Ordered [longitude, latitude] positions"
    )

    @field_validator("coordinates")
    @classmethod
    def validate_positions(cls, v: list[tuple[float, float]]) -> list[tuple[float, float]]:
        """Validate that at least one position exists."""
        if not v:
            raise ValueError("LineString must have at least one position")
        return v
