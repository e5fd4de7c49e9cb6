"""Router settings."""

from typing import Dict

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .units import DistanceUnit


class RouterSettings(BaseModel):
    """Tunable behaviour of a SeaRouter.

    Unknown field names are rejected, so a misspelled profile key is an error.
    """

    model_config = ConfigDict(extra="forbid")

    search_radius: float = Field(
        default=30000.0, gt=0, description="Maximum distance from a point to its nearest lane"
    )
    search_radius_units: DistanceUnit = Field(
        default=DistanceUnit.KILOMETERS, description="Unit of search_radius"
    )
    default_units: DistanceUnit = Field(
        default=DistanceUnit.NAUTICAL_MILES, description="Route length unit when none is requested"
    )
    validate_coordinates: bool = Field(
        default=False, description="Reject longitudes outside [-180, 180] and latitudes outside [-90, 90]"
    )
    use_spatial_index: bool = Field(
        default=True, description="Narrow the nearest-lane scan with an STRtree"
    )
    node_precision: int = Field(
        default=5, ge=0, le=12, description="Decimal places used to merge shared lane vertices"
    )
    max_workers: int = Field(
        default=4, ge=1, le=64, description="Thread pool size for batch routing"
    )

    @field_validator("search_radius_units", "default_units", mode="before")
    @classmethod
    def parse_units(cls, v):
        """Accept unit aliases such as 'km'."""
        return DistanceUnit.parse(v)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "RouterSettings":
        """Load settings from a YAML mapping; an empty document gives the defaults."""
        data = yaml.safe_load(yaml_content)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings YAML must be a mapping, got {type(data).__name__}")
        return cls.model_validate(data)

    def merge_override(self, override: Dict) -> "RouterSettings":
        """Return new settings with the `override` fields replaced."""
        return RouterSettings.model_validate({**self.model_dump(), **override})
