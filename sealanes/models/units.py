"""Distance units accepted for route lengths and search radii."""

from enum import Enum

from ..errors import InvalidInputError


class DistanceUnit(str, Enum):
    """Unit a route length or snapping radius is expressed in."""

    NAUTICAL_MILES = "nm"
    KILOMETERS = "kilometers"
    MILES = "miles"
    DEGREES = "degrees"
    RADIANS = "radians"

    @classmethod
    def parse(cls, value: "str | DistanceUnit") -> "DistanceUnit":
        """Resolve a unit name or alias.

        Raises:
            InvalidInputError: If the name is not a supported unit
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidInputError(f"Distance unit must be a string, got {type(value).__name__}")

        key = value.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(u.value for u in cls)
            raise InvalidInputError(f"Unknown distance unit '{value}' (expected one of: {valid})")


_ALIASES = {
    "nauticalmiles": DistanceUnit.NAUTICAL_MILES,
    "nautical_miles": DistanceUnit.NAUTICAL_MILES,
    "km": DistanceUnit.KILOMETERS,
    "kilometres": DistanceUnit.KILOMETERS,
    "mi": DistanceUnit.MILES,
}
