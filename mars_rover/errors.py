"""Exceptions raised by plateau operations.

Every failure is recoverable: the plateau is left exactly as it was before
the call. A refused move (edge of the plateau or another rover in the way) is
not an error and never raises.
"""

from typing import Optional

from mars_rover.components import Point
from mars_rover.types import RoverName


class PlateauError(Exception):
    """Base class for rejected plateau requests."""

    def __init__(
        self, message: str, name: RoverName, position: Optional[Point] = None
    ) -> None:
        super().__init__(message)
        self.name = name
        self.position = position


class DuplicateNameError(PlateauError, ValueError):
    """A rover with this name is already registered."""

    def __init__(self, name: RoverName) -> None:
        super().__init__(f"Rover {name!r} is already registered", name)


class OutOfBoundsError(PlateauError, ValueError):
    """The requested position lies outside the plateau."""

    def __init__(self, name: RoverName, position: Point) -> None:
        super().__init__(
            f"Rover {name!r} cannot land at ({position.x}, {position.y}): "
            "outside the plateau",
            name,
            position,
        )


class PositionOccupiedError(PlateauError, ValueError):
    """Another rover already stands on the requested position."""

    def __init__(self, name: RoverName, position: Point) -> None:
        super().__init__(
            f"Rover {name!r} cannot land at ({position.x}, {position.y}): "
            "position occupied",
            name,
            position,
        )


class UnknownRoverError(PlateauError, LookupError):
    """No rover with this name is registered."""

    def __init__(self, name: RoverName) -> None:
        super().__init__(f"Unknown rover: {name!r}", name)
