"""Rover component.

A rover is a named value object. Moving it means storing a new ``Rover`` with
an updated ``position`` in the plateau state; the direction never changes
after registration.
"""

from dataclasses import dataclass, replace

from mars_rover.components.point import Point
from mars_rover.types import Direction, RoverName


@dataclass(frozen=True)
class Rover:
    """Registered rover.

    Attributes:
        name: Identifier, unique within one plateau.
        position: Current cell.
        direction: Facing direction.
    """

    name: RoverName
    position: Point
    direction: Direction

    def at(self, position: Point) -> "Rover":
        """Return a copy of this rover standing on ``position``."""
        return replace(self, position=position)
