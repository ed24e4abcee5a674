"""Immutable plateau snapshot.

:class:`PlateauState` is the whole world at one instant: the inclusive
bounds of the plateau plus every registered rover. Systems in
:mod:`mars_rover.systems` are pure functions taking a snapshot and returning
a new one, so a snapshot handed out to a caller never changes underneath it.

Design notes:

* Rovers are stored in a **persistent map** (``pyrsistent.PMap``) keyed by
  rover name. ``PMap`` has no stable iteration order, so ``order`` keeps the
  names in registration order.
* ``southwest`` and ``northeast`` are already normalized; use
  :meth:`PlateauState.from_corners` to build a snapshot from two arbitrary
  corners.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from pyrsistent import PMap, PVector, pmap, pvector

from mars_rover.components import Point, Rover
from mars_rover.types import RoverName


@dataclass(frozen=True)
class PlateauState:
    """Immutable plateau world state.

    Attributes:
        southwest (Point): Lowest x and lowest y cell, inclusive.
        northeast (Point): Highest x and highest y cell, inclusive.
        rovers (PMap[RoverName, Rover]): Registered rovers keyed by name.
        order (PVector[RoverName]): Rover names in registration order.
    """

    southwest: Point
    northeast: Point
    rovers: PMap[RoverName, Rover] = pmap()
    order: PVector[RoverName] = pvector()

    @classmethod
    def from_corners(cls, corner_a: Point, corner_b: Point) -> "PlateauState":
        """Build an empty snapshot from two opposite corners in any order."""
        return cls(
            southwest=Point(min(corner_a.x, corner_b.x), min(corner_a.y, corner_b.y)),
            northeast=Point(max(corner_a.x, corner_b.x), max(corner_a.y, corner_b.y)),
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.northeast.x - self.southwest.x + 1

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.northeast.y - self.southwest.y + 1

    @property
    def description(self) -> PMap[str, Any]:
        """Compact summary for logging and debugging."""
        return pmap(
            {
                "southwest": self.southwest,
                "northeast": self.northeast,
                "rovers": {
                    name: (rover.position.x, rover.position.y, rover.direction.value)
                    for name, rover in self.registered()
                },
            }
        )

    def registered(self) -> Iterator[Tuple[RoverName, Rover]]:
        """Yield ``(name, rover)`` pairs in registration order."""
        for name in self.order:
            yield name, self.rovers[name]
