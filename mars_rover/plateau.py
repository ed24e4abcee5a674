"""Plateau aggregate.

:class:`Plateau` is the object callers hold. It owns the current
:class:`~mars_rover.state.PlateauState` and is the only place that replaces
it: every mutating call runs a pure system on the current snapshot and swaps
in the result. Reads work on a single snapshot, so they never observe a
half-applied update.

Mutations are serialized by a per-instance lock, keeping the occupancy check
and the position update of a move atomic when a plateau is shared between
threads.

Example::

    >>> from mars_rover import Direction, Plateau, Point
    >>> plateau = Plateau(Point(5, 5), Point(0, 0))
    >>> plateau.add_rover("spirit", Point(1, 2), Direction.NORTH)
    Rover(name='spirit', position=Point(x=1, y=2), direction=<Direction.NORTH: 'N'>)
    >>> plateau.move_rover("spirit")
    True
    >>> plateau.rover_position("spirit")
    Point(x=1, y=3)
"""

import logging
import threading
from typing import List

from mars_rover.components import Point, Rover
from mars_rover.errors import UnknownRoverError
from mars_rover.state import PlateauState
from mars_rover.systems.movement import movement_system
from mars_rover.systems.registration import registration_system
from mars_rover.types import Direction, RoverName
from mars_rover.utils.grid import is_in_bounds, is_occupied_at


logger = logging.getLogger(__name__)


class Plateau:
    """Bounded grid hosting named rovers.

    Args:
        corner_a (Point): One corner of the plateau.
        corner_b (Point): The opposite corner; order does not matter.
    """

    def __init__(self, corner_a: Point, corner_b: Point) -> None:
        self._state = PlateauState.from_corners(corner_a, corner_b)
        self._lock = threading.RLock()

    @classmethod
    def create(cls, corner_a: Point, corner_b: Point) -> "Plateau":
        """Alternate constructor, same as ``Plateau(corner_a, corner_b)``."""
        return cls(corner_a, corner_b)

    def __repr__(self) -> str:
        return (
            f"Plateau(southwest={self.southwest!r}, northeast={self.northeast!r}, "
            f"rovers={len(self)})"
        )

    def __len__(self) -> int:
        return len(self._state.rovers)

    def __contains__(self, name: object) -> bool:
        return name in self._state.rovers

    @property
    def southwest(self) -> Point:
        return self._state.southwest

    @property
    def northeast(self) -> Point:
        return self._state.northeast

    def snapshot(self) -> PlateauState:
        """Return the current immutable state."""
        return self._state

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies on the plateau, edges included."""
        return is_in_bounds(self._state, point)

    def occupied(self, point: Point) -> bool:
        """Return True if a registered rover stands on ``point``."""
        return is_occupied_at(self._state, point)

    def add_rover(self, name: RoverName, position: Point, direction: Direction) -> Rover:
        """Register a rover and return it.

        Raises:
            DuplicateNameError: ``name`` is already registered.
            OutOfBoundsError: ``position`` is off the plateau.
            PositionOccupiedError: another rover stands on ``position``.
        """
        with self._lock:
            self._state = registration_system(self._state, name, position, direction)
            rover = self._state.rovers[name]
        logger.info(
            "Registered rover %s at (%d, %d) facing %s",
            name,
            position.x,
            position.y,
            direction.name,
        )
        return rover

    def move_rover(self, name: RoverName) -> bool:
        """Advance a rover one cell in its facing direction.

        A step off the plateau or onto another rover is refused silently: the
        rover stays where it is and ``False`` is returned.

        Returns:
            bool: True if the rover moved.

        Raises:
            UnknownRoverError: ``name`` is not registered.
        """
        with self._lock:
            before = self._state
            self._state = movement_system(before, name)
            moved = self._state is not before
            position = self._state.rovers[name].position
        if moved:
            logger.debug("Rover %s moved to (%d, %d)", name, position.x, position.y)
        else:
            logger.debug("Rover %s held at (%d, %d)", name, position.x, position.y)
        return moved

    def rover(self, name: RoverName) -> Rover:
        """Return the registered rover called ``name``.

        Raises:
            UnknownRoverError: ``name`` is not registered.
        """
        rover = self._state.rovers.get(name)
        if rover is None:
            raise UnknownRoverError(name)
        return rover

    def rover_position(self, name: RoverName) -> Point:
        """Return the current position of ``name``.

        Raises:
            UnknownRoverError: ``name`` is not registered.
        """
        return self.rover(name).position

    def rovers(self) -> List[Rover]:
        """Return all rovers in registration order."""
        return [rover for _, rover in self._state.registered()]
