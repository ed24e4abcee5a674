"""mars_rover
============

Named rovers stepping across a bounded rectangular plateau.

The public surface::

    from mars_rover import Direction, Plateau, Point

    plateau = Plateau(Point(0, 0), Point(5, 5))
    plateau.add_rover("spirit", Point(1, 2), Direction.EAST)
    plateau.move_rover("spirit")

See :mod:`mars_rover.plateau` for the rules and :mod:`mars_rover.mission` for
the mission file runner.
"""

from .components import Point, Rover
from .errors import (
    DuplicateNameError,
    OutOfBoundsError,
    PlateauError,
    PositionOccupiedError,
    UnknownRoverError,
)
from .plateau import Plateau
from .state import PlateauState
from .types import Direction

__all__ = [
    "Direction",
    "DuplicateNameError",
    "OutOfBoundsError",
    "Plateau",
    "PlateauError",
    "PlateauState",
    "Point",
    "PositionOccupiedError",
    "Rover",
    "UnknownRoverError",
]
