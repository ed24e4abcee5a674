"""Direction deltas and the single-step move function.

``DIRECTION_DELTAS`` is the canonical table mapping each heading to the cell
offset of one step. :func:`step_from` turns a position and heading into the
cell a rover would enter; it does not check bounds or occupancy, the movement
system does.
"""

from typing import Dict, Tuple

from mars_rover.components import Point
from mars_rover.types import Direction


DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def unit_delta(direction: Direction) -> Tuple[int, int]:
    """Return ``(dx, dy)`` for one step facing ``direction``."""
    return DIRECTION_DELTAS[direction]


def step_from(pos: Point, direction: Direction) -> Point:
    """Return the neighbor of ``pos`` in ``direction``."""
    dx, dy = unit_delta(direction)
    return Point(pos.x + dx, pos.y + dy)

