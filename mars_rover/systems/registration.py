"""Rover registration system.

Adds a rover to the plateau state after validating, in this order:

1. the name is not already registered,
2. the landing position is inside the plateau,
3. no other rover stands on the landing position.

The first failing check raises; the input state is never modified.
"""

from dataclasses import replace

from mars_rover.components import Point, Rover
from mars_rover.errors import DuplicateNameError, OutOfBoundsError, PositionOccupiedError
from mars_rover.state import PlateauState
from mars_rover.types import Direction, RoverName
from mars_rover.utils.grid import is_in_bounds, is_occupied_at


def registration_system(
    state: PlateauState, name: RoverName, position: Point, direction: Direction
) -> PlateauState:
    """Register a new rover.

    Args:
        state (PlateauState): Current state.
        name (RoverName): Identifier for the new rover.
        position (Point): Landing cell.
        direction (Direction): Facing direction, fixed from now on.

    Returns:
        PlateauState: New state containing the rover.

    Raises:
        DuplicateNameError: ``name`` is already registered.
        OutOfBoundsError: ``position`` is outside the plateau.
        PositionOccupiedError: another rover stands on ``position``.
    """
    if name in state.rovers:
        raise DuplicateNameError(name)
    if not is_in_bounds(state, position):
        raise OutOfBoundsError(name, position)
    if is_occupied_at(state, position):
        raise PositionOccupiedError(name, position)

    rover = Rover(name=name, position=position, direction=direction)
    return replace(
        state,
        rovers=state.rovers.set(name, rover),
        order=state.order.append(name),
    )
