"""Rover movement system.

Attempts to advance a rover by one cell. The move is applied only if the
destination is in-bounds and no rover stands on it; otherwise the original
state is returned unchanged. Occupancy is evaluated on the state *before* the
update, and since a step always changes the cell, the moving rover never
blocks itself.
"""

from dataclasses import replace

from mars_rover.errors import UnknownRoverError
from mars_rover.moves import step_from
from mars_rover.state import PlateauState
from mars_rover.types import RoverName
from mars_rover.utils.grid import is_in_bounds, is_occupied_at


def movement_system(state: PlateauState, name: RoverName) -> PlateauState:
    """Move a rover one cell if allowed.

    Args:
        state (PlateauState): Current state.
        name (RoverName): Rover to move.

    Returns:
        PlateauState: Same state if blocked / off-plateau, otherwise a new state
            with the rover's updated position.

    Raises:
        UnknownRoverError: ``name`` is not registered.
    """
    rover = state.rovers.get(name)
    if rover is None:
        raise UnknownRoverError(name)

    next_pos = step_from(rover.position, rover.direction)

    if not is_in_bounds(state, next_pos):
        return state  # Edge of the plateau: don't move

    if is_occupied_at(state, next_pos):
        return state

    return replace(state, rovers=state.rovers.set(name, rover.at(next_pos)))
