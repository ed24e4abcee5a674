"""Grid bounds / occupancy helpers.

Pure predicates used by the registration and movement systems.
"""

from typing import Optional

from mars_rover.components import Point
from mars_rover.state import PlateauState
from mars_rover.types import RoverName


def is_in_bounds(state: PlateauState, pos: Point) -> bool:
    """Return True if ``pos`` lies inside the plateau, edges included."""
    return (
        state.southwest.x <= pos.x <= state.northeast.x
        and state.southwest.y <= pos.y <= state.northeast.y
    )


def rover_at(state: PlateauState, pos: Point) -> Optional[RoverName]:
    """Return the name of the rover standing on ``pos``, if any."""
    for name, rover in state.rovers.items():
        if rover.position == pos:
            return name
    return None


def is_occupied_at(state: PlateauState, pos: Point) -> bool:
    """Return True if any registered rover stands on ``pos``."""
    return rover_at(state, pos) is not None
