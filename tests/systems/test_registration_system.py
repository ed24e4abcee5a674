import pytest

from mars_rover.components import Point, Rover
from mars_rover.errors import (
    DuplicateNameError,
    OutOfBoundsError,
    PlateauError,
    PositionOccupiedError,
)
from mars_rover.systems.registration import registration_system
from mars_rover.types import Direction
from tests.test_utils import make_plateau_state


def test_registration_adds_rover() -> None:
    state = make_plateau_state()
    new_state = registration_system(state, "r1", Point(1, 2), Direction.SOUTH)
    assert new_state.rovers["r1"] == Rover("r1", Point(1, 2), Direction.SOUTH)
    assert list(new_state.order) == ["r1"]
    assert len(state.rovers) == 0  # input untouched


def test_registration_keeps_bounds() -> None:
    state = make_plateau_state(southwest=(-1, -1), northeast=(3, 3))
    new_state = registration_system(state, "r1", Point(-1, -1), Direction.NORTH)
    assert new_state.southwest == state.southwest
    assert new_state.northeast == state.northeast


def test_duplicate_name_rejected() -> None:
    state = make_plateau_state([("r1", (0, 0), Direction.NORTH)])
    with pytest.raises(DuplicateNameError) as excinfo:
        registration_system(state, "r1", Point(3, 3), Direction.EAST)
    assert excinfo.value.name == "r1"
    assert state.rovers["r1"] == Rover("r1", Point(0, 0), Direction.NORTH)


def test_out_of_bounds_rejected() -> None:
    state = make_plateau_state()
    with pytest.raises(OutOfBoundsError) as excinfo:
        registration_system(state, "r1", Point(5, 0), Direction.NORTH)
    assert excinfo.value.position == Point(5, 0)


def test_occupied_position_rejected() -> None:
    state = make_plateau_state([("r1", (2, 2), Direction.NORTH)])
    with pytest.raises(PositionOccupiedError):
        registration_system(state, "r2", Point(2, 2), Direction.WEST)


def test_duplicate_name_wins_over_out_of_bounds() -> None:
    state = make_plateau_state([("r1", (0, 0), Direction.NORTH)])
    with pytest.raises(DuplicateNameError):
        registration_system(state, "r1", Point(99, 99), Direction.NORTH)


def test_duplicate_name_wins_over_occupied() -> None:
    state = make_plateau_state([("r1", (0, 0), Direction.NORTH)])
    with pytest.raises(DuplicateNameError):
        registration_system(state, "r1", Point(0, 0), Direction.NORTH)


def test_out_of_bounds_checked_before_occupancy() -> None:
    # A rover outside the bounds can only exist in a hand-built state.
    state = make_plateau_state([("ghost", (9, 9), Direction.NORTH)])
    with pytest.raises(OutOfBoundsError):
        registration_system(state, "r2", Point(9, 9), Direction.NORTH)


def test_errors_share_a_base_class() -> None:
    state = make_plateau_state([("r1", (0, 0), Direction.NORTH)])
    with pytest.raises(PlateauError):
        registration_system(state, "r1", Point(0, 0), Direction.NORTH)
    with pytest.raises(ValueError):
        registration_system(state, "r2", Point(-1, 0), Direction.NORTH)
