# tests/unit/test_point.py

import dataclasses

import pytest

from mars_rover.components import Point, Rover
from mars_rover.types import Direction


def test_points_compare_by_value() -> None:
    assert Point(3, 4) == Point(3, 4)
    assert Point(3, 4) != Point(4, 3)
    assert Point(-1, 0) != Point(1, 0)


def test_point_is_hashable_by_value() -> None:
    assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2


def test_point_is_immutable() -> None:
    p = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5  # type: ignore[misc]


def test_rover_fields() -> None:
    rover = Rover("some name", Point(3, 4), Direction.EAST)
    assert rover.name == "some name"
    assert rover.position == Point(3, 4)
    assert rover.direction is Direction.EAST


def test_rover_at_keeps_name_and_direction() -> None:
    rover = Rover("r", Point(0, 0), Direction.NORTH)
    moved = rover.at(Point(0, 1))
    assert moved == Rover("r", Point(0, 1), Direction.NORTH)
    assert rover.position == Point(0, 0)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("N", Direction.NORTH),
        ("e", Direction.EAST),
        ("South", Direction.SOUTH),
        (" WEST ", Direction.WEST),
    ],
)
def test_direction_parse(text: str, expected: Direction) -> None:
    assert Direction.parse(text) is expected


@pytest.mark.parametrize("text", ["", "X", "NE", "up"])
def test_direction_parse_rejects_unknown(text: str) -> None:
    with pytest.raises(ValueError):
        Direction.parse(text)
