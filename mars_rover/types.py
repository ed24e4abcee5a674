"""Common type aliases and enumerations.

``Direction`` is the closed set of compass headings a rover can face. Its
string values are the single-letter codes used by mission files, so
``Direction("N") is Direction.NORTH``.
"""

from enum import StrEnum


RoverName = str


class Direction(StrEnum):
    """Compass heading of a rover (fixed at registration)."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Accept a compass letter or full name, case-insensitive."""
        token = text.strip().upper()
        for direction in cls:
            if token in (direction.value, direction.name):
                return direction
        raise ValueError(f"Unknown direction: {text!r}")
