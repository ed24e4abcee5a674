"""Plain-text rendering of a plateau.

North is up: the first line is the ``northeast.y`` row and the last line the
``southwest.y`` row. Empty cells are ``.``; rovers are drawn by heading.
Plateaus larger than ``MAX_RENDER_CELLS`` are refused.
"""

from typing import Dict, List

from mars_rover.components import Point, Rover
from mars_rover.plateau import Plateau
from mars_rover.types import Direction


EMPTY_GLYPH = "."

MAX_RENDER_CELLS = 1_000_000

DIRECTION_GLYPHS: Dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}


def format_rover(rover: Rover) -> str:
    """Return ``"NAME X Y D"`` for ``rover``."""
    return (
        f"{rover.name} {rover.position.x} {rover.position.y} {rover.direction.value}"
    )


def render_plateau(plateau: Plateau) -> str:
    """Draw the plateau as rows of glyphs joined by newlines.

    Raises:
        ValueError: The plateau has more than ``MAX_RENDER_CELLS`` cells.
    """
    state = plateau.snapshot()
    if state.width * state.height > MAX_RENDER_CELLS:
        raise ValueError(
            f"Plateau of {state.width}x{state.height} cells is too large to render "
            f"(limit {MAX_RENDER_CELLS} cells)"
        )
    glyphs: Dict[Point, str] = {
        rover.position: DIRECTION_GLYPHS[rover.direction]
        for rover in state.rovers.values()
    }
    west = state.southwest.x
    rows: List[str] = []
    for y in reversed(range(state.southwest.y, state.southwest.y + state.height)):
        rows.append(
            "".join(
                glyphs.get(Point(x, y), EMPTY_GLYPH)
                for x in range(west, west + state.width)
            )
        )
    return "\n".join(rows)
