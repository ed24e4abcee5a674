"""Point component.

Immutable signed integer grid coordinates. Rovers carry one as their
position and the plateau uses two as its corners.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Grid coordinate.

    Attributes:
        x: Column index, growing eastward.
        y: Row index, growing northward.
    """

    x: int
    y: int
