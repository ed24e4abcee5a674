"""mars_rover.components
=======================

Value objects stored in the plateau state. Both are frozen dataclasses with
no behavior beyond their fields; systems build new instances instead of
mutating them::

    from mars_rover.components import Point, Rover
"""

from .point import Point
from .rover import Rover

__all__ = [
    "Point",
    "Rover",
]
