"""Box capability and writing direction.

A box is a solid, unbreakable element of a paragraph, typically a word.
The engine only needs two things from it: the direction it is written in
and how wide it is. Any object exposing these two attributes can be broken
into lines; nothing has to inherit from a base class.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


class Direction(str, Enum):
    """Writing direction of a box or of a whole paragraph."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"

    @property
    def opposite(self) -> "Direction":
        """Get the other direction."""
        if self is Direction.LEFT_TO_RIGHT:
            return Direction.RIGHT_TO_LEFT
        return Direction.LEFT_TO_RIGHT


@runtime_checkable
class Box(Protocol):
    """A solid text element that can be placed on a line.

    Attributes:
        direction: Writing direction of the box
        width: Extent of the box along the line (non-negative)
    """

    @property
    def direction(self) -> Direction: ...

    @property
    def width(self) -> float: ...
