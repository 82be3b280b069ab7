"""Line produced by the line-breaking algorithms."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from linebreak.domain.box import Box


@dataclass(frozen=True, slots=True)
class Line:
    """A series of boxes that fit in one line of text.

    Attributes:
        boxes: Boxes of the line in visual order
        glue_width: Extent of every glue between two adjacent boxes
    """

    boxes: tuple[Box, ...] = field(default_factory=tuple)
    glue_width: float = 0.0

    @classmethod
    def of(cls, boxes: Sequence[Box], glue_width: float) -> "Line":
        """Build a line from any sequence of boxes."""
        return cls(boxes=tuple(boxes), glue_width=glue_width)

    def __len__(self) -> int:
        return len(self.boxes)

    @property
    def num_glues(self) -> int:
        """Number of glues between the boxes of the line."""
        return max(len(self.boxes) - 1, 0)

    @property
    def boxes_width(self) -> float:
        """Total width of the boxes, without glue."""
        return sum(box.width for box in self.boxes)

    @property
    def width(self) -> float:
        """Total extent of the line including its glues."""
        return self.boxes_width + self.num_glues * self.glue_width
