"""Simplified bidirectional reordering of a line.

Boxes written against the paragraph direction are deferred on a stack and
flushed in reverse as soon as a box in the paragraph direction shows up (or
the line ends). Each maximal run of opposite-direction boxes is thus shown
back to front, anchored in place between the surrounding boxes.

This is a single-level approximation. Nested embeddings and the rest of the
Unicode bidirectional algorithm are not handled.
"""

from collections.abc import Iterable

from linebreak.domain import Box, Direction, Line


def reorder(boxes: Iterable[Box], text_direction: Direction) -> list[Box]:
    """Convert boxes from logical order to visual order.

    Args:
        boxes: Boxes of one line in logical order
        text_direction: Dominant direction of the paragraph

    Returns:
        New list with the same boxes in visual order
    """
    result: list[Box] = []
    stack: list[Box] = []
    for box in boxes:
        if box.direction != text_direction:
            stack.append(box)
            continue
        while stack:
            result.append(stack.pop())
        result.append(box)
    while stack:
        result.append(stack.pop())
    return result


def reorder_line(line: Line, text_direction: Direction) -> Line:
    """Return a copy of ``line`` with its boxes in visual order."""
    return Line.of(reorder(line.boxes, text_direction), line.glue_width)
