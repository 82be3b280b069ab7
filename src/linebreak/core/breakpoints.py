"""Break-point enumeration and the badness model.

For a given start index, the enumerator lists every index at which the
current line may end, together with the local cost ("badness") of ending it
there. Badness is the squared deviation between the nominal glue width and
the glue width needed to fill the line exactly, so lines whose spacing stays
close to normal are cheap and very loose or very tight lines are expensive.

Candidates are produced in two phases:

1. A walk that packs boxes while the line still fits with fully expanded
   glue. Where it stops lies the tightest feasible break.
2. A continuation that keeps adding boxes while the line still fits with
   fully shrunk glue. Every accepted box yields a looser break.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from linebreak.config import Options
from linebreak.domain import Box


@dataclass(frozen=True, slots=True)
class BreakPoint:
    """A feasible line end.

    Attributes:
        index: Index of the first box of the next line (exclusive end)
        badness: Cost of ending the current line here
    """

    index: int
    badness: float = 0.0


def badness(boxes_width: float, num_glues: int, options: Options) -> float:
    """Calculate the badness of a justified line.

    Args:
        boxes_width: Total width of the boxes on the line
        num_glues: Number of glues between those boxes
        options: Line-breaking options

    Returns:
        Squared difference between the nominal glue width and the glue width
        that fills the text width exactly, or 0 for lines without glue
    """
    if num_glues <= 0:
        return 0.0
    diff = options.glue_width - (options.text_width - boxes_width) / num_glues
    return diff * diff


def break_range(boxes: Sequence[Box], options: Options, start: int) -> list[BreakPoint]:
    """List every feasible break for the line starting at ``start``.

    Args:
        boxes: Boxes of the paragraph in logical order
        options: Line-breaking options
        start: Index of the first box of the line

    Returns:
        Break points ordered from the tightest (fewest boxes) to the loosest.
        A box wider than the text width still yields a single break right
        after it, so every line holds at least one box.
    """
    count = len(boxes)
    min_glue_width = options.min_glue_width
    max_glue_width = options.max_glue_width

    min_line_width = 0.0
    max_line_width = 0.0
    boxes_width = 0.0
    num_glues = 0

    first = start
    tight: BreakPoint | None = None
    while first < count:
        box_width = boxes[first].width
        if first == start:
            min_line_width += box_width
            max_line_width += box_width
            boxes_width += box_width
        elif max_line_width + max_glue_width + box_width <= options.text_width:
            min_line_width += min_glue_width + box_width
            max_line_width += max_glue_width + box_width
            boxes_width += box_width
            num_glues += 1
        else:
            tight = BreakPoint(index=first, badness=badness(boxes_width, num_glues, options))
            break
        first += 1

    if tight is None:
        # Everything left fits on this line
        return [BreakPoint(index=first)]

    candidates = [tight]
    for last in range(first, count):
        box_width = boxes[last].width
        if min_line_width + min_glue_width + box_width > options.text_width:
            break
        min_line_width += min_glue_width + box_width
        boxes_width += box_width
        num_glues += 1
        if last == count - 1:
            # The last line of a paragraph is never stretched
            candidates.append(BreakPoint(index=last + 1))
        else:
            candidates.append(
                BreakPoint(index=last + 1, badness=badness(boxes_width, num_glues, options))
            )
    return candidates
