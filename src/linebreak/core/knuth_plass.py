"""Knuth-Plass optimal line breaking.

The optimizer chooses the set of breaks that minimizes the total badness of
the paragraph. The best way to break the suffix that starts at a given box
does not depend on how that box was reached, so each suffix is solved once.
Suffixes are solved from the end of the paragraph back to its start, which
keeps the search iterative for long paragraphs.
"""

import math
from collections.abc import Sequence

from linebreak.config import Options
from linebreak.core.bidi import reorder
from linebreak.core.breakpoints import break_range
from linebreak.domain import Box, Line


def optimal_breaks(boxes: Sequence[Box], options: Options) -> tuple[list[int], float]:
    """Find the breaks with the lowest total badness.

    Among equally bad solutions the one found first wins. Since candidates
    are tried tightest first, ties favour lines holding fewer boxes.

    Args:
        boxes: Boxes of the paragraph in logical order
        options: Line-breaking options

    Returns:
        Tuple of (line end indices, total badness). The last end index is
        always ``len(boxes)``; an empty paragraph yields ``([], 0.0)``.
    """
    count = len(boxes)
    if count == 0:
        return [], 0.0

    total = [math.inf] * (count + 1)
    chosen = [count] * (count + 1)
    total[count] = 0.0

    for start in range(count - 1, -1, -1):
        for bp in break_range(boxes, options, start):
            candidate = bp.badness + total[bp.index]
            if candidate < total[start]:
                total[start] = candidate
                chosen[start] = bp.index

    ends: list[int] = []
    position = 0
    while position < count:
        position = chosen[position]
        ends.append(position)
    return ends, total[0]


def materialize(boxes: Sequence[Box], ends: Sequence[int], options: Options) -> list[Line]:
    """Build justified lines from a list of line end indices.

    Every line except the last one has its glue stretched or shrunk so that
    the line fills the text width. The last line and single-box lines keep
    the nominal glue width.

    Args:
        boxes: Boxes of the paragraph in logical order
        ends: Exclusive end index of each line, in increasing order
        options: Line-breaking options

    Returns:
        Lines with their boxes in visual order
    """
    lines: list[Line] = []
    count = len(boxes)
    begin = 0
    for end in ends:
        line_boxes = boxes[begin:end]
        boxes_width = sum(box.width for box in line_boxes)
        num_glues = len(line_boxes) - 1
        glue_width = options.glue_width
        if end < count and num_glues > 0:
            glue_width = (options.text_width - boxes_width) / num_glues
        lines.append(Line.of(reorder(line_boxes, options.text_direction), glue_width))
        begin = end
    return lines


def knuth_plass(boxes: Sequence[Box], options: Options) -> list[Line]:
    """Break a paragraph with the Knuth-Plass algorithm.

    Relatively slow compared to greedy packing, but gives the most even
    spacing over the whole paragraph.

    Args:
        boxes: Boxes of the paragraph in logical order
        options: Line-breaking options

    Returns:
        Justified lines in visual order
    """
    ends, _ = optimal_breaks(boxes, options)
    return materialize(boxes, ends, options)
