"""Greedy line breaking."""

from collections.abc import Sequence

from linebreak.config import Options
from linebreak.core.bidi import reorder
from linebreak.domain import Box, Line


def greedy(boxes: Sequence[Box], options: Options) -> list[Line]:
    """Break a paragraph by fitting as many boxes as possible on each line.

    Fast, single pass. Each closed line gets its glue stretched towards the
    text width, but never beyond the maximum glue width. The last line keeps
    the nominal glue width.

    Args:
        boxes: Boxes of the paragraph in logical order
        options: Line-breaking options

    Returns:
        Lines with their boxes in visual order
    """
    min_glue_width = options.min_glue_width
    max_glue_width = options.max_glue_width

    lines: list[Line] = []
    line_boxes: list[Box] = []
    line_width = 0.0
    boxes_width = 0.0

    for box in boxes:
        box_width = box.width
        if not line_boxes:
            line_boxes.append(box)
            line_width = box_width
            boxes_width = box_width
        elif line_width + min_glue_width + box_width <= options.text_width:
            line_boxes.append(box)
            line_width += min_glue_width + box_width
            boxes_width += box_width
        else:
            glue_width = options.glue_width
            num_glues = len(line_boxes) - 1
            if num_glues > 0 and boxes_width < options.text_width:
                glue_width = min(
                    (options.text_width - boxes_width) / num_glues, max_glue_width
                )
            lines.append(Line.of(reorder(line_boxes, options.text_direction), glue_width))
            line_boxes = [box]
            line_width = box_width
            boxes_width = box_width

    if line_boxes:
        lines.append(Line.of(reorder(line_boxes, options.text_direction), options.glue_width))
    return lines
