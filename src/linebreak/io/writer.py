"""Plain-text rendering of broken lines."""

from collections.abc import Iterable

from linebreak.domain import Line


def render_line(line: Line) -> str:
    """Render one line as text.

    Boxes are rendered with ``str()``; glue is rendered as a whole number of
    spaces, at least one.
    """
    spaces = " " * max(1, int(line.glue_width))
    return spaces.join(str(box) for box in line.boxes)


def render_lines(lines: Iterable[Line]) -> str:
    """Render lines as text, one per row."""
    return "\n".join(render_line(line) for line in lines)
