"""Domain models for linebreak.

This module contains the values exchanged between callers and the
line-breaking engine:

- Direction: Writing direction of a box or a paragraph
- Box: Capability protocol every paragraph element must satisfy
- Line: A broken line of boxes in visual order with its glue width
- Word: A ready-made box for plain text, measured in characters

The engine never owns boxes; it only keeps references to the caller's
objects while a paragraph is being broken.
"""

from linebreak.domain.box import Box, Direction
from linebreak.domain.line import Line
from linebreak.domain.word import Word

__all__: list[str] = [
    # Enums
    "Direction",
    # Core types
    "Box",
    "Line",
    "Word",
]
