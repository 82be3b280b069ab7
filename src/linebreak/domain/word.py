"""Word box for plain text.

Words are measured in characters unless an explicit width is given, which
makes them convenient for monospaced output and for tests. Callers that
measure text with a real font pass the measured width instead.
"""

import unicodedata
from dataclasses import dataclass

from linebreak.domain.box import Direction

# Bidirectional classes of strong right-to-left characters (Hebrew, Arabic, ...)
RTL_BIDI_CLASSES = frozenset({"R", "AL"})


def detect_direction(text: str) -> Direction:
    """Guess the writing direction of a word from its first character.

    Args:
        text: Word text

    Returns:
        RIGHT_TO_LEFT if the first character is a strong right-to-left
        character, LEFT_TO_RIGHT otherwise (including for empty text)
    """
    if text and unicodedata.bidirectional(text[0]) in RTL_BIDI_CLASSES:
        return Direction.RIGHT_TO_LEFT
    return Direction.LEFT_TO_RIGHT


@dataclass(frozen=True, slots=True)
class Word:
    """A word of text satisfying the Box protocol.

    Attributes:
        text: The word itself
        width: Extent of the word (defaults to its character count)
        direction: Writing direction (detected from the text if omitted)
    """

    text: str
    width: float | None = None
    direction: Direction | None = None

    def __post_init__(self) -> None:
        if self.width is None:
            object.__setattr__(self, "width", float(len(self.text)))
        if self.direction is None:
            object.__setattr__(self, "direction", detect_direction(self.text))

    def __str__(self) -> str:
        return self.text
