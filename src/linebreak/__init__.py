"""Linebreak - Break paragraphs of boxes into evenly spaced lines.

Linebreak is a small typesetting primitive. Callers describe a paragraph as a
sequence of boxes (usually words) that each carry a writing direction and a
width, and get back lines that fit a target width. Two algorithms are provided:
a fast greedy packer and the Knuth-Plass optimizer, which chooses break points
that keep the inter-word glue as close to its nominal width as possible.

Example:
    >>> from linebreak import Options, Word, knuth_plass
    >>> words = [Word(w) for w in "the quick brown fox".split()]
    >>> lines = knuth_plass(words, Options(text_width=10))
"""

from linebreak.config import Algorithm, Options
from linebreak.core import break_lines, greedy, knuth_plass, reorder
from linebreak.core.breaker import LineBreaker
from linebreak.domain import Box, Direction, Line, Word

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "Box",
    "Direction",
    "Line",
    "LineBreaker",
    "Options",
    "Word",
    "__version__",
    "break_lines",
    "greedy",
    "knuth_plass",
    "reorder",
]
