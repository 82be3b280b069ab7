"""Text I/O layer for linebreak.

This module turns plain text into paragraphs of word boxes and renders
broken lines back to plain text. Words are measured in characters, which
suits monospaced output; callers measuring with real fonts build their own
boxes instead.

Key classes:
- TextReader: Load a text file and split it into paragraphs of words

Key functions:
- split_paragraphs: Split text into paragraphs on newlines
- split_words: Split a paragraph into words on spaces
- render_lines: Render lines of words as plain text
"""

from linebreak.io.reader import TextReader, split_paragraphs, split_words
from linebreak.io.writer import render_line, render_lines

__all__ = [
    "TextReader",
    "render_line",
    "render_lines",
    "split_paragraphs",
    "split_words",
]
