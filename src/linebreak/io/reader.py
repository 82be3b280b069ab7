"""Text reading and splitting into word boxes."""

from collections.abc import Iterator
from pathlib import Path

from linebreak.domain import Direction, Word
from linebreak.exceptions import TextLoadError


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs, one per line.

    Args:
        text: Source text

    Returns:
        Paragraph strings without their line terminators
    """
    return text.splitlines()


def split_words(paragraph: str, direction: Direction | None = None) -> list[Word]:
    """Split a paragraph into words.

    Words are separated by single spaces, so runs of spaces produce empty
    words, which keep the extra spacing of the source as zero-width boxes.
    A blank paragraph yields no words.

    Args:
        paragraph: Paragraph text
        direction: Force every word to this direction (detected if None)

    Returns:
        Word boxes in logical order
    """
    if not paragraph.strip():
        return []
    return [Word(text, direction=direction) for text in paragraph.split(" ")]


class TextReader:
    """Reads a UTF-8 text file as paragraphs of words.

    Example:
        reader = TextReader(Path("alice.txt"))
        reader.load()
        for words in reader.iter_paragraphs():
            ...
    """

    def __init__(self, text_path: Path, direction: Direction | None = None) -> None:
        """Initialize the reader.

        Args:
            text_path: Path to the text file
            direction: Force every word to this direction (detected if None)
        """
        self._text_path = text_path
        self._direction = direction
        self._text: str | None = None

    def load(self) -> None:
        """Read the text file.

        Raises:
            TextLoadError: If the file is missing, unreadable, or not UTF-8
        """
        try:
            self._text = self._text_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise TextLoadError(str(self._text_path), "file not found") from None
        except UnicodeDecodeError as e:
            raise TextLoadError(str(self._text_path), f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise TextLoadError(str(self._text_path), e.strerror or str(e)) from e

    @property
    def text(self) -> str:
        """Get the loaded text.

        Raises:
            RuntimeError: If the text is not loaded
        """
        if self._text is None:
            raise RuntimeError("Text not loaded. Call load() first.")
        return self._text

    @property
    def paragraph_count(self) -> int:
        """Number of paragraphs in the loaded text."""
        return len(split_paragraphs(self.text))

    def iter_paragraphs(self) -> Iterator[list[Word]]:
        """Iterate over paragraphs as lists of words.

        Yields:
            Words of each paragraph (empty for blank paragraphs)
        """
        for paragraph in split_paragraphs(self.text):
            yield split_words(paragraph, self._direction)
