"""Shared fixtures for linebreak tests."""

from collections.abc import Callable, Sequence

import pytest

from linebreak.domain import Box, Direction, Line, Word

ALICE = (
    "Alice was beginning to get very tired of sitting by her sister"
    " on the bank, and of having nothing to do: once or twice she had"
    " peeped into the book her sister was reading, but it had no pictures"
    " or conversations in it, 'and what is the use of a book,' thought"
    " Alice 'without pictures or conversation?'"
)


def _make_words(
    widths: Sequence[float], direction: Direction = Direction.LEFT_TO_RIGHT
) -> list[Word]:
    return [Word(f"w{i}", width=width, direction=direction) for i, width in enumerate(widths)]


def _logical_order(lines: Sequence[Line], boxes: Sequence[Box]) -> list[list[Box]]:
    position = {id(box): index for index, box in enumerate(boxes)}
    return [sorted(line.boxes, key=lambda box: position[id(box)]) for line in lines]


@pytest.fixture
def make_words() -> Callable[..., list[Word]]:
    """Factory for uniquely named words with the given widths."""
    return _make_words


@pytest.fixture
def logical_order() -> Callable[[Sequence[Line], Sequence[Box]], list[list[Box]]]:
    """Undo the visual reordering of each line using paragraph positions."""
    return _logical_order


@pytest.fixture
def alice_words() -> list[Word]:
    """Words of the opening of Alice in Wonderland, measured in characters."""
    return [Word(text) for text in ALICE.split(" ")]
