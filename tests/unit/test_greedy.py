"""Unit tests for greedy line breaking."""

import pytest

from linebreak.config import Options
from linebreak.core.greedy import greedy
from linebreak.domain import Direction, Word


@pytest.fixture
def options() -> Options:
    """Options of the reference scenario."""
    return Options(text_width=12, glue_width=1, glue_shrink=0, glue_expand=1)


class TestGreedy:
    """Tests for greedy."""

    def test_empty_paragraph(self, options: Options):
        """Zero boxes yield zero lines."""
        assert greedy([], options) == []

    def test_reference_scenario(self, options: Options, make_words):
        """Each line takes as many boxes as fit."""
        boxes = make_words([5, 3, 4, 2, 6])
        lines = greedy(boxes, options)

        assert [list(line.boxes) for line in lines] == [boxes[0:2], boxes[2:4], boxes[4:5]]

    def test_stretch_is_capped(self, options: Options, make_words):
        """Closed lines never stretch beyond the maximum glue width."""
        boxes = make_words([5, 3, 4, 2, 6])
        lines = greedy(boxes, options)

        # (12 - 8) / 1 and (12 - 6) / 1 are both capped at 1 + 1
        assert [line.glue_width for line in lines] == [2.0, 2.0, 1.0]

    def test_stretch_below_cap(self, make_words):
        """Closed lines are justified when the cap allows it."""
        options = Options(text_width=10, glue_width=1, glue_expand=2)
        boxes = make_words([4, 4, 2, 6])
        lines = greedy(boxes, options)

        assert [len(line) for line in lines] == [2, 2]
        assert [line.glue_width for line in lines] == [2.0, 1.0]

    def test_single_line(self, options: Options, make_words):
        """A paragraph that fits is one unstretched line."""
        lines = greedy(make_words([2, 2, 2]), options)
        assert len(lines) == 1
        assert lines[0].glue_width == 1.0

    def test_fit_uses_shrunk_glue(self, make_words):
        """Boxes are added while they fit with fully shrunk glue."""
        options = Options(text_width=11, glue_width=2, glue_shrink=1, glue_expand=0)
        lines = greedy(make_words([3, 3, 3]), options)
        assert [len(line) for line in lines] == [3]

    def test_oversize_box(self, options: Options, make_words):
        """A box wider than the text width is a line of its own."""
        boxes = make_words([30])
        lines = greedy(boxes, options)

        assert len(lines) == 1
        assert lines[0].boxes == (boxes[0],)

    def test_oversize_box_in_paragraph(self, options: Options, make_words):
        """An oversize box in the middle breaks around itself."""
        boxes = make_words([3, 15, 2])
        lines = greedy(boxes, options)
        assert [list(line.boxes) for line in lines] == [[boxes[0]], [boxes[1]], [boxes[2]]]

    def test_single_box_line_keeps_nominal_glue(self, options: Options, make_words):
        """Closed lines without glue are not stretched."""
        lines = greedy(make_words([10, 10]), options)
        assert [line.glue_width for line in lines] == [1.0, 1.0]

    def test_alice(self, alice_words):
        """Greedy packing of a known paragraph."""
        options = Options(text_width=40, glue_width=1, glue_expand=1)
        lines = greedy(alice_words, options)

        assert [" ".join(str(box) for box in line.boxes) for line in lines] == [
            "Alice was beginning to get very tired of",
            "sitting by her sister on the bank, and",
            "of having nothing to do: once or twice",
            "she had peeped into the book her sister",
            "was reading, but it had no pictures or",
            "conversations in it, 'and what is the",
            "use of a book,' thought Alice 'without",
            "pictures or conversation?'",
        ]

    def test_partition_and_feasibility(self, alice_words):
        """Lines concatenate back into the paragraph and fit."""
        options = Options(text_width=30, glue_width=1, glue_shrink=0.5, glue_expand=1)
        lines = greedy(alice_words, options)

        assert [box for line in lines for box in line.boxes] == alice_words
        for line in lines:
            assert line.boxes_width + line.num_glues * options.min_glue_width <= 30
            assert line.glue_width <= options.max_glue_width

    def test_last_line_is_reordered(self, options: Options):
        """The final line goes through bidi reordering like the others."""
        a = Word("a", width=1)
        b = Word("b", width=1, direction=Direction.RIGHT_TO_LEFT)
        c = Word("c", width=1, direction=Direction.RIGHT_TO_LEFT)
        lines = greedy([a, b, c], options)

        assert lines[0].boxes == (a, c, b)
