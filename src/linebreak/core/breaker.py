"""Line-breaking orchestration.

This module ties the algorithms to the configuration and logging layers.
``LineBreaker`` breaks paragraphs with the configured defaults and keeps
statistics about everything it has broken; ``break_lines`` is the one-call
entry point for library users that only need the lines.
"""

import logging
import time
from collections.abc import Callable, Iterable, Sequence

import structlog

from linebreak.config import Algorithm, LineBreakSettings, Options
from linebreak.core.breakpoints import badness
from linebreak.core.greedy import greedy
from linebreak.core.knuth_plass import materialize, optimal_breaks
from linebreak.domain import Box, Line
from linebreak.exceptions import UnknownAlgorithmError
from linebreak.utils import BreakLogger, BreakStats

logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

BreakFunction = Callable[[Sequence[Box], Options], tuple[list[Line], float]]


def _break_greedy(boxes: Sequence[Box], options: Options) -> tuple[list[Line], float]:
    lines = greedy(boxes, options)
    total = sum(
        badness(line.boxes_width, line.num_glues, options) for line in lines[:-1]
    )
    return lines, total


def _break_knuth_plass(boxes: Sequence[Box], options: Options) -> tuple[list[Line], float]:
    ends, total = optimal_breaks(boxes, options)
    return materialize(boxes, ends, options), total


ALGORITHMS: dict[Algorithm, BreakFunction] = {
    Algorithm.GREEDY: _break_greedy,
    Algorithm.KNUTH_PLASS: _break_knuth_plass,
}


def resolve_algorithm(algorithm: Algorithm | str) -> Algorithm:
    """Convert an algorithm name into an Algorithm.

    Args:
        algorithm: Algorithm or its name (hyphens are accepted for underscores)

    Returns:
        Matching Algorithm

    Raises:
        UnknownAlgorithmError: If no algorithm has that name
    """
    if isinstance(algorithm, Algorithm):
        return algorithm
    try:
        return Algorithm(algorithm.strip().lower().replace("-", "_"))
    except ValueError:
        raise UnknownAlgorithmError(algorithm) from None


class LineBreaker:
    """Breaks paragraphs into lines using configured defaults.

    Example:
        breaker = LineBreaker(LineBreakSettings())
        lines = breaker.break_paragraph([Word("hello"), Word("world")])
        print(breaker.stats.line_count)
    """

    def __init__(
        self,
        settings: LineBreakSettings | None = None,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the line breaker.

        Args:
            settings: Application settings (defaults if None)
            log: Logger for progress and statistics (module logger if None)
        """
        self.settings = settings if settings is not None else LineBreakSettings()
        self.break_logger = BreakLogger(log if log is not None else logger)

    @property
    def stats(self) -> BreakStats:
        """Statistics of every paragraph broken so far."""
        return self.break_logger.stats

    def break_paragraph(
        self,
        boxes: Sequence[Box],
        options: Options | None = None,
        algorithm: Algorithm | str | None = None,
    ) -> list[Line]:
        """Break one paragraph into lines.

        Args:
            boxes: Boxes of the paragraph in logical order
            options: Line-breaking options (settings options if None)
            algorithm: Algorithm to use (settings algorithm if None)

        Returns:
            Lines with their boxes in visual order
        """
        options = options if options is not None else self.settings.options
        chosen = resolve_algorithm(
            algorithm if algorithm is not None else self.settings.breaker.algorithm
        )
        index = self.stats.paragraph_count

        if self.stats.start_time is None:
            self.stats.start_time = time.time()
        started = time.perf_counter()
        self.break_logger.log_algorithm(chosen.value)
        self.break_logger.log_paragraph_start(index, len(boxes), chosen.value)

        lines, total = ALGORITHMS[chosen](boxes, options)

        overflow = 0
        for line_index, line in enumerate(lines):
            natural = line.boxes_width + line.num_glues * options.min_glue_width
            if natural > options.text_width:
                overflow += 1
                self.break_logger.log_overflow(index, line_index, natural, options.text_width)

        self.break_logger.log_paragraph_complete(
            index=index,
            box_count=len(boxes),
            line_count=len(lines),
            badness=total,
            overflow_count=overflow,
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        self.stats.end_time = time.time()
        return lines

    def break_paragraphs(
        self,
        paragraphs: Iterable[Sequence[Box]],
        options: Options | None = None,
        algorithm: Algorithm | str | None = None,
    ) -> list[list[Line]]:
        """Break several independent paragraphs.

        Args:
            paragraphs: Paragraphs, each a sequence of boxes in logical order
            options: Line-breaking options shared by all paragraphs
            algorithm: Algorithm to use for all paragraphs

        Returns:
            One list of lines per paragraph, in input order
        """
        return [
            self.break_paragraph(paragraph, options=options, algorithm=algorithm)
            for paragraph in paragraphs
        ]


def break_lines(
    boxes: Sequence[Box],
    options: Options,
    algorithm: Algorithm | str = Algorithm.KNUTH_PLASS,
) -> list[Line]:
    """Break a paragraph with the given algorithm.

    Args:
        boxes: Boxes of the paragraph in logical order
        options: Line-breaking options
        algorithm: Algorithm or algorithm name

    Returns:
        Lines with their boxes in visual order

    Raises:
        UnknownAlgorithmError: If the algorithm name is unknown
    """
    lines, _ = ALGORITHMS[resolve_algorithm(algorithm)](boxes, options)
    return lines
