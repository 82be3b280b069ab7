"""Core line-breaking algorithms for linebreak.

This module contains:

- Break-point enumeration and the badness model
- Knuth-Plass optimal line breaking
- Greedy line breaking
- Bidirectional reordering of broken lines

All functions are pure: they read the boxes and options they are given and
return fresh lines, so paragraphs can be broken independently and
concurrently by callers.

Key functions:
- break_range: List feasible breaks for a line start
- badness: Cost of a justified line
- optimal_breaks: Break indices with the lowest total badness
- knuth_plass: Break a paragraph optimally
- greedy: Break a paragraph greedily
- reorder: Convert a line from logical to visual order
- break_lines: Break a paragraph with a named algorithm

Key classes:
- BreakPoint: A feasible line end with its badness
- LineBreaker: Breaks paragraphs with configured defaults and statistics
"""

from linebreak.core.bidi import reorder, reorder_line
from linebreak.core.breaker import LineBreaker, break_lines, resolve_algorithm
from linebreak.core.breakpoints import BreakPoint, badness, break_range
from linebreak.core.greedy import greedy
from linebreak.core.knuth_plass import knuth_plass, materialize, optimal_breaks

__all__ = [
    # Break points
    "BreakPoint",
    # Orchestration
    "LineBreaker",
    "badness",
    "break_lines",
    "break_range",
    # Algorithms
    "greedy",
    "knuth_plass",
    "materialize",
    "optimal_breaks",
    # Bidi
    "reorder",
    "reorder_line",
    "resolve_algorithm",
]
