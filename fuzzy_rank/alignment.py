"""Local (Smith-Waterman style) alignment of a candidate against a query.

Rows of every matrix built here follow the candidate, columns follow the
query. Row 0 and column 0 stay at zero, and no cell ever drops below zero.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fuzzy_rank.models import AlignmentMatrix, Coordinate, EmptySpan, RangeSpan, Span
from fuzzy_rank.scoring import gap_penalty, similarity_score

logger = logging.getLogger(__name__)


def build_alignment_matrix(
    sequence1: Sequence[Any], sequence2: Sequence[Any]
) -> AlignmentMatrix:
    matrix = [[0] * (len(sequence2) + 1) for _ in range(len(sequence1) + 1)]
    for i in range(1, len(sequence1) + 1):
        for j in range(1, len(sequence2) + 1):
            matrix[i][j] = max(
                matrix[i - 1][j - 1]
                + similarity_score(sequence1[i - 1], sequence2[j - 1]),
                matrix[i][j - 1] - gap_penalty(1),
                matrix[i - 1][j] - gap_penalty(1),
                0,
            )
    return matrix


def matrix_max_value(matrix: AlignmentMatrix, minimum_value: int = 0) -> int:
    maximum_value = minimum_value
    for row in matrix:
        for value in row:
            if value > maximum_value:
                maximum_value = value
    return maximum_value


def matrix_max_coordinates(
    matrix: AlignmentMatrix, minimum_value: int = 0
) -> list[Coordinate]:
    """Return every cell holding the matrix maximum, in row-major order.

    Ties are expected and all of them are reported.
    """
    maximum_value = matrix_max_value(matrix, minimum_value)
    return [
        (i, j)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value == maximum_value
    ]


def trace_from_coordinates(matrix: AlignmentMatrix, row: int, column: int) -> Span:
    """Walk back from ``(row, column)`` to the cell where its alignment starts.

    At every step the largest predecessor wins; ties go to the diagonal,
    then the vertical, then the horizontal neighbour. The resulting span
    covers candidate offsets ``[row_at_stop, starting_row)``. A trace that
    never leaves the starting row, including one starting on a zero cell,
    yields :class:`EmptySpan`.
    """
    end = row
    i, j = row, column
    while matrix[i][j] != 0:
        diagonal = matrix[i - 1][j - 1]
        vertical = matrix[i - 1][j]
        horizontal = matrix[i][j - 1]
        if diagonal >= vertical and diagonal >= horizontal:
            i -= 1
            j -= 1
        elif vertical >= horizontal:
            i -= 1
        else:
            j -= 1

    if i == end:
        return EmptySpan()
    return RangeSpan(start=i, length=end - i)


def extract_subsequence_spans(matrix: AlignmentMatrix) -> list[Span]:
    coordinates = matrix_max_coordinates(matrix, 0)
    logger.debug("Tracing %d maximal cells", len(coordinates))
    return [trace_from_coordinates(matrix, i, j) for i, j in coordinates]


def span_text(sequence: Sequence[Any], span: Span) -> Sequence[Any]:
    if isinstance(span, EmptySpan):
        return sequence[0:0]
    return sequence[span.start : span.end]
