from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def edit_distance(lhs: Sequence[Any], rhs: Sequence[Any]) -> int:
    """Return the Levenshtein distance between ``lhs`` and ``rhs``.

    Insertions, deletions and substitutions all cost one. The result is
    zero only for equal sequences and never exceeds the longer length.
    """
    distances = [[0] * (len(rhs) + 1) for _ in range(len(lhs) + 1)]
    for i in range(1, len(lhs) + 1):
        distances[i][0] = i
    for j in range(1, len(rhs) + 1):
        distances[0][j] = j

    for i in range(1, len(lhs) + 1):
        for j in range(1, len(rhs) + 1):
            substitution_cost = 0 if lhs[i - 1] == rhs[j - 1] else 1
            distances[i][j] = min(
                distances[i - 1][j] + 1,
                distances[i][j - 1] + 1,
                distances[i - 1][j - 1] + substitution_cost,
            )
    return distances[-1][-1]
