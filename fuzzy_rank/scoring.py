from __future__ import annotations

from typing import Any

MATCH_SCORE = 3
MISMATCH_SCORE = -3
GAP_PENALTY_PER_SYMBOL = 2


def similarity_score(lhs: Any, rhs: Any) -> int:
    if lhs == rhs:
        return MATCH_SCORE
    return MISMATCH_SCORE


def gap_penalty(gap_length: int) -> int:
    return GAP_PENALTY_PER_SYMBOL * gap_length
