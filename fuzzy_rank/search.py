from __future__ import annotations

import concurrent.futures
import itertools
import logging
from collections.abc import Iterable
from concurrent.futures import Executor

from fuzzy_rank.alignment import (
    build_alignment_matrix,
    extract_subsequence_spans,
    span_text,
)
from fuzzy_rank.distance import edit_distance
from fuzzy_rank.exceptions import RankingTimeoutError
from fuzzy_rank.models import ScoredCandidate

logger = logging.getLogger(__name__)


def candidate_score(candidate: str, query: str) -> int:
    """Score a candidate against the query; lower scores are better.

    The best local alignment regions of ``candidate`` are recovered and the
    smallest edit distance between one of them and the whole query is
    returned. Zero means the query occurs verbatim inside the candidate.
    """
    matrix = build_alignment_matrix(candidate, query)
    spans = list(dict.fromkeys(extract_subsequence_spans(matrix)))
    logger.debug("%r: %d distinct spans", candidate, len(spans))
    return min(edit_distance(span_text(candidate, span), query) for span in spans)


def score_candidate(candidate: str, query: str) -> ScoredCandidate:
    return ScoredCandidate(candidate=candidate, score=candidate_score(candidate, query))


def rank_by_similarity(
    candidates: Iterable[str],
    query: str,
    *,
    pool: Executor | None = None,
    timeout: float | None = None,
) -> list[ScoredCandidate]:
    """Score every candidate and sort them best match first.

    Candidates are scored independently, on ``pool`` when one is given.
    The sort is stable, so candidates with equal scores keep their input
    order. ``timeout`` bounds the whole batch and only applies to pooled
    scoring.
    """
    candidates = list(candidates)
    logger.debug("Ranking %d candidates against %r", len(candidates), query)

    if pool is None:
        scored = [score_candidate(candidate, query) for candidate in candidates]
    else:
        try:
            scored = list(
                pool.map(
                    score_candidate,
                    candidates,
                    itertools.repeat(query),
                    timeout=timeout,
                )
            )
        except concurrent.futures.TimeoutError as exc:
            raise RankingTimeoutError(
                f"Scoring {len(candidates)} candidates exceeded {timeout} seconds"
            ) from exc

    return sorted(scored, key=lambda item: item.score)
