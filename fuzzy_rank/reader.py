from __future__ import annotations

from fuzzy_rank.exceptions import InputValidationError
from fuzzy_rank.models import RankingRequest


def parse_ranking_input(
    text: str,
    *,
    query: str | None = None,
    default_query: str | None = None,
) -> RankingRequest:
    """Parse ``<count> <candidate>... <query>`` from whitespace-delimited text.

    When ``query`` is passed the text holds only the count and candidates.
    Otherwise a missing query token falls back to ``default_query``, and is
    an error when that is ``None`` too.
    """
    tokens = text.split()
    if not tokens:
        raise InputValidationError("Expected a candidate count, got empty input")

    count_token, *rest = tokens
    try:
        count = int(count_token)
    except ValueError as exc:
        raise InputValidationError(
            f"Candidate count must be an integer, got {count_token!r}"
        ) from exc
    if count < 0:
        raise InputValidationError(f"Candidate count must not be negative, got {count}")

    candidates = rest[:count]
    if len(candidates) < count:
        raise InputValidationError(
            f"Expected {count} candidates, got {len(candidates)}"
        )

    remaining = rest[count:]
    if query is None:
        if remaining:
            query, *remaining = remaining
        elif default_query is not None:
            query = default_query
        else:
            raise InputValidationError("Expected a search query after the candidates")

    if remaining:
        raise InputValidationError(
            f"Unexpected trailing input: {' '.join(remaining)!r}"
        )

    return RankingRequest(candidates=candidates, query=query)
