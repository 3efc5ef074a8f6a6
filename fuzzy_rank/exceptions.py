from __future__ import annotations


class FuzzyRankError(Exception):
    """Base class for errors raised outside the scoring core."""


class InputValidationError(FuzzyRankError, ValueError):
    """The ranking input did not follow the count / candidates / query layout."""


class RankingTimeoutError(FuzzyRankError, TimeoutError):
    """A batch of candidates was not scored before its deadline."""
