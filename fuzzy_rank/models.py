from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

Coordinate = tuple[int, int]
AlignmentMatrix = list[list[int]]


@dataclass(frozen=True)
class EmptySpan:
    """No local alignment was found at a matrix maximum."""


@dataclass(frozen=True)
class RangeSpan:
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


Span = EmptySpan | RangeSpan


@dataclass(frozen=True)
class ScoredCandidate:
    candidate: str
    score: int

    def __iter__(self) -> Iterator[str | int]:
        yield self.candidate
        yield self.score


@dataclass(frozen=True)
class RankingRequest:
    candidates: list[str]
    query: str
