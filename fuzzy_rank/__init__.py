from __future__ import annotations

from fuzzy_rank.models import ScoredCandidate
from fuzzy_rank.search import candidate_score, rank_by_similarity

__version__ = "0.1.0"

__all__ = [
    "ScoredCandidate",
    "__version__",
    "candidate_score",
    "rank_by_similarity",
]
