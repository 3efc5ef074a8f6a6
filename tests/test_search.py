import concurrent.futures
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor

import pytest

from fuzzy_rank.exceptions import RankingTimeoutError
from fuzzy_rank.models import ScoredCandidate
from fuzzy_rank.search import candidate_score, rank_by_similarity, score_candidate


@pytest.mark.parametrize("word", ["a", "abc", "sitting", "mississippi", "aaaa"])
def test_string_matches_itself(word: str) -> None:
    assert rank_by_similarity([word], word) == [ScoredCandidate(word, 0)]


def test_candidate_score_uses_best_aligned_region() -> None:
    assert candidate_score("xxabcxx", "abc") == 0
    assert candidate_score("abd", "abc") == 1


def test_candidate_score_without_alignment_compares_empty_substring() -> None:
    assert candidate_score("xyz", "abc") == 3


def test_candidate_score_with_empty_query_is_zero() -> None:
    assert candidate_score("abc", "") == 0
    assert candidate_score("", "") == 0


def test_candidate_score_accepts_bytes() -> None:
    assert candidate_score(b"xxabcxx", b"abc") == 0


def test_score_candidate_pairs_candidate_with_score() -> None:
    result = score_candidate("abd", "abc")

    assert result == ScoredCandidate(candidate="abd", score=1)
    assert tuple(result) == ("abd", 1)


def test_rank_by_similarity_sorts_best_match_first() -> None:
    results = rank_by_similarity(["xyz", "abd", "xxabcxx"], "abc")

    assert [tuple(result) for result in results] == [
        ("xxabcxx", 0),
        ("abd", 1),
        ("xyz", 3),
    ]


def test_rank_by_similarity_kitten_scenario() -> None:
    candidates = ["kitten", "sitting", "flaw", "lawn"]

    results = rank_by_similarity(candidates, "sitting")

    assert results[0] == ScoredCandidate("sitting", 0)
    scores = dict(results)
    assert scores["kitten"] > 0
    assert sorted(scores) == sorted(candidates)
    assert [result.score for result in results] == sorted(
        result.score for result in results
    )


def test_rank_by_similarity_keeps_input_order_for_ties() -> None:
    results = rank_by_similarity(["zzz", "yyy", "abc", "xxx"], "abc")

    assert [result.candidate for result in results] == ["abc", "zzz", "yyy", "xxx"]


def test_rank_by_similarity_handles_empty_inputs() -> None:
    assert rank_by_similarity([], "abc") == []
    assert rank_by_similarity(["abc", "de"], "") == [
        ScoredCandidate("abc", 0),
        ScoredCandidate("de", 0),
    ]


def test_rank_by_similarity_is_repeatable() -> None:
    candidates = ["kitten", "sitting", "flaw", "lawn", "sitting"]

    assert rank_by_similarity(candidates, "sitting") == rank_by_similarity(
        candidates, "sitting"
    )


def test_rank_by_similarity_with_thread_pool_matches_sequential() -> None:
    candidates = ["kitten", "sitting", "flaw", "lawn", "xyz", "abd"]

    with ThreadPoolExecutor(max_workers=3) as pool:
        pooled = rank_by_similarity(candidates, "sitting", pool=pool)

    assert pooled == rank_by_similarity(candidates, "sitting")


def test_rank_by_similarity_with_process_pool_matches_sequential() -> None:
    candidates = ["xyz", "abd", "xxabcxx"]

    with ProcessPoolExecutor(max_workers=2) as pool:
        pooled = rank_by_similarity(candidates, "abc", pool=pool, timeout=60.0)

    assert pooled == rank_by_similarity(candidates, "abc")


def test_rank_by_similarity_reports_timeout() -> None:
    class _SlowExecutor(Executor):
        def map(self, fn, *iterables, timeout=None, chunksize=1):
            raise concurrent.futures.TimeoutError

    with pytest.raises(RankingTimeoutError, match="2 candidates"):
        rank_by_similarity(["a", "b"], "a", pool=_SlowExecutor(), timeout=0.5)
