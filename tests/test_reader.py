import pytest

from fuzzy_rank.exceptions import FuzzyRankError, InputValidationError
from fuzzy_rank.models import RankingRequest
from fuzzy_rank.reader import parse_ranking_input


def test_parse_ranking_input_reads_count_candidates_and_query() -> None:
    request = parse_ranking_input("4\nkitten sitting\nflaw   lawn\nsitting\n")

    assert request == RankingRequest(
        candidates=["kitten", "sitting", "flaw", "lawn"],
        query="sitting",
    )


def test_parse_ranking_input_with_zero_candidates() -> None:
    assert parse_ranking_input("0 abc") == RankingRequest(candidates=[], query="abc")


def test_parse_ranking_input_uses_explicit_query() -> None:
    assert parse_ranking_input("2 abc de", query="") == RankingRequest(
        candidates=["abc", "de"], query=""
    )


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "empty input"),
        ("   \n", "empty input"),
        ("two a b q", "must be an integer"),
        ("-1 q", "must not be negative"),
        ("3 a b", "Expected 3 candidates, got 2"),
        ("2 a b", "Expected a search query"),
        ("1 a q extra", "Unexpected trailing input"),
    ],
)
def test_parse_ranking_input_rejects_malformed_input(text: str, message: str) -> None:
    with pytest.raises(InputValidationError, match=message):
        parse_ranking_input(text)


def test_parse_ranking_input_rejects_query_token_when_query_is_given() -> None:
    with pytest.raises(InputValidationError, match="'q'"):
        parse_ranking_input("1 a q", query="q")


def test_input_validation_error_hierarchy() -> None:
    assert issubclass(InputValidationError, FuzzyRankError)
    assert issubclass(InputValidationError, ValueError)


def test_parse_ranking_input_falls_back_to_default_query() -> None:
    assert parse_ranking_input("2 abc de", default_query="") == RankingRequest(
        candidates=["abc", "de"], query=""
    )


def test_parse_ranking_input_prefers_query_token_over_default() -> None:
    assert parse_ranking_input(
        "4 kitten sitting flaw lawn sitting", default_query=""
    ) == RankingRequest(
        candidates=["kitten", "sitting", "flaw", "lawn"], query="sitting"
    )
