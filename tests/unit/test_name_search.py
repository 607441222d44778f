from __future__ import annotations

import pytest

from core.search.name_search import (
    MatchKind,
    MatchScore,
    compare_matches,
    normalize_for_search,
    score_candidate,
    search_display_name,
)

NAMES = ["Emily Kwan", "Arden Chew"]


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_matches_nothing(query):
    assert search_display_name(query, NAMES) == []


def test_empty_candidates():
    assert search_display_name("emily", []) == []


def test_exact_match_short_circuits():
    assert search_display_name("emily kwan", ["Emily Kwan", "Emily Kwanicka"]) == ["Emily Kwan"]


def test_exact_match_ignores_case_and_spacing():
    assert search_display_name("EMILY   KWAN", ["Emily Kwan"]) == ["Emily Kwan"]
    assert search_display_name("  emily\tkwan ", ["Emily Kwan"]) == ["Emily Kwan"]


def test_returns_original_strings():
    assert search_display_name("emily", ["  Emily   Kwan "]) == ["  Emily   Kwan "]


def test_substring_prefers_matching_name():
    assert search_display_name("kwan", NAMES) == ["Emily Kwan"]


def test_word_level_partial_credit():
    assert search_display_name("em kwan", ["Emily Kwan"]) == ["Emily Kwan"]
    match = score_candidate("em kwan", "Emily Kwan")
    assert match.kind is MatchKind.WORD_MATCH
    assert match.score == pytest.approx(0.8)


def test_partial_words_only():
    match = score_candidate("emi kwa", "Emily Kwan")
    assert match.kind is MatchKind.PARTIAL_WORD
    assert match.score == pytest.approx(0.6)


def test_weak_word_match_is_dropped():
    assert score_candidate("em zed", "Emily Kwan") is None
    assert search_display_name("em zed", NAMES) == []


def test_query_containing_candidate_scores_lower():
    match = score_candidate("emily kwan smith", "Emily Kwan")
    assert match.kind is MatchKind.FULL_SUBSTRING
    assert match.score == pytest.approx(0.64)


def test_ambiguous_query_returns_ranked_names():
    first = search_display_name("ch", ["Charlie Chu", "Arden Chew"])
    assert first == ["Arden Chew", "Charlie Chu"]
    assert search_display_name("ch", ["Charlie Chu", "Arden Chew"]) == first


def test_substring_is_not_returned_as_exact():
    result = search_display_name("emily", ["Emily Kwan", "Emily Kwanicka"])
    assert result == ["Emily Kwan", "Emily Kwanicka"]


def test_inputs_are_not_mutated():
    names = ["Emily Kwanicka", "Emily Kwan"]
    search_display_name("kwan", names)
    assert names == ["Emily Kwanicka", "Emily Kwan"]


def test_normalize_for_search():
    assert normalize_for_search("  Emily \t  KWAN\n") == "emily kwan"


def test_compare_orders_by_score_outside_epsilon():
    high = MatchScore(name="A much longer name", score=0.9, kind=MatchKind.PARTIAL_WORD)
    low = MatchScore(name="Al", score=0.5, kind=MatchKind.FULL_SUBSTRING)
    assert compare_matches(high, low) < 0
    assert compare_matches(low, high) > 0


def test_compare_uses_kind_within_epsilon():
    partial = MatchScore(name="Al", score=0.805, kind=MatchKind.PARTIAL_WORD)
    full = MatchScore(name="A much longer name", score=0.8, kind=MatchKind.FULL_SUBSTRING)
    assert compare_matches(full, partial) < 0


def test_compare_uses_length_last():
    short = MatchScore(name="Al Chew", score=0.6, kind=MatchKind.WORD_MATCH)
    long = MatchScore(name="Alexander Chew", score=0.605, kind=MatchKind.WORD_MATCH)
    assert compare_matches(short, long) < 0
    assert compare_matches(short, short) == 0


def test_first_overlapping_name_word_decides():
    # "an" overlaps "anna" before it reaches the equal word "an".
    assert score_candidate("an lee", "Anna An") is None
    assert search_display_name("an lee", ["Anna An"]) == []
    match = score_candidate("an anna", "Anna An")
    assert match.kind is MatchKind.WORD_MATCH
    assert match.score == pytest.approx(0.8)


def test_first_equal_candidate_wins():
    assert search_display_name("emily kwan", ["emily  kwan", "Emily Kwan"]) == ["emily  kwan"]


def test_near_equal_scores_rank_by_kind_then_length():
    names = ["Emmeline Kwan", "Emily Kwan", "Tem Kwan-Smithers"]
    assert search_display_name("em kwan", names) == ["Tem Kwan-Smithers", "Emily Kwan", "Emmeline Kwan"]
