"""Fuzzy display-name search used to resolve a typed guest name.

The candidate set is the handful of display names in ``config/users.yaml`` so a
linear scan plus a sort is all we need. Results are ranked by:
    1. score (descending, scores within ``SCORE_EPSILON`` count as tied),
    2. match kind (full substring > word match > partial word),
    3. shorter display name first.
An exact (case/space-insensitive) match short-circuits to a single result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import List, Optional, Sequence

SCORE_EPSILON = 0.01
# Word-level matches below this score are dropped.
WORD_SCORE_THRESHOLD = 0.5
PARTIAL_WORD_WEIGHT = 0.6

_WHITESPACE = re.compile(r"\s+")


class MatchKind(str, Enum):
    FULL_SUBSTRING = "full-substring"
    WORD_MATCH = "word-match"
    PARTIAL_WORD = "partial-word"

    @property
    def priority(self) -> int:
        return _KIND_PRIORITY[self]


_KIND_PRIORITY = {
    MatchKind.FULL_SUBSTRING: 3,
    MatchKind.WORD_MATCH: 2,
    MatchKind.PARTIAL_WORD: 1,
}


@dataclass(frozen=True)
class MatchScore:
    """Scored candidate kept for ranking; lives only for one search call."""

    name: str
    score: float
    kind: MatchKind


def normalize_for_search(text: str) -> str:
    """Lower-case, trim and collapse internal whitespace to single spaces."""
    return _WHITESPACE.sub(" ", text.strip().lower())


def compare_matches(a: MatchScore, b: MatchScore) -> int:
    """Three-way comparator; negative when ``a`` ranks ahead of ``b``."""
    if abs(a.score - b.score) > SCORE_EPSILON:
        return -1 if a.score > b.score else 1
    if a.kind.priority != b.kind.priority:
        return b.kind.priority - a.kind.priority
    return len(a.name) - len(b.name)


def _word_counts(query_words: List[str], name_words: List[str]) -> tuple[int, int]:
    exact = 0
    partial = 0
    for query_word in query_words:
        # The first name word that equals or overlaps the query word decides.
        for name_word in name_words:
            if name_word == query_word:
                exact += 1
                break
            if name_word in query_word or query_word in name_word:
                partial += 1
                break
    return exact, partial


def score_candidate(normalized_query: str, name: str) -> Optional[MatchScore]:
    """Score one display name against an already-normalised, non-exact query."""
    normalized_name = normalize_for_search(name)

    if normalized_query in normalized_name:
        score = 0.9 - (len(normalized_name) - len(normalized_query)) / 100
        return MatchScore(name=name, score=score, kind=MatchKind.FULL_SUBSTRING)
    if normalized_name in normalized_query:
        score = 0.7 - (len(normalized_query) - len(normalized_name)) / 100
        return MatchScore(name=name, score=score, kind=MatchKind.FULL_SUBSTRING)

    query_words = [word for word in normalized_query.split(" ") if word]
    name_words = [word for word in normalized_name.split(" ") if word]
    if not query_words or not name_words:
        return None

    exact, partial = _word_counts(query_words, name_words)
    if not exact and not partial:
        return None
    total_words = max(len(query_words), len(name_words))
    score = exact / total_words + PARTIAL_WORD_WEIGHT * (partial / total_words)
    if score < WORD_SCORE_THRESHOLD:
        return None
    kind = MatchKind.WORD_MATCH if exact else MatchKind.PARTIAL_WORD
    return MatchScore(name=name, score=score, kind=kind)


def search_display_name(query: str, display_names: Sequence[str]) -> List[str]:
    """Return display names ranked by how likely they are the one the guest typed.

    An empty list means no match, a single element means the name resolved, and
    several elements mean the query was ambiguous. Returned strings are taken
    verbatim from ``display_names``.
    """
    if not query.strip():
        return []

    normalized_query = normalize_for_search(query)
    matches: List[MatchScore] = []
    for name in display_names:
        if normalize_for_search(name) == normalized_query:
            return [name]
        match = score_candidate(normalized_query, name)
        if match is not None:
            matches.append(match)

    matches.sort(key=cmp_to_key(compare_matches))
    return [match.name for match in matches]
