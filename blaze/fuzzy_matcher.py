"""Fuzzy matching and scoring of lines against a query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

BASE_SCORE = 1000
CONSECUTIVE_BONUS = 20
WORD_BOUNDARY_BONUS = 30
WORD_BOUNDARY_MULTIPLIER = 2
COMPACTNESS_PENALTY = 30
LATE_MATCH_PENALTY = 50


@dataclass
class MatchResult:
    """A scored line; a score of -1 means the query did not match."""

    line: str
    score: int
    match_indices: list[int] = field(default_factory=list)


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _is_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _fold(c: str) -> str:
    return c.lower() if _is_upper(c) else c


def is_word_boundary(s: str, i: int) -> bool:
    """Whether position ``i`` of ``s`` starts a word."""
    if i == 0:
        return True
    prev, curr = s[i - 1], s[i]
    return not _is_alnum(prev) or (_is_lower(prev) and _is_upper(curr))


def calculate_match(query: str, line: str) -> MatchResult:
    """Match ``query`` as a subsequence of ``line`` and score the result."""
    if not query:
        raise ValueError("query must not be empty")

    match_indices: list[int] = []
    consecutive = 0
    max_consecutive = 0
    boundary_bonus = 0
    query_pos = 0

    for line_pos, char in enumerate(line):
        if query_pos >= len(query):
            break
        if len(line) - line_pos < len(query) - query_pos:
            break
        if _fold(query[query_pos]) != _fold(char):
            continue
        if is_word_boundary(line, line_pos):
            boundary_bonus += WORD_BOUNDARY_BONUS
        if match_indices and match_indices[-1] + 1 == line_pos:
            consecutive += 1
        else:
            consecutive = 1
        match_indices.append(line_pos)
        max_consecutive = max(max_consecutive, consecutive)
        query_pos += 1

    if query_pos < len(query):
        return MatchResult(line, -1, [])

    span = match_indices[-1] - match_indices[0] + 1
    score = (
        max_consecutive * CONSECUTIVE_BONUS
        + boundary_bonus * WORD_BOUNDARY_MULTIPLIER
        - (span - len(query)) * COMPACTNESS_PENALTY
        - match_indices[0] * LATE_MATCH_PENALTY
    )
    return MatchResult(line, BASE_SCORE + score, match_indices)


def fuzzy_match(query: str, entries: Iterable[str]) -> list[MatchResult]:
    """Return the matching entries, best score first."""
    results = [
        result
        for result in (calculate_match(query, entry) for entry in entries)
        if result.score >= 0
    ]
    results.sort(key=lambda result: result.score, reverse=True)
    return results