"""Similarity score between two tokens."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

EXACT_MATCH_SCORE = 1.0
# Containment short-circuits edit distance so "cap" still reaches "cappuccino".
SUBSTRING_MATCH_SCORE = 0.9


def similarity(a: str, b: str) -> float:
    """
    Score how alike two strings are, from 0.0 to 1.0 (case-insensitive).

    Equal strings score 1.0 and strings where one contains the other score
    0.9. Anything else scores ``1 - levenshtein / max(len(a), len(b))``.
    """
    a = a.lower()
    b = b.lower()

    if a == b:
        return EXACT_MATCH_SCORE

    if a in b or b in a:
        return SUBSTRING_MATCH_SCORE

    distance = Levenshtein.distance(a, b)
    return 1 - distance / max(len(a), len(b))
