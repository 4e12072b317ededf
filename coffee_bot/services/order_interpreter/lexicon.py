"""Fuzzy lookup of tokens against a lexicon of canonical keys and aliases."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

from coffee_bot.services.order_interpreter.models import LexiconEntry, LexiconMatch
from coffee_bot.services.order_interpreter.similarity import similarity

T = TypeVar("T")

DEFAULT_THRESHOLD = 0.7


class Lexicon(Generic[T]):
    """Ordered, read-only collection of lexicon entries.

    Iteration follows declaration order, which is also the tie-break order
    for :func:`find_best_match`.
    """

    def __init__(self, entries: Sequence[LexiconEntry[T]]):
        self._entries: tuple = tuple(entries)
        self._by_key = {e.key: e for e in self._entries}

    def __iter__(self) -> Iterator[LexiconEntry[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> Optional[T]:
        entry = self._by_key.get(key)
        return entry.value if entry else None

    def keys(self) -> List[str]:
        return [e.key for e in self._entries]

    def values(self) -> List[T]:
        return [e.value for e in self._entries]


def _entry_score(term: str, entry: LexiconEntry) -> float:
    score = similarity(term, entry.key)
    for alias in entry.aliases:
        score = max(score, similarity(term, alias))
    return score


def find_best_match(term: str, lexicon: Lexicon[T], threshold: float = DEFAULT_THRESHOLD) -> Optional[LexiconMatch[T]]:
    """
    Find the lexicon entry most similar to ``term``.

    Each entry scores the best similarity among its key and aliases. The
    winner is returned only when its score is strictly above ``threshold``;
    on ties the earliest entry wins.

    Returns:
        LexiconMatch or None
    """
    best: Optional[LexiconMatch[T]] = None
    best_score = threshold

    for entry in lexicon:
        score = _entry_score(term, entry)
        if score > best_score:
            best = LexiconMatch(key=entry.key, value=entry.value, score=score)
            best_score = score

    return best
