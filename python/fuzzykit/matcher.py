"""Configurable fuzzy matching over candidate lists.

FuzzyMatcher binds one similarity algorithm and a threshold, then scores,
filters and ranks candidates with it. Candidates are scanned linearly and
ranking is stable: equal scores keep their input order.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Union

from fuzzykit._utils import normalize_algorithm, validate_limit, validate_similarity
from fuzzykit.enums import Algorithm
from fuzzykit.jaro import JaroWinkler, jaro_similarity
from fuzzykit.lcs import lcs_similarity
from fuzzykit.levenshtein import levenshtein_similarity
from fuzzykit.results import MatchResult

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 0.7
DEFAULT_ALGORITHM = Algorithm.JARO_WINKLER

_SIMILARITY_FUNCS: Dict[Algorithm, Callable[[str, str], float]] = {
    Algorithm.LEVENSHTEIN: levenshtein_similarity,
    Algorithm.JARO: jaro_similarity,
    Algorithm.JARO_WINKLER: JaroWinkler().similarity,
    Algorithm.LCS: lcs_similarity,
}


class FuzzyMatcher:
    """
    Fuzzy string matcher with a fixed algorithm and similarity threshold.

    Instances hold no mutable state, so one matcher can be shared freely
    between threads.

    Args:
        algorithm: Similarity algorithm (Algorithm enum or its string value):
            - "levenshtein": Normalized Levenshtein similarity
            - "jaro": Jaro similarity
            - "jaro_winkler": Jaro-Winkler similarity (default)
            - "lcs": Longest common subsequence similarity
        threshold: Minimum similarity (inclusive) for a match, 0.0 to 1.0
            (default: 0.7).

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        ValidationError: If threshold is outside [0.0, 1.0] or NaN.

    Example:
        >>> matcher = FuzzyMatcher(threshold=0.8)
        >>> text, score = matcher.best_match("appel", ["apple", "apply", "banana"])
        >>> text, round(score, 2)
        ('apple', 0.95)
    """

    __slots__ = ("_algorithm", "_threshold", "_score")

    def __init__(
        self,
        algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        self._algorithm = normalize_algorithm(algorithm)
        self._threshold = validate_similarity(threshold, "threshold")
        self._score = _SIMILARITY_FUNCS[self._algorithm]
        logger.debug(
            "Created FuzzyMatcher(algorithm=%s, threshold=%s)",
            self._algorithm.value,
            self._threshold,
        )

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def threshold(self) -> float:
        return self._threshold

    def similarity(self, first: str, second: str) -> float:
        """Similarity of two strings under the configured algorithm (0.0 to 1.0)."""
        return self._score(first, second)

    def matches(self, first: str, second: str) -> bool:
        """True if the similarity reaches the threshold (inclusive)."""
        return self._score(first, second) >= self._threshold

    def _score_all(self, query: str, candidates: Iterable[str]) -> List[MatchResult]:
        return [MatchResult(c, self._score(query, c)) for c in candidates]

    def best_match(self, query: str, candidates: Iterable[str]) -> Optional[MatchResult]:
        """
        Find the highest-scoring candidate, regardless of threshold.

        Returns:
            The best MatchResult, the earliest candidate on ties, or None if
            there are no candidates.
        """
        scored = self._score_all(query, candidates)
        if not scored:
            return None
        # max() keeps the first of equal maxima
        return max(scored, key=lambda r: r.score)

    def find_matches(self, query: str, candidates: Iterable[str]) -> List[MatchResult]:
        """
        Find all candidates scoring at or above the threshold.

        Returns:
            MatchResult list sorted by score descending; equal scores keep
            candidate order.
        """
        scored = [r for r in self._score_all(query, candidates) if r.score >= self._threshold]
        scored.sort(key=lambda r: r.score, reverse=True)
        return scored

    def closest_matches(
        self,
        query: str,
        candidates: Iterable[str],
        limit: Optional[int] = None,
    ) -> List[MatchResult]:
        """
        Rank all candidates by similarity, ignoring the threshold.

        Args:
            query: Query string.
            candidates: Strings to rank.
            limit: Maximum number of results (None for all).

        Returns:
            MatchResult list sorted by score descending, stable on ties.
        """
        limit = validate_limit(limit)
        scored = self._score_all(query, candidates)
        scored.sort(key=lambda r: r.score, reverse=True)
        if limit is not None:
            return scored[:limit]
        return scored

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FuzzyMatcher):
            return NotImplemented
        return (self._algorithm, self._threshold) == (other._algorithm, other._threshold)

    def __hash__(self) -> int:
        return hash((self._algorithm, self._threshold))

    def __repr__(self) -> str:
        return f"FuzzyMatcher(algorithm={self._algorithm.value!r}, threshold={self._threshold})"


def fuzzy_matches(
    first: str,
    second: str,
    threshold: float = DEFAULT_THRESHOLD,
    algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
) -> bool:
    """Check whether two strings fuzzy-match under a one-off matcher."""
    return FuzzyMatcher(algorithm, threshold).matches(first, second)


def best_fuzzy_match(
    query: str,
    candidates: Iterable[str],
    algorithm: Union[str, Algorithm] = DEFAULT_ALGORITHM,
) -> Optional[MatchResult]:
    """Find the best fuzzy match for ``query`` among ``candidates``."""
    return FuzzyMatcher(algorithm).best_match(query, candidates)


__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_THRESHOLD",
    "FuzzyMatcher",
    "best_fuzzy_match",
    "fuzzy_matches",
]
