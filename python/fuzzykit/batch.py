"""Batch operations API for fuzzykit.

This module provides list-based batch operations on strings. Every function
is a thin wrapper around :class:`fuzzykit.FuzzyMatcher`, so results agree
exactly with the single-pair functions.

Example usage:
    >>> import fuzzykit.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [r.text for r in results]
    ['hello', 'hallo', 'world']

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.text for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hello", "word"], algorithm="lcs")
    [1.0, 0.8]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fuzzykit._utils import validate_limit, validate_similarity
from fuzzykit.exceptions import ValidationError
from fuzzykit.matcher import FuzzyMatcher
from fuzzykit.results import MatchResult

if TYPE_CHECKING:
    from fuzzykit.enums import Algorithm

logger = logging.getLogger(__name__)

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


def similarity(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum). Options:
            - "levenshtein": Normalized Levenshtein similarity
            - "jaro": Jaro similarity
            - "jaro_winkler": Jaro-Winkler similarity (default)
            - "lcs": Longest common subsequence similarity

    Returns:
        List of MatchResult objects in the same order as input strings.
    """
    matcher = FuzzyMatcher(algorithm, threshold=0.0)
    return [MatchResult(s, matcher.similarity(query, s)) for s in strings]


def best_matches(
    strings: list[str],
    query: str,
    algorithm: str | Algorithm = "jaro_winkler",
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending (input order on ties),
    and returns the top matches up to the specified limit.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        algorithm: Similarity algorithm to use (string or Algorithm enum).
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If min_similarity is outside [0.0, 1.0] or limit is negative.
    """
    validate_limit(limit)
    matcher = FuzzyMatcher(algorithm, threshold=validate_similarity(min_similarity))
    logger.debug("best_matches over %d strings with %r", len(strings), matcher)
    return matcher.find_matches(query, strings)[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    algorithm: str | Algorithm = "jaro_winkler",
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        algorithm: Similarity algorithm to use (string or Algorithm enum).

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        ValidationError: If left and right have different lengths.
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    matcher = FuzzyMatcher(algorithm, threshold=0.0)
    return [matcher.similarity(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    algorithm: str | Algorithm = "levenshtein",
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    matcher = FuzzyMatcher(algorithm, threshold=0.0)
    logger.debug("similarity_matrix %dx%d with %r", len(queries), len(choices), matcher)
    return [[matcher.similarity(q, c) for c in choices] for q in queries]
