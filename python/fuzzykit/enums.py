"""Enums for fuzzykit API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity algorithms.

    This enum provides type-safe algorithm selection for FuzzyMatcher and
    the batch helpers. String values are accepted anywhere an Algorithm is.

    Example:
        >>> from fuzzykit import Algorithm, FuzzyMatcher
        >>> matcher = FuzzyMatcher(algorithm=Algorithm.LCS, threshold=0.5)
        >>> matcher.matches("ABCBDAB", "BDCABA")
        True
    """

    LEVENSHTEIN = "levenshtein"
    """Normalized edit distance (insertions, deletions, substitutions)"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    LCS = "lcs"
    """Longest Common Subsequence similarity"""


__all__ = ["Algorithm"]
