"""
fuzzykit - Approximate string matching

Edit distance, Jaro/Jaro-Winkler, longest common subsequence, shell-style
glob patterns, and a configurable matcher that ranks candidate lists.

Example usage:
    >>> import fuzzykit as fk

    # Distances and similarities
    >>> fk.levenshtein("kitten", "sitting")
    3
    >>> round(fk.jaro_winkler_similarity("MARTHA", "MARHTA"), 3)
    0.961

    # Rank candidates (returns MatchResult tuples)
    >>> matcher = fk.FuzzyMatcher(algorithm="jaro_winkler", threshold=0.8)
    >>> [m.text for m in matcher.find_matches("appel", ["apple", "apply", "banana"])]
    ['apple', 'apply']

    # Glob patterns
    >>> fk.glob_filter("*.txt", ["a.txt", "b.md", "c.txt"])
    ['a.txt', 'c.txt']
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzykit.expr  # noqa: F401
from fuzzykit import batch
from fuzzykit.enums import Algorithm
from fuzzykit.exceptions import AlgorithmError, FuzzyKitError, ValidationError
from fuzzykit.glob import GlobPattern, glob_filter, glob_match
from fuzzykit.jaro import (
    DEFAULT_MAX_PREFIX_LENGTH,
    DEFAULT_SCALING_FACTOR,
    JaroWinkler,
    common_prefix_length,
    jaro_similarity,
    jaro_winkler_similarity,
)
from fuzzykit.lcs import lcs_length, lcs_similarity, lcs_string
from fuzzykit.levenshtein import levenshtein, levenshtein_similarity
from fuzzykit.matcher import (
    DEFAULT_ALGORITHM,
    DEFAULT_THRESHOLD,
    FuzzyMatcher,
    best_fuzzy_match,
    fuzzy_matches,
)
from fuzzykit.polars_ext import match_series
from fuzzykit.results import MatchResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = _get_version("fuzzykit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FuzzyKitError",
    "ValidationError",
    "AlgorithmError",
    # Result types
    "MatchResult",
    # Enums
    "Algorithm",
    # Distance/similarity functions
    "levenshtein",
    "levenshtein_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "common_prefix_length",
    "JaroWinkler",
    "lcs_length",
    "lcs_string",
    "lcs_similarity",
    # Glob patterns
    "GlobPattern",
    "glob_match",
    "glob_filter",
    # Matching
    "FuzzyMatcher",
    "fuzzy_matches",
    "best_fuzzy_match",
    # Defaults
    "DEFAULT_ALGORITHM",
    "DEFAULT_THRESHOLD",
    "DEFAULT_SCALING_FACTOR",
    "DEFAULT_MAX_PREFIX_LENGTH",
    # Batch processing
    "batch",
    # Polars integration
    "match_series",
]


# Convenience aliases
edit_distance = levenshtein
similarity = jaro_winkler_similarity
