"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable fuzzy matching operations directly in Polars
expression contexts. Rows are evaluated with `map_elements`; null
values stay null.

Example:
    >>> import polars as pl
    >>> import fuzzykit  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").fuzzy.is_similar("John", min_similarity=0.8)
    ... )
"""

from typing import Callable, List, Union

import polars as pl

from fuzzykit._utils import validate_similarity
from fuzzykit.enums import Algorithm
from fuzzykit.glob import GlobPattern
from fuzzykit.lcs import lcs_string
from fuzzykit.levenshtein import levenshtein
from fuzzykit.matcher import FuzzyMatcher


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(
        self,
        other: Union[str, pl.Expr],
        func: Callable[[str, str], object],
        return_dtype: pl.DataType,
    ) -> pl.Expr:
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: func(str(s), other),
                return_dtype=return_dtype,
            )

        def apply(row):
            if row["_left"] is None or row["_right"] is None:
                return None
            return func(str(row["_left"]), str(row["_right"]))

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            apply,
            return_dtype=return_dtype,
        )

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Similarity algorithm to use (string or Algorithm enum)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(score=pl.col("name").fuzzy.similarity("John"))
            >>> df.with_columns(score=pl.col("name1").fuzzy.similarity(pl.col("name2")))
        """
        matcher = FuzzyMatcher(algorithm, threshold=0.0)
        return self._pairwise(other, matcher.similarity, pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        algorithm: Union[str, Algorithm] = "jaro_winkler",
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score to return True (0.0 to 1.0)
            algorithm: Similarity algorithm to use (string or Algorithm enum)

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_similarity=0.85))
        """
        matcher = FuzzyMatcher(algorithm, threshold=validate_similarity(min_similarity))
        return self._pairwise(other, matcher.matches, pl.Boolean)

    def distance(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Calculate Levenshtein distance between this column and another value/column.

        Returns:
            Expression producing integer distances
        """
        return self._pairwise(other, levenshtein, pl.Int64)

    def lcs(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """Longest common subsequence of this column and another value/column."""
        return self._pairwise(other, lcs_string, pl.Utf8)

    def best_match(
        self,
        choices: List[str],
        algorithm: Union[str, Algorithm] = "jaro_winkler",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            algorithm: Similarity algorithm to use (string or Algorithm enum)
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(category=pl.col("raw_category").fuzzy.best_match(categories))
        """
        matcher = FuzzyMatcher(algorithm, threshold=validate_similarity(min_similarity))

        def find_best(value):
            result = matcher.best_match(str(value), choices)
            if result is None or result.score < matcher.threshold:
                return None
            return result.text

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def best_match_score(
        self,
        choices: List[str],
        algorithm: Union[str, Algorithm] = "jaro_winkler",
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Get both the best match and its score as a struct.

        Returns:
            Struct expression with fields 'match' and 'score'

        Example:
            >>> df.with_columns(
            ...     result=pl.col("name").fuzzy.best_match_score(candidates)
            ... ).select(
            ...     pl.col("result").struct.field("match"),
            ...     pl.col("result").struct.field("score"),
            ... )
        """
        matcher = FuzzyMatcher(algorithm, threshold=validate_similarity(min_similarity))

        def find_best_with_score(value):
            result = matcher.best_match(str(value), choices)
            if result is None or result.score < matcher.threshold:
                return {"match": None, "score": None}
            return {"match": result.text, "score": result.score}

        return self._expr.map_elements(
            find_best_with_score,
            return_dtype=pl.Struct({"match": pl.Utf8, "score": pl.Float64}),
        )

    def glob(self, pattern: str, case_sensitive: bool = True) -> pl.Expr:
        """
        Check whether values match a glob pattern (``*``, ``?``, ``[...]``).

        Example:
            >>> df.filter(pl.col("filename").fuzzy.glob("*.txt"))
        """
        compiled = GlobPattern(pattern, case_sensitive)
        return self._expr.map_elements(
            lambda s: compiled.matches(str(s)),
            return_dtype=pl.Boolean,
        )
