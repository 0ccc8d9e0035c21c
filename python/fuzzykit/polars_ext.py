"""Series-level fuzzy matching for Polars.

``match_series`` pairs every query with every target scoring at or above a
threshold. Scoring goes through :class:`fuzzykit.FuzzyMatcher`, so the
scores equal the scalar functions' results.

Example Usage
-------------
>>> import polars as pl
>>> from fuzzykit.polars_ext import match_series
>>>
>>> queries = pl.Series(["apple", "banana"])
>>> targets = pl.Series(["appel", "banan", "cherry"])
>>> result = match_series(queries, targets, min_similarity=0.7)
"""

from typing import Union

import polars as pl

from fuzzykit._utils import validate_similarity
from fuzzykit.enums import Algorithm
from fuzzykit.matcher import FuzzyMatcher

_MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "score": pl.Float64,
}


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    algorithm: Union[str, Algorithm] = "jaro_winkler",
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, finds all target values at or above the similarity
    threshold. Null queries and targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        algorithm: Similarity algorithm to use (string or Algorithm enum)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score.
        Rows are grouped by query; within a query, highest score first and
        target order on ties.
    """
    matcher = FuzzyMatcher(algorithm, threshold=validate_similarity(min_similarity))
    targets = [
        (idx, str(target))
        for idx, target in enumerate(target_series.to_list())
        if target is not None
    ]

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        query = str(query)
        scored = [
            (target_idx, target, matcher.similarity(query, target))
            for target_idx, target in targets
        ]
        scored = [entry for entry in scored if entry[2] >= matcher.threshold]
        scored.sort(key=lambda entry: entry[2], reverse=True)
        for target_idx, target, score in scored:
            rows.append(
                {
                    "query_idx": query_idx,
                    "query": query,
                    "target_idx": target_idx,
                    "target": target,
                    "score": score,
                }
            )

    return pl.DataFrame(rows, schema=_MATCH_SCHEMA)


__all__ = ["match_series"]
