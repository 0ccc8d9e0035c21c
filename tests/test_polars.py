"""Tests for Polars integration."""

import polars as pl
import pytest

import fuzzykit as fk
from fuzzykit.polars_ext import match_series


class TestExprNamespace:
    """Tests for the `.fuzzy` expression namespace."""

    def test_similarity_literal(self):
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.with_columns(score=pl.col("name").fuzzy.similarity("John"))
        expected = [fk.jaro_winkler_similarity(n, "John") for n in ["John", "Jon", "Jane"]]
        assert result["score"].to_list() == expected

    def test_similarity_columns(self):
        df = pl.DataFrame({"a": ["kitten", "hello"], "b": ["sitting", "hello"]})
        result = df.select(
            score=pl.col("a").fuzzy.similarity(pl.col("b"), algorithm="levenshtein")
        )
        assert result["score"].to_list() == [
            pytest.approx(1 - 3 / 7),
            1.0,
        ]

    def test_is_similar(self):
        df = pl.DataFrame({"name": ["MARTHA", "MARHTA", "JONES"]})
        result = df.filter(pl.col("name").fuzzy.is_similar("MARTHA", min_similarity=0.9))
        assert result["name"].to_list() == ["MARTHA", "MARHTA"]

    def test_distance(self):
        df = pl.DataFrame({"word": ["kitten", "saturday"]})
        result = df.select(d=pl.col("word").fuzzy.distance("sitting"))
        assert result["d"].to_list() == [3, fk.levenshtein("saturday", "sitting")]

    def test_lcs(self):
        df = pl.DataFrame({"a": ["ABCDGH"], "b": ["AEDFHR"]})
        result = df.select(lcs=pl.col("a").fuzzy.lcs(pl.col("b")))
        assert result["lcs"].to_list() == ["ADH"]

    def test_nulls_propagate(self):
        df = pl.DataFrame({"a": ["abc", None], "b": ["abc", "abd"]})
        result = df.select(score=pl.col("a").fuzzy.similarity(pl.col("b")))
        assert result["score"].to_list() == [1.0, None]

    def test_best_match(self):
        df = pl.DataFrame({"raw": ["aple", "bananna", "zzz"]})
        result = df.select(
            match=pl.col("raw").fuzzy.best_match(["apple", "banana"], min_similarity=0.8)
        )
        assert result["match"].to_list() == ["apple", "banana", None]

    def test_best_match_score(self):
        df = pl.DataFrame({"raw": ["apple"]})
        result = df.select(r=pl.col("raw").fuzzy.best_match_score(["apple", "apply"]))
        assert result["r"].struct.field("match").to_list() == ["apple"]
        assert result["r"].struct.field("score").to_list() == [1.0]

    def test_glob(self):
        df = pl.DataFrame({"file": ["a.txt", "b.md", "C.TXT"]})
        assert df.filter(pl.col("file").fuzzy.glob("*.txt"))["file"].to_list() == ["a.txt"]
        result = df.filter(pl.col("file").fuzzy.glob("*.txt", case_sensitive=False))
        assert result["file"].to_list() == ["a.txt", "C.TXT"]

    def test_unknown_algorithm(self):
        with pytest.raises(fk.AlgorithmError):
            pl.col("name").fuzzy.similarity("x", algorithm="ngram")


class TestMatchSeries:
    """Tests for match_series function."""

    def test_basic_match(self):
        queries = pl.Series(["apple", "banana"])
        targets = pl.Series(["appel", "banan", "cherry"])
        result = match_series(queries, targets, min_similarity=0.7)

        assert isinstance(result, pl.DataFrame)
        assert result.columns == ["query_idx", "query", "target_idx", "target", "score"]
        pairs = set(zip(result["query"].to_list(), result["target"].to_list()))
        assert ("apple", "appel") in pairs
        assert ("banana", "banan") in pairs
        assert all(score >= 0.7 for score in result["score"].to_list())

    def test_sorted_within_query(self):
        result = match_series(pl.Series(["cat"]), pl.Series(["hat", "cat", "bat"]), "levenshtein")
        assert result["target"].to_list() == ["cat", "hat", "bat"]
        assert result["target_idx"].to_list() == [1, 0, 2]

    def test_empty_series(self):
        queries = pl.Series([], dtype=pl.Utf8)
        targets = pl.Series(["apple", "banana"])
        result = match_series(queries, targets)
        assert len(result) == 0
        assert result.schema["score"] == pl.Float64

    def test_no_matches(self):
        result = match_series(pl.Series(["xyz"]), pl.Series(["apple", "banana"]), min_similarity=0.9)
        assert len(result) == 0

    def test_nulls_skipped(self):
        result = match_series(pl.Series(["abc", None]), pl.Series([None, "abc"]))
        assert result.rows() == [(0, "abc", 1, "abc", 1.0)]

    def test_exported(self):
        assert fk.match_series is match_series
