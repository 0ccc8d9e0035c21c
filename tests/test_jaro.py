"""Tests for Jaro and Jaro-Winkler similarity algorithms.

This module tests the Jaro and Jaro-Winkler similarity functions provided by
fuzzykit, including short-string edge cases and parameter validation.
"""

import pytest

import fuzzykit as fk


class TestJaro:
    """Tests for Jaro similarity."""

    def test_jaro_identical(self):
        assert fk.jaro_similarity("hello", "hello") == 1.0
        assert fk.jaro_similarity("", "") == 1.0

    def test_jaro_empty_vs_nonempty(self):
        assert fk.jaro_similarity("", "abc") == 0.0
        assert fk.jaro_similarity("abc", "") == 0.0

    def test_jaro_different(self):
        assert fk.jaro_similarity("abc", "xyz") == 0.0

    def test_jaro_classic_examples(self):
        # Classic MARTHA/MARHTA example: m=6, t=1
        assert fk.jaro_similarity("MARTHA", "MARHTA") == pytest.approx(17 / 18)
        assert fk.jaro_similarity("DIXON", "DICKSONX") == pytest.approx(0.7667, abs=1e-4)

    def test_single_units(self):
        # Window max(1, 1) // 2 - 1 is negative, so any two single units score 1.0
        assert fk.jaro_similarity("a", "a") == 1.0
        assert fk.jaro_similarity("a", "b") == 1.0
        assert fk.jaro_similarity(["é"], ["e"]) == 1.0

    def test_single_unit_against_longer(self):
        # Window for length 2 is 0: only the aligned position can match
        assert fk.jaro_similarity("a", "ba") == 0.0
        assert fk.jaro_similarity("a", "ab") == pytest.approx((1 + 0.5 + 1) / 3)

    def test_match_window(self):
        # Window for length 4 is 1: 'a' at 0 and 3 are too far apart to match
        assert fk.jaro_similarity("abcd", "bcda") < fk.jaro_similarity("abcd", "abdc")


class TestJaroWinkler:
    """Tests for the Jaro-Winkler prefix boost."""

    def test_martha_reference_value(self):
        assert fk.jaro_winkler_similarity("MARTHA", "MARHTA") == pytest.approx(0.961, abs=0.001)

    def test_prefix_boost(self):
        jaro = fk.jaro_similarity("MARTHA", "MARHTA")
        jaro_winkler = fk.jaro_winkler_similarity("MARTHA", "MARHTA")
        assert jaro_winkler > jaro

    def test_no_common_prefix_equals_jaro(self):
        assert fk.jaro_winkler_similarity("xhello", "yhello") == fk.jaro_similarity("xhello", "yhello")

    def test_prefix_is_capped(self):
        a, b = "prefix_test", "prefix_best"
        jaro = fk.jaro_similarity(a, b)
        expected = jaro + 4 * 0.1 * (1 - jaro)
        assert fk.jaro_winkler_similarity(a, b) == pytest.approx(expected)

    def test_custom_parameters(self):
        default = fk.jaro_winkler_similarity("prefix_test", "prefix_best")
        higher = fk.jaro_winkler_similarity("prefix_test", "prefix_best", scaling_factor=0.2)
        assert higher >= default

    def test_prefix_is_case_sensitive(self):
        assert fk.jaro_winkler_similarity("Martha", "martha") < 1.0
        assert fk.jaro_winkler_similarity("Martha".lower(), "martha") == 1.0

    def test_empty(self):
        assert fk.jaro_winkler_similarity("", "") == 1.0
        assert fk.jaro_winkler_similarity("", "abc") == 0.0

    def test_single_units(self):
        assert fk.jaro_winkler_similarity("a", "b") == 1.0
        assert fk.JaroWinkler(scaling_factor=0.2).similarity("x", "y") == 1.0

    def test_struct_matches_functions(self):
        jw = fk.JaroWinkler(scaling_factor=0.2, max_prefix_length=3)
        assert jw.similarity("DWAYNE", "DUANE") == fk.jaro_winkler_similarity(
            "DWAYNE", "DUANE", scaling_factor=0.2, max_prefix_length=3
        )
        assert jw.jaro_similarity("DWAYNE", "DUANE") == fk.jaro_similarity("DWAYNE", "DUANE")

    def test_common_prefix_length(self):
        assert fk.common_prefix_length("MARTHA", "MARHTA") == 3
        assert fk.common_prefix_length("abcdef", "abcdeg") == 4
        assert fk.common_prefix_length("abcdef", "abcdeg", max_length=10) == 5
        assert fk.common_prefix_length("", "abc") == 0


class TestJaroWinklerValidation:
    """Tests for Jaro-Winkler parameter validation."""

    def test_scaling_factor_too_high_raises_error(self):
        with pytest.raises(fk.ValidationError, match="scaling_factor must be in range"):
            fk.jaro_winkler_similarity("hello", "hello", scaling_factor=0.26)

    def test_scaling_factor_negative_raises_error(self):
        with pytest.raises(fk.ValidationError, match="scaling_factor must be in range"):
            fk.jaro_winkler_similarity("hello", "hallo", scaling_factor=-0.01)

    def test_scaling_factor_nan_raises_error(self):
        with pytest.raises(fk.ValidationError):
            fk.JaroWinkler(scaling_factor=float("nan"))

    def test_negative_prefix_length_raises_error(self):
        with pytest.raises(fk.ValidationError):
            fk.JaroWinkler(max_prefix_length=-1)

    def test_boundary_values(self):
        assert fk.jaro_winkler_similarity("hello", "hello", scaling_factor=0.0) == 1.0
        assert fk.jaro_winkler_similarity("hello", "hello", scaling_factor=0.25) == 1.0

    def test_zero_prefix_length_allows_any_scaling(self):
        jw = fk.JaroWinkler(scaling_factor=5.0, max_prefix_length=0)
        assert jw.similarity("MARTHA", "MARHTA") == fk.jaro_similarity("MARTHA", "MARHTA")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            fk.JaroWinkler(scaling_factor=1.0)


class TestJaroLongStrings:
    """Tests for Jaro similarity with long strings."""

    def test_jaro_similarity_long_strings(self):
        result = fk.jaro_similarity("a" * 1000, "b" * 1000)
        assert isinstance(result, float)
        assert result == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
