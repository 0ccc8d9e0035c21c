"""Exception hierarchy for fuzzykit.

The matching algorithms never raise on string input. These exceptions are
raised only for invalid configuration (thresholds, Jaro-Winkler parameters,
algorithm names) and for mismatched batch inputs.
"""


class FuzzyKitError(Exception):
    """Base exception for all fuzzykit errors."""


class ValidationError(FuzzyKitError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class AlgorithmError(FuzzyKitError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


__all__ = ["FuzzyKitError", "ValidationError", "AlgorithmError"]
