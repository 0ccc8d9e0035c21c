"""Internal utilities for fuzzykit."""

import math
from typing import Optional, Union

from fuzzykit.enums import Algorithm
from fuzzykit.exceptions import AlgorithmError, ValidationError

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> Algorithm:
    """Convert a string algorithm name to an Algorithm, validating it.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        The matching Algorithm member.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm("Levenshtein")
        <Algorithm.LEVENSHTEIN: 'levenshtein'>
    """
    if isinstance(algorithm, Algorithm):
        return algorithm

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return Algorithm(algo_lower)
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def validate_similarity(value: float, name: str = "min_similarity") -> float:
    """Ensure a similarity threshold is a finite number in [0.0, 1.0]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {type(value).__name__}")
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError(f"{name} must be in range [0.0, 1.0], got {value}")
    return float(value)


def validate_limit(limit: Optional[int]) -> Optional[int]:
    """Ensure an optional result limit is a non-negative integer."""
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError(f"limit must be an int or None, got {type(limit).__name__}")
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    return limit


__all__ = ["normalize_algorithm", "validate_similarity", "validate_limit", "VALID_ALGORITHMS"]
