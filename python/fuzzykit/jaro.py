"""Jaro and Jaro-Winkler similarity.

Jaro counts units that match within a sliding window and penalizes
transpositions among them. Jaro-Winkler adds a bonus for a shared prefix.
The prefix is computed from both strings at once, so the score is symmetric.
"""

import math
from dataclasses import dataclass

from fuzzykit.exceptions import ValidationError

DEFAULT_SCALING_FACTOR = 0.1
DEFAULT_MAX_PREFIX_LENGTH = 4


def jaro_similarity(a: str, b: str) -> float:
    """Calculate the Jaro similarity between two strings (0.0 to 1.0).

    Two empty strings score 1.0; an empty string against a non-empty one
    scores 0.0. Two single units always score 1.0, because their match
    window would be negative.

    Example:
        >>> round(jaro_similarity("MARTHA", "MARHTA"), 4)
        0.9444
    """
    if not a or not b:
        return 1.0 if not a and not b else 0.0

    len_a, len_b = len(a), len(b)
    match_distance = max(len_a, len_b) // 2 - 1
    if match_distance < 0:
        return 1.0

    a_matched = [False] * len_a
    b_matched = [False] * len_b
    matches = 0

    for i in range(len_a):
        start = max(0, i - match_distance)
        end = min(i + match_distance + 1, len_b)
        for j in range(start, end):
            if b_matched[j] or a[i] != b[j]:
                continue
            a_matched[i] = True
            b_matched[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(len_a):
        if not a_matched[i]:
            continue
        while not b_matched[k]:
            k += 1
        if a[i] != b[k]:
            transpositions += 1
        k += 1

    m = float(matches)
    t = transpositions / 2.0
    return (m / len_a + m / len_b + (m - t) / m) / 3.0


def common_prefix_length(a: str, b: str, max_length: int = DEFAULT_MAX_PREFIX_LENGTH) -> int:
    """Length of the exact shared prefix of ``a`` and ``b``, capped at ``max_length``."""
    limit = min(len(a), len(b), max_length)
    count = 0
    while count < limit and a[count] == b[count]:
        count += 1
    return count


@dataclass(frozen=True)
class JaroWinkler:
    """Jaro-Winkler calculator with fixed prefix parameters.

    Args:
        scaling_factor: Weight of each shared prefix unit (default 0.1).
        max_prefix_length: Maximum prefix length considered (default 4).

    Raises:
        ValidationError: If the parameters could push a score above 1.0.

    Example:
        >>> jw = JaroWinkler()
        >>> round(jw.similarity("MARTHA", "MARHTA"), 3)
        0.961
    """

    scaling_factor: float = DEFAULT_SCALING_FACTOR
    max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH

    def __post_init__(self):
        p = self.scaling_factor
        if isinstance(p, bool) or not isinstance(p, (int, float)) or not math.isfinite(p):
            raise ValidationError(f"scaling_factor must be a finite number, got {p!r}")
        if isinstance(self.max_prefix_length, bool) or not isinstance(self.max_prefix_length, int):
            raise ValidationError(
                f"max_prefix_length must be an int, got {type(self.max_prefix_length).__name__}"
            )
        if self.max_prefix_length < 0:
            raise ValidationError(
                f"max_prefix_length must be non-negative, got {self.max_prefix_length}"
            )
        upper = 1.0 / self.max_prefix_length if self.max_prefix_length else math.inf
        if not 0.0 <= p <= upper:
            raise ValidationError(
                f"scaling_factor must be in range [0.0, {upper}] "
                f"for max_prefix_length={self.max_prefix_length}, got {p}"
            )

    def jaro_similarity(self, a: str, b: str) -> float:
        return jaro_similarity(a, b)

    def similarity(self, a: str, b: str) -> float:
        """Calculate the Jaro-Winkler similarity between two strings (0.0 to 1.0)."""
        jaro = jaro_similarity(a, b)
        prefix = common_prefix_length(a, b, self.max_prefix_length)
        return jaro + prefix * self.scaling_factor * (1.0 - jaro)


def jaro_winkler_similarity(
    a: str,
    b: str,
    scaling_factor: float = DEFAULT_SCALING_FACTOR,
    max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH,
) -> float:
    """Calculate the Jaro-Winkler similarity between two strings (0.0 to 1.0).

    Args:
        a: First string.
        b: Second string.
        scaling_factor: Weight of each shared prefix unit (default 0.1).
        max_prefix_length: Maximum prefix length considered (default 4).

    Raises:
        ValidationError: If ``scaling_factor * max_prefix_length`` exceeds 1.0
            or either parameter is negative.
    """
    return JaroWinkler(scaling_factor, max_prefix_length).similarity(a, b)


__all__ = [
    "DEFAULT_SCALING_FACTOR",
    "DEFAULT_MAX_PREFIX_LENGTH",
    "JaroWinkler",
    "common_prefix_length",
    "jaro_similarity",
    "jaro_winkler_similarity",
]
