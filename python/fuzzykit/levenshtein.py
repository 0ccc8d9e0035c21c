"""Levenshtein edit distance.

The distance is the minimum number of single-unit insertions, deletions and
substitutions turning one sequence into the other. Only two DP rows are kept,
sized by the shorter input.
"""


def levenshtein(source: str, target: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Args:
        source: First string.
        target: Second string.

    Returns:
        Non-negative edit distance. Distance to or from an empty string is the
        other string's length.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    # Distance is symmetric, so iterate rows over the longer input
    if len(source) < len(target):
        source, target = target, source

    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    current = [0] * (len(target) + 1)

    for i, s_unit in enumerate(source, start=1):
        current[0] = i
        for j, t_unit in enumerate(target, start=1):
            cost = 0 if s_unit == t_unit else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous, current = current, previous

    return previous[len(target)]


def levenshtein_similarity(source: str, target: str) -> float:
    """Normalized Levenshtein similarity: ``1 - distance / max(len)``.

    Two empty strings are identical and score 1.0.

    Example:
        >>> levenshtein_similarity("hello", "hallo")
        0.8
    """
    max_len = max(len(source), len(target))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein(source, target) / max_len


__all__ = ["levenshtein", "levenshtein_similarity"]
