"""Longest Common Subsequence (LCS).

A common subsequence keeps the relative order of units but need not be
contiguous. When several LCS strings exist, ``lcs_string`` returns the one
found by backtracking that drops a unit of the first input on ties.
"""

from typing import List


def _lcs_table(a: str, b: str) -> List[List[int]]:
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        a_unit = a[i - 1]
        row, prev = dp[i], dp[i - 1]
        for j in range(1, n + 1):
            if a_unit == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def lcs_length(a: str, b: str) -> int:
    """Length of the longest common subsequence.

    Example:
        >>> lcs_length("ABCBDAB", "BDCABA")
        4
    """
    if not a or not b:
        return 0
    return _lcs_table(a, b)[len(a)][len(b)]


def lcs_string(a: str, b: str) -> str:
    """Return one longest common subsequence of ``a`` and ``b``.

    Example:
        >>> lcs_string("ABCDGH", "AEDFHR")
        'ADH'
    """
    if not a or not b:
        return ""

    dp = _lcs_table(a, b)
    result = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    result.reverse()
    return "".join(result)


def lcs_similarity(a: str, b: str) -> float:
    """LCS similarity ratio: ``lcs_length / max(len)``, 1.0 when both are empty."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return lcs_length(a, b) / max_len


__all__ = ["lcs_length", "lcs_string", "lcs_similarity"]
