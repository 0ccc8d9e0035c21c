"""Result types returned by matching operations."""

from typing import NamedTuple


class MatchResult(NamedTuple):
    """A candidate paired with its similarity to a query.

    Unpacks as ``(text, score)``:

        >>> text, score = MatchResult("apple", 0.93)
    """

    text: str
    score: float


__all__ = ["MatchResult"]
