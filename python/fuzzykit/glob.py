"""Shell-style glob matching.

Supported syntax:

- ``*`` matches any run of units, including none
- ``?`` matches exactly one unit
- ``[abc]``, ``[a-z]`` match one unit from a set; ``[!...]`` negates it

A class ends at the first ``]`` after its ``[``, so ``[]`` is an empty set
that never matches and ``[!]`` matches any single unit. A ``[`` without a
closing ``]`` is matched literally. Case-insensitive patterns lowercase both
the pattern and the subject, brackets included.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Set, Tuple, Union

logger = logging.getLogger(__name__)

_STAR = "*"
_ANY = "?"


@dataclass(frozen=True)
class _CharClass:
    negated: bool
    singles: frozenset
    ranges: Tuple[Tuple[str, str], ...]

    def contains(self, unit: str) -> bool:
        hit = unit in self.singles or any(lo <= unit <= hi for lo, hi in self.ranges)
        return hit != self.negated


@dataclass(frozen=True)
class _Literal:
    unit: str


_Token = Union[str, _CharClass, _Literal]


def _parse_class(body: str) -> _CharClass:
    negated = body.startswith("!")
    if negated:
        body = body[1:]
    singles = set()
    ranges = []
    i = 0
    while i < len(body):
        if i + 2 < len(body) and body[i + 1] == "-":
            ranges.append((body[i], body[i + 2]))
            i += 3
        else:
            singles.add(body[i])
            i += 1
    return _CharClass(negated, frozenset(singles), tuple(ranges))


def _compile(pattern: str) -> Tuple[_Token, ...]:
    tokens: List[_Token] = []
    i = 0
    while i < len(pattern):
        unit = pattern[i]
        if unit == _STAR:
            # Consecutive stars are equivalent to one
            if not tokens or tokens[-1] != _STAR:
                tokens.append(_STAR)
            i += 1
        elif unit == _ANY:
            tokens.append(_ANY)
            i += 1
        elif unit == "[":
            close = pattern.find("]", i + 1)
            if close == -1:
                logger.debug("Unclosed '[' at %d in glob %r, matching it literally", i, pattern)
                tokens.append(_Literal(unit))
                i += 1
            else:
                tokens.append(_parse_class(pattern[i + 1:close]))
                i = close + 1
        else:
            tokens.append(_Literal(unit))
            i += 1
    return tuple(tokens)


def _match_tokens(tokens: Tuple[_Token, ...], subject: Sequence[str]) -> bool:
    failed: Set[Tuple[int, int]] = set()

    def match_from(ti: int, si: int) -> bool:
        if (ti, si) in failed:
            return False
        start = (ti, si)
        while ti < len(tokens):
            token = tokens[ti]
            if token == _STAR:
                # Zero units first, then consume one more each round
                for next_si in range(si, len(subject) + 1):
                    if match_from(ti + 1, next_si):
                        return True
                failed.add(start)
                return False
            if si == len(subject):
                failed.add(start)
                return False
            if token == _ANY:
                ok = True
            elif isinstance(token, _CharClass):
                ok = token.contains(subject[si])
            else:
                ok = token.unit == subject[si]
            if not ok:
                failed.add(start)
                return False
            ti += 1
            si += 1
        if si == len(subject):
            return True
        failed.add(start)
        return False

    return match_from(0, 0)


@dataclass(frozen=True)
class GlobPattern:
    """A compiled glob pattern.

    The pattern is compiled once; :meth:`matches` keeps no state between
    calls, so one instance can be shared across threads.

    Example:
        >>> GlobPattern("*.txt").matches("file.txt")
        True
        >>> GlobPattern("*.TXT", case_sensitive=False).filter(["a.txt", "b.md"])
        ['a.txt']
    """

    pattern: str
    case_sensitive: bool = True
    _tokens: Tuple[_Token, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        source = self.pattern if self.case_sensitive else self.pattern.lower()
        object.__setattr__(self, "_tokens", _compile(source))

    def matches(self, subject: Union[str, Sequence[str]]) -> bool:
        """Check whether ``subject`` matches the whole pattern.

        ``subject`` may also be a sequence of units, such as grapheme
        clusters; each unit is compared against one pattern position.
        """
        if not self.case_sensitive:
            if isinstance(subject, str):
                subject = subject.lower()
            else:
                subject = [unit.lower() for unit in subject]
        return _match_tokens(self._tokens, subject)

    def filter(self, strings: Iterable[str]) -> List[str]:
        """Return the strings that match, in their original order."""
        return [s for s in strings if self.matches(s)]


def glob_match(pattern: str, subject: Union[str, Sequence[str]], case_sensitive: bool = True) -> bool:
    """Check whether ``subject`` matches the glob ``pattern``.

    Example:
        >>> glob_match("te?t", "text")
        True
        >>> glob_match("te[!sx]t", "test")
        False
    """
    return GlobPattern(pattern, case_sensitive).matches(subject)


def glob_filter(pattern: str, strings: Iterable[str], case_sensitive: bool = True) -> List[str]:
    """Filter ``strings`` to those matching ``pattern``, order preserved."""
    return GlobPattern(pattern, case_sensitive).filter(strings)


__all__ = ["GlobPattern", "glob_match", "glob_filter"]
