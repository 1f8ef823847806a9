"""Backtracking parser combinators over a shared Cursor.

Every parser built here is a zero-argument callable that returns either a
parsed value or the NO_MATCH sentinel. A parser that fails leaves the cursor
where it found it; a parser that succeeds leaves it after the consumed text.

NO_MATCH is ordinary control flow. It is never raised and never confused
with a parse error: the driver decides what a top-level NO_MATCH means.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable, Sequence
from enum import Enum

from cldrplural.syntax.cursor import Cursor

__all__ = [
    "NO_MATCH",
    "NoMatch",
    "Parser",
    "choice",
    "literal",
    "pattern",
    "repeat",
    "sequence",
]


class NoMatch(Enum):
    """Sentinel type for a parser that did not match.

    An enum member rather than None: 0 and False are legitimate parsed
    values, and the type checker can narrow on ``result is NO_MATCH``.
    """

    NO_MATCH = "NO_MATCH"

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch.NO_MATCH

type Parser[T] = Callable[[], T | NoMatch]


def literal(cursor: Cursor, text: str) -> Parser[str]:
    """Match an exact string at the cursor.

    Example:
        >>> cursor = Cursor("mod 10")
        >>> literal(cursor, "mod")()
        'mod'
        >>> cursor.pos
        3
    """
    length = len(text)

    def parse_literal() -> str | NoMatch:
        if cursor.startswith(text):
            cursor.advance(length)
            return text
        return NO_MATCH

    return parse_literal


def pattern(cursor: Cursor, regex: str | re.Pattern[str]) -> Parser[str]:
    """Match a regular expression anchored at the cursor.

    Example:
        >>> cursor = Cursor("42..45")
        >>> pattern(cursor, r"\\d+")()
        '42'
    """
    compiled = re.compile(regex)

    def parse_pattern() -> str | NoMatch:
        match = compiled.match(cursor.source, cursor.pos)
        if match is None:
            return NO_MATCH
        cursor.advance(match.end() - match.start())
        return match.group()

    return parse_pattern


def choice[T](parsers: Sequence[Parser[T]]) -> Parser[T]:
    """Try parsers in listed order; the first match wins.

    choice() never rewinds by itself: every alternative is responsible for
    restoring the cursor when it fails. Order matters whenever one
    alternative's text is a prefix of another's.
    """

    def parse_choice() -> T | NoMatch:
        for parser in parsers:
            result = parser()
            if result is not NO_MATCH:
                return result
        return NO_MATCH

    return parse_choice


def sequence(cursor: Cursor, parsers: Sequence[Parser[object]]) -> Parser[list[object]]:
    """Run parsers one after another; all must match.

    Returns the list of sub-results. On the first failure the cursor is
    restored to where the sequence started.
    """

    def parse_sequence() -> list[object] | NoMatch:
        start = cursor.mark()
        results: list[object] = []
        for parser in parsers:
            result = parser()
            if result is NO_MATCH:
                cursor.reset(start)
                return NO_MATCH
            results.append(result)
        return results

    return parse_sequence


def repeat[T](cursor: Cursor, min_count: int, parser: Parser[T]) -> Parser[list[T]]:
    """Apply a parser until it fails; require at least min_count matches.

    A match that consumes nothing ends the loop, so a zero-width parser
    cannot spin forever.

    Example:
        >>> cursor = Cursor(",,,x")
        >>> repeat(cursor, 1, literal(cursor, ","))()
        [',', ',', ',']
        >>> repeat(cursor, 1, literal(cursor, ","))()
        NO_MATCH
    """

    def parse_repeat() -> list[T] | NoMatch:
        start = cursor.mark()
        results: list[T] = []
        while True:
            before = cursor.mark()
            result = parser()
            if result is NO_MATCH:
                break
            results.append(result)
            if cursor.mark() == before:
                break
        if len(results) < min_count:
            cursor.reset(start)
            return NO_MATCH
        return results

    return parse_repeat
