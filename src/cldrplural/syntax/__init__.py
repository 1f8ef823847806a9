"""Parsing primitives for plural rules.

Provides the shared mutable cursor and the backtracking combinators the
rule grammar is built from. Separate from runtime so the combinators can
be reused and tested without operands or evaluation.

Python 3.13+.
"""

from .combinators import NO_MATCH, NoMatch, Parser, choice, literal, pattern, repeat, sequence
from .cursor import Cursor

__all__ = [
    "NO_MATCH",
    "Cursor",
    "NoMatch",
    "Parser",
    "choice",
    "literal",
    "pattern",
    "repeat",
    "sequence",
]
