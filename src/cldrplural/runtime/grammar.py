"""CLDR plural rule grammar with fused evaluation.

Productions are built from the combinators over one shared Cursor and one
set of PluralOperands. Each production returns its evaluated value (a number
for expressions, ranges for range lists, a bool for relations and
conditions) instead of a syntax tree.

Grammar (UTS #35, Language Plural Rules):

    condition       = and_condition ('or' and_condition)*
    and_condition   = relation ('and' relation)*
    relation        = is_relation | in_relation | within_relation
    is_relation     = expr 'is' ('not')? value
    in_relation     = expr (('not')? 'in' | '=' | '!=') range_list
    within_relation = expr ('not')? 'within' range_list
    expr            = operand (('mod' | '%') value)?
    operand         = 'n' | 'i' | 'f' | 't' | 'v' | 'w' | 'e' | 'c'
    range_list      = (range | value) (',' (range | value))*
    range           = value '..' value
    value           = digit+

Tokens are separated by mandatory whitespace; range lists are written
without spaces.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import localcontext
from itertools import chain
from typing import TYPE_CHECKING

from cldrplural.core import DepthGuard
from cldrplural.runtime.operands import operand_parser
from cldrplural.syntax.combinators import (
    NO_MATCH,
    NoMatch,
    choice,
    literal,
    pattern,
    repeat,
    sequence,
)

if TYPE_CHECKING:
    from cldrplural.runtime.operands import OperandValue, PluralOperands
    from cldrplural.syntax.cursor import Cursor

__all__ = ["PluralRuleGrammar", "RangeList", "expand_range_list"]

# Inclusive ranges in encounter order; a bare value v is range(v, v + 1).
type RangeList = tuple[range, ...]


def expand_range_list(ranges: RangeList) -> list[int]:
    """Flatten a range list into its integers, preserving encounter order.

    Example:
        >>> expand_range_list((range(1, 3), range(4, 5), range(6, 8)))
        [1, 2, 4, 6, 7]
    """
    return list(chain.from_iterable(ranges))


def _contains(ranges: RangeList, value: OperandValue) -> bool:
    """Integer membership: non-integral values are never members."""
    if value != int(value):
        return False
    integer = int(value)
    return any(integer in r for r in ranges)


def _within(ranges: RangeList, value: OperandValue) -> bool:
    """Half-open containment between the first and last listed values.

    Bounds come from the expanded list, so a reversed (empty) range
    contributes no bound; a list with no values contains nothing.
    """
    listed = [r for r in ranges if r]
    if not listed:
        return False
    return listed[0][0] <= value < listed[-1][-1]


class PluralRuleGrammar:
    """Recursive-descent productions for one rule evaluation.

    Instances are single-use: they hold the cursor of one rule and the
    operands of one number. Build a new grammar for every evaluation.

    Example:
        >>> cursor = Cursor("n mod 10 is 1")
        >>> grammar = PluralRuleGrammar(cursor, PluralOperands.from_number(21))
        >>> grammar.condition()
        True
    """

    __slots__ = (
        "_and_keyword",
        "_condition_alternatives",
        "_cursor",
        "_depth",
        "_and_condition_alternatives",
        "_expression",
        "_integer",
        "_not",
        "_operand",
        "_or_keyword",
        "_range_item",
        "_relation",
        "_whitespace",
    )

    def __init__(
        self,
        cursor: Cursor,
        operands: PluralOperands,
        depth_guard: DepthGuard | None = None,
    ) -> None:
        self._cursor = cursor
        self._depth = depth_guard if depth_guard is not None else DepthGuard()

        self._whitespace = pattern(cursor, r"\s+")
        digits = pattern(cursor, r"\d+")

        def integer() -> int | NoMatch:
            text = digits()
            return NO_MATCH if text is NO_MATCH else int(text)

        self._integer = integer
        self._operand = operand_parser(cursor, operands)
        self._expression = choice([self._mod, self._operand])
        self._not = sequence(cursor, [self._whitespace, literal(cursor, "not")])
        self._range_item = choice([self._range, self._value_range])
        self._relation = choice(
            [self._is, self._not_in, self._isnot, self._in, self._within_relation]
        )
        self._and_keyword = literal(cursor, "and")
        self._or_keyword = literal(cursor, "or")
        self._and_condition_alternatives = choice([self._and, self.relation])
        self._condition_alternatives = choice([self._or, self.and_condition])

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def expression(self) -> OperandValue | NoMatch:
        """expr = operand (('mod' | '%') value)?"""
        return self._expression()

    def _mod(self) -> OperandValue | NoMatch:
        start = self._cursor.mark()
        result = sequence(
            self._cursor,
            [
                self._operand,
                self._whitespace,
                choice([literal(self._cursor, "mod"), literal(self._cursor, "%")]),
                self._whitespace,
                self._integer,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        value, _, _, _, divisor = result
        if divisor == 0:
            self._cursor.reset(start)
            return NO_MATCH
        if isinstance(value, int):
            return value % divisor  # type: ignore[operator]
        # Decimal remainder truncates toward zero and needs every digit of n
        # in the context precision.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(format(value, "f")))
            return value % divisor  # type: ignore[operator]

    # ------------------------------------------------------------------
    # Range lists
    # ------------------------------------------------------------------

    def range_list(self) -> RangeList | NoMatch:
        """range_list = (range | value) (',' (range | value))*"""
        result = sequence(
            self._cursor,
            [
                self._range_item,
                repeat(
                    self._cursor,
                    0,
                    sequence(self._cursor, [literal(self._cursor, ","), self._range_item]),
                ),
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        first, tail = result
        return (first, *(item for _, item in tail))  # type: ignore[misc]

    def _range(self) -> range | NoMatch:
        """range = value '..' value (inclusive; empty when left > right)"""
        result = sequence(
            self._cursor, [self._integer, literal(self._cursor, ".."), self._integer]
        )()
        if result is NO_MATCH:
            return NO_MATCH
        left, _, right = result
        return range(left, right + 1)  # type: ignore[operator]

    def _value_range(self) -> range | NoMatch:
        value = self._integer()
        if value is NO_MATCH:
            return NO_MATCH
        return range(value, value + 1)

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def relation(self) -> bool | NoMatch:
        """relation = is | not_in | isnot | in | within, tried in that order.

        "is" precedes "is not" so that a failed "is" rewinds before
        "is not" is tried; "!=" followed by a range list is claimed by
        not_in before isnot sees it.
        """
        return self._relation()

    def _is(self) -> bool | NoMatch:
        result = sequence(
            self._cursor,
            [
                self._expression,
                self._whitespace,
                literal(self._cursor, "is"),
                self._whitespace,
                self._integer,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        return result[0] == result[4]

    def _not_in(self) -> bool | NoMatch:
        result = sequence(
            self._cursor,
            [
                self._expression,
                self._whitespace,
                literal(self._cursor, "!="),
                self._whitespace,
                self.range_list,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        return not _contains(result[4], result[0])  # type: ignore[arg-type]

    def _isnot(self) -> bool | NoMatch:
        result = sequence(
            self._cursor,
            [
                self._expression,
                self._whitespace,
                choice([literal(self._cursor, "is not"), literal(self._cursor, "!=")]),
                self._whitespace,
                self._integer,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        return result[0] != result[4]

    def _in(self) -> bool | NoMatch:
        result = sequence(
            self._cursor,
            [
                self._expression,
                repeat(self._cursor, 0, self._not),
                self._whitespace,
                choice([literal(self._cursor, "in"), literal(self._cursor, "=")]),
                self._whitespace,
                self.range_list,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        negated = bool(result[1])
        return _contains(result[5], result[0]) != negated  # type: ignore[arg-type]

    def _within_relation(self) -> bool | NoMatch:
        result = sequence(
            self._cursor,
            [
                self._expression,
                repeat(self._cursor, 0, self._not),
                self._whitespace,
                literal(self._cursor, "within"),
                self._whitespace,
                self.range_list,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        negated = bool(result[1])
        return _within(result[5], result[0]) != negated  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Conditions
    # ------------------------------------------------------------------

    def condition(self) -> bool | NoMatch:
        """condition = or | and_condition

        Each call holds one depth level while it runs. A chain of k relations
        reaches depth k + 1 whether it is joined by "and" or by "or".
        """
        with self._depth:
            return self._condition_alternatives()

    def and_condition(self) -> bool | NoMatch:
        """and_condition = and | relation"""
        with self._depth:
            return self._and_condition_alternatives()

    def _or(self) -> bool | NoMatch:
        """or = and_condition 'or' condition"""
        result = sequence(
            self._cursor,
            [
                self.and_condition,
                self._whitespace,
                self._or_keyword,
                self._whitespace,
                self.condition,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        return bool(result[0]) or bool(result[4])

    def _and(self) -> bool | NoMatch:
        """and = relation 'and' and_condition"""
        result = sequence(
            self._cursor,
            [
                self.relation,
                self._whitespace,
                self._and_keyword,
                self._whitespace,
                self.and_condition,
            ],
        )()
        if result is NO_MATCH:
            return NO_MATCH
        return bool(result[0]) and bool(result[4])
