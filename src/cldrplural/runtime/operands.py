"""CLDR plural operands and their token evaluators.

Derives the operands of UTS #35 (n, i, v, w, f, t, e, c) from a caller's
number, and builds the nullary evaluators the grammar uses as the left-hand
side of every relation.

Visible fraction digits depend on how the number is written, so the
accepted input types differ in what they can express:

    int      -> never has fraction digits
    float    -> shortest repr: 1.5 has v=1, and 1.50 is the same float
    Decimal  -> exact: Decimal("1.50") has v=2
    str      -> parsed as Decimal: "1.50" has v=2

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from cldrplural.diagnostics import PluralOperandError
from cldrplural.diagnostics.templates import ErrorTemplate
from cldrplural.syntax.combinators import NO_MATCH, NoMatch, choice, literal

if TYPE_CHECKING:
    from cldrplural.syntax.combinators import Parser
    from cldrplural.syntax.cursor import Cursor

__all__ = [
    "OPERAND_TOKENS",
    "OperandValue",
    "PluralNumber",
    "PluralOperands",
    "operand_evaluator",
    "operand_parser",
]

type PluralNumber = int | float | Decimal | str
type OperandValue = int | Decimal

# Order in which operand alternatives are tried.
OPERAND_TOKENS: tuple[str, ...] = ("n", "i", "f", "t", "v", "w", "e", "c")


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Operands of a number per UTS #35 Language Plural Rules.

    Attributes:
        n: Absolute value of the source number (integer and decimals)
        i: Integer digits of n
        v: Number of visible fraction digits in n, with trailing zeros
        w: Number of visible fraction digits in n, without trailing zeros
        f: Visible fraction digits in n, with trailing zeros
        t: Visible fraction digits in n, without trailing zeros
        e: Compact decimal exponent (always 0: no compact formatting)
        c: Deprecated synonym for e

    Example:
        >>> ops = PluralOperands.from_number("1.50")
        >>> (ops.i, ops.v, ops.w, ops.f, ops.t)
        (1, 2, 1, 50, 5)
    """

    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int
    e: int = 0
    c: int = 0

    @classmethod
    def from_number(cls, number: PluralNumber) -> PluralOperands:
        """Derive operands from a number.

        Args:
            number: int, float, Decimal or decimal string. Negative values
                are accepted; operands describe the absolute value.

        Returns:
            PluralOperands for the number

        Raises:
            PluralOperandError: NaN, infinity, bool, or a non-numeric string
            TypeError: Any other input type
        """
        value = _to_decimal(number)
        absolute = value.copy_abs()

        # Fixed-point text: Decimal("1E+2") -> "100", Decimal("1.50") -> "1.50"
        digits = format(absolute, "f")
        integer_digits, _, fraction_digits = digits.partition(".")
        trimmed = fraction_digits.rstrip("0")

        return cls(
            n=absolute,
            i=int(integer_digits),
            v=len(fraction_digits),
            w=len(trimmed),
            f=int(fraction_digits or "0"),
            t=int(trimmed or "0"),
        )

    def get(self, token: str) -> OperandValue:
        """Return the operand named by a one-letter token."""
        if token not in OPERAND_TOKENS:
            msg = f"Unknown plural operand: {token!r}"
            raise KeyError(msg)
        value: OperandValue = getattr(self, token)
        return value


def _to_decimal(number: PluralNumber) -> Decimal:
    """Convert accepted input types to a finite Decimal."""
    if isinstance(number, bool):
        raise PluralOperandError(
            ErrorTemplate.number_invalid(repr(number)), input_value=repr(number)
        )

    match number:
        case int():
            return Decimal(number)
        case float():
            if not math.isfinite(number):
                raise PluralOperandError(
                    ErrorTemplate.number_invalid(repr(number)), input_value=repr(number)
                )
            # repr() is the shortest round-tripping form: 1.5, not 1.5000000000000000
            return Decimal(repr(number))
        case Decimal():
            value = number
        case str():
            try:
                value = Decimal(number.strip())
            except InvalidOperation:
                raise PluralOperandError(
                    ErrorTemplate.number_invalid(repr(number)), input_value=repr(number)
                ) from None
        case _:
            raise TypeError(ErrorTemplate.number_type_unsupported(type(number).__name__).message)

    if not value.is_finite():
        raise PluralOperandError(
            ErrorTemplate.number_invalid(repr(number)), input_value=repr(number)
        )
    return value


def operand_evaluator(cursor: Cursor, operands: PluralOperands, token: str) -> Parser[OperandValue]:
    """Build the evaluator for one operand.

    Matches the operand's token at the cursor and, only when it matches,
    reads the derived value. A token mismatch returns NO_MATCH and reads
    nothing.
    """
    match_token = literal(cursor, token)

    def evaluate_operand() -> OperandValue | NoMatch:
        if match_token() is NO_MATCH:
            return NO_MATCH
        return operands.get(token)

    return evaluate_operand


def operand_parser(cursor: Cursor, operands: PluralOperands) -> Parser[OperandValue]:
    """operand = 'n' | 'i' | 'f' | 't' | 'v' | 'w' | 'e' | 'c'"""
    return choice([operand_evaluator(cursor, operands, token) for token in OPERAND_TOKENS])
