"""Tests for runtime/operands.py - CLDR operand derivation and evaluators.

Operand values follow UTS #35: visible fraction digits depend on the
written form of the number, so Decimal and str inputs keep trailing zeros
while floats use their shortest repr.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from cldrplural.diagnostics import DiagnosticCode, PluralOperandError
from cldrplural.runtime.operands import (
    OPERAND_TOKENS,
    PluralOperands,
    operand_evaluator,
    operand_parser,
)
from cldrplural.syntax.combinators import NO_MATCH
from cldrplural.syntax.cursor import Cursor

# ============================================================================
# Derivation
# ============================================================================


class TestOperandDerivation:
    """PluralOperands.from_number for representative inputs."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            # number, (i, v, w, f, t)
            (1, (1, 0, 0, 0, 0)),
            ("1.0", (1, 1, 0, 0, 0)),
            ("1.00", (1, 2, 0, 0, 0)),
            ("1.3", (1, 1, 1, 3, 3)),
            ("1.30", (1, 2, 1, 30, 3)),
            ("1.03", (1, 2, 2, 3, 3)),
            ("1.230", (1, 3, 2, 230, 23)),
            (Decimal("1.50"), (1, 2, 1, 50, 5)),
            ("1.50", (1, 2, 1, 50, 5)),
            (1.5, (1, 1, 1, 5, 5)),
            (0.25, (0, 2, 2, 25, 25)),
            ("1200.50", (1200, 2, 1, 50, 5)),
        ],
    )
    def test_uts35_table(self, number: object, expected: tuple[int, ...]) -> None:
        """Operands match the UTS #35 examples."""
        ops = PluralOperands.from_number(number)  # type: ignore[arg-type]
        assert (ops.i, ops.v, ops.w, ops.f, ops.t) == expected

    def test_n_keeps_decimals(self) -> None:
        """n is the absolute value, fraction included."""
        assert PluralOperands.from_number("2.5").n == Decimal("2.5")

    def test_n_equals_integer_for_integral_decimal(self) -> None:
        """n of 1.0 compares equal to 1."""
        assert PluralOperands.from_number("1.0").n == 1

    def test_negative_numbers_use_absolute_value(self) -> None:
        """Operands describe the absolute value."""
        ops = PluralOperands.from_number(-3.25)
        assert ops.n == Decimal("3.25")
        assert ops.i == 3
        assert ops.f == 25

    def test_exponent_decimal_is_expanded(self) -> None:
        """Decimal("1E+2") is 100 with no fraction digits."""
        ops = PluralOperands.from_number(Decimal("1E+2"))
        assert (ops.i, ops.v) == (100, 0)

    def test_small_float_uses_fixed_point(self) -> None:
        """Floats printed in scientific notation are expanded."""
        ops = PluralOperands.from_number(1e-7)
        assert ops.i == 0
        assert ops.v == 7
        assert ops.f == 1

    def test_string_is_stripped(self) -> None:
        """Surrounding whitespace in a numeric string is ignored."""
        assert PluralOperands.from_number("  5.0 ").v == 1

    def test_high_precision_is_not_rounded(self) -> None:
        """Derivation does not round to the decimal context precision."""
        ops = PluralOperands.from_number("1." + "0" * 40 + "1")
        assert ops.v == 41
        assert ops.t == 1

    def test_compact_exponent_is_zero(self) -> None:
        """e and c are 0 for numbers without compact formatting."""
        ops = PluralOperands.from_number(1_000_000)
        assert ops.e == 0
        assert ops.c == 0

    @given(value=st.integers(min_value=0, max_value=10**12))
    @example(value=0)
    def test_integers_have_no_fraction(self, value: int) -> None:
        """Property: integers have v = w = f = t = 0 and i = n."""
        event(f"digits={len(str(value))}")
        ops = PluralOperands.from_number(value)
        assert ops.n == ops.i == value
        assert ops.v == ops.w == ops.f == ops.t == 0

    @given(
        integer=st.integers(min_value=0, max_value=10**6),
        fraction=st.text(alphabet="0123456789", min_size=1, max_size=8),
    )
    def test_string_fraction_digits(self, integer: int, fraction: str) -> None:
        """Property: w <= v, and t is f with trailing zeros removed."""
        event(f"v={len(fraction)}")
        ops = PluralOperands.from_number(f"{integer}.{fraction}")
        assert ops.i == integer
        assert ops.v == len(fraction)
        assert ops.w <= ops.v
        assert ops.f == int(fraction)
        assert ops.t == int(fraction.rstrip("0") or "0")


# ============================================================================
# Invalid input
# ============================================================================


class TestOperandInputValidation:
    """Rejected numeric subjects."""

    @pytest.mark.parametrize(
        "value", [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity")]
    )
    def test_non_finite_rejected(self, value: object) -> None:
        """NaN and infinities cannot be classified."""
        with pytest.raises(PluralOperandError) as exc_info:
            PluralOperands.from_number(value)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NUMBER_INVALID

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "nan", "1..2"])
    def test_non_numeric_string_rejected(self, value: str) -> None:
        """Strings must be decimal numbers."""
        with pytest.raises(PluralOperandError) as exc_info:
            PluralOperands.from_number(value)
        assert exc_info.value.input_value == repr(value)

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_rejected(self, value: bool) -> None:
        """Booleans are not numbers here, even though bool subclasses int."""
        with pytest.raises(PluralOperandError):
            PluralOperands.from_number(value)

    def test_operand_error_is_value_error(self) -> None:
        """PluralOperandError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Cannot derive plural operands"):
            PluralOperands.from_number("twelve")

    @pytest.mark.parametrize("value", [None, [1], 1 + 2j, b"1"])
    def test_unsupported_type(self, value: object) -> None:
        """Other types raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported number type"):
            PluralOperands.from_number(value)  # type: ignore[arg-type]


# ============================================================================
# Evaluators
# ============================================================================


class TestOperandEvaluators:
    """Token-matching evaluators used by the grammar."""

    def test_token_order(self) -> None:
        """Operands are tried as n, i, f, t, v, w, then e, c."""
        assert OPERAND_TOKENS == ("n", "i", "f", "t", "v", "w", "e", "c")

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("n", Decimal("1.50")), ("i", 1), ("f", 50), ("t", 5), ("v", 2), ("w", 1)],
    )
    def test_each_token_reads_its_operand(self, token: str, expected: object) -> None:
        """Every token yields its own derivation."""
        ops = PluralOperands.from_number("1.50")
        cursor = Cursor(f"{token} is 1")
        assert operand_parser(cursor, ops)() == expected
        assert cursor.pos == 1

    def test_w_has_its_own_token(self) -> None:
        """'w' reads w, not v."""
        ops = PluralOperands.from_number("2.10")
        assert operand_parser(Cursor("w"), ops)() == 1
        assert operand_parser(Cursor("v"), ops)() == 2

    def test_mismatch_returns_no_match(self) -> None:
        """A different token yields NO_MATCH and leaves the cursor."""
        ops = PluralOperands.from_number(3)
        cursor = Cursor("x is 1")
        assert operand_evaluator(cursor, ops, "n")() is NO_MATCH
        assert operand_parser(cursor, ops)() is NO_MATCH
        assert cursor.pos == 0

    def test_get_unknown_token(self) -> None:
        """get() only knows the plural operand tokens."""
        with pytest.raises(KeyError):
            PluralOperands.from_number(1).get("x")
