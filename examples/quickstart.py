"""Quickstart Example - Evaluating CLDR Plural Rules.

Demonstrates:
1. Evaluating single rules for numbers
2. Visible fraction digits (int vs Decimal vs str)
3. Category selection from a locale's CLDR data
4. Category selection from explicit rule texts
5. Error handling and non-fatal diagnostics

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from cldrplural import (
    PluralRuleSyntaxError,
    evaluate_rule,
    evaluate_rule_with_diagnostics,
    select_from_rules,
    select_plural_category,
)
from cldrplural.diagnostics import DiagnosticFormatter, OutputFormat


# Example 1: Single rules
def example_1_single_rules() -> None:
    """Example 1: Does a rule hold for a number?"""
    print("=" * 60)
    print("Example 1: Single Rules")
    print("=" * 60)

    rule = "n mod 10 is 1 and n mod 100 is not 11"
    for number in (1, 11, 21, 111):
        print(f"  {rule!r} for {number}: {evaluate_rule(rule, number)}")

    print(f"  'n within 0..5' for 2.5: {evaluate_rule('n within 0..5', Decimal('2.5'))}")
    print(f"  'n in 0..5' for 2.5: {evaluate_rule('n in 0..5', Decimal('2.5'))}")


# Example 2: Visible fraction digits
def example_2_fraction_digits() -> None:
    """Example 2: How a number is written changes its operands."""
    print("\n" + "=" * 60)
    print("Example 2: Visible Fraction Digits")
    print("=" * 60)

    rule = "i = 1 and v = 0 @integer 1"
    for number in (1, 1.0, Decimal("1.00"), "1"):
        print(f"  {rule!r} for {number!r}: {evaluate_rule(rule, number)}")


# Example 3: Locale data
def example_3_locale_categories() -> None:
    """Example 3: Categories from Babel's CLDR data."""
    print("\n" + "=" * 60)
    print("Example 3: Locale Categories")
    print("=" * 60)

    for locale in ("en-US", "ru", "ar", "lv", "ja"):
        categories = [select_plural_category(n, locale) for n in (0, 1, 2, 5, 11, 21)]
        print(f"  {locale:6} 0, 1, 2, 5, 11, 21 -> {', '.join(categories)}")


# Example 4: Explicit rules
def example_4_explicit_rules() -> None:
    """Example 4: Categories from rule texts the caller supplies."""
    print("\n" + "=" * 60)
    print("Example 4: Explicit Rules")
    print("=" * 60)

    rules = {
        "one": "v = 0 and i % 10 = 1 and i % 100 != 11 @integer 1, 21, 31",
        "few": "v = 0 and i % 10 = 2..4 and i % 100 != 12..14 @integer 2~4, 22~24",
        "many": "v = 0 and i % 10 = 0 or v = 0 and i % 10 = 5..9 or v = 0 and i % 100 = 11..14",
    }
    for number in (1, 3, 5, 12, "1.5"):
        print(f"  {number!r}: {select_from_rules(rules, number)}")


# Example 5: Errors and diagnostics
def example_5_errors() -> None:
    """Example 5: Hard failures raise; trailing text is a warning."""
    print("\n" + "=" * 60)
    print("Example 5: Errors and Diagnostics")
    print("=" * 60)

    try:
        evaluate_rule("x is 1", 1)
    except PluralRuleSyntaxError as e:
        print(f"  [ERROR] position {e.position} in {e.rule!r}")
        print(str(e))

    result, diagnostics = evaluate_rule_with_diagnostics("n is 1 and junk", 1)
    formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
    print(f"\n  Result of recognized prefix: {result}")
    for diagnostic in diagnostics:
        print(f"  [WARNING] {formatter.format(diagnostic)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    example_1_single_rules()
    example_2_fraction_digits()
    example_3_locale_categories()
    example_4_explicit_rules()
    example_5_errors()
