"""Evaluate a CLDR plural rule for a number.

Entry points:
    evaluate_rule: True/False for (rule, number); raises on unparseable rules
    evaluate_rule_with_diagnostics: same, plus the non-fatal diagnostics

Every call builds a fresh cursor, grammar and depth guard, so evaluations
share no state and can run concurrently.

Python 3.13+.
"""

from __future__ import annotations

import logging

from cldrplural.constants import MAX_RULE_LENGTH
from cldrplural.core import DepthGuard
from cldrplural.diagnostics import Diagnostic, PluralRuleSyntaxError, RuleLengthExceededError
from cldrplural.diagnostics.templates import ErrorTemplate
from cldrplural.runtime.grammar import PluralRuleGrammar
from cldrplural.runtime.operands import PluralNumber, PluralOperands
from cldrplural.syntax.combinators import NO_MATCH
from cldrplural.syntax.cursor import Cursor

__all__ = ["evaluate_rule", "evaluate_rule_with_diagnostics", "strip_samples"]

logger = logging.getLogger(__name__)


def strip_samples(rule: str) -> str:
    """Remove @integer / @decimal sample annotations and surrounding whitespace.

    Example:
        >>> strip_samples("i = 1 and v = 0 @integer 1")
        'i = 1 and v = 0'
        >>> strip_samples(" @integer 0, 2~16, 100, 1000, …")
        ''
    """
    condition, _, _ = rule.partition("@")
    return condition.strip()


def evaluate_rule_with_diagnostics(
    rule: str, number: PluralNumber
) -> tuple[bool, tuple[Diagnostic, ...]]:
    """Evaluate a plural rule and report non-fatal diagnostics.

    Args:
        rule: CLDR plural rule text, sample annotations allowed
        number: Number to classify (see PluralOperands.from_number)

    Returns:
        Tuple of (result, diagnostics). diagnostics holds a warning when
        only a prefix of the rule was recognized; the result is then the
        value of that prefix.

    Raises:
        PluralRuleSyntaxError: No grammar production matched the rule
        RuleLengthExceededError: The rule exceeds MAX_RULE_LENGTH
        PluralOperandError: number cannot be turned into operands
        DepthLimitExceededError: The rule chains more relations than
            MAX_DEPTH allows

    Example:
        >>> evaluate_rule_with_diagnostics("n is 1 junk", 1)
        (True, (Diagnostic(code=<DiagnosticCode.RULE_PARTIALLY_PARSED: 1002>, ...),))
    """
    text = strip_samples(rule)

    # Empty rule (the implicit "other" category) holds for every number.
    if not text:
        return True, ()

    if len(text) > MAX_RULE_LENGTH:
        raise RuleLengthExceededError(
            ErrorTemplate.rule_too_long(len(text), MAX_RULE_LENGTH),
            length=len(text),
            max_length=MAX_RULE_LENGTH,
        )

    # The number is validated before the rule is parsed, so an invalid
    # number is reported even when the rule would not parse.
    operands = PluralOperands.from_number(number)
    cursor = Cursor(text)
    grammar = PluralRuleGrammar(cursor, operands, DepthGuard())
    result = grammar.condition()

    if result is NO_MATCH:
        raise PluralRuleSyntaxError(
            ErrorTemplate.rule_parse_failed(text, cursor.furthest),
            rule=text,
            position=cursor.furthest,
        )

    diagnostics: tuple[Diagnostic, ...] = ()
    if not cursor.is_eof:
        diagnostic = ErrorTemplate.rule_partially_parsed(text, cursor.pos)
        logger.warning(
            "Rule not parsed completely. Parser stopped at '%s' for rule: %s (unparsed: '%s')",
            text[: cursor.pos],
            text,
            cursor.remaining,
            extra={"diagnostic": diagnostic},
        )
        diagnostics = (diagnostic,)

    logger.debug("Rule '%s' for %r evaluated to %s", text, number, result)
    return result, diagnostics


def evaluate_rule(rule: str, number: PluralNumber) -> bool:
    """Evaluate a CLDR plural rule for a number.

    Args:
        rule: CLDR plural rule text. Anything from the first '@' on
            (sample annotations) is ignored.
        number: int, float, Decimal or decimal string. Use Decimal or str
            when visible trailing zeros matter ("1.50" has v = 2).

    Returns:
        True if the rule's condition holds for the number

    Raises:
        PluralRuleSyntaxError: No grammar production matched the rule

    Example:
        >>> evaluate_rule("n mod 10 is 1 and n mod 100 is not 11", 21)
        True
        >>> evaluate_rule("n mod 10 is 1 and n mod 100 is not 11", 11)
        False
        >>> evaluate_rule("i = 1 and v = 0 @integer 1", "1.0")
        False
    """
    result, _ = evaluate_rule_with_diagnostics(rule, number)
    return result
