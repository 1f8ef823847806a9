"""Plural rule runtime package.

Provides operand derivation, the fused grammar/evaluator, and Babel-backed
category selection. Depends on syntax package for parsing primitives.

Python 3.13+.
"""

from .evaluator import evaluate_rule, evaluate_rule_with_diagnostics, strip_samples
from .grammar import PluralRuleGrammar, RangeList, expand_range_list
from .operands import OPERAND_TOKENS, PluralNumber, PluralOperands
from .plural_rules import get_plural_rules, select_from_rules, select_plural_category

__all__ = [
    "OPERAND_TOKENS",
    "PluralNumber",
    "PluralOperands",
    "PluralRuleGrammar",
    "RangeList",
    "evaluate_rule",
    "evaluate_rule_with_diagnostics",
    "expand_range_list",
    "get_plural_rules",
    "select_from_rules",
    "select_plural_category",
    "strip_samples",
]
