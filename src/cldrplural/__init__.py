"""cldrplural - CLDR plural rule evaluation engine.

Decides whether a CLDR plural rule ("n mod 10 is 1 and n mod 100 is not 11")
holds for a number. Rules are parsed by backtracking combinators with
evaluation fused into the parse: no syntax tree is built and nothing is
cached between calls.

Public API:
    evaluate_rule - True/False for (rule, number)
    evaluate_rule_with_diagnostics - Result plus non-fatal diagnostics
    PluralOperands - CLDR operands (n, i, v, w, f, t, e, c) of a number
    select_plural_category - Category for a number in a locale (Babel data)
    select_from_rules - Category for a number from explicit rule texts
    get_plural_rules - A locale's rule texts (Babel data)

Exceptions:
    PluralRuleError - Base exception class
    PluralRuleSyntaxError - Rule text not recognized by the grammar
    RuleLengthExceededError - Rule text longer than MAX_RULE_LENGTH
    PluralOperandError - Number cannot be turned into operands

Submodules:
    cldrplural.syntax - Cursor and parser combinators
    cldrplural.runtime - Operands, grammar, evaluator, category selection
    cldrplural.diagnostics - Diagnostic codes, templates and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    PluralOperandError,
    PluralRuleError,
    PluralRuleSyntaxError,
    RuleLengthExceededError,
)
from .runtime import (
    PluralOperands,
    evaluate_rule,
    evaluate_rule_with_diagnostics,
    get_plural_rules,
    select_from_rules,
    select_plural_category,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrplural")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Plural rule syntax conformance
__cldr_spec_url__ = "https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"

__all__ = [
    "PluralOperandError",
    "PluralOperands",
    "PluralRuleError",
    "PluralRuleSyntaxError",
    "RuleLengthExceededError",
    "__cldr_spec_url__",
    "__version__",
    "evaluate_rule",
    "evaluate_rule_with_diagnostics",
    "get_plural_rules",
    "select_from_rules",
    "select_plural_category",
]
