"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from cldrplural.syntax.cursor import Cursor

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _rule_span(rule: str, start: int, end: int) -> SourceSpan:
    """Build a span for a position range inside a rule."""
    line, column = Cursor(rule).compute_line_col(start)
    return SourceSpan(start=start, end=end, line=line, column=column)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # Base documentation URL (UTS #35, Part 3: Numbers)
    _DOCS_BASE = "https://unicode.org/reports/tr35/tr35-numbers.html"

    # =========================================================================
    # RULE SYNTAX ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def rule_parse_failed(rule: str, position: int) -> Diagnostic:
        """No grammar production matched the rule.

        Args:
            rule: The rule text (sample annotations removed)
            position: Furthest position reached by the parser

        Returns:
            Diagnostic for RULE_PARSE_FAILED
        """
        msg = f"Parse error at position {position} for rule: {rule}"
        return Diagnostic(
            code=DiagnosticCode.RULE_PARSE_FAILED,
            message=msg,
            span=_rule_span(rule, position, len(rule)),
            hint="Rules start with an operand (n, i, f, t, v, w, e, c) followed by a relation",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Language_Plural_Rules",
            rule=rule,
        )

    @staticmethod
    def rule_partially_parsed(rule: str, position: int) -> Diagnostic:
        """Grammar matched a strict prefix of the rule.

        Args:
            rule: The rule text (sample annotations removed)
            position: Position where the parser stopped

        Returns:
            Warning diagnostic for RULE_PARTIALLY_PARSED
        """
        msg = (
            f"Rule not parsed completely. Parser stopped at "
            f"'{rule[:position]}' for rule: {rule}"
        )
        return Diagnostic(
            code=DiagnosticCode.RULE_PARTIALLY_PARSED,
            message=msg,
            span=_rule_span(rule, position, len(rule)),
            hint=f"Unparsed remainder: '{rule[position:]}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Language_Plural_Rules",
            rule=rule,
            severity="warning",
        )

    @staticmethod
    def rule_too_long(length: int, max_length: int) -> Diagnostic:
        """Rule exceeds the input size limit.

        Args:
            length: Actual rule length in characters
            max_length: Configured maximum

        Returns:
            Diagnostic for RULE_TOO_LONG
        """
        msg = f"Rule length {length} exceeds maximum of {max_length} characters"
        return Diagnostic(
            code=DiagnosticCode.RULE_TOO_LONG,
            message=msg,
            span=None,
            hint="CLDR plural rules are short; check that the right text was passed",
        )

    # =========================================================================
    # OPERAND ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def number_invalid(value: str) -> Diagnostic:
        """Number cannot be represented as plural operands.

        Args:
            value: repr() of the rejected value

        Returns:
            Diagnostic for NUMBER_INVALID
        """
        msg = f"Cannot derive plural operands from {value}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_INVALID,
            message=msg,
            span=None,
            hint="Pass a finite decimal number such as 3, 1.5, Decimal('1.50') or '1.50'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Operands",
        )

    @staticmethod
    def number_type_unsupported(type_name: str) -> Diagnostic:
        """Number has a type that is not accepted.

        Args:
            type_name: Name of the rejected type

        Returns:
            Diagnostic for NUMBER_TYPE_UNSUPPORTED
        """
        msg = f"Unsupported number type: {type_name}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_TYPE_UNSUPPORTED,
            message=msg,
            span=None,
            hint="Use int, float, Decimal or a decimal string",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Operands",
        )

    # =========================================================================
    # EVALUATION LIMITS (3000-3999)
    # =========================================================================

    @staticmethod
    def rule_depth_exceeded(max_depth: int) -> Diagnostic:
        """Condition nesting exceeded the depth limit.

        Args:
            max_depth: Maximum allowed nesting depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum condition depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Reduce the number of chained 'and'/'or' relations",
        )

    # =========================================================================
    # LOCALE LOOKUP (4000-4999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale not known to Babel's CLDR data.

        Args:
            locale_code: The locale code that was not recognized

        Returns:
            Warning diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            span=None,
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'pt_BR'",
            severity="warning",
        )
