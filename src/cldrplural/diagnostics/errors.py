"""Plural rule exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PluralRuleError(Exception):
    """Base exception for all plural rule errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralRuleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PluralRuleSyntaxError(PluralRuleError):
    """Rule text could not be recognized by the grammar.

    Raised only when no grammar production matches any prefix of the rule.
    A rule whose prefix parses but leaves trailing text is NOT an error;
    it produces a warning diagnostic instead.

    Attributes:
        rule: The rule text (sample annotations already removed)
        position: Furthest cursor position the parser reached
    """

    def __init__(self, message: str | Diagnostic, *, rule: str, position: int) -> None:
        """Initialize PluralRuleSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            rule: The rule text that failed to parse
            position: Furthest position reached before failing
        """
        super().__init__(message)
        self.rule = rule
        self.position = position


class PluralOperandError(PluralRuleError, ValueError):
    """Numeric subject cannot be turned into plural operands.

    Examples:
    - NaN or infinity
    - A string that is not a decimal number

    Attributes:
        input_value: repr() of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize PluralOperandError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: repr() of the rejected value
        """
        super().__init__(message)
        self.input_value = input_value


class RuleLengthExceededError(PluralRuleError):
    """Rule text is longer than MAX_RULE_LENGTH.

    Raised before parsing starts, so it says nothing about whether the
    rule is well-formed.

    Attributes:
        length: Length of the rejected rule in characters
        max_length: Configured maximum
    """

    def __init__(self, message: str | Diagnostic, *, length: int, max_length: int) -> None:
        """Initialize RuleLengthExceededError.

        Args:
            message: Error message string OR Diagnostic object
            length: Length of the rejected rule
            max_length: Configured maximum
        """
        super().__init__(message)
        self.length = length
        self.max_length = max_length
