"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Rule syntax errors (parser failures)
        2000-2999: Operand errors (unusable numeric subjects)
        3000-3999: Evaluation limits
        4000-4999: Locale lookup
    """

    # Rule syntax errors (1000-1999)
    RULE_PARSE_FAILED = 1001
    RULE_PARTIALLY_PARSED = 1002
    RULE_TOO_LONG = 1003

    # Operand errors (2000-2999)
    NUMBER_INVALID = 2001
    NUMBER_TYPE_UNSUPPORTED = 2002

    # Evaluation limits (3000-3999)
    MAX_DEPTH_EXCEEDED = 3001

    # Locale lookup (4000-4999)
    LOCALE_UNKNOWN = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a rule for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1, or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    both humans and tools to locate the problem inside a rule.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the rule (None for non-syntax errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        rule: The rule text the diagnostic refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    rule: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[RULE_PARSE_FAILED]: Parse error at position 0 for rule: x is 1
              --> line 1, column 1
              = rule: x is 1
              = help: Rules start with an operand (n, i, f, t, v, w, e, c)

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
