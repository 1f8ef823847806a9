"""Diagnostic system for plural rule errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    PluralOperandError,
    PluralRuleError,
    PluralRuleSyntaxError,
    RuleLengthExceededError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "PluralOperandError",
    "PluralRuleError",
    "PluralRuleSyntaxError",
    "RuleLengthExceededError",
    "SourceSpan",
]
