"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.rule_parse_failed("x is 1", 0)))
        RULE_PARSE_FAILED: Parse error at position 0 for rule: x is 1
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            warning[RULE_PARTIALLY_PARSED]: Rule not parsed completely. ...
              --> line 1, column 7
              = rule: n is 1 xyz
              = help: Unparsed remainder: ' xyz'
              = note: see https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules
        """
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> line {diagnostic.span.line}, column {diagnostic.span.column}")

        if diagnostic.rule is not None:
            parts.append(f"  = rule: {self._maybe_sanitize(diagnostic.rule)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            RULE_PARSE_FAILED: Parse error at position 0 for rule: x is 1
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "RULE_PARSE_FAILED", "code_value": 1001, "message": "...", ...}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.rule is not None:
            data["rule"] = self._maybe_sanitize(diagnostic.rule)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
