"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# C0 controls and DEL are escaped so user-supplied values cannot forge log lines.
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)}


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
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.invalid_time_zone("Mars/Olympus")
        >>> print(formatter.format(diagnostic))
        error[INVALID_TIME_ZONE]: Invalid time zone specified: Mars/Olympus
          = option: timeZone
          = received: Mars/Olympus
          = help: Use 'UTC', an 'Etc/GMT+N' offset, or an IANA Area/Location name
          = note: see https://tc39.es/ecma402/#sec-isvalidtimezonename

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        INVALID_TIME_ZONE: Invalid time zone specified: Mars/Olympus
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
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

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style."""
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        message = self._clean(diagnostic.message)
        parts = [f"{severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.option_name:
            parts.append(f"  = option: {diagnostic.option_name}")

        if diagnostic.received_value is not None:
            parts.append(f"  = received: {self._clean(diagnostic.received_value)}")

        if diagnostic.allowed_values:
            parts.append(f"  = expected: {', '.join(diagnostic.allowed_values)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON."""
        data: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.option_name:
            data["option_name"] = diagnostic.option_name

        if diagnostic.received_value is not None:
            data["received_value"] = self._maybe_sanitize(diagnostic.received_value)

        if diagnostic.allowed_values:
            data["allowed_values"] = list(diagnostic.allowed_values)

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        """Escape control characters, then truncate if sanitizing."""
        return self._maybe_sanitize(text.translate(_CONTROL_ESCAPES))

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
