"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Option errors (values outside their allowed set, bad locales)
        2000-2999: Time errors (time zones, time values)
        3000-3999: Receiver errors (operation invoked on the wrong object)
        4000-4999: Engine errors (missing locale data, internal faults)
    """

    # Option errors (1000-1999)
    INVALID_OPTION_VALUE = 1001
    INVALID_LOCALE = 1002
    INVALID_LOCALE_TYPE = 1003

    # Time errors (2000-2999)
    INVALID_TIME_ZONE = 2001
    INVALID_TIME_VALUE = 2002
    TIME_VALUE_OUT_OF_HOST_RANGE = 2003

    # Receiver errors (3000-3999)
    WRONG_RECEIVER_TYPE = 3001

    # Engine errors (4000-4999)
    MISSING_LOCALE_DATA = 4001
    UNREACHABLE_FIELD = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        option_name: Option that carried the offending value
        received_value: The offending value, as text
        allowed_values: Values the option accepts
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    option_name: str | None = None
    received_value: str | None = None
    allowed_values: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[INVALID_OPTION_VALUE]: Value 'tiny' is out of range for option 'month'
              = option: month
              = received: tiny
              = expected: narrow, long, short, 2-digit, numeric
              = help: Use one of the allowed values

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
