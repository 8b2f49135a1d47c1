"""Diagnostic system for DateTimeFormat errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DateTimeFormatError,
    InvalidLocaleError,
    InvalidOptionValueError,
    InvalidTimeValueError,
    InvalidTimeZoneError,
    MissingLocaleDataError,
    UnreachableFieldError,
    WrongReceiverTypeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateTimeFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidLocaleError",
    "InvalidOptionValueError",
    "InvalidTimeValueError",
    "InvalidTimeZoneError",
    "MissingLocaleDataError",
    "OutputFormat",
    "UnreachableFieldError",
    "WrongReceiverTypeError",
]
