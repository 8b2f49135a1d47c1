"""DateTimeFormat exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Concrete errors also derive from the matching builtin (ValueError, TypeError,
RuntimeError) so callers can catch them without importing this module.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateTimeFormatError(Exception):
    """Base exception for all DTFEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateTimeFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidOptionValueError(DateTimeFormatError, ValueError):
    """Option value outside its allowed set.

    Raised during resolution; no configuration is produced.
    """

    def __init__(self, message: str | Diagnostic, *, option_name: str = "") -> None:
        """Initialize InvalidOptionValueError.

        Args:
            message: Error message string OR Diagnostic object
            option_name: Name of the offending option
        """
        super().__init__(message)
        self.option_name = option_name


class InvalidLocaleError(DateTimeFormatError, ValueError):
    """Requested locale list holds a malformed tag or a non-string entry."""


class InvalidTimeZoneError(DateTimeFormatError, ValueError):
    """Time zone could not be canonicalized or is not a real zone.

    Attributes:
        time_zone: The time zone string as supplied by the caller
    """

    def __init__(self, message: str | Diagnostic, *, time_zone: str = "") -> None:
        """Initialize InvalidTimeZoneError.

        Args:
            message: Error message string OR Diagnostic object
            time_zone: The rejected time zone string
        """
        super().__init__(message)
        self.time_zone = time_zone


class InvalidTimeValueError(DateTimeFormatError, ValueError):
    """Timestamp is NaN or outside the representable range at format time."""


class WrongReceiverTypeError(DateTimeFormatError, TypeError):
    """Operation invoked on a value lacking a resolved configuration."""


class MissingLocaleDataError(DateTimeFormatError, RuntimeError):
    """Format engine cannot build even a base-locale formatter.

    Indicates a deployment defect (locale data not installed), not a caller
    error. Construction is aborted rather than returning a degraded formatter.
    """


class UnreachableFieldError(DateTimeFormatError, RuntimeError):
    """Format engine reported a field that no option can request.

    Internal error: generated patterns only contain fields reachable from
    the date/time options.
    """
