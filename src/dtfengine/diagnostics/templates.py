"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://tc39.es/ecma402"

    @staticmethod
    def invalid_option_value(
        option_name: str, value: object, allowed: Iterable[str]
    ) -> Diagnostic:
        """Option value outside its allowed set.

        Args:
            option_name: Name of the option (e.g. "month")
            value: Value supplied by the caller
            allowed: Values the option accepts

        Returns:
            Diagnostic for INVALID_OPTION_VALUE
        """
        allowed_values = tuple(allowed)
        msg = f"Value '{value}' out of range for option '{option_name}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OPTION_VALUE,
            message=msg,
            hint=f"Use one of: {', '.join(allowed_values)}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-getoption",
            option_name=option_name,
            received_value=str(value),
            allowed_values=allowed_values,
        )

    @staticmethod
    def invalid_locale(tag: str) -> Diagnostic:
        """Structurally invalid language tag.

        Args:
            tag: The rejected tag

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Incorrect locale information provided: '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a BCP-47 tag such as 'en-US' or 'de-DE-u-hc-h23'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-canonicalizelocalelist",
            received_value=tag,
        )

    @staticmethod
    def invalid_locale_type(value: object) -> Diagnostic:
        """Locale list entry that is not a string.

        Args:
            value: The rejected entry

        Returns:
            Diagnostic for INVALID_LOCALE_TYPE
        """
        type_name = type(value).__name__
        msg = f"Language ID should be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_TYPE,
            message=msg,
            hint="Pass a string or an iterable of strings",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-canonicalizelocalelist",
            received_value=type_name,
        )

    @staticmethod
    def invalid_time_zone(time_zone: str) -> Diagnostic:
        """Time zone cannot be canonicalized or does not name a real zone.

        Args:
            time_zone: The time zone as supplied by the caller

        Returns:
            Diagnostic for INVALID_TIME_ZONE
        """
        msg = f"Invalid time zone specified: {time_zone}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIME_ZONE,
            message=msg,
            hint="Use 'UTC', an 'Etc/GMT+N' offset, or an IANA Area/Location name",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-isvalidtimezonename",
            option_name="timeZone",
            received_value=time_zone,
        )

    @staticmethod
    def invalid_time_value(value: object) -> Diagnostic:
        """Timestamp is NaN or outside the time-clip range.

        Args:
            value: The rejected timestamp

        Returns:
            Diagnostic for INVALID_TIME_VALUE
        """
        msg = f"Invalid time value: {value}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIME_VALUE,
            message=msg,
            hint="Timestamps are finite epoch milliseconds within +/-8.64e15",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-formatdatetime",
            received_value=str(value),
        )

    @staticmethod
    def time_value_out_of_host_range(value: float) -> Diagnostic:
        """Timestamp is valid but cannot be represented as a Python datetime.

        Args:
            value: The clipped timestamp in milliseconds

        Returns:
            Diagnostic for TIME_VALUE_OUT_OF_HOST_RANGE
        """
        msg = f"Time value {value} is outside the datetime range (years 1-9999)"
        return Diagnostic(
            code=DiagnosticCode.TIME_VALUE_OUT_OF_HOST_RANGE,
            message=msg,
            hint="Format timestamps between 0001-01-01 and 9999-12-31",
            received_value=str(value),
        )

    @staticmethod
    def wrong_receiver_type(operation: str, value: object) -> Diagnostic:
        """Operation invoked on an object without a resolved configuration.

        Args:
            operation: Name of the invoked operation
            value: The receiver that was passed

        Returns:
            Diagnostic for WRONG_RECEIVER_TYPE
        """
        type_name = type(value).__name__
        msg = f"Method {operation} called on incompatible receiver {type_name}"
        return Diagnostic(
            code=DiagnosticCode.WRONG_RECEIVER_TYPE,
            message=msg,
            hint="Create a configuration with initialize() first",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#sec-unwrapdatetimeformat",
            received_value=type_name,
        )

    @staticmethod
    def missing_locale_data(locale: str) -> Diagnostic:
        """Formatter could not be built even for the base locale.

        Args:
            locale: The base locale that failed

        Returns:
            Diagnostic for MISSING_LOCALE_DATA
        """
        msg = f"Failed to create date format for '{locale}'; is CLDR data installed?"
        return Diagnostic(
            code=DiagnosticCode.MISSING_LOCALE_DATA,
            message=msg,
            hint="Reinstall Babel so its locale data files are present",
        )

    @staticmethod
    def unreachable_field(field_name: str) -> Diagnostic:
        """Formatted output contains a field no option can request.

        Args:
            field_name: Name of the unexpected field

        Returns:
            Diagnostic for UNREACHABLE_FIELD
        """
        msg = f"Field {field_name} cannot appear in date/time format output"
        return Diagnostic(
            code=DiagnosticCode.UNREACHABLE_FIELD,
            message=msg,
        )
