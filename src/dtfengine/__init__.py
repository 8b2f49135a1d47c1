"""DTFEngine - locale-aware date/time formatting with Intl.DateTimeFormat semantics.

Resolves locales and formatting options into an immutable configuration,
then renders epoch-millisecond timestamps or datetimes as strings or typed
parts. Locale data and rendering come from Babel (CLDR).

Public API:
    initialize - Resolve locales and options into a DateTimeFormatConfig
    format_date_time - Format a time value
    format_to_parts - Format a time value into typed parts
    resolved_options - Caller-visible snapshot of a configuration
    canonicalize_time_zone - Canonical casing of a time zone id ("" if invalid)
    to_locale_string / to_locale_date_string / to_locale_time_string -
        One-shot helpers with an optional DefaultFormatterCache
    get_available_locales - Locales with formatting data

Exceptions:
    DateTimeFormatError - Base exception class
    InvalidOptionValueError, InvalidLocaleError, InvalidTimeZoneError,
    InvalidTimeValueError, WrongReceiverTypeError, MissingLocaleDataError

Submodules:
    dtfengine.core - Time zone canonicalization and skeleton tables
    dtfengine.engine - FormatEngine protocol and the Babel implementation
    dtfengine.runtime - Option resolution, formatting, and reporting
    dtfengine.diagnostics - Error types, codes, and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import canonicalize_time_zone
from .diagnostics import (
    DateTimeFormatError,
    InvalidLocaleError,
    InvalidOptionValueError,
    InvalidTimeValueError,
    InvalidTimeZoneError,
    MissingLocaleDataError,
    UnreachableFieldError,
    WrongReceiverTypeError,
)
from .engine import DEFAULT_ENGINE, BabelFormatEngine, FormatEngine
from .enums import HourCycle, PartType
from .runtime import (
    DateTimeFormatConfig,
    DefaultFormatterCache,
    FormattedPart,
    format_date_time,
    format_to_parts,
    initialize,
    resolved_options,
    to_locale_date_string,
    to_locale_string,
    to_locale_time_string,
    unwrap_date_time_format,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("dtfengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def get_available_locales(engine: FormatEngine | None = None) -> frozenset[str]:
    """BCP-47 tags of every locale the engine can format for."""
    return (engine if engine is not None else DEFAULT_ENGINE).get_available_locales()


__all__ = [
    "BabelFormatEngine",
    "DateTimeFormatConfig",
    "DateTimeFormatError",
    "DefaultFormatterCache",
    "FormatEngine",
    "FormattedPart",
    "HourCycle",
    "InvalidLocaleError",
    "InvalidOptionValueError",
    "InvalidTimeValueError",
    "InvalidTimeZoneError",
    "MissingLocaleDataError",
    "PartType",
    "UnreachableFieldError",
    "WrongReceiverTypeError",
    "__version__",
    "canonicalize_time_zone",
    "format_date_time",
    "format_to_parts",
    "get_available_locales",
    "initialize",
    "resolved_options",
    "to_locale_date_string",
    "to_locale_string",
    "to_locale_time_string",
    "unwrap_date_time_format",
]
