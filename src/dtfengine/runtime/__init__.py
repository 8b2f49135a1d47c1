"""Option resolution, locale negotiation, formatting, and reporting.

Python 3.13+.
"""

from .cache import (
    DefaultFormatterCache,
    to_locale_date_string,
    to_locale_string,
    to_locale_time_string,
)
from .datetime_format import (
    DateTimeFormatConfig,
    TimeValue,
    format_date_time,
    format_to_parts,
    initialize,
    time_clip,
    unwrap_date_time_format,
)
from .locale_resolution import ResolvedLocale, canonicalize_locale_list, resolve_locale
from .parts import FormattedPart, part_type_for, to_parts
from .reporting import resolved_options

__all__ = [
    "DateTimeFormatConfig",
    "DefaultFormatterCache",
    "FormattedPart",
    "ResolvedLocale",
    "TimeValue",
    "canonicalize_locale_list",
    "format_date_time",
    "format_to_parts",
    "initialize",
    "part_type_for",
    "resolve_locale",
    "resolved_options",
    "time_clip",
    "to_locale_date_string",
    "to_locale_string",
    "to_locale_time_string",
    "to_parts",
    "unwrap_date_time_format",
]
