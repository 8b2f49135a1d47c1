"""DateTimeFormat configuration: initialization and formatting.

initialize() runs the whole resolution pipeline once and freezes the
result into a DateTimeFormatConfig:

    locale list -> option defaults -> locale negotiation -> hour cycle
    -> time zone -> calendar -> skeleton -> pattern -> formatter
    -> final hour cycle -> "hc" reconciliation

Construction is all-or-nothing: any error aborts it and no configuration
exists. A configuration is immutable and safe for concurrent formatting.

Time values are epoch milliseconds. They are clipped the ECMAScript way
(truncated toward zero, limited to +/-8.64e15) before rendering; Python's
datetime additionally limits rendering to years 1-9999.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TypeAlias

from dtfengine.constants import MAX_TIME_VALUE_MS
from dtfengine.core.skeleton import build_skeleton, hour_cycle_default
from dtfengine.core.timezones import canonicalize_time_zone
from dtfengine.diagnostics import (
    ErrorTemplate,
    InvalidTimeValueError,
    InvalidTimeZoneError,
    MissingLocaleDataError,
    WrongReceiverTypeError,
)
from dtfengine.engine import DEFAULT_ENGINE, Calendar, FieldSpan, FormatEngine, Formatter
from dtfengine.enums import DefaultsOption, HourCycle, RequiredOption
from dtfengine.runtime import reporting
from dtfengine.runtime.locale_resolution import (
    ResolvedLocale,
    canonicalize_locale_list,
    resolve_locale,
)
from dtfengine.runtime.options import (
    extract_fields,
    finalize_hour_cycle,
    get_bool_option,
    get_format_matcher,
    get_hour_cycle_option,
    get_locale_matcher,
    get_string_option,
    negotiate_hour_cycle,
    reconcile_hour_cycle_extension,
    resolve_defaults,
)
from dtfengine.runtime.parts import FormattedPart, to_parts

__all__ = [
    "DateTimeFormatConfig",
    "TimeValue",
    "format_date_time",
    "format_to_parts",
    "initialize",
    "time_clip",
    "unwrap_date_time_format",
]

logger = logging.getLogger(__name__)

TimeValue: TypeAlias = datetime | int | float | None

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)

# Skeleton whose pattern reveals the locale's preferred hour cycle.
_LOCALE_HOUR_SKELETON = "jm"


@dataclass(frozen=True, slots=True)
class DateTimeFormatConfig:
    """Resolved, immutable date/time formatting configuration.

    Attributes:
        locale: Resolved BCP-47 tag, e.g. "en-US" or "de-DE-u-hc-h23"
        calendar: Engine calendar name (reported as its BCP-47 form)
        numbering_system: Numbering system digits render in
        time_zone: Canonical zone id, None if the engine cannot name it
        hour_cycle: Hour cycle, None when no hour field was requested
        skeleton: Skeleton built from the requested fields
        formatter: Compiled engine formatter
        engine: Engine that built the formatter and renders with it
    """

    locale: str
    calendar: str
    numbering_system: str
    time_zone: str | None
    hour_cycle: HourCycle | None
    skeleton: str
    formatter: Formatter
    engine: FormatEngine = field(default=DEFAULT_ENGINE, repr=False, compare=False)

    @property
    def pattern(self) -> str:
        """Concrete pattern the formatter renders."""
        return self.engine.get_pattern(self.formatter)

    def format(self, value: TimeValue = None) -> str:
        """Format a time value; see format_date_time()."""
        return format_date_time(self, value)

    def format_to_parts(self, value: TimeValue = None) -> tuple[FormattedPart, ...]:
        """Format a time value into parts; see format_to_parts()."""
        return format_to_parts(self, value)

    def resolved_options(self) -> dict[str, str | bool | None]:
        """Caller-visible snapshot of this configuration."""
        return reporting.resolved_options(self)


def _resolve_time_zone(options: Mapping[str, object]) -> tuple[str | None, str | None]:
    """Return (as supplied, canonical) time zone; (None, None) for the local zone."""
    time_zone = get_string_option(options, "timeZone")
    if time_zone is None:
        return None, None
    canonical = canonicalize_time_zone(time_zone)
    if not canonical:
        raise InvalidTimeZoneError(
            ErrorTemplate.invalid_time_zone(time_zone), time_zone=time_zone
        )
    return time_zone, canonical


def _locale_hour_cycle(engine: FormatEngine, base_name: str) -> HourCycle | None:
    pattern = engine.generate_skeleton_pattern(base_name, _LOCALE_HOUR_SKELETON)
    return hour_cycle_default(pattern or "")


def _build_formatter(
    engine: FormatEngine,
    resolved: ResolvedLocale,
    calendar: Calendar,
    skeleton: str,
) -> tuple[ResolvedLocale, Formatter]:
    """Generate the pattern and compile it, retrying without extensions.

    Patterns are always generated for the base locale. When compiling for
    the full tag fails, the extensions are dropped from the resolved locale
    too, since the formatter no longer honors them.

    Raises:
        MissingLocaleDataError: If even the base locale cannot be compiled
    """
    formatter: Formatter | None = None
    pattern = engine.generate_skeleton_pattern(resolved.base_name, skeleton)
    if pattern is not None:
        formatter = engine.build_formatter(resolved.locale, calendar, pattern)
        if formatter is None and resolved.extensions:
            logger.warning(
                "Could not build formatter for %s. Retrying with %s",
                resolved.locale,
                resolved.base_name,
            )
            resolved = ResolvedLocale(resolved.base_name)
            formatter = engine.build_formatter(resolved.locale, calendar, pattern)
    if formatter is None:
        raise MissingLocaleDataError(ErrorTemplate.missing_locale_data(resolved.base_name))
    return resolved, formatter


def initialize(
    locales: str | Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    *,
    engine: FormatEngine | None = None,
    required: RequiredOption = RequiredOption.ANY,
    defaults: DefaultsOption = DefaultsOption.DATE,
) -> DateTimeFormatConfig:
    """Resolve locales and options into a formatting configuration.

    Args:
        locales: A BCP-47 tag, an iterable of tags, or None for the default
        options: Formatting options ("year", "hour12", "timeZone", ...);
            keys mapped to None count as absent. Never modified.
        engine: Format engine (default: the shared Babel engine)
        required: Field group whose presence suppresses defaults
        defaults: Field group receiving "numeric" defaults

    Returns:
        Immutable DateTimeFormatConfig

    Raises:
        InvalidLocaleError: If a requested tag is malformed
        InvalidOptionValueError: If an option is outside its allowed set
        InvalidTimeZoneError: If the time zone is malformed or unknown
        MissingLocaleDataError: If no formatter can be built
        TypeError: If options is not a mapping

    Example:
        >>> config = initialize("en-US", {"timeZone": "UTC"})
        >>> config.format(0)
        '1/1/1970'
    """
    engine = engine if engine is not None else DEFAULT_ENGINE
    requested = canonicalize_locale_list(locales)
    view = resolve_defaults(options, required, defaults)

    get_locale_matcher(view)
    hour12 = get_bool_option(view, "hour12")
    hour_cycle_option = get_hour_cycle_option(view)

    resolved = resolve_locale(engine.get_available_locales(), requested)
    extension_hc = resolved.extensions.get("hc")
    negotiated = negotiate_hour_cycle(
        hour12,
        hour_cycle_option,
        HourCycle(extension_hc) if extension_hc is not None else None,
    )
    if hour12 is not None:
        # hour12 fixes 12 vs 24 hours; the locale picks h11/h12 or h23/h24.
        negotiated = finalize_hour_cycle(
            negotiated,
            hour12,
            _locale_hour_cycle(engine, resolved.base_name),
            has_hour=True,
        )

    time_zone, canonical_zone = _resolve_time_zone(view)
    calendar = engine.create_calendar(resolved.locale, canonical_zone)
    if calendar is None:
        supplied = time_zone or ""
        raise InvalidTimeZoneError(
            ErrorTemplate.invalid_time_zone(supplied), time_zone=supplied
        )

    fields = extract_fields(view)
    get_format_matcher(view)
    skeleton = build_skeleton(fields, negotiated)
    resolved, formatter = _build_formatter(engine, resolved, calendar, skeleton)

    has_hour = "hour" in fields
    pattern_hour_cycle = (
        hour_cycle_default(engine.get_pattern(formatter)) if has_hour else None
    )
    hour_cycle = finalize_hour_cycle(
        negotiated, None, pattern_hour_cycle, has_hour=has_hour
    )
    resolved = reconcile_hour_cycle_extension(
        resolved, hour12, hour_cycle_option, hour_cycle
    )

    logger.debug(
        "Initialized %s with skeleton %r -> pattern %r",
        resolved.locale,
        skeleton,
        engine.get_pattern(formatter),
    )
    return DateTimeFormatConfig(
        locale=resolved.locale,
        calendar=calendar.calendar_type,
        numbering_system=engine.get_numbering_system(resolved.locale),
        time_zone=engine.canonical_time_zone_id(calendar),
        hour_cycle=hour_cycle,
        skeleton=skeleton,
        formatter=formatter,
        engine=engine,
    )


def unwrap_date_time_format(
    value: object, operation: str = "resolvedOptions"
) -> DateTimeFormatConfig:
    """Return value as a configuration.

    Raises:
        WrongReceiverTypeError: If value is not a DateTimeFormatConfig
    """
    if not isinstance(value, DateTimeFormatConfig):
        raise WrongReceiverTypeError(ErrorTemplate.wrong_receiver_type(operation, value))
    return value


def time_clip(value: float) -> int:
    """Clip a time value to whole milliseconds within +/-8.64e15.

    Raises:
        InvalidTimeValueError: If the value is NaN, infinite, or out of range
    """
    if not math.isfinite(value) or abs(value) > MAX_TIME_VALUE_MS:
        raise InvalidTimeValueError(ErrorTemplate.invalid_time_value(value))
    return int(value)


def _epoch_ms(value: TimeValue) -> int:
    """Convert a time value to clipped epoch milliseconds.

    Naive datetimes are taken as local time, like datetime.timestamp().
    """
    match value:
        case None:
            return (datetime.now(UTC) - _EPOCH) // _ONE_MS
        case datetime():
            aware = value if value.tzinfo is not None else value.astimezone()
            return (aware - _EPOCH) // _ONE_MS
        case bool():
            raise InvalidTimeValueError(ErrorTemplate.invalid_time_value(value))
        case int() | float():
            return time_clip(value)
        case _:
            raise InvalidTimeValueError(ErrorTemplate.invalid_time_value(value))


def _render(
    config: DateTimeFormatConfig, value: TimeValue
) -> tuple[str, tuple[FieldSpan, ...]]:
    epoch_ms = _epoch_ms(value)
    try:
        return config.engine.format_with_field_positions(config.formatter, epoch_ms)
    except OverflowError as e:
        raise InvalidTimeValueError(
            ErrorTemplate.time_value_out_of_host_range(epoch_ms)
        ) from e


def format_date_time(config: object, value: TimeValue = None) -> str:
    """Format a time value.

    Args:
        config: Configuration from initialize()
        value: Epoch milliseconds, a datetime, or None for now

    Returns:
        Formatted string

    Raises:
        WrongReceiverTypeError: If config is not a DateTimeFormatConfig
        InvalidTimeValueError: If the value is NaN, out of range, or not a time
    """
    unwrapped = unwrap_date_time_format(config, "format")
    epoch_ms = _epoch_ms(value)
    try:
        return unwrapped.engine.format(unwrapped.formatter, epoch_ms)
    except OverflowError as e:
        raise InvalidTimeValueError(
            ErrorTemplate.time_value_out_of_host_range(epoch_ms)
        ) from e


def format_to_parts(config: object, value: TimeValue = None) -> tuple[FormattedPart, ...]:
    """Format a time value into typed parts.

    Concatenating the part values gives exactly format_date_time(config, value).

    Raises:
        WrongReceiverTypeError: If config is not a DateTimeFormatConfig
        InvalidTimeValueError: If the value is NaN, out of range, or not a time
    """
    unwrapped = unwrap_date_time_format(config, "formatToParts")
    formatted, spans = _render(unwrapped, value)
    return to_parts(formatted, spans)
