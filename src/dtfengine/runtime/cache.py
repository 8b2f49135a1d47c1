"""Default-formatter cache and the to_locale_*_string convenience helpers.

The helpers build a throwaway configuration per call. When the caller
passes neither locales nor options, the configuration depends only on the
defaults kind (date, time, or all), so it can be reused; the cache holds
one configuration per kind.

The cache is owned by the embedding context and passed in explicitly.
There is no module-level instance.

Thread Safety:
    Slot reads and writes are protected by a Lock. Two threads missing the
    same slot may both build a configuration; the last write is kept. Both
    configurations are equivalent.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import datetime
from threading import Lock

from dtfengine.constants import INVALID_DATE, MAX_TIME_VALUE_MS
from dtfengine.diagnostics import ErrorTemplate, WrongReceiverTypeError
from dtfengine.enums import DefaultsOption, RequiredOption
from dtfengine.runtime.datetime_format import (
    DateTimeFormatConfig,
    format_date_time,
    initialize,
)

__all__ = [
    "DefaultFormatterCache",
    "to_locale_date_string",
    "to_locale_string",
    "to_locale_time_string",
]

logger = logging.getLogger(__name__)


class DefaultFormatterCache:
    """One configuration slot per DefaultsOption.

    Example:
        >>> cache = DefaultFormatterCache()
        >>> to_locale_date_string(0, cache=cache) == to_locale_date_string(0, cache=cache)
        True
        >>> len(cache)
        1
    """

    __slots__ = ("_lock", "_slots")

    def __init__(self) -> None:
        self._lock = Lock()
        self._slots: dict[DefaultsOption, DateTimeFormatConfig] = {}

    def get(self, kind: DefaultsOption) -> DateTimeFormatConfig | None:
        """Cached configuration for a defaults kind, or None."""
        with self._lock:
            return self._slots.get(kind)

    def put(self, kind: DefaultsOption, config: DateTimeFormatConfig) -> None:
        """Store a configuration, replacing any previous one."""
        with self._lock:
            self._slots[kind] = config

    def clear(self) -> None:
        """Drop every cached configuration."""
        with self._lock:
            self._slots.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)


def _config_for(
    locales: str | Iterable[str] | None,
    options: Mapping[str, object] | None,
    required: RequiredOption,
    defaults: DefaultsOption,
    cache: DefaultFormatterCache | None,
) -> DateTimeFormatConfig:
    if cache is None or locales is not None or options is not None:
        return initialize(locales, options, required=required, defaults=defaults)

    cached = cache.get(defaults)
    if cached is not None:
        logger.debug("Default formatter cache hit: %s", defaults)
        return cached
    config = initialize(required=required, defaults=defaults)
    cache.put(defaults, config)
    return config


def _to_locale_string(
    operation: str,
    value: object,
    locales: str | Iterable[str] | None,
    options: Mapping[str, object] | None,
    required: RequiredOption,
    defaults: DefaultsOption,
    cache: DefaultFormatterCache | None,
) -> str:
    match value:
        case datetime():
            pass
        case bool():
            raise WrongReceiverTypeError(ErrorTemplate.wrong_receiver_type(operation, value))
        case int() | float():
            # Values that cannot be a time value render like NaN
            if not math.isfinite(value) or abs(value) > MAX_TIME_VALUE_MS:
                return INVALID_DATE
        case _:
            raise WrongReceiverTypeError(ErrorTemplate.wrong_receiver_type(operation, value))

    config = _config_for(locales, options, required, defaults, cache)
    return format_date_time(config, value)


def to_locale_string(
    value: object,
    locales: str | Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    *,
    cache: DefaultFormatterCache | None = None,
) -> str:
    """Format date and time, defaulting to every numeric field.

    Args:
        value: A datetime or epoch milliseconds
        locales: Locale tag(s), None for the default locale
        options: Formatting options
        cache: Cache consulted when locales and options are both None

    Returns:
        Formatted string, or "Invalid Date" for NaN, infinities and
        values beyond +/-8.64e15

    Raises:
        WrongReceiverTypeError: If value is not a datetime or a number
    """
    return _to_locale_string(
        "toLocaleString",
        value,
        locales,
        options,
        RequiredOption.ANY,
        DefaultsOption.ALL,
        cache,
    )


def to_locale_date_string(
    value: object,
    locales: str | Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    *,
    cache: DefaultFormatterCache | None = None,
) -> str:
    """Format the date, defaulting to numeric year, month and day."""
    return _to_locale_string(
        "toLocaleDateString",
        value,
        locales,
        options,
        RequiredOption.DATE,
        DefaultsOption.DATE,
        cache,
    )


def to_locale_time_string(
    value: object,
    locales: str | Iterable[str] | None = None,
    options: Mapping[str, object] | None = None,
    *,
    cache: DefaultFormatterCache | None = None,
) -> str:
    """Format the time, defaulting to numeric hour, minute and second."""
    return _to_locale_string(
        "toLocaleTimeString",
        value,
        locales,
        options,
        RequiredOption.TIME,
        DefaultsOption.TIME,
        cache,
    )
