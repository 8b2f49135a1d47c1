"""Resolved options: the caller-visible snapshot of a configuration.

Field values are not stored on the configuration; they are read back from
the generated pattern with reverse_map(), so what is reported is what the
pattern actually renders (a requested "2-digit" hour may report "numeric"
if the locale pattern has no padded hour).

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType

from dtfengine.core.skeleton import reverse_map
from dtfengine.core.timezones import reported_time_zone

__all__ = ["reported_calendar", "resolved_options"]

# Engine calendar names that differ from their BCP-47 "ca" values.
_CALENDAR_ALIASES = MappingProxyType(
    {
        "gregorian": "gregory",
        "ethiopic-amete-alem": "ethioaa",
    }
)


def reported_calendar(calendar_type: str) -> str:
    """BCP-47 calendar name for an engine calendar name."""
    return _CALENDAR_ALIASES.get(calendar_type, calendar_type)


def resolved_options(config: object) -> dict[str, str | bool | None]:
    """Build the resolved options mapping, keys in a fixed order.

    Order: locale, calendar, numberingSystem, timeZone, hourCycle, hour12,
    then the fields in declaration order. numberingSystem is omitted when
    empty; hourCycle and hour12 are omitted when no hour was requested.

    Raises:
        WrongReceiverTypeError: If config is not a DateTimeFormatConfig.

    Example:
        >>> list(resolved_options(initialize("en-US", {"timeZone": "UTC"})))
        ['locale', 'calendar', 'numberingSystem', 'timeZone', 'year', 'month', 'day']
    """
    from .datetime_format import unwrap_date_time_format  # noqa: PLC0415 - circular

    config = unwrap_date_time_format(config, "resolvedOptions")
    options: dict[str, str | bool | None] = {
        "locale": config.locale,
        "calendar": reported_calendar(config.calendar),
    }
    if config.numbering_system:
        options["numberingSystem"] = config.numbering_system
    options["timeZone"] = (
        reported_time_zone(config.time_zone) if config.time_zone is not None else None
    )
    if config.hour_cycle is not None:
        options["hourCycle"] = str(config.hour_cycle)
        options["hour12"] = config.hour_cycle.is_twelve_hour
    options.update(reverse_map(config.pattern))
    return options
