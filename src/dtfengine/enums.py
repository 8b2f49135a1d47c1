"""Enumerations for DTFEngine type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class HourCycle(StrEnum):
    """Hour numbering convention for the hour field.

    An unset hour cycle is represented as None rather than a member, so
    ``HourCycle | None`` is the type of a negotiated hour cycle.
    """

    H11 = "h11"
    """12-value clock numbered 0-11"""

    H12 = "h12"
    """12-value clock numbered 1-12"""

    H23 = "h23"
    """24-value clock numbered 0-23"""

    H24 = "h24"
    """24-value clock numbered 1-24"""

    @property
    def is_twelve_hour(self) -> bool:
        """True for h11/h12, the value reported as ``hour12``."""
        return self in (HourCycle.H11, HourCycle.H12)


class RequiredOption(StrEnum):
    """Which field group must be present before defaults are skipped."""

    DATE = "date"
    TIME = "time"
    ANY = "any"


class DefaultsOption(StrEnum):
    """Which field group receives "numeric" defaults when nothing was requested.

    Also keys the default-formatter cache slots.
    """

    DATE = "date"
    TIME = "time"
    ALL = "all"


class PartType(StrEnum):
    """Type tag of a formatted part.

    StrEnum provides automatic string conversion: str(PartType.DAY_PERIOD) == "dayPeriod"
    """

    LITERAL = "literal"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    WEEKDAY = "weekday"
    DAY_PERIOD = "dayPeriod"
    TIME_ZONE_NAME = "timeZoneName"
    ERA = "era"


class LocaleMatcher(StrEnum):
    """Values accepted by the ``localeMatcher`` option."""

    LOOKUP = "lookup"
    BEST_FIT = "best fit"


class FormatMatcher(StrEnum):
    """Values accepted by the ``formatMatcher`` option.

    Only best fit matching is implemented; "basic" is validated and accepted.
    """

    BASIC = "basic"
    BEST_FIT = "best fit"


__all__ = [
    "DefaultsOption",
    "FormatMatcher",
    "HourCycle",
    "LocaleMatcher",
    "PartType",
    "RequiredOption",
]
