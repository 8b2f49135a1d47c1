"""Format engine contract.

The format engine owns locale data and pattern-to-text rendering. The
option resolution core reaches it only through the FormatEngine protocol,
so tests can substitute an engine and the Babel implementation stays
swappable.

Failures that the core must react to (unknown time zone, formatter cannot
be built) are reported by returning None, not by raising.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import TYPE_CHECKING, Literal, Protocol, TypeAlias

from dtfengine.constants import START_OF_TIME_MS

if TYPE_CHECKING:
    from babel import Locale

    from dtfengine.engine.fields import DateField

__all__ = [
    "Calendar",
    "FieldSpan",
    "FormatEngine",
    "Formatter",
    "PatternToken",
]

PatternToken: TypeAlias = tuple[Literal["chars"], str] | tuple[Literal["field"], tuple[str, int]]


@dataclass(frozen=True, slots=True)
class Calendar:
    """Calendar bound to a locale and time zone.

    Attributes:
        locale: Locale tag the calendar was created for
        calendar_type: Engine calendar name (legacy form, e.g. "gregorian")
        time_zone_id: Zone id as created, None if the zone has no name
        tz: Zone used to convert timestamps to wall time
        gregorian_change: Julian/Gregorian cutover in epoch milliseconds.
            Never consulted when rendering: datetime is proleptic Gregorian,
            which is what the default (start of time) cutover describes.
    """

    locale: str
    calendar_type: str
    time_zone_id: str | None
    tz: tzinfo
    gregorian_change: int = START_OF_TIME_MS


@dataclass(frozen=True, slots=True)
class Formatter:
    """Compiled pattern ready to render timestamps.

    Attributes:
        locale_tag: Locale the formatter was built for
        babel_locale: Babel locale providing names and symbols
        calendar: Calendar supplying the time zone
        pattern: Concrete CLDR pattern
        tokens: Pattern tokenized into literal and field runs
    """

    locale_tag: str
    babel_locale: Locale
    calendar: Calendar
    pattern: str
    tokens: tuple[PatternToken, ...]


@dataclass(frozen=True, slots=True)
class FieldSpan:
    """Range [begin, end) of formatted text produced by one field."""

    begin: int
    end: int
    field: DateField


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class FormatEngine(Protocol):
    """Operations the formatting core consumes from the locale engine."""

    def create_calendar(self, locale: str, time_zone_id: str | None) -> Calendar | None:
        """Build a calendar; None id means the local zone, None result an unknown zone."""
        ...

    def generate_skeleton_pattern(self, base_locale: str, skeleton: str) -> str | None:
        """Best-fit pattern for a skeleton in a locale without extensions."""
        ...

    def build_formatter(
        self, locale: str, calendar: Calendar, pattern: str
    ) -> Formatter | None:
        """Compile a formatter, or None if the locale cannot support it."""
        ...

    def format(self, formatter: Formatter, epoch_ms: float) -> str:
        """Render a clipped, finite timestamp."""
        ...

    def format_with_field_positions(
        self, formatter: Formatter, epoch_ms: float
    ) -> tuple[str, tuple[FieldSpan, ...]]:
        """Render a timestamp and report the span of every field."""
        ...

    def get_pattern(self, formatter: Formatter) -> str:
        """Pattern the formatter renders."""
        ...

    def get_available_locales(self) -> frozenset[str]:
        """Tags of every locale with date formatting data."""
        ...

    def get_numbering_system(self, locale: str) -> str:
        """Numbering system digits are rendered in."""
        ...

    def canonical_time_zone_id(self, calendar: Calendar) -> str | None:
        """Canonical id of the calendar's zone, None if it has none."""
        ...
# pylint: enable=unnecessary-ellipsis
