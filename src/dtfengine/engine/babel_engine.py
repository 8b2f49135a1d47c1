"""FormatEngine implementation backed by Babel.

Babel supplies CLDR locale data, time zones (zoneinfo, or pytz when
installed), best-fit skeleton matching, and per-field rendering through
``babel.dates.DateTimeFormat``. Rendering walks the tokenized pattern
field by field, so field positions come out of the same pass that builds
the formatted string.

Python 3.13+. Uses Babel for all locale data.
"""

from __future__ import annotations

import functools
import logging
from datetime import UTC, datetime, timedelta, tzinfo
from typing import TYPE_CHECKING

from babel import UnknownLocaleError
from babel.core import get_global
from babel.dates import LOCALTZ, DateTimeFormat, get_timezone, tokenize_pattern
from babel.localedata import locale_identifiers

from dtfengine.engine.fields import PATTERN_CHAR_FIELDS
from dtfengine.engine.generator import get_best_pattern
from dtfengine.engine.protocol import Calendar, FieldSpan, Formatter
from dtfengine.locale_utils import (
    get_babel_locale,
    split_unicode_extension,
    to_language_tag,
)

if TYPE_CHECKING:
    from dtfengine.engine.protocol import PatternToken

__all__ = [
    "RENDERABLE_CALENDARS",
    "RENDERABLE_NUMBERING_SYSTEMS",
    "BabelFormatEngine",
]

logger = logging.getLogger(__name__)

# Babel renders the proleptic Gregorian calendar with Latin digits only.
RENDERABLE_CALENDARS: frozenset[str] = frozenset({"gregory"})
RENDERABLE_NUMBERING_SYSTEMS: frozenset[str] = frozenset({"latn"})

_CALENDAR_TYPE = "gregorian"
_DEFAULT_NUMBERING_SYSTEM = "latn"
_UNKNOWN_ZONE = "Etc/Unknown"
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _zone_key(tz: tzinfo) -> str | None:
    """IANA name of a zone object (zoneinfo ``key`` or pytz ``zone``)."""
    key = getattr(tz, "key", None) or getattr(tz, "zone", None)
    return key if isinstance(key, str) else None


@functools.cache
def _available_locales() -> frozenset[str]:
    return frozenset(to_language_tag(identifier) for identifier in locale_identifiers())


class BabelFormatEngine:
    """Format engine rendering CLDR patterns with Babel.

    Stateless apart from module-level memoization of Babel locales and
    generated patterns, so one instance can be shared across threads.
    """

    __slots__ = ()

    def create_calendar(self, locale: str, time_zone_id: str | None) -> Calendar | None:
        """Build a Gregorian calendar in the given zone.

        Args:
            locale: Resolved locale tag
            time_zone_id: Canonical zone id, or None for the local zone

        Returns:
            Calendar, or None if the id does not name a real zone
        """
        if time_zone_id is None:
            tz: tzinfo = LOCALTZ
            zone_id = _zone_key(tz)
        else:
            if time_zone_id == _UNKNOWN_ZONE:
                return None
            try:
                tz = get_timezone(time_zone_id)
            except (LookupError, ValueError, OSError):
                logger.debug("Time zone %r not found", time_zone_id)
                return None
            zone_id = time_zone_id
        return Calendar(
            locale=locale,
            calendar_type=_CALENDAR_TYPE,
            time_zone_id=zone_id,
            tz=tz,
        )

    def generate_skeleton_pattern(self, base_locale: str, skeleton: str) -> str | None:
        """Best-fit pattern for a skeleton, or None without locale data."""
        try:
            return get_best_pattern(base_locale, skeleton)
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("Pattern generation failed for %s: %s", base_locale, e)
            return None

    def build_formatter(
        self, locale: str, calendar: Calendar, pattern: str
    ) -> Formatter | None:
        """Compile a pattern for a locale.

        Returns None when the locale has no CLDR data or requests a calendar
        or numbering system Babel cannot render.
        """
        base_name, keywords = split_unicode_extension(locale)
        calendar_type = keywords.get("ca")
        if calendar_type is not None and calendar_type not in RENDERABLE_CALENDARS:
            logger.debug("Calendar %r not renderable for %s", calendar_type, locale)
            return None
        numbering = keywords.get("nu")
        if numbering is not None and numbering not in RENDERABLE_NUMBERING_SYSTEMS:
            logger.debug("Numbering system %r not renderable for %s", numbering, locale)
            return None

        try:
            babel_locale = get_babel_locale(base_name)
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("No locale data for %s: %s", locale, e)
            return None

        tokens: tuple[PatternToken, ...] = tuple(tokenize_pattern(pattern))
        return Formatter(
            locale_tag=locale,
            babel_locale=babel_locale,
            calendar=calendar,
            pattern=pattern,
            tokens=tokens,
        )

    def format(self, formatter: Formatter, epoch_ms: float) -> str:
        """Render a timestamp.

        Raises:
            OverflowError: If the timestamp is outside the datetime range
        """
        text, _ = self.format_with_field_positions(formatter, epoch_ms)
        return text

    def format_with_field_positions(
        self, formatter: Formatter, epoch_ms: float
    ) -> tuple[str, tuple[FieldSpan, ...]]:
        """Render a timestamp and report the span of every field.

        Raises:
            OverflowError: If the timestamp is outside the datetime range
        """
        value = (_EPOCH + timedelta(milliseconds=epoch_ms)).astimezone(formatter.calendar.tz)
        fields = DateTimeFormat(value, formatter.babel_locale)

        chunks: list[str] = []
        spans: list[FieldSpan] = []
        position = 0
        for kind, token in formatter.tokens:
            if kind == "chars":
                text = token
            else:
                char, width = token
                text = fields[char * width]
                field = PATTERN_CHAR_FIELDS.get(char)
                if field is not None and text:
                    spans.append(FieldSpan(position, position + len(text), field))
            chunks.append(text)
            position += len(text)
        return "".join(chunks), tuple(spans)

    def get_pattern(self, formatter: Formatter) -> str:
        """Pattern the formatter renders."""
        return formatter.pattern

    def get_available_locales(self) -> frozenset[str]:
        """BCP-47 tags of every locale Babel ships data for."""
        return _available_locales()

    def get_numbering_system(self, locale: str) -> str:
        """Numbering system digits are rendered in ("latn")."""
        _, keywords = split_unicode_extension(locale)
        numbering = keywords.get("nu", _DEFAULT_NUMBERING_SYSTEM)
        if numbering in RENDERABLE_NUMBERING_SYSTEMS:
            return numbering
        return _DEFAULT_NUMBERING_SYSTEM

    def canonical_time_zone_id(self, calendar: Calendar) -> str | None:
        """CLDR canonical id of the calendar's zone ("UTC" -> "Etc/UTC")."""
        if calendar.time_zone_id is None:
            return None
        aliases = get_global("zone_aliases")
        return aliases.get(calendar.time_zone_id, calendar.time_zone_id)
