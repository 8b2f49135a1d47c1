"""Pattern field identifiers.

Each CLDR pattern letter produces one field in formatted output. Field ids
use the ICU UDAT_*_FIELD numbering so spans reported by any engine share
one vocabulary.

Python 3.13+. Zero external dependencies.
"""

from enum import IntEnum
from types import MappingProxyType

__all__ = ["PATTERN_CHAR_FIELDS", "DateField"]


class DateField(IntEnum):
    """Semantic field of a pattern letter."""

    ERA = 0
    YEAR = 1
    MONTH = 2
    DATE = 3
    HOUR_OF_DAY1 = 4
    HOUR_OF_DAY0 = 5
    MINUTE = 6
    SECOND = 7
    FRACTIONAL_SECOND = 8
    DAY_OF_WEEK = 9
    DAY_OF_YEAR = 10
    DAY_OF_WEEK_IN_MONTH = 11
    WEEK_OF_YEAR = 12
    WEEK_OF_MONTH = 13
    AM_PM = 14
    HOUR1 = 15
    HOUR0 = 16
    TIMEZONE = 17
    YEAR_WOY = 18
    DOW_LOCAL = 19
    EXTENDED_YEAR = 20
    JULIAN_DAY = 21
    MILLISECONDS_IN_DAY = 22
    TIMEZONE_RFC = 23
    TIMEZONE_GENERIC = 24
    STANDALONE_DAY = 25
    STANDALONE_MONTH = 26
    QUARTER = 27
    STANDALONE_QUARTER = 28
    TIMEZONE_SPECIAL = 29
    YEAR_NAME = 30
    TIMEZONE_LOCALIZED_GMT_OFFSET = 31
    TIMEZONE_ISO = 32
    TIMEZONE_ISO_LOCAL = 33
    RELATED_YEAR = 34
    AM_PM_MIDNIGHT_NOON = 35
    FLEXIBLE_DAY_PERIOD = 36


PATTERN_CHAR_FIELDS = MappingProxyType(
    {
        "G": DateField.ERA,
        "y": DateField.YEAR,
        "M": DateField.MONTH,
        "d": DateField.DATE,
        "k": DateField.HOUR_OF_DAY1,
        "H": DateField.HOUR_OF_DAY0,
        "m": DateField.MINUTE,
        "s": DateField.SECOND,
        "S": DateField.FRACTIONAL_SECOND,
        "E": DateField.DAY_OF_WEEK,
        "D": DateField.DAY_OF_YEAR,
        "F": DateField.DAY_OF_WEEK_IN_MONTH,
        "w": DateField.WEEK_OF_YEAR,
        "W": DateField.WEEK_OF_MONTH,
        "a": DateField.AM_PM,
        "h": DateField.HOUR1,
        "K": DateField.HOUR0,
        "z": DateField.TIMEZONE,
        "Y": DateField.YEAR_WOY,
        "e": DateField.DOW_LOCAL,
        "u": DateField.EXTENDED_YEAR,
        "g": DateField.JULIAN_DAY,
        "A": DateField.MILLISECONDS_IN_DAY,
        "Z": DateField.TIMEZONE_RFC,
        "v": DateField.TIMEZONE_GENERIC,
        "c": DateField.STANDALONE_DAY,
        "L": DateField.STANDALONE_MONTH,
        "Q": DateField.QUARTER,
        "q": DateField.STANDALONE_QUARTER,
        "V": DateField.TIMEZONE_SPECIAL,
        "U": DateField.YEAR_NAME,
        "O": DateField.TIMEZONE_LOCALIZED_GMT_OFFSET,
        "X": DateField.TIMEZONE_ISO,
        "x": DateField.TIMEZONE_ISO_LOCAL,
        "r": DateField.RELATED_YEAR,
        "b": DateField.AM_PM_MIDNIGHT_NOON,
        "B": DateField.FLEXIBLE_DAY_PERIOD,
    }
)
