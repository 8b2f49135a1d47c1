"""Conversion of engine field spans into tagged formatted parts.

The engine reports where each field landed in the formatted string; any
text not covered by a span is a literal. Parts always tile the string:
concatenating their values reproduces it exactly.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dtfengine.diagnostics import ErrorTemplate, UnreachableFieldError
from dtfengine.engine.fields import DateField
from dtfengine.enums import PartType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dtfengine.engine.protocol import FieldSpan

__all__ = ["FormattedPart", "part_type_for", "to_parts"]


@dataclass(frozen=True, slots=True)
class FormattedPart:
    """One typed run of formatted text.

    Attributes:
        type: What produced the text (literal or a date/time field)
        value: The text itself
    """

    type: PartType
    value: str


def part_type_for(field: DateField) -> PartType:
    """Map an engine field to the part type it is reported as.

    Raises:
        UnreachableFieldError: For fields no date/time option can request
    """
    match field:
        case DateField.YEAR | DateField.EXTENDED_YEAR | DateField.YEAR_NAME:
            return PartType.YEAR
        case DateField.MONTH | DateField.STANDALONE_MONTH:
            return PartType.MONTH
        case DateField.DATE:
            return PartType.DAY
        case (
            DateField.HOUR_OF_DAY1
            | DateField.HOUR_OF_DAY0
            | DateField.HOUR1
            | DateField.HOUR0
        ):
            return PartType.HOUR
        case DateField.MINUTE:
            return PartType.MINUTE
        case DateField.SECOND:
            return PartType.SECOND
        case DateField.DAY_OF_WEEK | DateField.DOW_LOCAL | DateField.STANDALONE_DAY:
            return PartType.WEEKDAY
        case DateField.AM_PM | DateField.AM_PM_MIDNIGHT_NOON | DateField.FLEXIBLE_DAY_PERIOD:
            return PartType.DAY_PERIOD
        case (
            DateField.TIMEZONE
            | DateField.TIMEZONE_GENERIC
            | DateField.TIMEZONE_RFC
            | DateField.TIMEZONE_SPECIAL
            | DateField.TIMEZONE_LOCALIZED_GMT_OFFSET
            | DateField.TIMEZONE_ISO
            | DateField.TIMEZONE_ISO_LOCAL
        ):
            return PartType.TIME_ZONE_NAME
        case DateField.ERA:
            return PartType.ERA
        case _:
            raise UnreachableFieldError(ErrorTemplate.unreachable_field(field.name))


def to_parts(formatted: str, spans: Iterable[FieldSpan]) -> tuple[FormattedPart, ...]:
    """Split a formatted string into parts.

    Args:
        formatted: Text produced by the engine
        spans: Field spans sorted by begin index, non-overlapping

    Returns:
        Parts covering the whole string, literals filling the gaps

    Example:
        >>> spans = [FieldSpan(0, 1, DateField.MONTH), FieldSpan(2, 3, DateField.DATE)]
        >>> [p.value for p in to_parts("1/1", spans)]
        ['1', '/', '1']
    """
    if not formatted:
        return ()

    parts: list[FormattedPart] = []
    previous_end = 0
    for span in spans:
        if previous_end < span.begin:
            parts.append(
                FormattedPart(PartType.LITERAL, formatted[previous_end : span.begin])
            )
        parts.append(
            FormattedPart(part_type_for(span.field), formatted[span.begin : span.end])
        )
        previous_end = span.end
    if previous_end < len(formatted):
        parts.append(FormattedPart(PartType.LITERAL, formatted[previous_end:]))
    return tuple(parts)
