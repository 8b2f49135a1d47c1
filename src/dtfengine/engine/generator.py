"""Best-fit pattern generation from skeletons using CLDR availableFormats.

Babel exposes each locale's availableFormats as ``Locale.datetime_skeletons``
and a distance-based matcher (``babel.dates.match_skeleton``) that only
picks a skeleton; it neither adjusts field widths nor combines date and
time halves. This module adds those steps:

1. Resolve "j" to the locale's preferred hour letter.
2. Try the whole skeleton against availableFormats.
3. Otherwise match the date and time halves separately and join them with
   the locale's dateTimeFormat (full/long/medium/short, picked from the
   requested month and weekday widths).
4. A half with no exact skeleton is covered greedily by the largest
   available subset, the remaining fields appended after a space.
5. Matched patterns are adjusted to the request: widths follow the
   requested ones (hour, minute and second only ever widen), and the hour
   and time zone letters become the requested letters.

Hour letters are matched by family (h/K as "h", H/k as "H") because CLDR
only lists h and H skeletons.

Python 3.13+. Uses Babel for CLDR data and pattern tokenization.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from itertools import groupby
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from babel.dates import match_skeleton, tokenize_pattern, untokenize_pattern

from dtfengine.constants import MAX_PATTERN_CACHE_SIZE
from dtfengine.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale

__all__ = ["get_best_pattern", "preferred_hour_char"]

logger = logging.getLogger(__name__)

# Pattern letter -> field class. Letters of one class fill the same slot.
_FIELD_CLASSES = MappingProxyType(
    {
        "G": "G",
        "y": "y",
        "Y": "y",
        "u": "y",
        "U": "y",
        "r": "y",
        "M": "M",
        "L": "M",
        "E": "E",
        "c": "E",
        "e": "E",
        "d": "d",
        "a": "a",
        "b": "a",
        "B": "a",
        "h": "h",
        "H": "h",
        "k": "h",
        "K": "h",
        "m": "m",
        "s": "s",
        "z": "z",
        "v": "z",
        "V": "z",
        "O": "z",
        "Z": "z",
        "X": "z",
        "x": "z",
    }
)

_CLASS_ORDER: tuple[str, ...] = ("G", "y", "M", "E", "d", "a", "h", "m", "s", "z")
_DATE_CLASSES = frozenset({"G", "y", "M", "E", "d"})
_WIDEN_ONLY_CLASSES = frozenset({"h", "m", "s"})

# Hour letters folded onto the letters CLDR skeletons use.
_HOUR_MATCH_CHAR = MappingProxyType({"h": "h", "K": "h", "H": "H", "k": "H"})

SkeletonFields: TypeAlias = dict[str, tuple[str, int]]


def preferred_hour_char(locale: Locale) -> str:
    """Hour letter of the locale's short time format ("h" for en, "H" for de)."""
    for kind, value in tokenize_pattern(str(locale.time_formats["short"])):
        if kind == "field" and value[0] in _HOUR_MATCH_CHAR:
            return value[0]
    return "H"


def _parse_skeleton(skeleton: str, hour_char: str) -> SkeletonFields:
    """Split a skeleton into field class -> (letter, width)."""
    fields: SkeletonFields = {}
    for char, run in groupby(skeleton):
        width = len(list(run))
        if char == "j":
            char = hour_char
        field_class = _FIELD_CLASSES.get(char)
        if field_class is not None:
            fields[field_class] = (char, width)
    return fields


def _matching_skeleton(fields: Mapping[str, tuple[str, int]]) -> str:
    parts: list[str] = []
    for field_class in _CLASS_ORDER:
        if field_class in fields:
            char, width = fields[field_class]
            parts.append(_HOUR_MATCH_CHAR.get(char, char) * width)
    return "".join(parts)


def _skeleton_classes(skeleton: str) -> frozenset[str]:
    return frozenset(
        _FIELD_CLASSES[char] for char in skeleton if char in _FIELD_CLASSES
    )


def _adjust(pattern: str, fields: Mapping[str, tuple[str, int]]) -> str:
    """Rewrite a matched pattern's field letters and widths to the request."""
    adjusted: list[tuple[str, object]] = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            char, width = value
            field_class = _FIELD_CLASSES.get(char)
            requested = fields.get(field_class) if field_class else None
            if requested is not None:
                requested_char, requested_width = requested
                if field_class in _WIDEN_ONLY_CLASSES:
                    width = max(width, requested_width)
                else:
                    width = requested_width
                if field_class in ("h", "z"):
                    char = requested_char
            value = (char, width)
        adjusted.append((kind, value))
    return untokenize_pattern(adjusted)


def _match_exact(locale: Locale, fields: Mapping[str, tuple[str, int]]) -> str | None:
    skeletons = locale.datetime_skeletons
    matched = match_skeleton(_matching_skeleton(fields), skeletons)
    if matched is None:
        return None
    return _adjust(str(skeletons[matched]), fields)


def _single_field(fields: Mapping[str, tuple[str, int]], field_class: str) -> str:
    char, width = fields[field_class]
    return char * width


def _cover(locale: Locale, fields: SkeletonFields) -> str:
    """Pattern for a field group, exact match first, then greedy cover."""
    if not fields:
        return ""
    exact = _match_exact(locale, fields)
    if exact is not None:
        return exact

    requested = frozenset(fields)
    best: frozenset[str] = frozenset()
    for skeleton in sorted(locale.datetime_skeletons):
        classes = _skeleton_classes(skeleton)
        if classes < requested and len(classes) > len(best):
            best = classes

    if best:
        head = _cover(locale, {c: fields[c] for c in _CLASS_ORDER if c in best})
    else:
        first = next(c for c in _CLASS_ORDER if c in fields)
        best = frozenset({first})
        head = _single_field(fields, first)
    rest = {c: fields[c] for c in _CLASS_ORDER if c in fields and c not in best}
    tail = _cover(locale, rest)
    return f"{head} {tail}" if tail else head


def _date_time_glue(locale: Locale, date_fields: Mapping[str, tuple[str, int]]) -> str:
    month_width = date_fields["M"][1] if "M" in date_fields else 0
    if month_width >= 4:
        style = "full" if "E" in date_fields else "long"
    elif month_width == 3:
        style = "medium"
    else:
        style = "short"
    formats = locale.datetime_formats
    glue = formats.get(style) or formats.get("medium") or "{1} {0}"
    return str(glue)


@lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def get_best_pattern(locale_code: str, skeleton: str) -> str:
    """Generate the best-fit pattern for a skeleton.

    Args:
        locale_code: Locale without extensions (BCP-47 or POSIX)
        skeleton: Skeleton such as "yMMMd" or "jm"

    Returns:
        Concrete pattern, e.g. "MMM d, y" for ("en-US", "yMMMd")

    Raises:
        babel.core.UnknownLocaleError: If the locale has no CLDR data
        ValueError: If the locale code is malformed

    Thread-safe: memoized via lru_cache; results are immutable strings.
    """
    locale = get_babel_locale(locale_code)
    fields = _parse_skeleton(skeleton, preferred_hour_char(locale))
    if not fields:
        return ""

    exact = _match_exact(locale, fields)
    if exact is not None:
        logger.debug("Skeleton %r matched %r for %s", skeleton, exact, locale_code)
        return exact

    date_fields = {c: v for c, v in fields.items() if c in _DATE_CLASSES}
    time_fields = {c: v for c, v in fields.items() if c not in _DATE_CLASSES}
    date_pattern = _cover(locale, date_fields)
    time_pattern = _cover(locale, time_fields)
    if not date_pattern or not time_pattern:
        pattern = date_pattern or time_pattern
    else:
        glue = _date_time_glue(locale, date_fields)
        pattern = glue.replace("{1}", date_pattern).replace("{0}", time_pattern)

    logger.debug("Skeleton %r composed into %r for %s", skeleton, pattern, locale_code)
    return pattern
