"""Field tables, skeleton compilation, and pattern reverse mapping.

A skeleton lists which date/time fields to show ("yMMMd") without literal
separators; the format engine turns it into a locale-specific pattern.
This module owns the ordered tables that map option values to skeleton
tokens and back.

Ordering matters in two places:
- Fields are emitted in declaration order (weekday, era, year, month, day,
  hour, minute, second, timeZoneName), never in option insertion order.
- Within a field, tokens are listed longest first, because reverse mapping
  takes the first token found as a substring of the pattern ("MMMM" must be
  tried before "MMM"). The tables are tuples for that reason.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache

from dtfengine.enums import HourCycle

__all__ = [
    "PATTERN_ITEMS",
    "FieldSpec",
    "build_skeleton",
    "hour_cycle_default",
    "hour_tokens",
    "pattern_data",
    "reverse_map",
]

_NARROW_LONG_SHORT = ("narrow", "long", "short")
_LONG_SHORT = ("long", "short")
_TWO_DIGIT_NUMERIC = ("2-digit", "numeric")
_ALL_MONTH_VALUES = ("narrow", "long", "short", "2-digit", "numeric")


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One date/time option and its token table.

    Attributes:
        name: Option name, e.g. "month"
        pairs: (token, value) pairs, longest token first
        allowed_values: Values the option accepts
    """

    name: str
    pairs: tuple[tuple[str, str], ...]
    allowed_values: tuple[str, ...]

    def token_for(self, value: str) -> str:
        """Skeleton token for an option value (first pair carrying the value)."""
        for token, pair_value in self.pairs:
            if pair_value == value:
                return token
        msg = f"No token for {self.name}={value!r}"
        raise KeyError(msg)


PATTERN_ITEMS: tuple[FieldSpec, ...] = (
    FieldSpec(
        "weekday",
        (
            ("EEEEE", "narrow"),
            ("EEEE", "long"),
            ("EEE", "short"),
            ("ccccc", "narrow"),
            ("cccc", "long"),
            ("ccc", "short"),
        ),
        _NARROW_LONG_SHORT,
    ),
    FieldSpec(
        "era",
        (("GGGGG", "narrow"), ("GGGG", "long"), ("GGG", "short")),
        _NARROW_LONG_SHORT,
    ),
    FieldSpec("year", (("yy", "2-digit"), ("y", "numeric")), _TWO_DIGIT_NUMERIC),
    # Patterns sometimes use stand-alone L instead of M for the month.
    FieldSpec(
        "month",
        (
            ("MMMMM", "narrow"),
            ("MMMM", "long"),
            ("MMM", "short"),
            ("MM", "2-digit"),
            ("M", "numeric"),
            ("LLLLL", "narrow"),
            ("LLLL", "long"),
            ("LLL", "short"),
            ("LL", "2-digit"),
            ("L", "numeric"),
        ),
        _ALL_MONTH_VALUES,
    ),
    FieldSpec("day", (("dd", "2-digit"), ("d", "numeric")), _TWO_DIGIT_NUMERIC),
    FieldSpec(
        "hour",
        (
            ("HH", "2-digit"),
            ("H", "numeric"),
            ("hh", "2-digit"),
            ("h", "numeric"),
            ("kk", "2-digit"),
            ("k", "numeric"),
            ("KK", "2-digit"),
            ("K", "numeric"),
        ),
        _TWO_DIGIT_NUMERIC,
    ),
    FieldSpec("minute", (("mm", "2-digit"), ("m", "numeric")), _TWO_DIGIT_NUMERIC),
    FieldSpec("second", (("ss", "2-digit"), ("s", "numeric")), _TWO_DIGIT_NUMERIC),
    FieldSpec("timeZoneName", (("zzzz", "long"), ("z", "short")), _LONG_SHORT),
)

# Symbol | Meaning              | Example
#   h      hour in am/pm (1~12)    h 7, hh 07
#   H      hour in day (0~23)      H 0, HH 00
#   k      hour in day (1~24)      k 24, kk 24
#   K      hour in am/pm (0~11)    K 0, KK 00
#   j      locale's preferred hour symbol
_HOUR_TOKENS: dict[HourCycle | None, tuple[str, str]] = {
    HourCycle.H11: ("KK", "K"),
    HourCycle.H12: ("hh", "h"),
    HourCycle.H23: ("HH", "H"),
    HourCycle.H24: ("kk", "k"),
    None: ("jj", "j"),
}


def hour_tokens(hour_cycle: HourCycle | None) -> tuple[str, str]:
    """Return the (2-digit, numeric) hour tokens for an hour cycle."""
    return _HOUR_TOKENS[hour_cycle]


@cache
def pattern_data(hour_cycle: HourCycle | None) -> tuple[FieldSpec, ...]:
    """Field tables for skeleton building, hour spec bound to an hour cycle."""
    two_digit, numeric = hour_tokens(hour_cycle)
    hour_spec = FieldSpec(
        "hour", ((two_digit, "2-digit"), (numeric, "numeric")), _TWO_DIGIT_NUMERIC
    )
    return tuple(hour_spec if item.name == "hour" else item for item in PATTERN_ITEMS)


def build_skeleton(fields: Mapping[str, str], hour_cycle: HourCycle | None) -> str:
    """Concatenate skeleton tokens for the requested field values.

    Fields absent from ``fields`` or holding a value outside the field's
    allowed set contribute nothing. Validation against the allowed set is the
    caller's job (see runtime.options.extract_fields).

    Args:
        fields: Option name -> requested value
        hour_cycle: Negotiated hour cycle (None selects the "j" tokens)

    Returns:
        Skeleton string in declaration order

    Example:
        >>> build_skeleton({"day": "numeric", "year": "numeric", "month": "long"}, None)
        'yMMMMd'
        >>> build_skeleton({"hour": "2-digit", "minute": "numeric"}, HourCycle.H23)
        'HHm'
    """
    skeleton: list[str] = []
    for item in pattern_data(hour_cycle):
        value = fields.get(item.name)
        if value is not None and value in item.allowed_values:
            skeleton.append(item.token_for(value))
    return "".join(skeleton)


def _unquoted(pattern: str) -> str:
    """Pattern text outside quoted literals ("HH 'Uhr'" -> "HH ")."""
    chars: list[str] = []
    in_quote = False
    for ch in pattern:
        if ch == "'":
            in_quote = not in_quote
        elif not in_quote:
            chars.append(ch)
    return "".join(chars)


def hour_cycle_default(pattern: str) -> HourCycle | None:
    """Derive the hour cycle a generated pattern uses.

    Letters are checked in K, h, H, k order on the pattern text outside
    quoted literals. Returns None when the pattern has no hour field.

    Example:
        >>> hour_cycle_default("HH 'Uhr'")
        <HourCycle.H23: 'h23'>
    """
    letters = _unquoted(pattern)
    if "K" in letters:
        return HourCycle.H11
    if "h" in letters:
        return HourCycle.H12
    if "H" in letters:
        return HourCycle.H23
    if "k" in letters:
        return HourCycle.H24
    return None


def reverse_map(pattern: str) -> dict[str, str]:
    """Reconstruct option values from a concrete pattern.

    Best effort, not a parse: for each field the first token occurring
    anywhere in the pattern wins. Tokens of adjacent fields can combine into
    a substring that matches the wrong entry; that imprecision is kept
    because callers observe it through resolved options.

    Example:
        >>> reverse_map("MMMM d, y")
        {'year': 'numeric', 'month': 'long', 'day': 'numeric'}
    """
    values: dict[str, str] = {}
    for item in PATTERN_ITEMS:
        for token, value in item.pairs:
            if token in pattern:
                values[item.name] = value
                break
    return values
