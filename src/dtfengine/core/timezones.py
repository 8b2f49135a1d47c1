"""Time zone identifier canonicalization.

Time zone names are matched case-insensitively by callers but CLDR/IANA
lookups are case-sensitive, so input is rewritten into canonical casing
before it reaches the format engine. Three disjoint grammars apply, in order:

1. UTC aliases: "UTC", "GMT", "Etc/UTC", "Etc/GMT" (any case) -> "UTC"
2. Offsets: "Etc/GMT0", "Etc/GMT[+-]N" with N in 0..14
3. Area/Location names: titlecased words separated by "_", "-" or "/"

All case mapping is ASCII-only. str.upper()/str.title() are never used:
they are Unicode-aware and would accept or rewrite non-ASCII letters.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["canonicalize_time_zone", "reported_time_zone"]

_UTC_ALIASES = frozenset({"UTC", "GMT", "ETC/UTC", "ETC/GMT"})
_GMT_PREFIX = "Etc/GMT"
_SEPARATORS = frozenset("_-/")
_LOWERCASE_WORDS = frozenset({"Of", "Es", "Au"})

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)

# Zone ids the engine reports for UTC; both are surfaced as "UTC".
_ENGINE_UTC_IDS = frozenset({"Etc/UTC", "Etc/GMT"})


def _is_ascii_alpha(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def _gmt_offset_id(value: str) -> str:
    """Validate the "Etc/GMT..." offset grammar on the original-case input."""
    match len(value):
        case 8:
            if value[7] == "0":
                return _GMT_PREFIX + "0"
        case 9:
            if value[7] in "+-" and "0" <= value[8] <= "9":
                return _GMT_PREFIX + value[7:9]
        case 10:
            if value[7] in "+-" and value[8] == "1" and "0" <= value[9] <= "4":
                return _GMT_PREFIX + value[7:10]
    return ""


def _title_case_location(value: str) -> str:
    """Titlecase an Area/Location name: bueNos_airES -> Buenos_Aires."""
    chars: list[str] = []
    word_length = 0
    for ch in value:
        if _is_ascii_alpha(ch):
            chars.append(ch.translate(_TO_LOWER if word_length else _TO_UPPER))
            word_length += 1
        elif ch in _SEPARATORS:
            if word_length == 2 and "".join(chars[-2:]) in _LOWERCASE_WORDS:
                chars[-2] = chars[-2].translate(_TO_LOWER)
            chars.append(ch)
            word_length = 0
        else:
            return ""
    return "".join(chars)


def canonicalize_time_zone(value: str) -> str:
    """Canonicalize a time zone identifier.

    Args:
        value: Time zone as supplied by the caller, any case

    Returns:
        Canonical identifier, or "" if the input fits none of the grammars.

    Examples:
        >>> canonicalize_time_zone("utc")
        'UTC'
        >>> canonicalize_time_zone("etc/gmt+5")
        'Etc/GMT+5'
        >>> canonicalize_time_zone("bueNos_airES")
        'Buenos_Aires'
        >>> canonicalize_time_zone("america/Of_Something")
        'America/of_Something'
        >>> canonicalize_time_zone("Etc/GMT+15")
        ''
    """
    upper = value.translate(_TO_UPPER)
    if upper in _UTC_ALIASES:
        return "UTC"
    if upper.startswith("ETC/GMT"):
        return _gmt_offset_id(value)
    return _title_case_location(value)


def reported_time_zone(canonical_id: str) -> str:
    """Map an engine canonical zone id to its caller-visible name.

    CLDR keeps Etc/UTC and Etc/GMT as separate ids for the same zone;
    callers see both as "UTC".
    """
    if canonical_id in _ENGINE_UTC_IDS:
        return "UTC"
    return canonical_id
