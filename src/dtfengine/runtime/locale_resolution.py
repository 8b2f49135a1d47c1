"""Locale list canonicalization and locale resolution.

resolve_locale() is the single collaborator call standing in for BCP-47
negotiation: it picks an available locale by lookup (truncating subtags
from the right) and keeps only the Unicode extension keywords date/time
formatting honors ("ca", "nu", "hc") with values the engine supports.

Python 3.13+. Uses Babel for tag structure validation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from babel.core import parse_locale

from dtfengine.constants import DEFAULT_LOCALE, RELEVANT_EXTENSION_KEYS
from dtfengine.diagnostics import ErrorTemplate, InvalidLocaleError
from dtfengine.enums import HourCycle
from dtfengine.locale_utils import (
    format_unicode_extension,
    get_system_locale,
    split_unicode_extension,
)

__all__ = [
    "SUPPORTED_EXTENSION_VALUES",
    "ResolvedLocale",
    "canonicalize_language_tag",
    "canonicalize_locale_list",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

# Extension values the Babel engine can honor. Babel renders the Gregorian
# calendar with Latin digits only.
SUPPORTED_EXTENSION_VALUES: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "ca": frozenset({"gregory"}),
        "hc": frozenset(HourCycle),
        "nu": frozenset({"latn"}),
    }
)


@dataclass(frozen=True, slots=True)
class ResolvedLocale:
    """Negotiated locale plus its relevant Unicode extension keywords.

    Attributes:
        base_name: Tag without extensions, e.g. "en-US"
        extensions: Relevant keyword -> value, e.g. {"hc": "h23"}
    """

    base_name: str
    extensions: Mapping[str, str] = field(default_factory=dict)

    @property
    def locale(self) -> str:
        """Full BCP-47 tag including the -u- extension, e.g. "en-US-u-hc-h23"."""
        return format_unicode_extension(self.base_name, self.extensions)

    def without_extension(self, key: str) -> ResolvedLocale:
        """Return a copy with one extension keyword removed."""
        remaining = {k: v for k, v in self.extensions.items() if k != key}
        return ResolvedLocale(self.base_name, remaining)


def canonicalize_language_tag(tag: str) -> str:
    """Validate a language tag and return it canonically cased.

    Raises:
        InvalidLocaleError: If the tag is structurally invalid
    """
    base, keywords = split_unicode_extension(tag)
    try:
        language, territory, script, variant = parse_locale(base, sep="-")[:4]
    except ValueError:
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(tag)) from None
    if not 2 <= len(language) <= 8:
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(tag))
    subtags = [language, script, territory, variant]
    base_name = "-".join(subtag for subtag in subtags if subtag)
    return format_unicode_extension(base_name, keywords)


def canonicalize_locale_list(locales: str | Iterable[str] | None) -> list[str]:
    """Canonicalize the requested locales.

    Args:
        locales: None, a single tag, or an iterable of tags

    Returns:
        Canonical tags in request order, duplicates removed

    Raises:
        InvalidLocaleError: If an entry is not a string or not a valid tag

    Example:
        >>> canonicalize_locale_list(["EN-us", "de", "en-US"])
        ['en-US', 'de']
    """
    if locales is None:
        return []
    candidates: Iterable[object] = [locales] if isinstance(locales, str) else locales
    seen: dict[str, None] = {}
    for candidate in candidates:
        if not isinstance(candidate, str):
            raise InvalidLocaleError(ErrorTemplate.invalid_locale_type(candidate))
        seen.setdefault(canonicalize_language_tag(candidate), None)
    return list(seen)


def _lookup(base_name: str, available: frozenset[str]) -> str | None:
    """RFC 4647 lookup: drop subtags from the right until a match."""
    candidate = base_name
    while candidate:
        if candidate in available:
            return candidate
        candidate, _, _ = candidate.rpartition("-")
    return None


def _default_locale(available: frozenset[str]) -> str:
    system = _lookup(get_system_locale(), available)
    if system is not None:
        return system
    return DEFAULT_LOCALE


def resolve_locale(
    available: frozenset[str],
    requested: Sequence[str],
    relevant_keys: frozenset[str] = RELEVANT_EXTENSION_KEYS,
) -> ResolvedLocale:
    """Pick the locale and extension keywords used for formatting.

    Args:
        available: Tags the format engine has data for
        requested: Canonical requested tags (see canonicalize_locale_list)
        relevant_keys: Extension keys to keep

    Returns:
        ResolvedLocale. Falls back to the system locale, then "en-US".
    """
    for tag in requested:
        base_name, keywords = split_unicode_extension(tag)
        matched = _lookup(base_name, available)
        if matched is None:
            continue
        extensions = {
            key: value
            for key, value in keywords.items()
            if key in relevant_keys and value in SUPPORTED_EXTENSION_VALUES.get(key, ())
        }
        return ResolvedLocale(matched, extensions)

    default = _default_locale(available)
    if requested:
        logger.warning(
            "None of the requested locales %s is available. Falling back to %s",
            list(requested),
            default,
        )
    return ResolvedLocale(default)
