"""Locale utilities for BCP-47 tags, Unicode extensions, and POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
BCP-47 tags ("en-US-u-hc-h23") are the public form; Babel expects POSIX
identifiers ("en_US") without extensions.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from dtfengine.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale

__all__ = [
    "format_unicode_extension",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "split_unicode_extension",
    "to_language_tag",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code without extensions (e.g., "en-US")

    Returns:
        POSIX-formatted locale code (e.g., "en_US")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("zh-Hans-CN")
        'zh_Hans_CN'
    """
    return locale_code.replace("-", "_")


def to_language_tag(identifier: str) -> str:
    """Convert a POSIX/Babel identifier to a BCP-47 tag.

    Example:
        >>> to_language_tag("zh_Hant_TW")
        'zh-Hant-TW'
    """
    return identifier.replace("_", "-")


def split_unicode_extension(tag: str) -> tuple[str, dict[str, str]]:
    """Split a language tag into its base name and Unicode extension keywords.

    Only the ``-u-`` extension is interpreted; key/type pairs follow it until
    the next singleton. A key without a type gets the value "true", as in
    BCP-47. Private-use and other singleton extensions are dropped.

    Args:
        tag: Language tag, e.g. "th-TH-u-ca-buddhist-nu-thai"

    Returns:
        Tuple of (base name, keyword mapping), e.g.
        ("th-TH", {"ca": "buddhist", "nu": "thai"})
    """
    subtags = tag.split("-")
    base: list[str] = []
    index = 0
    while index < len(subtags) and len(subtags[index]) != 1:
        base.append(subtags[index])
        index += 1

    keywords: dict[str, str] = {}
    while index < len(subtags):
        singleton = subtags[index].lower()
        index += 1
        if singleton == "x":
            # Private use runs to the end of the tag
            break
        key: str | None = None
        values: list[str] = []
        while index < len(subtags) and len(subtags[index]) != 1:
            subtag = subtags[index].lower()
            index += 1
            if singleton != "u":
                continue
            if len(subtag) == 2:
                if key is not None:
                    keywords.setdefault(key, "-".join(values) or "true")
                key, values = subtag, []
            elif key is not None:
                values.append(subtag)
        if key is not None:
            keywords.setdefault(key, "-".join(values) or "true")

    return "-".join(base), keywords


def format_unicode_extension(base_name: str, keywords: Mapping[str, str]) -> str:
    """Join a base name and keywords into a tag, keys in canonical (sorted) order.

    Example:
        >>> format_unicode_extension("en-US", {"hc": "h23", "ca": "gregory"})
        'en-US-u-ca-gregory-hc-h23'
        >>> format_unicode_extension("en-US", {})
        'en-US'
    """
    if not keywords:
        return base_name
    pairs = "-".join(f"{key}-{keywords[key]}" for key in sorted(keywords))
    return f"{base_name}-u-{pairs}"


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code without extensions (BCP-47 or POSIX format)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_TIME environment variable (for date/time formatting)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Returns:
        Detected locale as a BCP-47 tag (e.g., "de-DE"), or "en-US" when
        nothing usable is found.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return to_language_tag(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_TIME", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding (".UTF-8") and modifier ("@euro") suffixes
            return to_language_tag(value.split(".")[0].split("@")[0])

    return "en-US"
