"""Shared constants for DTFEngine.

This module provides centralized configuration constants used across
core, engine, and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Time values: Range limits for epoch-millisecond timestamps
- Cache limits: Memory bounds for caching subsystems
- Locale defaults: Fallbacks when no requested locale is available
- Fallback strings: Output for unformattable inputs

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Time values
    "MAX_TIME_VALUE_MS",
    "START_OF_TIME_MS",
    # Cache limits
    "MAX_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "RELEVANT_EXTENSION_KEYS",
    # Fallback strings
    "INVALID_DATE",
]

# ============================================================================
# TIME VALUES
# ============================================================================

# Largest absolute time value accepted by time clipping: 100,000,000 days
# either side of the epoch, in milliseconds.
MAX_TIME_VALUE_MS: float = 8.64e15

# Earliest timestamp the host can represent, -(2**53) ms.
# Gregorian-family calendars pin their Julian/Gregorian cutover here so
# every representable date follows proleptic Gregorian rules.
START_OF_TIME_MS: int = -9_007_199_254_740_992

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized (locale, skeleton) -> pattern results.
MAX_PATTERN_CACHE_SIZE: int = 512

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when neither a requested locale nor the system locale is available.
DEFAULT_LOCALE: str = "en-US"

# Unicode extension keys honored by date/time formatting.
RELEVANT_EXTENSION_KEYS: frozenset[str] = frozenset({"ca", "hc", "nu"})

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by the to_locale_*_string helpers for a NaN time value.
INVALID_DATE: str = "Invalid Date"
