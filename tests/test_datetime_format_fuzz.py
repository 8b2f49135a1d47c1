"""Fuzz-level property tests for initialization and formatting.

Run with: pytest -m fuzz

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from dtfengine.core import canonicalize_time_zone
from dtfengine.diagnostics import DateTimeFormatError
from dtfengine.runtime.datetime_format import initialize

option_values = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-5, max_value=30),
    st.sampled_from(
        ["numeric", "2-digit", "long", "short", "narrow", "h11", "h12", "h23", "h24", "UTC"]
    ),
    st.text(max_size=12),
)

option_names = st.sampled_from(
    [
        "weekday",
        "era",
        "year",
        "month",
        "day",
        "hour",
        "minute",
        "second",
        "timeZoneName",
        "hour12",
        "hourCycle",
        "timeZone",
        "localeMatcher",
        "formatMatcher",
    ]
)

locale_tags = st.one_of(
    st.sampled_from(
        ["en-US", "de-DE", "ja-JP", "ar-EG", "en-US-u-hc-h24", "th-TH-u-ca-buddhist", "fr"]
    ),
    st.from_regex(r"\A[a-z]{2,3}(-[A-Z]{2})?(-u-hc-h(11|12|23|24))?\Z"),
)


@pytest.mark.fuzz
class TestInitializeRobustness:
    """Arbitrary inputs fail only with library errors."""

    @given(
        locale=locale_tags,
        options=st.dictionaries(option_names, option_values, max_size=6),
        epoch_ms=st.integers(min_value=-(10**14), max_value=10**14),
    )
    @settings(max_examples=300)
    def test_only_library_errors(
        self, locale: str, options: dict[str, object], epoch_ms: int
    ) -> None:
        """INVARIANT: construction either succeeds or raises DateTimeFormatError."""
        try:
            config = initialize(locale, options)
        except DateTimeFormatError as e:
            event(f"error={type(e).__name__}")
            return
        event("outcome=initialized")
        parts = config.format_to_parts(epoch_ms)
        assert "".join(part.value for part in parts) == config.format(epoch_ms)
        resolved = config.resolved_options()
        assert resolved["locale"] == config.locale
        assert ("hourCycle" in resolved) is (config.hour_cycle is not None)


@pytest.mark.fuzz
class TestCanonicalizeTimeZoneRobustness:
    """Time zone canonicalization never raises."""

    @given(value=st.text(max_size=40))
    @settings(max_examples=500)
    def test_total(self, value: str) -> None:
        """PROPERTY: the result is empty or pure ASCII of the same length."""
        result = canonicalize_time_zone(value)
        event(f"accepted={bool(result)}")
        if result and result != "UTC":
            assert result.isascii()
            assert len(result) == len(value)
