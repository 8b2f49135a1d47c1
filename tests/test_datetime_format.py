"""Tests for DateTimeFormat initialization, formatting, and resolved options.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import UTC, datetime

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from dtfengine.diagnostics import (
    DiagnosticCode,
    InvalidLocaleError,
    InvalidOptionValueError,
    InvalidTimeValueError,
    InvalidTimeZoneError,
    MissingLocaleDataError,
    WrongReceiverTypeError,
)
from dtfengine.engine import BabelFormatEngine, Calendar, Formatter
from dtfengine.enums import DefaultsOption, HourCycle, PartType, RequiredOption
from dtfengine.runtime.datetime_format import (
    DateTimeFormatConfig,
    format_date_time,
    format_to_parts,
    initialize,
    time_clip,
    unwrap_date_time_format,
)
from dtfengine.runtime.reporting import resolved_options

UTC_OPTIONS = {"timeZone": "UTC"}


class ExtensionRejectingEngine(BabelFormatEngine):
    """Engine that cannot compile formatters for tags with extensions."""

    def build_formatter(
        self, locale: str, calendar: Calendar, pattern: str
    ) -> Formatter | None:
        if "-u-" in locale:
            return None
        return super().build_formatter(locale, calendar, pattern)


class NoDataEngine(BabelFormatEngine):
    """Engine without any compilable locale data."""

    def build_formatter(
        self, locale: str, calendar: Calendar, pattern: str
    ) -> Formatter | None:
        return None


class TestInitializeDefaults:
    """Default fields and basic formatting."""

    def test_numeric_date_defaults(self) -> None:
        config = initialize("en-US", UTC_OPTIONS)
        assert config.skeleton == "yMd"
        assert config.format(0) == "1/1/1970"

    def test_german_numeric_date(self) -> None:
        assert initialize("de-DE", UTC_OPTIONS).format(0) == "1.1.1970"

    def test_long_month(self) -> None:
        config = initialize("en-US", {"timeZone": "UTC", "month": "long", "day": "numeric", "year": "numeric"})
        assert config.format(0) == "January 1, 1970"

    def test_time_defaults(self) -> None:
        config = initialize(
            "en-US",
            {"timeZone": "UTC", "hourCycle": "h23"},
            required=RequiredOption.TIME,
            defaults=DefaultsOption.TIME,
        )
        assert config.format(0) == "00:00:00"

    def test_locale_list_first_supported_wins(self) -> None:
        config = initialize(["qq-QQ", "de-DE", "en-US"], UTC_OPTIONS)
        assert config.locale == "de-DE"

    def test_options_not_modified(self) -> None:
        options: dict[str, object] = {"timeZone": "UTC"}
        initialize("en-US", options)
        assert options == {"timeZone": "UTC"}

    def test_config_is_frozen(self) -> None:
        config = initialize("en-US", UTC_OPTIONS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.locale = "de-DE"  # type: ignore[misc]


class TestInitializeErrors:
    """All-or-nothing construction."""

    def test_invalid_option_value(self) -> None:
        with pytest.raises(InvalidOptionValueError) as exc_info:
            initialize("en-US", {"month": "longest"})
        assert exc_info.value.option_name == "month"

    def test_invalid_hour_cycle(self) -> None:
        with pytest.raises(InvalidOptionValueError):
            initialize("en-US", {"hourCycle": "h25"})

    def test_invalid_locale(self) -> None:
        with pytest.raises(InvalidLocaleError):
            initialize("e", UTC_OPTIONS)

    def test_malformed_time_zone(self) -> None:
        with pytest.raises(InvalidTimeZoneError) as exc_info:
            initialize("en-US", {"timeZone": "Etc/GMT+15"})
        assert exc_info.value.time_zone == "Etc/GMT+15"

    def test_unknown_time_zone(self) -> None:
        with pytest.raises(InvalidTimeZoneError) as exc_info:
            initialize("en-US", {"timeZone": "Mars/Olympus"})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_TIME_ZONE

    def test_options_must_be_mapping(self) -> None:
        with pytest.raises(TypeError):
            initialize("en-US", ["year"])  # type: ignore[arg-type]

    def test_missing_locale_data(self) -> None:
        with pytest.raises(MissingLocaleDataError) as exc_info:
            initialize("en-US", UTC_OPTIONS, engine=NoDataEngine())
        assert isinstance(exc_info.value, RuntimeError)

    def test_retry_drops_extensions(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="dtfengine.runtime.datetime_format"):
            config = initialize(
                "en-US-u-ca-gregory", UTC_OPTIONS, engine=ExtensionRejectingEngine()
            )
        assert config.locale == "en-US"
        assert config.format(0) == "1/1/1970"
        assert "Retrying with en-US" in caplog.text


class TestTimeZones:
    """Time zone canonicalization end to end."""

    def test_utc_aliases_report_utc(self) -> None:
        for alias in ("utc", "GMT", "etc/utc", "Etc/GMT"):
            assert initialize("en-US", {"timeZone": alias}).resolved_options()["timeZone"] == "UTC"

    def test_case_insensitive_zone(self) -> None:
        config = initialize("en-US", {"timeZone": "america/new_york"})
        assert config.resolved_options()["timeZone"] == "America/New_York"
        assert config.format(0) == "12/31/1969"

    def test_renamed_zone_reports_cldr_id(self) -> None:
        config = initialize("en-US", {"timeZone": "Asia/Kolkata"})
        assert config.resolved_options()["timeZone"] == "Asia/Calcutta"

    def test_offset_zone(self) -> None:
        config = initialize("en-US", {"timeZone": "etc/gmt+5"})
        assert config.resolved_options()["timeZone"] == "Etc/GMT+5"
        assert config.format(0) == "12/31/1969"


class TestHourCycle:
    """Hour cycle negotiation end to end."""

    def test_h23(self) -> None:
        config = initialize(
            "en-US", {"timeZone": "UTC", "hourCycle": "h23", "hour": "numeric", "minute": "numeric"}
        )
        assert config.hour_cycle is HourCycle.H23
        assert config.format(0) == "00:00"

    def test_h24_renders_midnight_as_24(self) -> None:
        config = initialize(
            "en-US", {"timeZone": "UTC", "hourCycle": "h24", "hour": "numeric", "minute": "numeric"}
        )
        assert config.hour_cycle is HourCycle.H24
        assert config.format(0) == "24:00"

    def test_hour12_overrides_hour_cycle(self) -> None:
        config = initialize(
            "en-US", {"timeZone": "UTC", "hour12": True, "hourCycle": "h23", "hour": "numeric"}
        )
        assert config.hour_cycle is HourCycle.H12
        assert config.format(0).startswith("12")

    def test_hour12_false_in_twelve_hour_locale(self) -> None:
        config = initialize("en-US", {"timeZone": "UTC", "hour12": False, "hour": "numeric"})
        assert config.hour_cycle is HourCycle.H23

    def test_hour12_true_in_twenty_four_hour_locale(self) -> None:
        config = initialize("de-DE", {"timeZone": "UTC", "hour12": True, "hour": "numeric"})
        assert config.hour_cycle is HourCycle.H12

    def test_locale_default_hour_cycle(self) -> None:
        assert initialize("de-DE", {"hour": "numeric"}).hour_cycle is HourCycle.H23
        assert initialize("en-US", {"hour": "numeric"}).hour_cycle is HourCycle.H12

    def test_no_hour_field_no_hour_cycle(self) -> None:
        config = initialize("en-US", {"timeZone": "UTC", "hourCycle": "h23"})
        assert config.hour_cycle is None
        assert "hourCycle" not in config.resolved_options()
        assert "hour12" not in config.resolved_options()

    def test_extension_hour_cycle_used(self) -> None:
        config = initialize("de-DE-u-hc-h12", {"hour": "numeric", "minute": "numeric"})
        assert config.hour_cycle is HourCycle.H12
        assert config.locale == "de-DE-u-hc-h12"

    def test_disagreeing_extension_dropped(self) -> None:
        config = initialize("en-US-u-hc-h11", {"hourCycle": "h23", "hour": "numeric"})
        assert config.locale == "en-US"
        assert config.hour_cycle is HourCycle.H23

    def test_agreeing_extension_kept(self) -> None:
        config = initialize("en-US-u-hc-h23", {"hourCycle": "h23", "hour": "numeric"})
        assert config.locale == "en-US-u-hc-h23"

    @given(
        hour_cycle=st.sampled_from(list(HourCycle)),
        epoch_ms=st.integers(min_value=-(10**13), max_value=10**13),
    )
    @example(hour_cycle=HourCycle.H23, epoch_ms=0)
    @example(hour_cycle=HourCycle.H24, epoch_ms=0)
    @example(hour_cycle=HourCycle.H11, epoch_ms=12 * 3_600_000)
    @example(hour_cycle=HourCycle.H12, epoch_ms=0)
    def test_hour_part_stays_in_cycle_range(self, hour_cycle: HourCycle, epoch_ms: int) -> None:
        """Property: the hour part is the UTC hour expressed in the requested cycle."""
        config = initialize(
            "en-US", {"timeZone": "UTC", "hourCycle": str(hour_cycle), "hour": "numeric"}
        )
        assert config.hour_cycle is hour_cycle
        parts = config.format_to_parts(epoch_ms)
        hours = [part.value for part in parts if part.type == PartType.HOUR]
        assert len(hours) == 1
        hour = int(hours[0])
        hour_of_day = (epoch_ms // 3_600_000) % 24
        event(f"hour_cycle={hour_cycle}")
        match hour_cycle:
            case HourCycle.H11:
                assert 0 <= hour <= 11
                assert hour == hour_of_day % 12
            case HourCycle.H12:
                assert 1 <= hour <= 12
                assert hour == (hour_of_day % 12 or 12)
            case HourCycle.H23:
                assert 0 <= hour <= 23
                assert hour == hour_of_day
            case HourCycle.H24:
                assert 1 <= hour <= 24
                assert hour == (hour_of_day or 24)


class TestResolvedOptions:
    """Caller-visible snapshot."""

    def test_date_key_order(self) -> None:
        resolved = initialize("en-US", UTC_OPTIONS).resolved_options()
        assert list(resolved) == [
            "locale",
            "calendar",
            "numberingSystem",
            "timeZone",
            "year",
            "month",
            "day",
        ]
        assert resolved["locale"] == "en-US"
        assert resolved["calendar"] == "gregory"
        assert resolved["numberingSystem"] == "latn"
        assert resolved["year"] == "numeric"

    def test_hour_keys_follow_time_zone(self) -> None:
        resolved = initialize(
            "en-US", {"timeZone": "UTC", "hourCycle": "h23", "hour": "numeric", "minute": "numeric"}
        ).resolved_options()
        assert list(resolved) == [
            "locale",
            "calendar",
            "numberingSystem",
            "timeZone",
            "hourCycle",
            "hour12",
            "hour",
            "minute",
        ]
        assert resolved["hourCycle"] == "h23"
        assert resolved["hour12"] is False
        # Values come back from the pattern, which pads the 24-hour clock.
        assert resolved["hour"] == "2-digit"

    def test_long_month_reported(self) -> None:
        resolved = initialize("en-US", {"timeZone": "UTC", "month": "long"}).resolved_options()
        assert resolved["month"] == "long"
        assert "year" not in resolved

    def test_unwrap_rejects_other_receivers(self) -> None:
        with pytest.raises(WrongReceiverTypeError) as exc_info:
            unwrap_date_time_format({"locale": "en-US"})
        assert "resolvedOptions" in str(exc_info.value)
        assert isinstance(exc_info.value, TypeError)

    @pytest.mark.parametrize("receiver", [{"locale": "en-US"}, 42, None])
    def test_resolved_options_rejects_other_receivers(self, receiver: object) -> None:
        with pytest.raises(WrongReceiverTypeError) as exc_info:
            resolved_options(receiver)
        assert "resolvedOptions" in str(exc_info.value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.WRONG_RECEIVER_TYPE

    def test_resolved_options_function_matches_method(self) -> None:
        config = initialize("de-DE", {"timeZone": "UTC", "hour": "numeric"})
        assert resolved_options(config) == config.resolved_options()


class TestFormatDateTime:
    """Time value handling."""

    def test_datetime_value(self) -> None:
        config = initialize("en-US", UTC_OPTIONS)
        assert config.format(datetime(2024, 3, 15, 12, tzinfo=UTC)) == "3/15/2024"

    def test_fractional_ms_truncated(self) -> None:
        config = initialize("en-US", UTC_OPTIONS)
        assert config.format(86_399_999.9) == "1/1/1970"
        assert config.format(-0.5) == "1/1/1970"
        assert config.format(-1) == "12/31/1969"

    def test_none_is_now(self) -> None:
        config = initialize("en-US", {"timeZone": "UTC", "year": "numeric"})
        before = datetime.now(UTC).year
        formatted = config.format()
        after = datetime.now(UTC).year
        assert formatted in {str(before), str(after)}

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf"), 8.64e15 + 1])
    def test_invalid_time_values(self, value: float) -> None:
        config = initialize("en-US", UTC_OPTIONS)
        with pytest.raises(InvalidTimeValueError) as exc_info:
            config.format(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_TIME_VALUE

    def test_bool_rejected(self) -> None:
        with pytest.raises(InvalidTimeValueError):
            initialize("en-US", UTC_OPTIONS).format(True)  # type: ignore[arg-type]

    def test_clip_limit_outside_datetime_range(self) -> None:
        config = initialize("en-US", UTC_OPTIONS)
        with pytest.raises(InvalidTimeValueError) as exc_info:
            config.format(8.64e15)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.TIME_VALUE_OUT_OF_HOST_RANGE

    def test_wrong_receiver(self) -> None:
        with pytest.raises(WrongReceiverTypeError) as exc_info:
            format_date_time("not a config", 0)
        assert "format" in str(exc_info.value)

    def test_time_clip(self) -> None:
        assert time_clip(1.9) == 1
        assert time_clip(-1.9) == -1
        assert time_clip(8.64e15) == 8_640_000_000_000_000


class TestFormatToParts:
    """Typed parts."""

    def test_long_date_parts(self) -> None:
        config = initialize(
            "en-US", {"timeZone": "UTC", "year": "numeric", "month": "long", "day": "numeric"}
        )
        parts = config.format_to_parts(0)
        assert [(part.type, part.value) for part in parts] == [
            (PartType.MONTH, "January"),
            (PartType.LITERAL, " "),
            (PartType.DAY, "1"),
            (PartType.LITERAL, ", "),
            (PartType.YEAR, "1970"),
        ]

    def test_time_parts(self) -> None:
        config = initialize("en-US", {"timeZone": "UTC", "hour": "numeric", "minute": "numeric"})
        types = [part.type for part in config.format_to_parts(0)]
        assert PartType.HOUR in types
        assert PartType.MINUTE in types
        assert PartType.DAY_PERIOD in types

    def test_wrong_receiver(self) -> None:
        with pytest.raises(WrongReceiverTypeError) as exc_info:
            format_to_parts(42, 0)
        assert "formatToParts" in str(exc_info.value)

    @given(
        epoch_ms=st.integers(min_value=-(10**13), max_value=10**13),
        options=st.fixed_dictionaries(
            {},
            optional={
                "weekday": st.sampled_from(["narrow", "long", "short"]),
                "year": st.sampled_from(["2-digit", "numeric"]),
                "month": st.sampled_from(["narrow", "long", "short", "2-digit", "numeric"]),
                "day": st.sampled_from(["2-digit", "numeric"]),
                "hour": st.sampled_from(["2-digit", "numeric"]),
                "minute": st.sampled_from(["2-digit", "numeric"]),
                "hourCycle": st.sampled_from(["h11", "h12", "h23", "h24"]),
            },
        ),
        locale=st.sampled_from(["en-US", "de-DE", "fr-FR", "ja-JP"]),
    )
    @example(epoch_ms=0, options={}, locale="en-US")
    def test_parts_concatenate_to_format(
        self, epoch_ms: int, options: dict[str, str], locale: str
    ) -> None:
        """Property: joined part values equal the formatted string."""
        config = initialize(locale, {"timeZone": "UTC", **options})
        event(f"option_count={len(options)}")
        parts = config.format_to_parts(epoch_ms)
        assert "".join(part.value for part in parts) == format_date_time(config, epoch_ms)
        assert all(part.value for part in parts)


class TestDateTimeFormatConfig:
    """Configuration object."""

    def test_pattern_property(self) -> None:
        assert initialize("en-US", UTC_OPTIONS).pattern == "M/d/y"

    def test_equal_configs_compare_equal(self) -> None:
        assert initialize("en-US", UTC_OPTIONS) == initialize("en-US", UTC_OPTIONS)

    def test_is_config_instance(self) -> None:
        assert isinstance(initialize("en-US", UTC_OPTIONS), DateTimeFormatConfig)
