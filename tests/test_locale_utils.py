"""Tests for locale_utils.py.

Covers BCP-47/POSIX conversion, Unicode extension splitting and joining,
cached Babel locales, and system locale detection.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from dtfengine.locale_utils import (
    format_unicode_extension,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
    split_unicode_extension,
    to_language_tag,
)


class TestNormalizeLocale:
    """BCP-47 <-> POSIX conversion."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_script_subtag(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    def test_to_language_tag(self) -> None:
        assert to_language_tag("zh_Hant_TW") == "zh-Hant-TW"
        assert to_language_tag("en") == "en"


class TestSplitUnicodeExtension:
    """Parsing of -u- keywords."""

    def test_no_extension(self) -> None:
        assert split_unicode_extension("en-US") == ("en-US", {})

    def test_keywords(self) -> None:
        assert split_unicode_extension("th-TH-u-ca-buddhist-nu-thai") == (
            "th-TH",
            {"ca": "buddhist", "nu": "thai"},
        )

    def test_key_without_type_is_true(self) -> None:
        assert split_unicode_extension("en-u-hc") == ("en", {"hc": "true"})

    def test_multi_subtag_type(self) -> None:
        assert split_unicode_extension("am-ET-u-ca-ethiopic-amete-alem") == (
            "am-ET",
            {"ca": "ethiopic-amete-alem"},
        )

    def test_keys_lowercased(self) -> None:
        assert split_unicode_extension("en-US-U-HC-H23") == ("en-US", {"hc": "h23"})

    def test_other_singletons_ignored(self) -> None:
        assert split_unicode_extension("en-t-de-u-hc-h11") == ("en", {"hc": "h11"})

    def test_private_use_stops_parsing(self) -> None:
        assert split_unicode_extension("en-x-u-hc-h11") == ("en", {})

    def test_first_occurrence_wins(self) -> None:
        assert split_unicode_extension("en-u-hc-h11-hc-h23") == ("en", {"hc": "h11"})


class TestFormatUnicodeExtension:
    """Joining keywords back into a tag."""

    def test_sorted_keys(self) -> None:
        assert (
            format_unicode_extension("en-US", {"nu": "latn", "ca": "gregory", "hc": "h23"})
            == "en-US-u-ca-gregory-hc-h23-nu-latn"
        )

    def test_empty(self) -> None:
        assert format_unicode_extension("de", {}) == "de"

    @given(
        keywords=st.dictionaries(
            st.sampled_from(["ca", "hc", "nu", "co", "kn"]),
            st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=3, max_size=8),
            max_size=5,
        )
    )
    def test_split_inverts_format(self, keywords: dict[str, str]) -> None:
        """Property: splitting a formatted tag gives back its keywords."""
        event(f"keyword_count={len(keywords)}")
        tag = format_unicode_extension("en-US", keywords)
        assert split_unicode_extension(tag) == ("en-US", keywords)


class TestGetBabelLocale:
    """Cached Babel locale lookup."""

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_posix_format(self) -> None:
        assert get_babel_locale("de_DE").language == "de"

    def test_caching(self) -> None:
        assert get_babel_locale("fr-FR") is get_babel_locale("fr-FR")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("qq-QQ")


class TestGetSystemLocale:
    """System locale detection."""

    def test_getlocale_success(self) -> None:
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en-US"

    def test_getlocale_with_encoding(self) -> None:
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de-DE"

    def test_getlocale_c_filtered(self) -> None:
        with patch("locale.getlocale", return_value=("C", None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "fr_FR"}, clear=True):
                assert get_system_locale() == "fr-FR"

    def test_getlocale_valueerror_fallback(self) -> None:
        with patch("locale.getlocale", side_effect=ValueError("mock error")):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True):
                assert get_system_locale() == "pt-BR"

    def test_lc_all_priority(self) -> None:
        env = {"LC_ALL": "ja_JP", "LC_TIME": "ko_KR", "LANG": "en_US"}
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "ja-JP"

    def test_lc_time_before_lang(self) -> None:
        env = {"LC_TIME": "ko_KR", "LANG": "en_US"}
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "ko-KR"

    def test_env_var_encoding_and_modifier_stripped(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "de_AT.UTF-8@euro"}, clear=True):
                assert get_system_locale() == "de-AT"

    def test_posix_env_filtered(self) -> None:
        env = {"LC_ALL": "POSIX", "LANG": "C"}
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "en-US"

    def test_nothing_detected_defaults_to_en_us(self) -> None:
        with patch("locale.getlocale", side_effect=ValueError("mock error")):  # noqa: SIM117
            with patch.dict(os.environ, {}, clear=True):
                assert get_system_locale() == "en-US"
