"""Tests for date <-> string conversion."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

import datekit
from datekit.config import FormatterConfig
from datekit.converter import DateConverter
from datekit.formats import DateFormat
from datekit.locales import LocaleFormat
from datekit.settings import Settings

UTC = ZoneInfo("UTC")


class TestRoundTrip:
    """format(parse(s)) == s for every catalog entry."""

    @pytest.mark.parametrize("fmt,text", [
        (DateFormat.CUT_ZERO_SHORT_DATE, "1.2.2024"),
        (DateFormat.SHORT_DATE, "01.02.2024"),
        (DateFormat.FULL_DATE, "01 February 2024"),
        (DateFormat.CUT_WORDS_FULL_DATE, "1 Feb 2024"),
        (DateFormat.CUT_WORDS_DATE, "11 Nov"),
        (DateFormat.TIME, "21:24"),
        (DateFormat.API_FULL_DATE_FORMAT, "2024-02-01T21:24:56.142+0000"),
        (DateFormat.API_DATE_FORMAT, "2024-02-01"),
        (DateFormat.DATE, "11 November"),
        (DateFormat.DAY_OF_THE_WEEK, "Monday"),
        (DateFormat.cut_words_date_with_time(LocaleFormat.ENG), "6 Feb at 10:07"),
        (DateFormat.cut_words_date_with_time(LocaleFormat.RUS), "6 февр. в 10:07"),
    ])
    def test_english_default_locale(self, converter, fmt, text):
        parsed = converter.date_from_string(text, fmt)
        assert parsed is not None
        assert converter.string_from_date(parsed, fmt) == text

    @pytest.mark.parametrize("fmt,text", [
        (DateFormat.FULL_DATE, "01 февраля 2024"),
        (DateFormat.CUT_WORDS_FULL_DATE, "1 февр. 2024"),
        (DateFormat.CUT_WORDS_DATE, "11 нояб."),
        (DateFormat.DATE, "11 ноября"),
        (DateFormat.DAY_OF_THE_WEEK, "понедельник"),
    ])
    def test_russian_locale(self, converter, fmt, text):
        config = FormatterConfig(fmt, LocaleFormat.RUS)
        parsed = converter.date_from_string(text, config)
        assert parsed is not None
        assert converter.string_from_date(parsed, config) == text

    def test_api_format_with_matching_timezone(self, converter):
        config = FormatterConfig(DateFormat.API_FULL_DATE_FORMAT, timezone="Asia/Yekaterinburg")
        text = "2024-02-01T21:24:56.142+0500"
        assert converter.string_from_date(converter.date_from_string(text, config), config) == text


class TestDateFromString:
    """Test parsing through the converter."""

    def test_default_format_is_api_full(self, converter):
        result = converter.date_from_string("2024-02-01T21:24:56.142+0500")
        assert result == datetime(2024, 2, 1, 16, 24, 56, 142000, tzinfo=UTC)

    def test_uses_configured_timezone(self, converter):
        tz = ZoneInfo("Europe/Moscow")
        result = converter.date_from_string("01.02.2024", FormatterConfig(DateFormat.SHORT_DATE, timezone=tz))
        assert result == datetime(2024, 2, 1, tzinfo=tz)

    def test_malformed_input_returns_none(self, converter):
        assert converter.date_from_string("not-a-date", DateFormat.API_DATE_FORMAT) is None

    def test_empty_config_never_parses(self, converter):
        assert converter.date_from_string("", FormatterConfig()) is None
        assert converter.date_from_string("01.02.2024", FormatterConfig()) is None


class TestStringFromDate:
    """Test formatting through the converter."""

    def test_aware_date_is_converted(self, converter):
        date = datetime(2024, 2, 1, 21, 24, tzinfo=UTC)
        config = FormatterConfig(DateFormat.TIME, timezone="Europe/Moscow")
        assert converter.string_from_date(date, config) == "00:24"

    def test_naive_date_is_taken_as_formatter_time(self, converter):
        config = FormatterConfig(DateFormat.TIME, timezone="Europe/Moscow")
        assert converter.string_from_date(datetime(2024, 2, 1, 21, 24), config) == "21:24"

    def test_embedded_locale_wins(self, converter):
        config = FormatterConfig(
            DateFormat.cut_words_date_with_time(LocaleFormat.ENG),
            locale=LocaleFormat.RUS,
        )
        assert converter.string_from_date(datetime(2024, 2, 6, 10, 7), config) == "6 Feb at 10:07"

    def test_russian_embedded_locale(self, converter):
        fmt = DateFormat.cut_words_date_with_time(LocaleFormat.RUS)
        assert converter.string_from_date(datetime(2024, 2, 6, 10, 7), fmt) == "6 февр. в 10:07"

    def test_day_of_the_week(self, converter):
        config = FormatterConfig(DateFormat.DAY_OF_THE_WEEK, LocaleFormat.RUS)
        assert converter.string_from_date(datetime(2024, 2, 4), config) == "воскресенье"


class TestConverterCache:
    """Test that the converter memoizes through its cache."""

    def test_structurally_equal_configs_share_formatter(self, converter):
        a = FormatterConfig(DateFormat.SHORT_DATE, LocaleFormat.RUS, "UTC")
        b = FormatterConfig(DateFormat.SHORT_DATE, LocaleFormat.RUS, "UTC")
        assert converter.formatter(a) is converter.formatter(b)
        assert converter.date_from_string("01.02.2024", a) == converter.date_from_string("01.02.2024", b)

    def test_bare_format_and_config_share_formatter(self, converter):
        assert converter.formatter(DateFormat.TIME) is converter.formatter(FormatterConfig(DateFormat.TIME))

    def test_settings_come_from_cache(self, converter, settings):
        assert converter.settings is settings


class TestModuleApi:
    """Test the module-level functions."""

    def test_uses_default_converter(self):
        converter = DateConverter(settings=Settings(default_timezone="UTC"))
        datekit.set_converter(converter)
        assert datekit.get_converter() is converter
        assert datekit.date_from_string("01.02.2024", DateFormat.SHORT_DATE) == datetime(2024, 2, 1, tzinfo=UTC)
        assert datekit.string_from_date(datetime(2024, 2, 1), DateFormat.SHORT_DATE) == "01.02.2024"

    def test_malformed_input(self):
        assert datekit.date_from_string("not-a-date", DateFormat.API_DATE_FORMAT) is None
        assert datekit.time_ago_string("not-a-date") == "Только что"
        assert datekit.time_ago_classified("not-a-date").is_just_now

    def test_reset_creates_fresh_converter(self):
        first = datekit.get_converter()
        datekit.reset_converter()
        assert datekit.get_converter() is not first
