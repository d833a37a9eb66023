"""Tests for the datekit CLI."""

import pytest
from typer.testing import CliRunner

from datekit.cli import app


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("DATEKIT_DEFAULT_LOCALE", "DATEKIT_DEFAULT_TIMEZONE", "DATEKIT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestParseCommand:
    """Test `datekit parse`."""

    def test_parse_short_date(self, runner):
        result = runner.invoke(app, ["parse", "01.02.2024", "--format", "shortDate", "--timezone", "UTC"])
        assert result.exit_code == 0
        assert result.output.strip() == "2024-02-01T00:00:00+00:00"

    def test_parse_default_format(self, runner):
        result = runner.invoke(app, ["parse", "2024-02-01T21:24:56.142+0500", "-t", "UTC"])
        assert result.exit_code == 0
        assert result.output.strip() == "2024-02-01T16:24:56.142000+00:00"

    def test_parse_russian(self, runner):
        result = runner.invoke(
            app, ["parse", "01 февраля 2024", "-f", "full_date", "-l", "ru", "-t", "UTC"]
        )
        assert result.exit_code == 0
        assert result.output.startswith("2024-02-01")

    def test_parse_failure(self, runner):
        result = runner.invoke(app, ["parse", "not-a-date", "--format", "api_date_format"])
        assert result.exit_code == 1
        assert "Could not parse" in result.output

    def test_unknown_format(self, runner):
        result = runner.invoke(app, ["parse", "01.02.2024", "--format", "longDate"])
        assert result.exit_code == 1
        assert "Unknown date format" in result.output


class TestFormatCommand:
    """Test `datekit format`."""

    def test_format_date_with_time(self, runner):
        result = runner.invoke(app, [
            "format", "2024-02-06T10:07:00+00:00",
            "--format", "cutWordsDateWithTime", "--locale", "ru", "--timezone", "UTC",
        ])
        assert result.exit_code == 0
        assert result.output.strip() == "6 февр. в 10:07"

    def test_format_default_short_date(self, runner):
        result = runner.invoke(app, ["format", "2024-02-01T12:00:00"])
        assert result.exit_code == 0
        assert result.output.strip() == "01.02.2024"

    def test_bad_iso_value(self, runner):
        result = runner.invoke(app, ["format", "yesterday"])
        assert result.exit_code == 1

    def test_unknown_locale(self, runner):
        result = runner.invoke(app, ["format", "2024-02-01T12:00:00", "--locale", "de"])
        assert result.exit_code == 1
        assert "Unsupported locale" in result.output

    def test_unknown_timezone(self, runner):
        result = runner.invoke(app, ["format", "2024-02-01T12:00:00", "--timezone", "Mars/Base"])
        assert result.exit_code == 1
        assert "Unknown timezone" in result.output


class TestAgoCommand:
    """Test `datekit ago`."""

    def test_malformed_is_just_now(self, runner):
        result = runner.invoke(app, ["ago", "not-a-date"])
        assert result.exit_code == 0
        assert result.output.strip() == "Только что"

    def test_unit_flag(self, runner):
        result = runner.invoke(app, ["ago", "not-a-date", "--unit"])
        assert result.output.strip() == "just_now: Только что"

    def test_years_ago(self, runner):
        result = runner.invoke(app, ["ago", "01.02.1990", "--format", "short_date", "--unit"])
        assert result.exit_code == 0
        assert result.output.startswith("years: ")
        assert result.output.strip().endswith(("год", "года", "лет"))


class TestOtherCommands:
    """Test `datekit formats` and `datekit plural`."""

    def test_formats_lists_catalog(self, runner):
        result = runner.invoke(app, ["formats"])
        assert result.exit_code == 0
        assert "short_date" in result.output
        assert "HH:mm" in result.output

    @pytest.mark.parametrize("count,expected", [
        ("21", "21 год"),
        ("3", "3 года"),
        ("12", "12 лет"),
    ])
    def test_plural(self, runner, count, expected):
        result = runner.invoke(app, ["plural", count, "год", "года", "лет"])
        assert result.exit_code == 0
        assert result.output.strip() == expected

    def test_verbose_flag(self, runner):
        result = runner.invoke(app, ["--verbose", "plural", "1", "день", "дня", "дней"])
        assert result.exit_code == 0
        assert "1 день" in result.output

    def test_bad_log_level_env(self, runner, monkeypatch):
        monkeypatch.setenv("DATEKIT_LOG_LEVEL", "LOUD")
        result = runner.invoke(app, ["plural", "1", "день", "дня", "дней"])
        assert result.exit_code == 1
