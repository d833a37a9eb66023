"""Module-level API backed by a process-default DateConverter."""

from __future__ import annotations

import threading
from datetime import datetime

from datekit.converter import DateConverter, FormatSpec
from datekit.elapsed import ElapsedTime
from datekit.formats import DateFormat

_converter: DateConverter | None = None
_converter_lock = threading.Lock()


def get_converter() -> DateConverter:
    """Get the process-default converter, creating it on first use."""
    global _converter
    with _converter_lock:
        if _converter is None:
            _converter = DateConverter()
        return _converter


def set_converter(converter: DateConverter) -> None:
    """Replace the process-default converter."""
    global _converter
    with _converter_lock:
        _converter = converter


def reset_converter() -> None:
    """Drop the process-default converter and its cache."""
    global _converter
    with _converter_lock:
        _converter = None


def date_from_string(
    text: str,
    spec: FormatSpec = DateFormat.API_FULL_DATE_FORMAT,
) -> datetime | None:
    """Parse text into a datetime; None if it does not match.

    Example:
        date_from_string("01.02.2024", DateFormat.SHORT_DATE)
        date_from_string("6 февр. в 10:07", FormatterConfig(
            DateFormat.cut_words_date_with_time(LocaleFormat.RUS)))
    """
    return get_converter().date_from_string(text, spec)


def string_from_date(date: datetime, spec: FormatSpec) -> str:
    """Format a datetime with a catalog format or configuration."""
    return get_converter().string_from_date(date, spec)


def time_ago_string(
    text: str,
    spec: FormatSpec = DateFormat.API_FULL_DATE_FORMAT,
) -> str:
    """Elapsed time since the date in ``text``, e.g. "5 минут"."""
    return get_converter().time_ago_string(text, spec)


def time_ago_classified(
    text: str,
    spec: FormatSpec = DateFormat.API_FULL_DATE_FORMAT,
) -> ElapsedTime:
    """Elapsed time since the date in ``text``, tagged with its unit."""
    return get_converter().time_ago_classified(text, spec)
