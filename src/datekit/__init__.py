"""datekit - date formatting and Russian "time ago" phrases.

Example:
    from datekit import DateFormat, FormatterConfig, LocaleFormat
    from datekit import date_from_string, string_from_date, time_ago_string

    date = date_from_string("01.02.2024", DateFormat.SHORT_DATE)
    string_from_date(date, FormatterConfig(DateFormat.FULL_DATE, LocaleFormat.RUS))
    # "01 февраля 2024"
    time_ago_string("2024-02-01T21:24:56.142+0500")  # e.g. "2 года"
"""

from datekit.api import (
    date_from_string,
    get_converter,
    reset_converter,
    set_converter,
    string_from_date,
    time_ago_classified,
    time_ago_string,
)
from datekit.cache import FormatterCache
from datekit.config import FormatterConfig
from datekit.converter import DateConverter
from datekit.elapsed import JUST_NOW_PHRASE, ElapsedTime, ElapsedUnit, classify
from datekit.exceptions import (
    DatekitError,
    InvalidTimezoneError,
    PatternError,
    SettingsError,
    UnknownFormatError,
    UnknownLocaleError,
)
from datekit.formats import DateFormat, iter_formats, resolve_pattern
from datekit.formatter import DateFormatter
from datekit.locales import LocaleFormat
from datekit.plurals import PluralCategory, agree, get_plural_category, pluralize
from datekit.settings import Settings

__version__ = "0.1.0"

__all__ = [
    # Operations
    "date_from_string",
    "string_from_date",
    "time_ago_string",
    "time_ago_classified",
    "get_converter",
    "set_converter",
    "reset_converter",
    # Service
    "DateConverter",
    "FormatterCache",
    "DateFormatter",
    # Configuration
    "DateFormat",
    "LocaleFormat",
    "FormatterConfig",
    "Settings",
    "resolve_pattern",
    "iter_formats",
    # Elapsed time
    "ElapsedTime",
    "ElapsedUnit",
    "JUST_NOW_PHRASE",
    "classify",
    # Plurals
    "PluralCategory",
    "agree",
    "get_plural_category",
    "pluralize",
    # Errors
    "DatekitError",
    "PatternError",
    "UnknownFormatError",
    "UnknownLocaleError",
    "InvalidTimezoneError",
    "SettingsError",
]
