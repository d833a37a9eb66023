"""Locale tags and the name tables used by the pattern engine.

Month names follow the CLDR "format" context: Russian full month names
are genitive ("1 февраля"), abbreviated ones carry a trailing dot except
for the short "мая".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from datekit.exceptions import UnknownLocaleError


class LocaleFormat(Enum):
    """Supported locales, valued by their platform identifier."""

    RUS = "ru_RU"
    ENG = "en_US"

    @property
    def tag(self) -> str:
        """Short language tag ("ru" or "en")."""
        return self.value.split("_")[0]

    @property
    def identifier(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, value: str) -> "LocaleFormat":
        """Convert a locale string to LocaleFormat.

        Args:
            value: "ru", "ru_RU", "ru-RU", "rus" and the English
                equivalents, case-insensitive.

        Returns:
            LocaleFormat member.

        Raises:
            UnknownLocaleError: If the locale is not supported.
        """
        mapping = {
            "ru": cls.RUS,
            "rus": cls.RUS,
            "ru_ru": cls.RUS,
            "en": cls.ENG,
            "eng": cls.ENG,
            "en_us": cls.ENG,
        }
        key = value.strip().lower().replace("-", "_")
        if key not in mapping:
            raise UnknownLocaleError(value)
        return mapping[key]


@dataclass(frozen=True)
class LocaleNames:
    """Month and weekday names for one locale.

    Attributes:
        months: Full month names, January first.
        months_abbr: Abbreviated month names, January first.
        weekdays: Full weekday names, Monday first.
        weekdays_abbr: Abbreviated weekday names, Monday first.
    """

    months: tuple[str, ...]
    months_abbr: tuple[str, ...]
    weekdays: tuple[str, ...]
    weekdays_abbr: tuple[str, ...]


_LOCALE_NAMES: dict[LocaleFormat, LocaleNames] = {
    LocaleFormat.ENG: LocaleNames(
        months=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
        months_abbr=(
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        weekdays=(
            "Monday", "Tuesday", "Wednesday", "Thursday",
            "Friday", "Saturday", "Sunday",
        ),
        weekdays_abbr=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    ),
    LocaleFormat.RUS: LocaleNames(
        months=(
            "января", "февраля", "марта", "апреля", "мая", "июня",
            "июля", "августа", "сентября", "октября", "ноября", "декабря",
        ),
        months_abbr=(
            "янв.", "февр.", "мар.", "апр.", "мая", "июн.",
            "июл.", "авг.", "сент.", "окт.", "нояб.", "дек.",
        ),
        weekdays=(
            "понедельник", "вторник", "среда", "четверг",
            "пятница", "суббота", "воскресенье",
        ),
        weekdays_abbr=("пн", "вт", "ср", "чт", "пт", "сб", "вс"),
    ),
}


def get_locale_names(locale: LocaleFormat) -> LocaleNames:
    """Get the name tables for a locale."""
    return _LOCALE_NAMES[locale]
