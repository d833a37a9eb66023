"""Catalog of named date formats.

Each format maps to an LDML pattern string. All but one are fixed;
``cut_words_date_with_time`` embeds a locale and picks its pattern from it.

Example:
    from datekit.formats import DateFormat, LocaleFormat, resolve_pattern

    resolve_pattern(DateFormat.SHORT_DATE)  # "dd.MM.yyyy"
    resolve_pattern(DateFormat.cut_words_date_with_time(LocaleFormat.RUS))
    # "d MMM 'в' HH:mm"
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Iterator

from datekit.exceptions import UnknownFormatError
from datekit.locales import LocaleFormat

CUT_WORDS_DATE_WITH_TIME = "cut_words_date_with_time"

_DATE_WITH_TIME_PATTERNS: dict[LocaleFormat, str] = {
    LocaleFormat.ENG: "d MMM 'at' HH:mm",
    LocaleFormat.RUS: "d MMM 'в' HH:mm",
}


@dataclass(frozen=True)
class DateFormat:
    """A named catalog format.

    Attributes:
        name: Catalog name (snake_case).
        pattern: LDML pattern string.
        example: Sample rendering, for listings.
        locale: Embedded locale, set only for cut_words_date_with_time.
    """

    name: str
    pattern: str
    example: str = ""
    locale: LocaleFormat | None = None

    CUT_ZERO_SHORT_DATE: ClassVar["DateFormat"]
    SHORT_DATE: ClassVar["DateFormat"]
    FULL_DATE: ClassVar["DateFormat"]
    CUT_WORDS_FULL_DATE: ClassVar["DateFormat"]
    CUT_WORDS_DATE: ClassVar["DateFormat"]
    TIME: ClassVar["DateFormat"]
    API_FULL_DATE_FORMAT: ClassVar["DateFormat"]
    API_DATE_FORMAT: ClassVar["DateFormat"]
    DATE: ClassVar["DateFormat"]
    DAY_OF_THE_WEEK: ClassVar["DateFormat"]

    @classmethod
    def cut_words_date_with_time(cls, locale: LocaleFormat) -> "DateFormat":
        """Day, abbreviated month and time: "6 Feb at 10:07" / "6 февр. в 10:07"."""
        examples = {
            LocaleFormat.ENG: "6 Feb at 10:07",
            LocaleFormat.RUS: "6 февр. в 10:07",
        }
        return cls(
            name=CUT_WORDS_DATE_WITH_TIME,
            pattern=_DATE_WITH_TIME_PATTERNS[locale],
            example=examples[locale],
            locale=locale,
        )

    @classmethod
    def from_name(cls, name: str, locale: LocaleFormat | None = None) -> "DateFormat":
        """Look up a format by name.

        Args:
            name: snake_case or camelCase catalog name.
            locale: Locale for cut_words_date_with_time (English if omitted).

        Returns:
            The catalog format.

        Raises:
            UnknownFormatError: If no format has that name.
        """
        key = name.strip()
        if not key.islower() and not key.isupper():
            key = re.sub(r"(?<!^)(?=[A-Z])", "_", key)
        key = key.lower()
        if key == CUT_WORDS_DATE_WITH_TIME:
            return cls.cut_words_date_with_time(locale or LocaleFormat.ENG)
        if key not in _FIXED_FORMATS:
            raise UnknownFormatError(name)
        return _FIXED_FORMATS[key]

    @property
    def embeds_locale(self) -> bool:
        return self.locale is not None


_FIXED_FORMATS: dict[str, DateFormat] = {
    fmt.name: fmt
    for fmt in (
        DateFormat("cut_zero_short_date", "d.M.yyyy", "1.2.2024"),
        DateFormat("short_date", "dd.MM.yyyy", "01.02.2024"),
        DateFormat("full_date", "dd MMMM yyyy", "01 February 2024"),
        DateFormat("cut_words_full_date", "d MMM yyy", "1 Feb 2024"),
        DateFormat("cut_words_date", "dd MMM", "11 Nov"),
        DateFormat("time", "HH:mm", "21:24"),
        DateFormat(
            "api_full_date_format",
            "yyyy-MM-dd'T'HH:mm:ss.SSSZ",
            "2024-02-01T21:24:56.142+0500",
        ),
        DateFormat("api_date_format", "yyyy-MM-dd", "2024-02-01"),
        DateFormat("date", "dd MMMM", "11 November"),
        DateFormat("day_of_the_week", "eeee", "Monday"),
    )
}

for _fmt in _FIXED_FORMATS.values():
    setattr(DateFormat, _fmt.name.upper(), _fmt)
del _fmt


def resolve_pattern(spec: DateFormat) -> str:
    """Get the pattern string of a catalog format.

    Literal words are quoted LDML-style, so cut_words_date_with_time
    resolves to ``d MMM 'at' HH:mm`` and renders as "6 Feb at 10:07".
    Unquoted, the letters of "at" would be read as pattern fields.
    """
    return spec.pattern


def iter_formats() -> Iterator[DateFormat]:
    """Iterate the fixed formats, then cut_words_date_with_time per locale."""
    yield from _FIXED_FORMATS.values()
    for locale in LocaleFormat:
        yield DateFormat.cut_words_date_with_time(locale)


__all__ = [
    "DateFormat",
    "LocaleFormat",
    "resolve_pattern",
    "iter_formats",
]
