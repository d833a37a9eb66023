"""Formatter configuration value object.

A FormatterConfig is the cache key for formatters. Equality and hashing
are defined over one resolved key so the two can never disagree:

    (pattern string, effective locale tag, timezone identifier)

The format is compared by its pattern, not by its name. When the format
is ``cut_words_date_with_time`` its embedded locale is the effective
locale and any separately configured locale is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timezone, tzinfo
from typing import Any, Hashable, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datekit.exceptions import InvalidTimezoneError
from datekit.formats import DateFormat, resolve_pattern
from datekit.locales import LocaleFormat

TimezoneLike = Union[tzinfo, str]

ConfigKey = tuple[Union[str, None], Union[str, None], Hashable]


def resolve_timezone(value: TimezoneLike | None) -> tzinfo | None:
    """Turn an IANA name into a ZoneInfo; pass tzinfo instances through.

    Raises:
        InvalidTimezoneError: If the name is not in the timezone database.
    """
    if value is None or isinstance(value, tzinfo):
        return value
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneError(value) from e


def timezone_id(tz: tzinfo | None) -> Hashable:
    """Stable identifier of a timezone.

    ZoneInfo zones are identified by their IANA key. Fixed offsets are
    identified by name and offset together, since abbreviations such as
    "MSK" are not unique. Other tzinfo types fall back to their repr.
    """
    if tz is None:
        return None
    key = getattr(tz, "key", None)
    if key:
        return key
    if isinstance(tz, timezone):
        return (tz.tzname(None), tz.utcoffset(None))
    return repr(tz)


@dataclass(frozen=True, eq=False)
class FormatterConfig:
    """Format, locale and timezone for one formatter.

    Attributes:
        format: Catalog format (pattern left unset if None).
        locale: Locale; the settings default applies if None.
        timezone: tzinfo or IANA name; the settings default applies if None.

    Example:
        config = FormatterConfig(DateFormat.SHORT_DATE, LocaleFormat.RUS, "Europe/Moscow")
        config == FormatterConfig(DateFormat.SHORT_DATE, LocaleFormat.RUS,
                                  ZoneInfo("Europe/Moscow"))  # True
    """

    format: DateFormat | None = None
    locale: LocaleFormat | None = None
    timezone: TimezoneLike | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timezone", resolve_timezone(self.timezone))

    @property
    def pattern(self) -> str | None:
        if self.format is None:
            return None
        return resolve_pattern(self.format)

    @property
    def effective_locale(self) -> LocaleFormat | None:
        """Locale the formatter will use; an embedded format locale wins."""
        if self.format is not None and self.format.locale is not None:
            return self.format.locale
        return self.locale

    @property
    def key(self) -> ConfigKey:
        locale = self.effective_locale
        return (
            self.pattern,
            locale.tag if locale is not None else None,
            timezone_id(self.timezone),  # type: ignore[arg-type]
        )

    def with_format(self, format: DateFormat) -> "FormatterConfig":
        return replace(self, format=format)

    def with_locale(self, locale: LocaleFormat) -> "FormatterConfig":
        return replace(self, locale=locale)

    def with_timezone(self, timezone: TimezoneLike) -> "FormatterConfig":
        return replace(self, timezone=timezone)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FormatterConfig):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        pattern, locale, tz = self.key
        return f"FormatterConfig(pattern={pattern!r}, locale={locale!r}, timezone={tz!r})"
