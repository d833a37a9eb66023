"""Configured date formatter.

A DateFormatter binds a compiled pattern to a locale and a timezone. It
is built once per configuration by the FormatterCache and is immutable,
so one instance can be shared freely.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from datekit.locales import LocaleFormat, get_locale_names
from datekit.patterns import compile_pattern

logger = logging.getLogger(__name__)


class DateFormatter:
    """Formats and parses dates with one pattern, locale and timezone.

    Example:
        formatter = DateFormatter("dd MMMM yyyy", LocaleFormat.RUS, ZoneInfo("Europe/Moscow"))
        formatter.format(datetime(2024, 2, 1))  # "01 февраля 2024"
        formatter.parse("01 февраля 2024")       # datetime(2024, 2, 1, tzinfo=...)
    """

    def __init__(
        self,
        pattern: str | None,
        locale: LocaleFormat,
        timezone: tzinfo,
    ) -> None:
        self._pattern = pattern or ""
        self._locale = locale
        self._timezone = timezone
        self._names = get_locale_names(locale)
        self._compiled = compile_pattern(self._pattern)
        self._regex = self._compiled.build_regex(self._names)

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def locale(self) -> LocaleFormat:
        return self._locale

    @property
    def timezone(self) -> tzinfo:
        return self._timezone

    def parse(self, text: str) -> datetime | None:
        """Parse text into an aware datetime.

        Args:
            text: Text that must match the whole pattern.

        Returns:
            Datetime in the formatter timezone, or None if the text does
            not match.
        """
        if not self._compiled.tokens:
            return None
        match = self._regex.fullmatch(text)
        if match is None:
            logger.debug("Text %r does not match pattern %r", text, self._pattern)
            return None
        result = self._compiled.from_match(match, self._names, self._timezone)
        if result is None:
            logger.debug("Text %r is not a valid date for pattern %r", text, self._pattern)
        return result

    def format(self, dt: datetime) -> str:
        """Render a datetime.

        Aware datetimes are converted to the formatter timezone first;
        naive ones are taken as already being in it.
        """
        if dt.tzinfo is not None:
            dt = dt.astimezone(self._timezone)
        return self._compiled.format(dt, self._names)

    def __repr__(self) -> str:
        return (
            f"DateFormatter(pattern={self._pattern!r}, "
            f"locale={self._locale.value!r}, timezone={self._timezone!r})"
        )
