"""Date conversion service.

DateConverter owns a formatter cache, the settings it was built with and
a clock. It implements the public operations; ``datekit.api`` exposes a
process-default instance through module-level functions.

Parse failures are swallowed on purpose: conversions return None and the
elapsed-time operations report "just now". Malformed input is therefore
indistinguishable from a date less than a minute old.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Union

from datekit.cache import FormatterCache
from datekit.config import FormatterConfig
from datekit.elapsed import ElapsedTime, classify
from datekit.formats import DateFormat
from datekit.formatter import DateFormatter
from datekit.settings import Settings, local_timezone

logger = logging.getLogger(__name__)

FormatSpec = Union[DateFormat, FormatterConfig]

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current time in the host's local zone."""
    return datetime.now(local_timezone())


def as_config(spec: FormatSpec) -> FormatterConfig:
    """Wrap a bare DateFormat into a FormatterConfig."""
    if isinstance(spec, FormatterConfig):
        return spec
    return FormatterConfig(format=spec)


class DateConverter:
    """Converts between text and datetimes and renders elapsed time.

    Example:
        converter = DateConverter()
        converter.date_from_string("01.02.2024", DateFormat.SHORT_DATE)
        converter.time_ago_string("2024-02-01T21:24:56.142+0500")  # "2 года"
    """

    def __init__(
        self,
        cache: FormatterCache | None = None,
        settings: Settings | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize converter.

        Args:
            cache: Formatter cache (a new one if None).
            settings: Defaults; taken from the cache or the environment if None.
            clock: Returns "now" for elapsed-time calls.
        """
        if cache is None:
            cache = FormatterCache(settings)
        self._cache = cache
        self._clock = clock or system_clock

    @property
    def cache(self) -> FormatterCache:
        return self._cache

    @property
    def settings(self) -> Settings:
        return self._cache.settings

    def formatter(self, spec: FormatSpec) -> DateFormatter:
        """Get the cached formatter for a format or configuration."""
        return self._cache.get(as_config(spec))

    def date_from_string(
        self,
        text: str,
        spec: FormatSpec = DateFormat.API_FULL_DATE_FORMAT,
    ) -> datetime | None:
        """Parse text into a datetime.

        Args:
            text: Text to parse.
            spec: Catalog format or full configuration.

        Returns:
            Aware datetime, or None if the text does not match.
        """
        return self.formatter(spec).parse(text)

    def string_from_date(self, date: datetime, spec: FormatSpec) -> str:
        """Format a datetime.

        Args:
            date: Datetime to format.
            spec: Catalog format or full configuration.

        Returns:
            Formatted string.
        """
        return self.formatter(spec).format(date)

    def time_ago_classified(
        self,
        text: str,
        spec: FormatSpec = DateFormat.API_FULL_DATE_FORMAT,
    ) -> ElapsedTime:
        """Classify the time elapsed since the date in ``text``.

        Returns:
            ElapsedTime tagged with the coarsest non-zero unit; JUST_NOW
            if nothing qualifies or the text does not parse.
        """
        then = self.date_from_string(text, spec)
        if then is None:
            logger.debug("Could not parse %r, reporting just now", text)
        return classify(then, self._clock())

    def time_ago_string(
        self,
        text: str,
        spec: FormatSpec = DateFormat.API_FULL_DATE_FORMAT,
    ) -> str:
        """Elapsed time since the date in ``text`` as a phrase.

        Returns:
            E.g. "3 дня", or "Только что".
        """
        return self.time_ago_classified(text, spec).text
