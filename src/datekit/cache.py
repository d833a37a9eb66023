"""Formatter cache.

Building a formatter compiles its pattern and parse regex, so formatters
are memoized per configuration. Entries live as long as the cache; the
configuration space is small and finite in practice, so there is no
eviction.
"""

from __future__ import annotations

import logging
import threading

from datekit.config import FormatterConfig
from datekit.formatter import DateFormatter
from datekit.settings import Settings

logger = logging.getLogger(__name__)


class FormatterCache:
    """Thread-safe map from FormatterConfig to DateFormatter.

    Lookups and insert-if-absent happen under one lock, so concurrent first
    use of a configuration stores a single formatter.

    Example:
        cache = FormatterCache()
        a = cache.get(FormatterConfig(DateFormat.SHORT_DATE))
        b = cache.get(FormatterConfig(DateFormat.SHORT_DATE))
        assert a is b
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize cache.

        Args:
            settings: Defaults for locale and timezone (environment if None).
        """
        self._settings = settings or Settings.from_env()
        self._formatters: dict[FormatterConfig, DateFormatter] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> Settings:
        return self._settings

    def get(self, config: FormatterConfig) -> DateFormatter:
        """Get the formatter for a configuration, building it on first use.

        Args:
            config: Formatter configuration.

        Returns:
            The cached formatter.
        """
        with self._lock:
            formatter = self._formatters.get(config)
            if formatter is None:
                formatter = self._build(config)
                self._formatters[config] = formatter
                logger.debug("Built formatter for %r (%d cached)", config, len(self._formatters))
            return formatter

    def _build(self, config: FormatterConfig) -> DateFormatter:
        locale = config.effective_locale or self._settings.default_locale
        timezone = config.timezone or self._settings.resolve_timezone()
        return DateFormatter(config.pattern, locale, timezone)  # type: ignore[arg-type]

    def clear(self) -> None:
        """Drop all cached formatters."""
        with self._lock:
            self._formatters.clear()

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, config: FormatterConfig) -> bool:
        with self._lock:
            return config in self._formatters
