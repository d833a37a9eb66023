"""Environment-driven defaults for datekit.

Variables (prefix ``DATEKIT``):

    DATEKIT_DEFAULT_LOCALE     ru | en            (default: en)
    DATEKIT_DEFAULT_TIMEZONE   IANA name          (default: host local zone)
    DATEKIT_LOG_LEVEL          logging level name (default: WARNING)

Usage:
    >>> settings = Settings.from_env()
    >>> settings.default_locale
    <LocaleFormat.ENG: 'en_US'>
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import tzlocal

from datekit.exceptions import DatekitError, SettingsError
from datekit.locales import LocaleFormat

ENV_PREFIX = "DATEKIT"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def local_timezone() -> tzinfo:
    """Get the host's local timezone.

    The zone follows the host's DST rules, so instants on either side of a
    transition get their own offset.
    """
    return tzlocal()


@dataclass(frozen=True)
class Settings:
    """Library defaults.

    Attributes:
        default_locale: Locale for configurations that do not set one.
        default_timezone: IANA name for configurations that do not set a
            timezone; None means the host's local zone.
        log_level: Level name used by the CLI.
    """

    default_locale: LocaleFormat = LocaleFormat.ENG
    default_timezone: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = ENV_PREFIX,
    ) -> "Settings":
        """Load settings from environment variables.

        Args:
            environ: Mapping to read (defaults to os.environ).
            prefix: Variable prefix.

        Returns:
            Settings instance.

        Raises:
            SettingsError: If any variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        errors: list[str] = []
        values: dict[str, object] = {}

        locale = env.get(f"{prefix}_DEFAULT_LOCALE")
        if locale:
            try:
                values["default_locale"] = LocaleFormat.from_tag(locale)
            except DatekitError as e:
                errors.append(str(e))

        tz_name = env.get(f"{prefix}_DEFAULT_TIMEZONE")
        if tz_name:
            try:
                ZoneInfo(tz_name)
                values["default_timezone"] = tz_name
            except (ZoneInfoNotFoundError, ValueError):
                errors.append(f"Unknown timezone: {tz_name!r}")

        level = env.get(f"{prefix}_LOG_LEVEL")
        if level:
            if level.upper() in _LOG_LEVELS:
                values["log_level"] = level.upper()
            else:
                errors.append(f"Unknown log level: {level!r}")

        if errors:
            raise SettingsError(errors)
        return cls(**values)  # type: ignore[arg-type]

    def resolve_timezone(self) -> tzinfo:
        """Get the default timezone as a tzinfo."""
        if self.default_timezone:
            return ZoneInfo(self.default_timezone)
        return local_timezone()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
