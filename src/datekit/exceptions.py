"""Exception hierarchy for datekit.

Only programmer and configuration mistakes raise. Text that fails to
parse is never an error: conversions return ``None`` and the elapsed-time
operations degrade to "just now".
"""

from __future__ import annotations


class DatekitError(Exception):
    """Base datekit error."""

    pass


class PatternError(DatekitError):
    """Pattern string contains an unsupported field letter."""

    def __init__(self, pattern: str, letter: str, position: int) -> None:
        self.pattern = pattern
        self.letter = letter
        self.position = position
        super().__init__(
            f"Unsupported field {letter!r} at position {position} in pattern {pattern!r}"
        )


class UnknownFormatError(DatekitError):
    """No catalog format with the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown date format: {name!r}")


class UnknownLocaleError(DatekitError):
    """Locale tag outside the supported set."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unsupported locale: {tag!r} (expected 'ru' or 'en')")


class InvalidTimezoneError(DatekitError):
    """Timezone name not found in the timezone database."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown timezone: {name!r}")


class SettingsError(DatekitError):
    """Invalid value in the environment settings."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid datekit settings: {', '.join(errors)}")
