"""Elapsed-time ("time ago") classification.

The difference between a date and now is taken in calendar units with
``relativedelta``: one month means one calendar month, not 30 days. The
coarsest non-zero unit wins, in the order years, months, days, hours,
minutes. Anything smaller, a future date, or a date that failed to parse
is reported as "just now".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from dateutil.relativedelta import relativedelta

from datekit.plurals import agree

logger = logging.getLogger(__name__)

JUST_NOW_PHRASE = "Только что"


class ElapsedUnit(Enum):
    """Unit an elapsed time was classified into."""

    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    JUST_NOW = "just_now"


# Priority order; each unit with its singular / plural / genitive plural forms.
UNIT_FORMS: dict[ElapsedUnit, tuple[str, str, str]] = {
    ElapsedUnit.YEARS: ("год", "года", "лет"),
    ElapsedUnit.MONTHS: ("месяц", "месяца", "месяцев"),
    ElapsedUnit.DAYS: ("день", "дня", "дней"),
    ElapsedUnit.HOURS: ("час", "часа", "часов"),
    ElapsedUnit.MINUTES: ("минута", "минуты", "минут"),
}


@dataclass(frozen=True)
class ElapsedTime:
    """Classified elapsed time with its rendered phrase.

    Attributes:
        unit: The unit that was selected.
        text: Rendered phrase, e.g. "2 года" or "Только что".
        count: Number of units (0 for JUST_NOW).

    Example:
        match result:
            case ElapsedTime(unit=ElapsedUnit.YEARS, text=text):
                ...
    """

    unit: ElapsedUnit
    text: str
    count: int = 0

    @classmethod
    def just_now(cls) -> "ElapsedTime":
        return cls(ElapsedUnit.JUST_NOW, JUST_NOW_PHRASE)

    @property
    def is_just_now(self) -> bool:
        return self.unit is ElapsedUnit.JUST_NOW

    def __str__(self) -> str:
        return self.text


def render(unit: ElapsedUnit, count: int) -> str:
    """Render "<count> <agreeing form>" for a unit."""
    singular, plural, plural_genitive = UNIT_FORMS[unit]
    return f"{count} {agree(count, singular, plural, plural_genitive)}"


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo is not None else dt.astimezone()


def calendar_difference(then: datetime, now: datetime) -> relativedelta:
    """Calendar difference from ``then`` to ``now``.

    Both datetimes are brought into ``now``'s timezone so calendar fields
    line up. A naive datetime is taken as host local time.
    """
    now = _aware(now)
    return relativedelta(now, _aware(then).astimezone(now.tzinfo))


def classify(then: datetime | None, now: datetime) -> ElapsedTime:
    """Classify the time elapsed since ``then``.

    Args:
        then: Past datetime, or None when parsing failed.
        now: Current time.

    Returns:
        ElapsedTime for the coarsest non-zero unit, or JUST_NOW.
    """
    if then is None:
        return ElapsedTime.just_now()

    now = _aware(now)
    then = _aware(then)
    delta = calendar_difference(then, now)
    components = (
        (ElapsedUnit.YEARS, delta.years),
        (ElapsedUnit.MONTHS, delta.months),
        (ElapsedUnit.DAYS, delta.days),
        (ElapsedUnit.HOURS, delta.hours),
        (ElapsedUnit.MINUTES, delta.minutes),
    )
    for unit, count in components:
        if count > 0:
            return ElapsedTime(unit, render(unit, count), count)

    if then > now:
        logger.debug("Date %s is in the future, reporting just now", then.isoformat())
    return ElapsedTime.just_now()
