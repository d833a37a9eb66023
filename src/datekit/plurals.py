"""Numeral agreement for Russian.

Russian nouns after a number take one of three forms:

    1, 21, 101        -> singular          (1 год, 21 день)
    2-4, 22-24, 102   -> plural            (2 года, 23 дня)
    0, 5-20, 25-30    -> plural genitive   (5 лет, 11 дней)

The teens 11-14 always take the genitive plural whatever their last
digit, which is why ``count == 1`` style pluralization is wrong here.
"""

from __future__ import annotations

from enum import Enum


class PluralCategory(Enum):
    """Plural categories used by the Slavic rule."""

    ONE = "one"
    FEW = "few"
    MANY = "many"


def get_plural_category(count: int) -> PluralCategory:
    """Get the plural category for a count.

    Args:
        count: The number. The sign is ignored.

    Returns:
        ONE, FEW or MANY.

    Example:
        get_plural_category(21)  # ONE
        get_plural_category(3)   # FEW
        get_plural_category(12)  # MANY
    """
    abs_count = abs(count)
    i10 = abs_count % 10
    i100 = abs_count % 100

    if i10 == 1 and i100 != 11:
        return PluralCategory.ONE
    if 2 <= i10 <= 4 and (i100 < 10 or i100 >= 20):
        return PluralCategory.FEW
    return PluralCategory.MANY


def agree(count: int, singular: str, plural: str, plural_genitive: str) -> str:
    """Select the word form that agrees with a count.

    Args:
        count: The number.
        singular: Form used after 1, 21, 31...
        plural: Form used after 2-4, 22-24...
        plural_genitive: Form used after 0, 5-20, 25-30...

    Returns:
        The matching form, without the number.
    """
    category = get_plural_category(count)
    if category is PluralCategory.ONE:
        return singular
    if category is PluralCategory.FEW:
        return plural
    return plural_genitive


def pluralize(count: int, singular: str, plural: str, plural_genitive: str) -> str:
    """Render a count followed by the agreeing word form.

    Example:
        pluralize(3, "год", "года", "лет")   # "3 года"
        pluralize(11, "день", "дня", "дней")  # "11 дней"
    """
    return f"{count} {agree(count, singular, plural, plural_genitive)}"
