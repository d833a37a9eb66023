"""LDML pattern engine.

Compiles pattern strings such as ``"dd MMMM yyyy"`` or
``"yyyy-MM-dd'T'HH:mm:ss.SSSZ"`` into field tokens, then formats
datetimes and parses text with a locale's name tables.

Supported fields:

    y  year            M  month          d  day of month
    H  hour (0-23)     m  minute         s  second
    S  fraction        E  weekday name   e  weekday (number or name)
    Z  zone offset

Text in single quotes is literal (``''`` is a quote). Other ASCII letters
are rejected with PatternError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Union

from datekit.exceptions import PatternError
from datekit.locales import LocaleNames

FIELD_LETTERS = frozenset("yMdHmsSEeZ")

# Fields absent from the pattern take these values when parsing.
DEFAULT_YEAR = 2000
DEFAULT_MONTH = 1
DEFAULT_DAY = 1

_OFFSET_RE = re.compile(r"(?:GMT)?(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})")


@dataclass(frozen=True)
class LiteralToken:
    """Text copied verbatim."""

    text: str


@dataclass(frozen=True)
class FieldToken:
    """A run of one field letter; width selects the presentation."""

    letter: str
    width: int


Token = Union[LiteralToken, FieldToken]


def tokenize(pattern: str) -> list[Token]:
    """Split a pattern string into literal and field tokens.

    Args:
        pattern: LDML pattern string.

    Returns:
        Tokens in pattern order; adjacent literals are merged.

    Raises:
        PatternError: If the pattern uses an unsupported field letter.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    def flush() -> None:
        if literal:
            tokens.append(LiteralToken("".join(literal)))
            literal.clear()

    while i < n:
        ch = pattern[i]

        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            # Quoted run; an unterminated quote runs to the end
            i += 1
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if ch.isascii() and ch.isalpha():
            if ch not in FIELD_LETTERS:
                raise PatternError(pattern, ch, i)
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            flush()
            tokens.append(FieldToken(ch, j - i))
            i = j
            continue

        literal.append(ch)
        i += 1

    flush()
    return tokens


def _names_alternation(names: list[str]) -> str:
    unique = sorted(set(names), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(name) for name in unique) + ")"


def _digits(width: int) -> str:
    if width == 1:
        return r"\d{1,2}"
    return r"\d{%d}" % width


def _format_offset(dt: datetime, width: int) -> str:
    offset = dt.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)

    if width <= 3:
        return f"{sign}{hours:02d}{minutes:02d}"
    if width == 4:
        if total_minutes == 0:
            return "GMT"
        return f"GMT{sign}{hours:02d}:{minutes:02d}"
    if total_minutes == 0:
        return "Z"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _parse_offset(text: str) -> timezone:
    if text.upper() in ("Z", "GMT"):
        return timezone.utc
    match = _OFFSET_RE.fullmatch(text.upper())
    if match is None:
        raise ValueError(f"Bad zone offset: {text!r}")
    delta = timedelta(hours=int(match["hours"]), minutes=int(match["minutes"]))
    if match["sign"] == "-":
        delta = -delta
    return timezone(delta)


@dataclass(frozen=True)
class CompiledPattern:
    """A tokenized pattern ready for formatting and parsing.

    Example:
        compiled = compile_pattern("dd.MM.yyyy")
        compiled.format(datetime(2024, 2, 1), names)   # "01.02.2024"
        compiled.parse("01.02.2024", names, tz)          # datetime(2024, 2, 1, tzinfo=tz)
    """

    pattern: str
    tokens: tuple[Token, ...]

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, dt: datetime, names: LocaleNames) -> str:
        """Render a datetime.

        Args:
            dt: Datetime, already in the target timezone.
            names: Locale name tables.

        Returns:
            Formatted string.
        """
        return "".join(self._format_token(token, dt, names) for token in self.tokens)

    def _format_token(self, token: Token, dt: datetime, names: LocaleNames) -> str:
        if isinstance(token, LiteralToken):
            return token.text

        letter, width = token.letter, token.width
        if letter == "y":
            if width == 2:
                return f"{dt.year % 100:02d}"
            return str(dt.year).zfill(width)
        if letter == "M":
            if width >= 4:
                return names.months[dt.month - 1]
            if width == 3:
                return names.months_abbr[dt.month - 1]
            return str(dt.month).zfill(width)
        if letter == "d":
            return str(dt.day).zfill(width)
        if letter == "H":
            return str(dt.hour).zfill(width)
        if letter == "m":
            return str(dt.minute).zfill(width)
        if letter == "s":
            return str(dt.second).zfill(width)
        if letter == "S":
            return f"{dt.microsecond:06d}"[:width].ljust(width, "0")
        if letter == "E":
            if width >= 4:
                return names.weekdays[dt.weekday()]
            return names.weekdays_abbr[dt.weekday()]
        if letter == "e":
            if width >= 4:
                return names.weekdays[dt.weekday()]
            if width == 3:
                return names.weekdays_abbr[dt.weekday()]
            return str(dt.isoweekday()).zfill(width)
        return _format_offset(dt, width)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def build_regex(self, names: LocaleNames) -> re.Pattern[str]:
        """Build the full-match regex for a locale.

        Each field is captured in a group named ``f<index>``.
        """
        parts: list[str] = []
        for index, token in enumerate(self.tokens):
            if isinstance(token, LiteralToken):
                parts.append(re.escape(token.text))
                continue
            parts.append(f"(?P<f{index}>{self._field_regex(token, names)})")
        return re.compile("".join(parts), re.IGNORECASE)

    def _field_regex(self, token: FieldToken, names: LocaleNames) -> str:
        letter, width = token.letter, token.width
        if letter == "y":
            if width == 2:
                return r"\d{2}"
            return r"\d{%d,}" % width
        if letter == "M":
            if width >= 3:
                return _names_alternation(list(names.months) + list(names.months_abbr))
            return _digits(width)
        if letter in "dHms":
            return _digits(width)
        if letter == "S":
            return r"\d{%d}" % width
        if letter == "E" or (letter == "e" and width >= 3):
            return _names_alternation(list(names.weekdays) + list(names.weekdays_abbr))
        if letter == "e":
            return r"[1-7]"
        return r"Z|GMT(?:[+-]\d{2}:?\d{2})?|[+-]\d{2}:?\d{2}"

    def parse(self, text: str, names: LocaleNames, tz: tzinfo) -> datetime | None:
        """Parse text that fully matches the pattern.

        Args:
            text: Input text.
            names: Locale name tables.
            tz: Timezone for the result when the text carries no offset.

        Returns:
            Aware datetime in ``tz``, or None if the text does not match.
        """
        match = self.build_regex(names).fullmatch(text)
        if match is None:
            return None
        return self.from_match(match, names, tz)

    def from_match(
        self,
        match: re.Match[str],
        names: LocaleNames,
        tz: tzinfo,
    ) -> datetime | None:
        """Build a datetime from a regex match produced by build_regex."""
        values: dict[str, Any] = {}

        for index, token in enumerate(self.tokens):
            if isinstance(token, LiteralToken):
                continue
            raw = match[f"f{index}"]
            letter, width = token.letter, token.width

            if letter == "y":
                year = int(raw)
                if width == 2:
                    year += 2000 if year < 50 else 1900
                values["year"] = year
            elif letter == "M":
                if raw.isdigit():
                    values["month"] = int(raw)
                else:
                    values["month"] = _lookup(raw, names.months, names.months_abbr) + 1
            elif letter == "d":
                values["day"] = int(raw)
            elif letter == "H":
                values["hour"] = int(raw)
            elif letter == "m":
                values["minute"] = int(raw)
            elif letter == "s":
                values["second"] = int(raw)
            elif letter == "S":
                values["microsecond"] = int(raw.ljust(6, "0")[:6])
            elif letter in "Ee":
                if raw.isdigit():
                    values["weekday"] = int(raw) - 1
                else:
                    values["weekday"] = _lookup(raw, names.weekdays, names.weekdays_abbr)
            else:
                values["offset"] = _parse_offset(raw)

        try:
            result = datetime(
                values.get("year", DEFAULT_YEAR),
                values.get("month", DEFAULT_MONTH),
                values.get("day", DEFAULT_DAY),
                values.get("hour", 0),
                values.get("minute", 0),
                values.get("second", 0),
                values.get("microsecond", 0),
            )
        except ValueError:
            return None

        if "weekday" in values and not {"year", "month", "day"} & values.keys():
            base = date(DEFAULT_YEAR, DEFAULT_MONTH, DEFAULT_DAY)
            result += timedelta(days=(values["weekday"] - base.weekday()) % 7)

        if "offset" in values:
            return result.replace(tzinfo=values["offset"]).astimezone(tz)
        return result.replace(tzinfo=tz)


def _lookup(raw: str, *tables: tuple[str, ...]) -> int:
    folded = raw.casefold()
    for table in tables:
        for index, name in enumerate(table):
            if name.casefold() == folded:
                return index
    raise ValueError(f"Unknown name: {raw!r}")


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile a pattern string.

    Raises:
        PatternError: If the pattern uses an unsupported field letter.
    """
    return CompiledPattern(pattern=pattern, tokens=tuple(tokenize(pattern)))
