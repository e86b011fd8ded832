"""
Date normalization: turns strings and datetime-like values into pendulum DateTimes.

Every calendar operation goes through a ``DateParser`` so the parsing rules
live in one place and can be swapped out (e.g. for a stricter parser in tests).
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Iterable, List

import pendulum
from pendulum import DateTime

from .exceptions import DateParseError
from .models import DateInput

logger = logging.getLogger(__name__)


EPOCH_TEXT = "01 Jan 1970 00:00:00 UTC"

# Tried after ISO-8601 and RFC-2822. Every format names year, month and day.
DEFAULT_INPUT_FORMATS = (
    "DD MMM YYYY HH:mm:ss",
    "DD MMM YYYY",
    "MMMM D, YYYY",
    "YYYY/MM/DD",
)

SCHEDULE_FORMAT = "DD-MM-YYYY"


class DateParser:
    """
    Normalizes date inputs to timezone-aware pendulum DateTimes.

    Strings are tried against, in order:
    1. strict ISO-8601 (``pendulum.parse``)
    2. RFC-2822 (``email.utils``), e.g. ``'04 Dec 1995 00:12:00 UTC'``
    3. the configured pendulum token formats

    Inputs without an explicit offset are placed in ``timezone``. Fragments
    such as ``"12:00"`` or ``"May"`` are rejected rather than completed from
    today's date, so the result depends on the input alone.
    """

    def __init__(
        self,
        timezone: str = "UTC",
        formats: Iterable[str] = DEFAULT_INPUT_FORMATS
    ):
        self.timezone = timezone
        self.formats: List[str] = list(formats)

    def parse(self, value: DateInput) -> DateTime | None:
        """
        Normalize a date input.

        Args:
            value: ISO/RFC-2822 string, DateTime, datetime or date

        Returns:
            DateTime, or None if the input cannot be understood
        """
        if isinstance(value, DateTime):
            return value

        if isinstance(value, datetime):
            return pendulum.instance(value, tz=self.timezone)

        if isinstance(value, date):
            return pendulum.datetime(value.year, value.month, value.day, tz=self.timezone)

        if not isinstance(value, str) or not value.strip():
            logger.warning("Could not parse date %r: unsupported input", value)
            return None

        text = value.strip()
        for attempt in (
            self._parse_iso,
            self._parse_rfc2822,
            self._parse_formats,
        ):
            parsed = attempt(text)
            if parsed is not None:
                return parsed

        logger.warning("Could not parse date %r", value)
        return None

    def parse_strict(self, value: DateInput) -> DateTime:
        """
        Normalize a date input, failing loudly.

        Raises:
            DateParseError: If the input cannot be understood
        """
        parsed = self.parse(value)
        if parsed is None:
            raise DateParseError(f"Invalid date: {value!r}")
        return parsed

    def parse_day(self, value: str, fmt: str = SCHEDULE_FORMAT) -> DateTime | None:
        """
        Parse a fixed-format day string (``DD-MM-YYYY`` by default) at midnight.

        Returns:
            DateTime, or None if the string does not match ``fmt``
        """
        try:
            return pendulum.from_format(value.strip(), fmt, tz=self.timezone).start_of("day")
        except (AttributeError, ValueError) as exc:
            logger.warning("Could not parse day %r with format %s: %s", value, fmt, exc)
            return None

    def epoch(self) -> DateTime:
        """The Unix epoch, parsed with the same rules as any other input."""
        return self.parse_strict(EPOCH_TEXT)

    # ── parsing stages ────────────────────────────────────────────────────

    def _parse_iso(self, text: str) -> DateTime | None:
        try:
            parsed = pendulum.parse(text, tz=self.timezone)
        except ValueError:
            return None
        # Bare times and durations are valid ISO-8601 but not dates.
        return parsed if isinstance(parsed, DateTime) else None

    def _parse_rfc2822(self, text: str) -> DateTime | None:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            return None
        if parsed is None:
            return None
        return pendulum.instance(parsed, tz=self.timezone)

    def _parse_formats(self, text: str) -> DateTime | None:
        for fmt in self.formats:
            try:
                return pendulum.from_format(text, fmt, tz=self.timezone)
            except ValueError:
                continue
        return None

    def __repr__(self) -> str:
        return f"DateParser(timezone={self.timezone!r}, formats={self.formats!r})"
