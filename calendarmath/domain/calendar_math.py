"""
Core calendar arithmetic.

Pure domain logic: every operation turns date input(s) into a primitive,
string or list and never mutates anything. Date normalization is delegated
to an injected ``DateParser``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

import pendulum
from pendulum import DateTime

from .exceptions import CalendarMathError
from .models import DateInput, DatePeriod, WorkSchedulePattern
from .parsing import SCHEDULE_FORMAT, DateParser

logger = logging.getLogger(__name__)


LOCALE = "en"
INVALID_DATE = "Invalid Date"
WEEKEND_DAYS = (pendulum.SATURDAY, pendulum.SUNDAY)

# A Friday the 13th occurs at least once every 14 months.
MAX_FRIDAY_STEPS = 7 * 12


class CalendarMath:
    """
    Stateless collection of calendar calculations.

    Operations that take date strings are permissive: an unparseable string
    yields an "invalid" result (NaN, ``False``, ``""``, ...) instead of an
    exception. Operations that take a date object expect a usable one and
    raise ``DateParseError`` otherwise.
    """

    def __init__(self, parser: DateParser | None = None):
        self.parser = parser or DateParser()

    @classmethod
    def from_config(cls, config) -> "CalendarMath":
        """Build a calculator from an ``AppConfig``."""
        return cls(parser=DateParser(timezone=config.timezone, formats=config.input_formats))

    # ── conversions and lookups ──────────────────────────────────────────

    def date_to_timestamp(self, date: DateInput) -> int | float:
        """
        Milliseconds elapsed between the Unix epoch and ``date``.

        The epoch itself goes through the same parser so both sides agree.

        Returns:
            Integer milliseconds, or NaN for an unparseable date
        """
        parsed = self.parser.parse(date)
        if parsed is None:
            return float("nan")
        epoch = self.parser.epoch()
        return round((parsed.timestamp() - epoch.timestamp()) * 1000)

    def get_time(self, date: DateInput) -> str:
        """Time of day as zero-padded ``HH:MM:SS`` (24h) in the date's own zone."""
        return self.parser.parse_strict(date).format("HH:mm:ss")

    def get_day_name(self, date: DateInput) -> str:
        """English weekday name, or an empty string for an unparseable date."""
        parsed = self.parser.parse(date)
        if parsed is None:
            return ""
        return parsed.format("dddd", locale=LOCALE)

    def get_quarter(self, date: DateInput) -> int:
        return (self.parser.parse_strict(date).month - 1) // 3 + 1

    def is_leap_year(self, date: DateInput) -> bool:
        return _is_leap(self.parser.parse_strict(date).year)

    def format_date(self, date: DateInput) -> str:
        """
        Render a date as ``M/D/YYYY, h:mm:ss AM/PM`` in UTC.

        Example:
            '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
        """
        parsed = self.parser.parse(date)
        if parsed is None:
            return INVALID_DATE
        return parsed.in_timezone("UTC").format("M/D/YYYY, h:mm:ss A", locale=LOCALE)

    # ── Friday arithmetic ────────────────────────────────────────────────

    def get_next_friday(self, date: DateInput) -> DateTime:
        """
        The first Friday strictly after ``date``, keeping the time of day.

        A Friday input yields the Friday of the following week.
        """
        return _next_friday(self.parser.parse_strict(date))

    def get_next_friday_the_13th(self, date: DateInput) -> DateTime:
        """
        The first Friday the 13th strictly after ``date``.

        Walks Friday to Friday; the walk is bounded since the Gregorian
        calendar never goes more than 14 months without one.

        Raises:
            CalendarMathError: If no Friday the 13th is found within the bound
        """
        current = self.parser.parse_strict(date)
        for _ in range(MAX_FRIDAY_STEPS):
            current = _next_friday(current)
            if current.day == 13:
                return current

        raise CalendarMathError(f"No Friday the 13th found within {MAX_FRIDAY_STEPS} weeks of {date}")

    # ── month and period counting ────────────────────────────────────────

    def get_count_days_in_month(self, month: int, year: int) -> int:
        """
        Number of days in a month, as the distance to the next month's first day.

        Args:
            month: 1 (January) to 12 (December)
            year: Four-digit year
        """
        first = pendulum.date(year, month, 1)
        return first.diff(first.add(months=1)).in_days()

    def get_count_days_on_period(self, start: DateInput, end: DateInput) -> int | float:
        """
        Days from ``start`` to ``end``, counting both endpoints.

        Returns:
            Whole days plus one, or NaN if either bound is unparseable
        """
        start_date = self.parser.parse(start)
        end_date = self.parser.parse(end)
        if start_date is None or end_date is None:
            return float("nan")
        return start_date.diff(end_date, False).in_days() + 1

    def is_date_in_period(self, date: DateInput, period: DatePeriod | Mapping[str, Any]) -> bool:
        """
        Check whether ``date`` lies within ``period``, bounds included.

        Any unparseable value makes the check fail.
        """
        period = DatePeriod.from_value(period)
        given = self.parser.parse(date)
        start = self.parser.parse(period.start)
        end = self.parser.parse(period.end)
        if given is None or start is None or end is None:
            return False
        return start <= given <= end

    def get_count_weekends_in_month(self, month: int, year: int) -> int:
        """Number of Saturdays and Sundays in a month."""
        first = pendulum.date(year, month, 1)
        last = first.end_of("month")
        return sum(
            1 for day in pendulum.interval(first, last).range("days")
            if day.day_of_week in WEEKEND_DAYS
        )

    def get_week_number_by_date(self, date: DateInput) -> int:
        """
        ISO-8601 style week number of ``date`` within its calendar year.

        Week 1 starts on the Monday of the week holding January 4th (i.e. the
        week with the year's first Thursday). Dates before that Monday are
        reported as week 1. Late-December dates keep counting up to week 53
        and are never rolled into week 1 of the following year.
        """
        day = self.parser.parse_strict(date).date()
        week_one = pendulum.date(day.year, 1, 4).start_of("week")

        if day <= week_one:
            return 1
        return week_one.diff(day).in_days() // 7 + 1

    # ── schedules ────────────────────────────────────────────────────────

    def get_work_schedule(
        self,
        period: DatePeriod | Mapping[str, Any],
        work_days: int,
        off_days: int,
        fmt: str = SCHEDULE_FORMAT
    ) -> List[str]:
        """
        Working days of a repeating on/off rota within an inclusive period.

        The cycle starts on the period's first day and repeats until the end.

        Args:
            period: Bounds as ``DD-MM-YYYY`` strings (or ``fmt``)
            work_days: Consecutive working days per cycle
            off_days: Consecutive days off per cycle
            fmt: Format of both the bounds and the returned days

        Returns:
            Working days in chronological order, formatted with ``fmt``

        Example:
            {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
            -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
        """
        period = DatePeriod.from_value(period)
        pattern = WorkSchedulePattern(work_days=work_days, off_days=off_days)

        start = self.parser.parse_day(period.start, fmt)
        end = self.parser.parse_day(period.end, fmt)
        if start is None or end is None or start > end:
            return []

        logger.debug("Building %s schedule for %s", pattern, period)

        days = pendulum.interval(start.date(), end.date()).range("days")
        return [
            day.format(fmt)
            for offset, day in enumerate(days)
            if pattern.is_working_offset(offset)
        ]

    # ── reporting ────────────────────────────────────────────────────────

    def month_summary(self, month: int, year: int) -> Dict[str, Any]:
        """
        Collect the month-level figures in one mapping.

        The Friday the 13th reported is the first one on or after the 1st.
        """
        first = pendulum.datetime(year, month, 1, tz=self.parser.timezone)
        return {
            "month": first.format("MMMM YYYY", locale=LOCALE),
            "days": self.get_count_days_in_month(month, year),
            "weekend_days": self.get_count_weekends_in_month(month, year),
            "quarter": self.get_quarter(first),
            "leap_year": self.is_leap_year(first),
            "week_of_first_day": self.get_week_number_by_date(first),
            "next_friday_13th": self.get_next_friday_the_13th(first.subtract(days=1)),
        }

    def __repr__(self) -> str:
        return f"CalendarMath(parser={self.parser!r})"


def _next_friday(date: DateTime) -> DateTime:
    return date.next(pendulum.FRIDAY, keep_time=True)


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)
