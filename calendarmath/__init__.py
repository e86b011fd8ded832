"""
calendarmath
~~~~~~~~~~~~

Small, pure date/time calculations built on pendulum.

Basic usage::

    import calendarmath

    calendarmath.get_day_name("2024-01-30T00:00:00.000Z")       # 'Tuesday'
    calendarmath.get_count_days_in_month(2, 2024)               # 29
    calendarmath.get_work_schedule(
        {"start": "01-01-2024", "end": "15-01-2024"}, 1, 3
    )                                                           # ['01-01-2024', ...]

The module-level functions use a default ``CalendarMath`` that parses in UTC.
Build your own ``CalendarMath(DateParser(timezone=...))`` for other zones.
"""

from .domain import (
    CalendarMath,
    CalendarMathError,
    ConfigError,
    DateParseError,
    DateParser,
    DatePeriod,
    WorkSchedulePattern,
)

__version__ = "1.0.0"

_calendar = CalendarMath()

date_to_timestamp = _calendar.date_to_timestamp
get_time = _calendar.get_time
get_day_name = _calendar.get_day_name
get_next_friday = _calendar.get_next_friday
get_count_days_in_month = _calendar.get_count_days_in_month
get_count_days_on_period = _calendar.get_count_days_on_period
is_date_in_period = _calendar.is_date_in_period
format_date = _calendar.format_date
get_count_weekends_in_month = _calendar.get_count_weekends_in_month
get_week_number_by_date = _calendar.get_week_number_by_date
get_next_friday_the_13th = _calendar.get_next_friday_the_13th
get_quarter = _calendar.get_quarter
get_work_schedule = _calendar.get_work_schedule
is_leap_year = _calendar.is_leap_year

__all__ = [
    "CalendarMath",
    "CalendarMathError",
    "ConfigError",
    "DateParseError",
    "DateParser",
    "DatePeriod",
    "WorkSchedulePattern",
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "is_leap_year",
]
