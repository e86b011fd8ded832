"""
Domain layer - Pure calendar arithmetic without I/O.
"""

from .calendar_math import CalendarMath
from .exceptions import CalendarMathError, ConfigError, DateParseError
from .models import DatePeriod, WorkSchedulePattern
from .parsing import DateParser

__all__ = [
    "CalendarMath",
    "CalendarMathError",
    "ConfigError",
    "DateParseError",
    "DateParser",
    "DatePeriod",
    "WorkSchedulePattern",
]
