"""
Domain-specific exception hierarchy for the calendarmath package.
"""


class CalendarMathError(Exception):
    """Base class for all calendarmath errors."""


class DateParseError(CalendarMathError):
    """Raised when a date input cannot be normalized in strict mode."""


class ConfigError(CalendarMathError):
    """Raised when the configuration file cannot be read or validated."""
