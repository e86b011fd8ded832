"""
Value types shared by the calendar operations.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Union

from pendulum import DateTime

DateInput = Union[str, DateTime, datetime, date]


@dataclass(frozen=True)
class DatePeriod:
    """
    An inclusive (start, end) pair of date inputs.

    The bounds are kept exactly as given and normalized only when an
    operation needs them. ``start <= end`` is assumed, not checked.
    """
    start: DateInput
    end: DateInput

    @classmethod
    def from_value(cls, value: "DatePeriod | Mapping[str, Any]") -> "DatePeriod":
        """
        Build a period from another period or a ``{"start": ..., "end": ...}`` mapping.

        Raises:
            KeyError: If the mapping lacks a bound
        """
        if isinstance(value, DatePeriod):
            return value
        return cls(start=value["start"], end=value["end"])

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class WorkSchedulePattern:
    """
    A repeating cycle of working days followed by days off.

    Invariant: neither count is negative and the cycle is not empty.
    """
    work_days: int
    off_days: int

    def __post_init__(self):
        if self.work_days < 0 or self.off_days < 0:
            raise ValueError(
                f"Work and off days must not be negative, got {self.work_days}/{self.off_days}"
            )
        if self.cycle_length == 0:
            raise ValueError("Work schedule pattern must contain at least one day")

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def is_working_offset(self, offset: int) -> bool:
        """Check whether the day ``offset`` days after the period start is worked."""
        return offset % self.cycle_length < self.work_days

    def __str__(self) -> str:
        return f"{self.work_days} on / {self.off_days} off"
