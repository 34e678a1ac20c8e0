"""Duration value object"""

from dataclasses import dataclass
from datetime import timedelta

from isoperiod.domain.formatting import format_duration
from isoperiod.domain.units import (
    DAY,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    HOUR,
    HOURS_PER_DAY,
    MICROSECOND,
    MINUTE,
    MINUTES_PER_HOUR,
    SECOND,
    WEEK,
    YEAR,
)


@dataclass(frozen=True)
class Duration:
    """ISO8601 duration backed by a count of elapsed nanoseconds"""

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        """Validate duration"""
        if isinstance(self.nanoseconds, bool) or not isinstance(self.nanoseconds, int):
            raise ValueError(f"Duration magnitude must be an integer, got {self.nanoseconds!r}")
        if self.nanoseconds < 0:
            raise ValueError("Duration cannot be negative")

    @classmethod
    def from_timedelta(cls, td: timedelta) -> "Duration":
        """Create duration from a timedelta"""
        return cls(td.days * DAY + td.seconds * SECOND + td.microseconds * MICROSECOND)

    @property
    def years(self) -> int:
        """Whole years"""
        return self.nanoseconds // YEAR

    @property
    def days(self) -> int:
        """Whole days left over after whole years"""
        return (self.nanoseconds // DAY) % DAYS_PER_YEAR

    @property
    def weeks(self) -> int:
        """Whole weeks, or 0 when days are not a multiple of a week"""
        days = self.days
        if days % DAYS_PER_WEEK:
            return 0
        return days // DAYS_PER_WEEK

    @property
    def hours(self) -> int:
        """Whole hours of the day"""
        return (self.nanoseconds // HOUR) % HOURS_PER_DAY

    @property
    def minutes(self) -> int:
        """Whole minutes of the hour"""
        return (self.nanoseconds // MINUTE) % MINUTES_PER_HOUR

    @property
    def seconds(self) -> float:
        """Seconds of the minute, with sub-second precision"""
        return (self.nanoseconds % MINUTE) / SECOND

    def is_zero(self) -> bool:
        """Check if duration is zero"""
        return self.nanoseconds == 0

    def is_weeks_only(self) -> bool:
        """Check if duration is expressible in whole weeks"""
        return self.weeks * WEEK == self.nanoseconds

    def has_time_part(self) -> bool:
        """Check if duration has a time section"""
        return self.hours != 0 or self.minutes != 0 or self.seconds != 0

    def to_timedelta(self) -> timedelta:
        """Convert to timedelta, truncating below one microsecond"""
        return timedelta(microseconds=self.nanoseconds // MICROSECOND)

    def __str__(self) -> str:
        """Canonical ISO8601 representation"""
        return format_duration(self)

    def __add__(self, other: object) -> "Duration":
        """Add two durations"""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)
