"""Canonical ISO8601 rendering of durations

The output is close to ISO8601 but months are never emitted. Days (1D ~ 364D)
or weeks (1W ~ 52W) are used instead whenever possible.
"""

from typing import TYPE_CHECKING, Callable, Tuple

from isoperiod.domain.units import MINUTE, SECOND, ZERO

if TYPE_CHECKING:
    from isoperiod.domain.value_objects.duration import Duration

Designator = Tuple[str, Callable[["Duration"], str]]


def _render_seconds(duration: "Duration") -> str:
    """Render seconds exactly from the magnitude, trimming trailing zeros"""
    whole, fraction = divmod(duration.nanoseconds % MINUTE, SECOND)
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:09d}".rstrip("0")


DATE_DESIGNATORS: Tuple[Designator, ...] = (
    ("Y", lambda d: str(d.years) if d.years else ""),
    ("D", lambda d: str(d.days) if d.days else ""),
)

TIME_DESIGNATORS: Tuple[Designator, ...] = (
    ("H", lambda d: str(d.hours) if d.hours else ""),
    ("M", lambda d: str(d.minutes) if d.minutes else ""),
    ("S", lambda d: _render_seconds(d) if d.nanoseconds % MINUTE else ""),
)


def _render(duration: "Duration", designators: Tuple[Designator, ...]) -> str:
    parts = []
    for letter, value_of in designators:
        value = value_of(duration)
        if value:
            parts.append(f"{value}{letter}")
    return "".join(parts)


def format_duration(duration: "Duration") -> str:
    """Format a duration in canonical form"""
    if duration.is_zero():
        return ZERO

    weeks = duration.weeks
    if weeks and duration.is_weeks_only():
        return f"P{weeks}W"

    result = "P" + _render(duration, DATE_DESIGNATORS)
    if duration.has_time_part():
        result += "T" + _render(duration, TIME_DESIGNATORS)

    return result
