"""Helpers for showing a week of shifts as a calendar."""

from __future__ import annotations

import random
from collections.abc import Iterable

from disasterprep.shift import Day, Shift

LOW_WEIGHT = 0
"""Lowest per-hour value given to a shift when values are randomized."""

HIGH_WEIGHT = 99 // 8
"""Highest per-hour value given to a shift when values are randomized."""

STANDARD_HOURS = 30
"""Hours an employee is allowed to work in the calendar view."""

_STANDARD_HOURS_BY_DAY: dict[Day, tuple[tuple[int, int], ...]] = {
    Day.SUNDAY: ((8, 14), (12, 18)),
    Day.MONDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.TUESDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.WEDNESDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.THURSDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.FRIDAY: ((8, 12), (12, 16), (16, 20), (8, 16), (12, 20)),
    Day.SATURDAY: ((8, 14), (12, 18)),
}


def standard_shifts() -> frozenset[Shift]:
    """Return the week's available shifts, each worth nothing."""
    return frozenset(
        Shift(day, start, end, 0)
        for day, hours in _STANDARD_HOURS_BY_DAY.items()
        for start, end in hours
    )


def hour_to_string(hour: int) -> str:
    """Return a clock label such as 12AM or 3PM for an hour of the day."""
    hour %= 24
    if hour == 0:
        return "12AM"
    if hour < 12:
        return f"{hour}AM"
    if hour == 12:
        return "12PM"
    return f"{hour - 12}PM"


def assign_subcolumns(shifts: Iterable[Shift]) -> dict[Shift, int]:
    """Place each shift in the first free subcolumn of its day.

    Shifts are visited in order of start time and each goes in the lowest
    numbered subcolumn whose last shift has already ended, so shifts sharing
    a subcolumn on the same day never overlap.
    """
    bottoms: dict[tuple[Day, int], int] = {}
    result: dict[Shift, int] = {}
    for shift in sorted(set(shifts)):
        column = 0
        while bottoms.get((shift.day, column), 0) > shift.start_hour:
            column += 1
        result[shift] = column
        bottoms[(shift.day, column)] = shift.end_hour
    return result


def hour_range(shifts: Iterable[Shift]) -> tuple[int, int]:
    """Return the earliest start and latest end hour, or (0, 24) if none."""
    shifts = list(shifts)
    if not shifts:
        return 0, 24
    return (
        min(shift.start_hour for shift in shifts),
        max(shift.end_hour for shift in shifts),
    )


def total_profit(shifts: Iterable[Shift]) -> int:
    """Return the combined value of the shifts."""
    return sum(shift.value for shift in shifts)


def total_length(shifts: Iterable[Shift]) -> int:
    """Return the combined length of the shifts in hours."""
    return sum(shift.length() for shift in shifts)


def randomize_profits(
    shifts: Iterable[Shift], rng: random.Random | None = None
) -> set[Shift]:
    """Return the shifts with new values drawn at a random per-hour rate."""
    rng = rng if rng is not None else random.Random()
    return {
        Shift(
            shift.day,
            shift.start_hour,
            shift.end_hour,
            rng.randint(LOW_WEIGHT, HIGH_WEIGHT) * shift.length(),
        )
        for shift in shifts
    }