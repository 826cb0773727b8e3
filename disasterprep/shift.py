"""Work shifts that an employee may take during a week."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Day(enum.IntEnum):
    """A day of the week, in calendar order starting on Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True, order=True)
class Shift:
    """A block of hours on one day, worth a given value.

    Shifts order by day, then start hour, then end hour, then value.
    """

    day: Day
    start_hour: int
    end_hour: int
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "day", Day(self.day))
        if self.start_hour > self.end_hour:
            raise ValueError("Shift ends before it starts?")

    def length(self) -> int:
        """Return how many hours the shift lasts."""
        return self.end_hour - self.start_hour

    def overlaps(self, other: Shift) -> bool:
        """Return whether this shift shares any time with ``other``."""
        return overlaps_with(self, other)

    def __str__(self) -> str:
        return (
            f"{{ {self.day}, {self.start_hour:02d}:00 - {self.end_hour:02d}:00,"
            f" value ${self.value} }}"
        )


def overlaps_with(one: Shift, two: Shift) -> bool:
    """Return whether two shifts fall on the same day and share some hour."""
    return one.day == two.day and (
        one.start_hour <= two.start_hour < one.end_hour
        or two.start_hour <= one.start_hour < two.end_hour
    )