"""Clock times of day and their addition."""

from __future__ import annotations

from dataclasses import dataclass

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True, order=True)
class ClockTime:
    """A time of day in hours, minutes and seconds on a 24-hour clock."""

    hours: int
    minutes: int
    seconds: int

    def __post_init__(self) -> None:
        if not 0 <= self.hours <= 23:
            raise ValueError(f"hours out of range: {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise ValueError(f"minutes out of range: {self.minutes}")
        if not 0 <= self.seconds <= 59:
            raise ValueError(f"seconds out of range: {self.seconds}")

    @classmethod
    def parse(cls, text: str) -> ClockTime:
        """Build a time from whitespace-separated hours, minutes and seconds."""
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"expected 'hours minutes seconds', got {text!r}")
        hours, minutes, seconds = (int(part) for part in parts)
        return cls(hours, minutes, seconds)

    @property
    def total_seconds(self) -> int:
        """Seconds elapsed since midnight."""
        return (self.hours * 60 + self.minutes) * 60 + self.seconds

    def __add__(self, other: object) -> ClockTime:
        if not isinstance(other, ClockTime):
            return NotImplemented
        return add_times(self, other)

    def __str__(self) -> str:
        return f"{self.hours} {self.minutes} {self.seconds}"


def add_times(first: ClockTime, second: ClockTime) -> ClockTime:
    """Add two clock times, carrying seconds and minutes and wrapping past midnight."""
    seconds = first.seconds + second.seconds
    minutes = first.minutes + second.minutes
    hours = first.hours + second.hours
    if seconds > 59:
        seconds %= 60
        minutes += 1
    if minutes > 59:
        minutes %= 60
        hours += 1
    if hours > 23:
        hours %= 24
    return ClockTime(hours, minutes, seconds)