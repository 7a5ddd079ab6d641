from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Union

from ..core.constants import YEAR_MONTH_FORMAT
from ..core.exceptions import ValidationError


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month (year + month), e.g. 2024-03."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Invalid month: {self.month}")

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse YYYY-MM string into YearMonth."""
        try:
            parsed = datetime.strptime(value.strip(), YEAR_MONTH_FORMAT)
        except (AttributeError, ValueError) as exc:
            raise ValidationError(f"Invalid year-month: {value!r}") from exc
        return cls(parsed.year, parsed.month)

    @classmethod
    def of(cls, value: Union["YearMonth", str]) -> "YearMonth":
        if isinstance(value, YearMonth):
            return value
        return cls.parse(value)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def bounds(self) -> tuple[datetime, datetime]:
        """Inclusive [start, end] datetimes covering the whole month."""
        return start_of_day(self.first_day()), end_of_day(self.last_day())

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
