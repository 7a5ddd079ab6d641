from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

from ..core.exceptions import ValidationError


@dataclass
class WorkTimeHistory:
    """Domain entity: one attendance record (clock-in, optional clock-out).

    ``work_end_time is None`` means the employee is currently at work.
    """

    employee_id: int
    work_start_time: datetime
    work_end_time: Optional[datetime] = None
    history_id: Optional[int] = None

    @classmethod
    def start(cls, employee_id: int, *, now: datetime) -> "WorkTimeHistory":
        return cls(employee_id=employee_id, work_start_time=now)

    @property
    def is_open(self) -> bool:
        return self.work_end_time is None

    @property
    def work_date(self) -> date:
        return self.work_start_time.date()

    def go_to_work(self, now: datetime) -> None:
        if self.work_end_time is not None:
            raise ValidationError("Work time record is already closed")
        self.work_start_time = now

    def leave_work(self, now: datetime) -> None:
        if self.work_end_time is not None:
            raise ValidationError("Work time record is already closed")
        if now < self.work_start_time:
            raise ValidationError("Work end time must not be before the start time")
        self.work_end_time = now

    def worked_minutes(self) -> int:
        """Whole minutes between clock-in and clock-out, 0 while still open."""
        if self.work_end_time is None:
            return 0
        return int((self.work_end_time - self.work_start_time).total_seconds() // 60)


@dataclass(frozen=True)
class DateWorkMinutes:
    """Read-model: minutes worked on one calendar date."""

    work_date: date
    working_minutes: int


@dataclass(frozen=True)
class EmployeeWorkHistory:
    """Read-model: per-date worked minutes for a month plus the grand total."""

    details: List[DateWorkMinutes] = field(default_factory=list)
    total_minutes: int = 0
