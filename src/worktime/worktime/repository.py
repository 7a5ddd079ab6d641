from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import WorkTimeHistory


class WorkTimeHistoryRepository(Protocol):
    def has_open_record(self, employee_id: int) -> bool:
        """True when the employee has a record without an end time."""

        raise NotImplementedError

    def get_open_for_date(self, employee_id: int, start: datetime, end: datetime) -> Optional[WorkTimeHistory]:
        """Open record whose start time lies within [start, end]."""

        raise NotImplementedError

    def get_started_between(self, employee_id: int, start: datetime, end: datetime) -> Sequence[WorkTimeHistory]:
        raise NotImplementedError

    def save(self, record: WorkTimeHistory) -> WorkTimeHistory:
        raise NotImplementedError
