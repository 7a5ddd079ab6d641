from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import YearMonth, end_of_day, now_local, start_of_day
from ..core.constants import ABSENT_EMPLOYEE_MESSAGE, ALREADY_AT_WORK_MESSAGE, EMPLOYEE_NOT_FOUND_MESSAGE
from ..core.exceptions import AbsentEmployeeError, AlreadyAtWorkError, EmployeeNotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import DateWorkMinutes, EmployeeWorkHistory, WorkTimeHistory
from .repository import WorkTimeHistoryRepository

logger = logging.getLogger(__name__)


class WorkTimeHistoryService:
    """Use cases: clock-in, clock-out and monthly worked-minute aggregation."""

    def __init__(self, work_time_histories: WorkTimeHistoryRepository, employees: EmployeeRepository):
        self._histories = work_time_histories
        self._employees = employees

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            logger.warning("Unknown employee id=%s", employee_id)
            raise EmployeeNotFoundError(EMPLOYEE_NOT_FOUND_MESSAGE)
        return employee

    def go_to_work(self, employee_id: int, *, now: Optional[datetime] = None) -> WorkTimeHistory:
        # Whole seconds only: DATETIME(0) columns round fractions.
        now = (now or now_local()).replace(microsecond=0)
        employee = self._get_employee(employee_id)

        if self._histories.has_open_record(employee.employee_id):
            logger.warning("Clock-in rejected, employee id=%s already at work", employee.employee_id)
            raise AlreadyAtWorkError(ALREADY_AT_WORK_MESSAGE)

        record = self._histories.save(WorkTimeHistory.start(employee.employee_id, now=now))
        logger.info("Clocked IN - %s at %s", employee.name, now.isoformat(timespec="seconds"))
        return record

    def leave_work(self, employee_id: int, *, now: Optional[datetime] = None) -> WorkTimeHistory:
        # Whole seconds only: DATETIME(0) columns round fractions.
        now = (now or now_local()).replace(microsecond=0)
        employee = self._get_employee(employee_id)

        today = now.date()
        record = self._histories.get_open_for_date(employee.employee_id, start_of_day(today), end_of_day(today))
        if not record:
            logger.warning("Clock-out rejected, employee id=%s has no open record on %s", employee.employee_id, today)
            raise AbsentEmployeeError(ABSENT_EMPLOYEE_MESSAGE)

        record.leave_work(now)
        record = self._histories.save(record)
        logger.info("Clocked OUT - %s at %s", employee.name, now.isoformat(timespec="seconds"))
        return record

    def is_at_work(self, employee_id: int) -> bool:
        employee = self._get_employee(employee_id)
        return self._histories.has_open_record(employee.employee_id)

    def get_employee_daily_working_hours(
        self,
        employee_id: int,
        year_month: Union[YearMonth, str],
    ) -> EmployeeWorkHistory:
        employee = self._get_employee(employee_id)
        month = YearMonth.of(year_month)
        start, end = month.bounds()

        minutes_by_date: dict[date, int] = defaultdict(int)
        for record in self._histories.get_started_between(employee.employee_id, start, end):
            minutes_by_date[record.work_date] += record.worked_minutes()

        details = [DateWorkMinutes(work_date=d, working_minutes=m) for d, m in sorted(minutes_by_date.items())]
        total = sum(d.working_minutes for d in details)
        logger.debug("Aggregated %s day(s), %s minute(s) for employee id=%s in %s", len(details), total, employee.employee_id, month)
        return EmployeeWorkHistory(details=details, total_minutes=total)
