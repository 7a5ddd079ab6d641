from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all, query_one
from .model import WorkTimeHistory
from .repository import WorkTimeHistoryRepository

_COLUMNS = "history_id, employee_id, work_start_time, work_end_time"


def _to_record(row: dict) -> WorkTimeHistory:
    return WorkTimeHistory(
        history_id=int(row["history_id"]),
        employee_id=int(row["employee_id"]),
        work_start_time=row["work_start_time"],
        work_end_time=row.get("work_end_time"),
    )


class MySQLWorkTimeHistoryRepository(WorkTimeHistoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def has_open_record(self, employee_id: int) -> bool:
        row = query_one(
            self._conn_factory,
            """
            SELECT 1 AS found
            FROM work_time_histories
            WHERE employee_id=%s AND work_end_time IS NULL
            LIMIT 1
            """,
            (employee_id,),
        )
        return row is not None

    def get_open_for_date(self, employee_id: int, start: datetime, end: datetime) -> Optional[WorkTimeHistory]:
        row = query_one(
            self._conn_factory,
            f"""
            SELECT {_COLUMNS}
            FROM work_time_histories
            WHERE employee_id=%s AND work_end_time IS NULL
              AND work_start_time BETWEEN %s AND %s
            ORDER BY work_start_time DESC
            LIMIT 1
            """,
            (employee_id, start, end),
        )
        return _to_record(row) if row else None

    def get_started_between(self, employee_id: int, start: datetime, end: datetime) -> Sequence[WorkTimeHistory]:
        rows = query_all(
            self._conn_factory,
            f"""
            SELECT {_COLUMNS}
            FROM work_time_histories
            WHERE employee_id=%s AND work_start_time BETWEEN %s AND %s
            ORDER BY work_start_time ASC
            """,
            (employee_id, start, end),
        )
        return [_to_record(r) for r in rows]

    def save(self, record: WorkTimeHistory) -> WorkTimeHistory:
        if record.history_id is None:
            result = execute(
                self._conn_factory,
                """
                INSERT INTO work_time_histories(employee_id, work_start_time, work_end_time)
                VALUES(%s,%s,%s)
                """,
                (record.employee_id, record.work_start_time, record.work_end_time),
            )
            record.history_id = result.lastrowid
        else:
            execute(
                self._conn_factory,
                """
                UPDATE work_time_histories
                SET work_start_time=%s, work_end_time=%s
                WHERE history_id=%s
                """,
                (record.work_start_time, record.work_end_time, record.history_id),
            )
        return record
