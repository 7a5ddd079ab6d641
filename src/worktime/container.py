from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .worktime.mysql_work_time_history_repository import MySQLWorkTimeHistoryRepository
from .worktime.service import WorkTimeHistoryService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    work_time_histories_repo: MySQLWorkTimeHistoryRepository

    work_time_history_service: WorkTimeHistoryService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    work_time_histories_repo = MySQLWorkTimeHistoryRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        work_time_histories_repo=work_time_histories_repo,
        work_time_history_service=WorkTimeHistoryService(work_time_histories_repo, employees_repo),
    )
