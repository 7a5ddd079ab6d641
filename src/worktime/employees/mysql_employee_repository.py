from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_one
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        row = query_one(
            self._conn_factory,
            """
            SELECT e.employee_id, e.name, e.is_manager, e.team_id, t.name AS team_name
            FROM employees e
            LEFT JOIN teams t ON t.team_id = e.team_id
            WHERE e.employee_id=%s
            """,
            (employee_id,),
        )
        if not row:
            return None
        return Employee(
            employee_id=int(row["employee_id"]),
            name=row["name"],
            is_manager=bool(row.get("is_manager")),
            team_id=row.get("team_id"),
            team_name=row.get("team_name"),
        )
