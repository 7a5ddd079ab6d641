from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..teams.model import Team


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no DB access code). Must exist before any
    attendance action is recorded for it.
    """

    employee_id: int
    name: str
    is_manager: bool = False
    team_id: Optional[int] = None
    team_name: Optional[str] = None

    def join_team(self, team: Team) -> "Employee":
        return replace(self, team_id=team.team_id, team_name=team.name)
