from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Team:
    """Domain entity: a team employees belong to."""

    name: str
    team_id: Optional[int] = None
