from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .connection import DatabaseConnection

Row = Dict[str, Any]


@dataclass(frozen=True)
class WriteResult:
    rowcount: int
    lastrowid: Optional[int]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """One connection per unit of work: commit when the block succeeds, rollback and re-raise otherwise."""
    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Row]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> WriteResult:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        lastrowid = getattr(cur, "lastrowid", None)
        return WriteResult(rowcount=int(getattr(cur, "rowcount", 0) or 0), lastrowid=int(lastrowid) if lastrowid else None)
