from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Staff
from .repository import StaffRepository


def _to_staff(r: Dict[str, Any]) -> Staff:
    return Staff(
        staff_id=int(r["staff_id"]),
        name=r["name"],
        role=r.get("role"),
        active=bool(r.get("active", 1)),
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT staff_id, name, role, active FROM staff WHERE staff_id=%s",
                (int(staff_id),),
            )
            r = fetchone(cur)
            return _to_staff(r) if r else None

    def list_all(self) -> Sequence[Staff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT staff_id, name, role, active FROM staff ORDER BY staff_id")
            return [_to_staff(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[Staff]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT staff_id, name, role, active FROM staff WHERE active=1 ORDER BY staff_id")
            return [_to_staff(r) for r in fetchall(cur)]
