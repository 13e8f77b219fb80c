from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import RecordKind, RecordStatus
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceRecordInput, AttendanceRecordPatch
from .repository import AttendanceRepository

_COLUMNS = "record_id, staff_id, kind, start_time, end_time, status, memo"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    status = r.get("status")
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        staff_id=int(r["staff_id"]),
        kind=RecordKind(r["kind"]),
        start_time=r["start_time"],
        end_time=r["end_time"],
        status=RecordStatus(status) if status else None,
        memo=r.get("memo"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: AttendanceRecordInput) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(staff_id, kind, start_time, end_time, status, memo)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(record.staff_id),
                    record.kind.value,
                    record.start_time,
                    record.end_time,
                    record.status.value if record.status else None,
                    record.memo,
                ),
            )
            return AttendanceRecord.from_input(int(cur.lastrowid), record)

    def update(self, record_id: int, patch: AttendanceRecordPatch) -> AttendanceRecord:
        current = self.get_by_id(record_id)
        if not current:
            raise NotFoundError("Không tìm thấy bản ghi")

        merged = patch.apply_to(current)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET staff_id=%s, kind=%s, start_time=%s, end_time=%s, status=%s, memo=%s
                WHERE record_id=%s
                """,
                (
                    merged.staff_id,
                    merged.kind.value,
                    merged.start_time,
                    merged.end_time,
                    merged.status.value if merged.status else None,
                    merged.memo,
                    int(record_id),
                ),
            )
        return merged

    def delete(self, record_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE record_id=%s", (int(record_id),))
            if cur.rowcount <= 0:
                raise NotFoundError("Không tìm thấy bản ghi")

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_by_staff(self, staff_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE staff_id=%s
                ORDER BY start_time ASC, record_id ASC
                """,
                (int(staff_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_by_range(
        self,
        start: datetime,
        end: datetime,
        *,
        kind: Optional[RecordKind] = None,
        staff_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["start_time >= %s", "start_time < %s"]
        params: list[object] = [start, end]
        if kind is not None:
            clauses.append("kind=%s")
            params.append(kind.value)
        if staff_id is not None:
            clauses.append("staff_id=%s")
            params.append(int(staff_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE {where}
                ORDER BY start_time ASC, record_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_overlapping(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE start_time < %s AND end_time > %s
                ORDER BY staff_id ASC, start_time ASC
                """,
                (end, start),
            )
            return [_to_record(r) for r in fetchall(cur)]
