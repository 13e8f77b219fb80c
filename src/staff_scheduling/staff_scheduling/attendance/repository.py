from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import RecordKind
from .model import AttendanceRecord, AttendanceRecordInput, AttendanceRecordPatch


class AttendanceRepository(Protocol):
    """Record store for scheduled and actual records.

    Every call is independent; there is no transaction spanning several calls.
    Implementations raise ``StoreError`` when the backend fails.
    """

    def create(self, record: AttendanceRecordInput) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: int, patch: AttendanceRecordPatch) -> AttendanceRecord:
        """Raises NotFoundError if the record does not exist."""

        raise NotImplementedError

    def delete(self, record_id: int) -> None:
        """Raises NotFoundError if the record does not exist."""

        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_by_staff(self, staff_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_range(
        self,
        start: datetime,
        end: datetime,
        *,
        kind: Optional[RecordKind] = None,
        staff_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records whose start_time is in [start, end)."""

        raise NotImplementedError

    def list_overlapping(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        """Records with start_time < end and end_time > start."""

        raise NotImplementedError
