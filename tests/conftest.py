from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.staff_scheduling.staff_scheduling.attendance.model import (
    AttendanceRecord,
    AttendanceRecordInput,
    AttendanceRecordPatch,
)
from src.staff_scheduling.staff_scheduling.core.exceptions import NotFoundError, StoreError
from src.staff_scheduling.staff_scheduling.staff.model import Staff


class InMemoryStaff:
    def __init__(self, staff: list[Staff]):
        self._staff = list(staff)

    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        for s in self._staff:
            if s.staff_id == int(staff_id):
                return s
        return None

    def list_all(self):
        return list(self._staff)

    def list_active(self):
        return [s for s in self._staff if s.active]


class InMemoryAttendance:
    def __init__(self):
        self._records: dict[int, AttendanceRecord] = {}
        self._id = 0
        self.create_calls = 0

    def create(self, record: AttendanceRecordInput) -> AttendanceRecord:
        self.create_calls += 1
        self._id += 1
        rec = AttendanceRecord.from_input(self._id, record)
        self._records[rec.record_id] = rec
        return rec

    def update(self, record_id: int, patch: AttendanceRecordPatch) -> AttendanceRecord:
        current = self._records.get(int(record_id))
        if not current:
            raise NotFoundError("missing")
        merged = patch.apply_to(current)
        self._records[merged.record_id] = merged
        return merged

    def delete(self, record_id: int) -> None:
        if int(record_id) not in self._records:
            raise NotFoundError("missing")
        del self._records[int(record_id)]

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._records.get(int(record_id))

    def list_by_staff(self, staff_id: int):
        return sorted((r for r in self._records.values() if r.staff_id == staff_id), key=lambda r: r.start_time)

    def list_by_range(self, start: datetime, end: datetime, *, kind=None, staff_id=None):
        out = [
            r
            for r in self._records.values()
            if start <= r.start_time < end
            and (kind is None or r.kind == kind)
            and (staff_id is None or r.staff_id == staff_id)
        ]
        return sorted(out, key=lambda r: (r.start_time, r.record_id))

    def list_overlapping(self, start: datetime, end: datetime):
        out = [r for r in self._records.values() if r.start_time < end and r.end_time > start]
        return sorted(out, key=lambda r: (r.staff_id, r.start_time))

    def all(self):
        return list(self._records.values())

    def put(self, record: AttendanceRecord) -> AttendanceRecord:
        """Seed a record directly (bypassing create counters)."""
        self._id = max(self._id, record.record_id)
        self._records[record.record_id] = record
        return record


class FailingAttendance(InMemoryAttendance):
    """Fails the N-th create call (1-based) with a StoreError."""

    def __init__(self, fail_on: int):
        super().__init__()
        self._fail_on = fail_on

    def create(self, record: AttendanceRecordInput) -> AttendanceRecord:
        if self.create_calls + 1 == self._fail_on:
            self.create_calls += 1
            raise StoreError("connection lost")
        return super().create(record)


@pytest.fixture
def roster() -> list[Staff]:
    return [
        Staff(staff_id=1, name="S1", role="Manager", active=True),
        Staff(staff_id=2, name="S2", role="Designer", active=True),
        Staff(staff_id=3, name="S3", role=None, active=False),
    ]


@pytest.fixture
def staff_repo(roster) -> InMemoryStaff:
    return InMemoryStaff(roster)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def failing_attendance():
    return FailingAttendance


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 4, 8, 55)


