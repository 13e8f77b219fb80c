from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from ..common.datetime_utils import now_local, start_of_day
from ..core.constants import CHECK_IN_MEMO, DEFAULT_LATE_GRACE_MINUTES, DEFAULT_SHIFT_HOURS
from ..core.enums import PresenceState, RecordKind
from ..core.exceptions import InvalidStateError, NotFoundError, ValidationError
from ..staff.model import Staff
from ..staff.repository import StaffRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, AttendanceRecordInput, AttendanceRecordPatch
from .repository import AttendanceRepository
from .status import AttendanceStatusResolver, PresenceStatus

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: check-in, check-out, quick panel and manual record edits."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        *,
        resolver: AttendanceStatusResolver | None = None,
        strategy_factory: AttendanceStrategyFactory | None = None,
        default_shift_hours: float = DEFAULT_SHIFT_HOURS,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    ):
        if float(default_shift_hours) <= 0:
            raise ValidationError("Độ dài ca mặc định phải lớn hơn 0")

        self._attendance = attendance
        self._staff = staff
        self._resolver = resolver or AttendanceStatusResolver()
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._default_shift = timedelta(hours=float(default_shift_hours))
        self._grace_minutes = int(grace_minutes)

    def _require_active_staff(self, staff_id: int) -> Staff:
        staff = self._staff.get_by_id(int(staff_id))
        if not staff or not staff.active:
            raise NotFoundError("Nhân viên không tồn tại hoặc đã nghỉ việc")
        return staff

    def _today_records(self, staff_id: int, kind: RecordKind, now: datetime) -> List[AttendanceRecord]:
        day_start = start_of_day(now.date())
        return list(
            self._attendance.list_by_range(
                day_start,
                day_start + timedelta(days=1),
                kind=kind,
                staff_id=int(staff_id),
            )
        )

    def _today_shift(self, staff_id: int, now: datetime) -> Optional[AttendanceRecord]:
        shifts = self._today_records(staff_id, RecordKind.SCHEDULED, now)
        if not shifts:
            return None
        return min(shifts, key=lambda r: r.start_time)

    def presence(self, staff_id: int, *, now: datetime | None = None) -> PresenceStatus:
        now = now or now_local()
        records = self._today_records(staff_id, RecordKind.ACTUAL, now)
        return self._resolver.resolve(int(staff_id), records, now)

    def today_panel(self, *, now: datetime | None = None) -> List[PresenceStatus]:
        now = now or now_local()
        day_start = start_of_day(now.date())
        records = self._attendance.list_by_range(day_start, day_start + timedelta(days=1), kind=RecordKind.ACTUAL)
        return self._resolver.panel(self._staff.list_active(), records, now)

    def check_in(self, staff_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        # DATETIME columns keep whole seconds only.
        now = (now or now_local()).replace(microsecond=0)
        staff = self._require_active_staff(staff_id)

        current = self.presence(staff.staff_id, now=now)
        if current.state != PresenceState.ABSENT:
            raise InvalidStateError("Nhân viên đã chấm công vào ca hôm nay rồi")

        shift = self._today_shift(staff.staff_id, now)
        strategy = self._factory.for_checkin(now=now, shift=shift, grace_minutes=self._grace_minutes)
        decision = strategy.decide_checkin(now=now, shift=shift, grace_minutes=self._grace_minutes)

        record = self._attendance.create(
            AttendanceRecordInput(
                staff_id=staff.staff_id,
                kind=RecordKind.ACTUAL,
                start_time=now,
                end_time=now + self._default_shift,
                status=decision.status,
                memo=decision.note or CHECK_IN_MEMO,
            )
        )
        logger.info("Check-in staff=%s record=%s status=%s", staff.staff_id, record.record_id, decision.status.value)
        return record

    def check_out(self, staff_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = (now or now_local()).replace(microsecond=0)
        staff = self._require_active_staff(staff_id)

        current = self.presence(staff.staff_id, now=now)
        if current.state != PresenceState.CHECKED_IN or current.record is None:
            raise InvalidStateError("Nhân viên chưa chấm công vào ca hôm nay")

        record = current.record
        shift = self._today_shift(staff.staff_id, now)
        strategy = self._factory.for_checkout(now=now, shift=shift, current_status=record.status)
        decision = strategy.decide_checkout(now=now, shift=shift, current=record.status)

        updated = self._attendance.update(
            record.record_id,
            AttendanceRecordPatch(end_time=now, status=decision.status),
        )
        logger.info("Check-out staff=%s record=%s status=%s", staff.staff_id, updated.record_id, decision.status.value)
        return updated

    def save_record(self, data: AttendanceRecordInput, record_id: int | None = None) -> AttendanceRecord:
        """Manual create/edit of a record (status may be set freely)."""
        if not self._staff.get_by_id(int(data.staff_id)):
            raise NotFoundError("Nhân viên không tồn tại")

        if record_id:
            patch = AttendanceRecordPatch(
                staff_id=data.staff_id,
                kind=data.kind,
                start_time=data.start_time,
                end_time=data.end_time,
                status=data.status,
                memo=data.memo,
            )
            return self.update_record(int(record_id), patch)

        record = self._attendance.create(data)
        logger.info("Created %s record=%s staff=%s", record.kind.value, record.record_id, record.staff_id)
        return record

    def update_record(self, record_id: int, patch: AttendanceRecordPatch) -> AttendanceRecord:
        if patch.is_empty():
            raise ValidationError("Vui lòng nhập ít nhất 1 thay đổi")

        current = self._attendance.get_by_id(int(record_id))
        if not current:
            raise NotFoundError("Không tìm thấy bản ghi")
        # Validates start < end before any write.
        merged = patch.apply_to(current)
        if merged.staff_id != current.staff_id and not self._staff.get_by_id(merged.staff_id):
            raise NotFoundError("Nhân viên không tồn tại")

        record = self._attendance.update(int(record_id), patch)
        logger.info("Updated record=%s staff=%s", record.record_id, record.staff_id)
        return record

    def delete_record(self, record_id: int) -> None:
        self._attendance.delete(int(record_id))
        logger.info("Deleted record=%s", record_id)
