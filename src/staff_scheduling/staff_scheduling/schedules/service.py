from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

from ..attendance.model import AttendanceRecord, AttendanceRecordInput, AttendanceRecordPatch
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import start_of_day
from ..common.validators import require_staff_selection, require_time_range
from ..core.constants import QUICK_SCHEDULE_MEMO
from ..core.enums import RecordKind
from ..core.exceptions import InvalidStateError, NotFoundError, ValidationError
from ..staff.repository import StaffRepository
from .applier import TemplateApplier
from .batch import BatchResult, run_batch
from .bulk import BulkScheduler
from .recurrence import RecurrenceGenerator
from .templates import TEMPLATE_CATALOG, ShiftTemplate, get_template

logger = logging.getLogger(__name__)


class ScheduleService:
    """Use cases around planned (scheduled) shifts.

    Template/staff selection is passed in explicitly on every call.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        *,
        generator: RecurrenceGenerator | None = None,
        applier: TemplateApplier | None = None,
        bulk: BulkScheduler | None = None,
    ):
        self._attendance = attendance
        self._staff = staff
        self._generator = generator or RecurrenceGenerator()
        self._applier = applier or TemplateApplier(attendance)
        self._bulk = bulk or BulkScheduler(attendance)

    def _require_active(self, staff_ids: Iterable[int]) -> List[int]:
        ids = require_staff_selection(staff_ids)
        for sid in ids:
            s = self._staff.get_by_id(sid)
            if not s or not s.active:
                raise NotFoundError(f"Nhân viên không tồn tại hoặc đã nghỉ việc (id={sid})")
        return ids

    def templates(self) -> Tuple[ShiftTemplate, ...]:
        return TEMPLATE_CATALOG

    def save_schedule(
        self,
        data: AttendanceRecordInput,
        *,
        repeat_days: Optional[Sequence[int]] = None,
        record_id: Optional[int] = None,
    ) -> List[AttendanceRecord]:
        """Edit one planned shift, create one, or create a 4-week recurrence."""
        if data.kind != RecordKind.SCHEDULED:
            raise ValidationError("Chỉ áp dụng cho ca dự kiến")

        if record_id:
            current = self._attendance.get_by_id(int(record_id))
            if not current or current.kind != RecordKind.SCHEDULED:
                raise NotFoundError("Không tìm thấy lịch")
            if not self._staff.get_by_id(int(data.staff_id)):
                raise NotFoundError("Nhân viên không tồn tại")
            record = self._attendance.update(
                int(record_id),
                AttendanceRecordPatch(
                    staff_id=data.staff_id,
                    kind=data.kind,
                    start_time=data.start_time,
                    end_time=data.end_time,
                    status=data.status,
                    memo=data.memo,
                ),
            )
            logger.info("Updated schedule record=%s", record.record_id)
            return [record]

        self._require_active([data.staff_id])

        if repeat_days:
            start_t = data.start_time.time()
            end_t = data.end_time.time()
            # The recurrence reuses time-of-day only, so an overnight range is rejected.
            require_time_range(start_t, end_t)
            inputs = self._generator.generate(
                data.start_time.date(),
                repeat_days,
                start_t,
                end_t,
                staff_id=data.staff_id,
                status=data.status,
                memo=data.memo,
            )
            created = run_batch(self._attendance.create, inputs)
            logger.info("Recurring schedule staff=%s created=%s", data.staff_id, len(created))
            return created

        record = self._attendance.create(data)
        logger.info("Created schedule record=%s staff=%s", record.record_id, record.staff_id)
        return [record]

    def quick_create(self, staff_id: int, day: date, start: time, end: time) -> AttendanceRecord:
        """Single planned shift; refused when the day already has one."""
        self._require_active([staff_id])
        require_time_range(start, end)

        day_start = start_of_day(day)
        existing = self._attendance.list_by_range(
            day_start,
            day_start + timedelta(days=1),
            kind=RecordKind.SCHEDULED,
            staff_id=int(staff_id),
        )
        if existing:
            raise InvalidStateError("Ngày này đã có lịch")

        record = self._attendance.create(
            AttendanceRecordInput(
                staff_id=int(staff_id),
                kind=RecordKind.SCHEDULED,
                start_time=datetime.combine(day, start),
                end_time=datetime.combine(day, end),
                memo=QUICK_SCHEDULE_MEMO,
            )
        )
        logger.info("Quick schedule record=%s staff=%s day=%s", record.record_id, staff_id, day)
        return record

    def apply_template(self, template_name: str, staff_ids: Iterable[int], week_dates: Sequence[date]) -> BatchResult:
        template = get_template(template_name)
        ids = self._require_active(staff_ids)
        if not week_dates:
            raise ValidationError("Vui lòng chọn tuần")
        return self._applier.apply(template, ids, week_dates)

    def apply_bulk(self, staff_ids: Iterable[int], dates: Sequence[date], start: time, end: time) -> BatchResult:
        ids = self._require_active(staff_ids)
        return self._bulk.apply(ids, dates, start, end)

    def delete_schedule(self, record_id: int) -> None:
        record = self._attendance.get_by_id(int(record_id))
        if not record or record.kind != RecordKind.SCHEDULED:
            raise NotFoundError("Không tìm thấy lịch")
        self._attendance.delete(int(record_id))
        logger.info("Deleted schedule record=%s", record_id)
