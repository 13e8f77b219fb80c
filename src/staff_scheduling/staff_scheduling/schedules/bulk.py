from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Iterable, List, Sequence

from ..attendance.model import AttendanceRecordInput
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_staff_selection, require_time_range
from ..core.constants import BULK_SCHEDULE_MEMO
from ..core.enums import RecordKind
from ..core.exceptions import ValidationError
from .batch import BatchResult, run_batch

logger = logging.getLogger(__name__)


class BulkScheduler:
    """One start/end time for every (staff, date) pair.

    Unlike TemplateApplier there is no existing-record check: running it twice
    over the same staff and dates creates duplicate planned shifts.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def plan(self, staff_ids: Iterable[int], dates: Sequence[date], start: time, end: time) -> List[AttendanceRecordInput]:
        ids = require_staff_selection(staff_ids)
        require_time_range(start, end)
        if not dates:
            raise ValidationError("Vui lòng chọn ít nhất 1 ngày")

        return [
            AttendanceRecordInput(
                staff_id=staff_id,
                kind=RecordKind.SCHEDULED,
                start_time=datetime.combine(day, start),
                end_time=datetime.combine(day, end),
                memo=BULK_SCHEDULE_MEMO,
            )
            for staff_id in ids
            for day in dates
        ]

    def apply(self, staff_ids: Iterable[int], dates: Sequence[date], start: time, end: time) -> BatchResult:
        pending = self.plan(staff_ids, dates, start, end)
        created = run_batch(self._attendance.create, pending)
        logger.info("Bulk schedule applied: created=%s", len(created))
        return BatchResult(created=created)
