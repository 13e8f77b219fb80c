from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Sequence

from ..attendance.model import AttendanceRecordInput
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import start_of_day, sunday_weekday
from ..common.validators import require_staff_selection
from ..core.enums import RecordKind
from .batch import BatchResult, run_batch
from .templates import ShiftTemplate

logger = logging.getLogger(__name__)


class TemplateApplier:
    """Applies a weekly template to staff over the given dates (any number of weeks).

    Staff/day pairs that already have a scheduled record are skipped, so
    applying the same template twice creates nothing the second time.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def _has_schedule(self, staff_id: int, day: date) -> bool:
        day_start = start_of_day(day)
        existing = self._attendance.list_by_range(
            day_start,
            day_start + timedelta(days=1),
            kind=RecordKind.SCHEDULED,
            staff_id=staff_id,
        )
        return len(existing) > 0

    def plan(self, template: ShiftTemplate, staff_ids: Iterable[int], week_dates: Sequence[date]) -> tuple[List[AttendanceRecordInput], int]:
        ids = require_staff_selection(staff_ids)
        days = sorted(set(week_dates))

        pending: List[AttendanceRecordInput] = []
        skipped = 0
        for staff_id in ids:
            for day in days:
                entry = template.entry_for(sunday_weekday(day))
                if entry is None:
                    continue
                if self._has_schedule(staff_id, day):
                    skipped += 1
                    logger.debug("Skip staff=%s day=%s: already scheduled", staff_id, day)
                    continue
                pending.append(
                    AttendanceRecordInput(
                        staff_id=staff_id,
                        kind=RecordKind.SCHEDULED,
                        start_time=datetime.combine(day, entry.start),
                        end_time=datetime.combine(day, entry.end),
                        memo=f"Template: {template.label}",
                    )
                )
        return pending, skipped

    def apply(self, template: ShiftTemplate, staff_ids: Iterable[int], week_dates: Sequence[date]) -> BatchResult:
        pending, skipped = self.plan(template, staff_ids, week_dates)
        created = run_batch(self._attendance.create, pending)
        logger.info("Template %s applied: created=%s skipped=%s", template.name, len(created), skipped)
        return BatchResult(created=created, skipped=skipped)
