from __future__ import annotations

from datetime import date
from typing import List

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..staff.repository import StaffRepository
from ..core.enums import ViewRange
from ..core.exceptions import ValidationError
from .projector import TimelineGroup, TimelineProjector, visible_window


class TimelineService:
    def __init__(self, attendance: AttendanceRepository, staff: StaffRepository, *, projector: TimelineProjector | None = None):
        self._attendance = attendance
        self._staff = staff
        self._projector = projector or TimelineProjector()

    def timeline(self, view: str, *, today: date | None = None) -> List[TimelineGroup]:
        try:
            view_range = ViewRange((view or ViewRange.TODAY.value).lower())
        except ValueError:
            raise ValidationError("Chế độ xem không hợp lệ (today/week/month)")

        today = today or now_local().date()
        start, end = visible_window(view_range, today)
        records = self._attendance.list_overlapping(start, end)
        items = self._projector.project(records, view_range, today)
        return self._projector.group_by_staff(items, self._staff.list_all())
