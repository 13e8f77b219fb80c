from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional

from ..common.datetime_utils import sunday_weekday
from ..common.validators import normalize_weekdays, require_time_range
from ..core.constants import RECURRENCE_WEEKS
from ..core.enums import RecordKind, RecordStatus
from ..core.exceptions import ValidationError
from ..attendance.model import AttendanceRecordInput


class RecurrenceGenerator:
    """Expands a weekday selection into dated planned shifts.

    Weekdays use 0=Sunday .. 6=Saturday. Output covers [anchor, anchor + weeks)
    and is NOT checked against records already in the store.
    """

    def __init__(self, weeks: int = RECURRENCE_WEEKS):
        if int(weeks) <= 0:
            raise ValidationError("Số tuần lặp phải lớn hơn 0")
        self._weeks = int(weeks)

    def dates(self, anchor: date, weekdays: Iterable[int]) -> List[date]:
        days = normalize_weekdays(weekdays)
        out: List[date] = []
        for week in range(self._weeks):
            base = anchor + timedelta(weeks=week)
            for d in days:
                out.append(base + timedelta(days=(d - sunday_weekday(base)) % 7))
        out.sort()
        return out

    def generate(
        self,
        anchor: date,
        weekdays: Iterable[int],
        start: time,
        end: time,
        *,
        staff_id: int,
        status: Optional[RecordStatus] = None,
        memo: Optional[str] = None,
    ) -> List[AttendanceRecordInput]:
        require_time_range(start, end)
        return [
            AttendanceRecordInput(
                staff_id=int(staff_id),
                kind=RecordKind.SCHEDULED,
                start_time=datetime.combine(day, start),
                end_time=datetime.combine(day, end),
                status=status,
                memo=memo,
            )
            for day in self.dates(anchor, weekdays)
        ]
