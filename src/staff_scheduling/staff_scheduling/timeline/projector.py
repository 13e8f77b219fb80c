from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Sequence, Tuple

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_duration, start_of_day
from ..core.constants import TODAY_VIEW_END_HOUR, TODAY_VIEW_START_HOUR
from ..core.enums import RecordKind, RecordStatus, TimelineClass, ViewRange
from ..staff.model import Staff


@dataclass(frozen=True)
class TimelineItem:
    record_id: int
    staff_id: int
    start_time: datetime
    end_time: datetime
    classification: TimelineClass
    duration_minutes: int

    @property
    def duration_hours(self) -> int:
        return self.duration_minutes // 60

    @property
    def duration_remainder_minutes(self) -> int:
        return self.duration_minutes % 60

    @property
    def label(self) -> str:
        return _LABELS[self.classification]

    @property
    def css_class(self) -> str:
        return _CSS[self.classification]

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "staff_id": self.staff_id,
            "start": self.start_time.strftime("%Y-%m-%dT%H:%M"),
            "end": self.end_time.strftime("%Y-%m-%dT%H:%M"),
            "time_range": f"{self.start_time.strftime('%H:%M')} ~ {self.end_time.strftime('%H:%M')}",
            "classification": self.classification.value,
            "label": self.label,
            "css_class": self.css_class,
            "duration_hours": self.duration_hours,
            "duration_minutes": self.duration_remainder_minutes,
            "duration_label": format_duration(self.duration_minutes),
        }


@dataclass(frozen=True)
class TimelineGroup:
    staff_id: int
    name: str
    items: List[TimelineItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"staff_id": self.staff_id, "name": self.name, "items": [i.to_dict() for i in self.items]}


_LABELS = {
    TimelineClass.SCHEDULED: "Dự kiến",
    TimelineClass.ACTUAL_ON_TIME: "Có mặt",
    TimelineClass.ACTUAL_LATE: "Đi muộn",
}

_CSS = {
    TimelineClass.SCHEDULED: "bg-light text-secondary",
    TimelineClass.ACTUAL_ON_TIME: "bg-primary",
    TimelineClass.ACTUAL_LATE: "bg-danger",
}


def visible_window(view: ViewRange | str, today: date) -> Tuple[datetime, datetime]:
    """Concrete [start, end) for a view selector around ``today``."""
    view = ViewRange(view)
    if view == ViewRange.TODAY:
        return (
            datetime.combine(today, time(TODAY_VIEW_START_HOUR)),
            datetime.combine(today, time(TODAY_VIEW_END_HOUR)),
        )
    if view == ViewRange.WEEK:
        monday = start_of_day(today - timedelta(days=today.weekday()))
        return monday, monday + timedelta(days=7)

    first = today.replace(day=1)
    next_first = (first + timedelta(days=32)).replace(day=1)
    return start_of_day(first), start_of_day(next_first)


def classify(record: AttendanceRecord) -> TimelineClass:
    if record.kind == RecordKind.SCHEDULED:
        return TimelineClass.SCHEDULED
    if record.status == RecordStatus.LATE:
        return TimelineClass.ACTUAL_LATE
    return TimelineClass.ACTUAL_ON_TIME


class TimelineProjector:
    """Pure read/transform of records onto a day/week/month window."""

    def project(self, records: Iterable[AttendanceRecord], view: ViewRange | str, today: date) -> List[TimelineItem]:
        start, end = visible_window(view, today)
        items = [
            TimelineItem(
                record_id=r.record_id,
                staff_id=r.staff_id,
                start_time=r.start_time,
                end_time=r.end_time,
                classification=classify(r),
                duration_minutes=r.duration_minutes,
            )
            for r in records
            if r.start_time < end and r.end_time > start
        ]
        items.sort(key=lambda i: (i.staff_id, i.start_time, i.record_id))
        return items

    def group_by_staff(self, items: Iterable[TimelineItem], staff: Sequence[Staff]) -> List[TimelineGroup]:
        by_staff: dict[int, List[TimelineItem]] = {s.staff_id: [] for s in staff}
        for item in items:
            if item.staff_id in by_staff:
                by_staff[item.staff_id].append(item)
        return [TimelineGroup(staff_id=s.staff_id, name=s.name, items=by_staff[s.staff_id]) for s in staff]
