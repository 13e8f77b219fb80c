from __future__ import annotations

from datetime import date, datetime

import pytest

from src.staff_scheduling.staff_scheduling.attendance.model import AttendanceRecord
from src.staff_scheduling.staff_scheduling.core.enums import RecordKind, RecordStatus, TimelineClass, ViewRange
from src.staff_scheduling.staff_scheduling.core.exceptions import ValidationError
from src.staff_scheduling.staff_scheduling.timeline.projector import TimelineProjector, classify, visible_window
from src.staff_scheduling.staff_scheduling.timeline.service import TimelineService


def _rec(record_id, staff_id, start, end, kind=RecordKind.ACTUAL, status=None) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=record_id,
        staff_id=staff_id,
        kind=kind,
        start_time=start,
        end_time=end,
        status=status,
    )


@pytest.mark.parametrize(
    "view,today,expected",
    [
        ("today", date(2024, 3, 6), (datetime(2024, 3, 6, 9), datetime(2024, 3, 6, 22))),
        ("week", date(2024, 3, 6), (datetime(2024, 3, 4), datetime(2024, 3, 11))),
        ("week", date(2024, 3, 10), (datetime(2024, 3, 4), datetime(2024, 3, 11))),
        ("month", date(2024, 2, 15), (datetime(2024, 2, 1), datetime(2024, 3, 1))),
        ("month", date(2024, 12, 31), (datetime(2024, 12, 1), datetime(2025, 1, 1))),
    ],
)
def test_visible_window(view, today, expected):
    assert visible_window(view, today) == expected


def test_classification():
    start, end = datetime(2024, 3, 4, 9), datetime(2024, 3, 4, 18)
    assert classify(_rec(1, 1, start, end, kind=RecordKind.SCHEDULED, status=RecordStatus.LATE)) == TimelineClass.SCHEDULED
    assert classify(_rec(2, 1, start, end, status=RecordStatus.LATE)) == TimelineClass.ACTUAL_LATE
    assert classify(_rec(3, 1, start, end, status=RecordStatus.EARLY)) == TimelineClass.ACTUAL_ON_TIME
    assert classify(_rec(4, 1, start, end)) == TimelineClass.ACTUAL_ON_TIME


def test_today_view_keeps_only_overlapping_records():
    records = [
        _rec(1, 1, datetime(2024, 3, 4, 9, 30), datetime(2024, 3, 4, 18, 0)),
        # ends exactly at window start: excluded
        _rec(2, 1, datetime(2024, 3, 4, 6, 0), datetime(2024, 3, 4, 9, 0)),
        # starts at window end: excluded
        _rec(3, 2, datetime(2024, 3, 4, 22, 0), datetime(2024, 3, 4, 23, 0)),
        # partially inside
        _rec(4, 2, datetime(2024, 3, 4, 20, 0), datetime(2024, 3, 4, 23, 30)),
        _rec(5, 2, datetime(2024, 3, 5, 9, 30), datetime(2024, 3, 5, 18, 0)),
    ]

    items = TimelineProjector().project(records, ViewRange.TODAY, date(2024, 3, 4))

    assert [i.record_id for i in items] == [1, 4]


def test_duration_fields():
    rec = _rec(1, 1, datetime(2024, 3, 4, 9, 15), datetime(2024, 3, 4, 17, 40), status=RecordStatus.LATE)

    (item,) = TimelineProjector().project([rec], "today", date(2024, 3, 4))

    assert item.duration_minutes == 505
    assert (item.duration_hours, item.duration_remainder_minutes) == (8, 25)
    body = item.to_dict()
    assert body["time_range"] == "09:15 ~ 17:40"
    assert body["classification"] == "actual-late"
    assert body["duration_label"] == "8h 25m"


def test_group_by_staff_keeps_roster_order_and_empty_rows(roster):
    records = [
        _rec(1, 2, datetime(2024, 3, 5, 9), datetime(2024, 3, 5, 18), kind=RecordKind.SCHEDULED),
        _rec(2, 2, datetime(2024, 3, 4, 9), datetime(2024, 3, 4, 18)),
        _rec(3, 99, datetime(2024, 3, 4, 9), datetime(2024, 3, 4, 18)),
    ]
    projector = TimelineProjector()

    groups = projector.group_by_staff(projector.project(records, "week", date(2024, 3, 4)), roster)

    assert [g.staff_id for g in groups] == [1, 2, 3]
    assert groups[0].items == []
    assert [i.record_id for i in groups[1].items] == [2, 1]


def test_service_reads_overlapping_records(attendance_repo, staff_repo):
    attendance_repo.put(_rec(1, 1, datetime(2024, 3, 3, 22, 0), datetime(2024, 3, 4, 6, 0)))
    attendance_repo.put(_rec(2, 1, datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 4, 18, 0)))

    groups = TimelineService(attendance_repo, staff_repo).timeline("WEEK", today=date(2024, 3, 6))

    assert [i.record_id for i in groups[0].items] == [1, 2]


def test_service_rejects_unknown_view(attendance_repo, staff_repo):
    with pytest.raises(ValidationError):
        TimelineService(attendance_repo, staff_repo).timeline("year", today=date(2024, 3, 6))
