from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from src.staff_scheduling.staff_scheduling.common.datetime_utils import sunday_weekday
from src.staff_scheduling.staff_scheduling.core.enums import RecordKind
from src.staff_scheduling.staff_scheduling.core.exceptions import ValidationError
from src.staff_scheduling.staff_scheduling.schedules.recurrence import RecurrenceGenerator


@pytest.mark.parametrize("anchor", [date(2024, 3, 4), date(2024, 3, 6), date(2024, 3, 10), date(2024, 12, 30)])
@pytest.mark.parametrize("weekdays", [[1], [1, 3, 5], [0, 6], [0, 1, 2, 3, 4, 5, 6]])
def test_emits_four_per_weekday_within_horizon(anchor, weekdays):
    records = RecurrenceGenerator().generate(anchor, weekdays, time(9, 0), time(18, 0), staff_id=1)

    assert len(records) == len(weekdays) * 4
    for r in records:
        d = r.start_time.date()
        assert anchor <= d < anchor + timedelta(weeks=4)
        assert sunday_weekday(d) in weekdays
        assert r.start_time < r.end_time
        assert r.kind == RecordKind.SCHEDULED
        assert r.start_time.time() == time(9, 0)
        assert r.end_time.time() == time(18, 0)

    dates = [r.start_time.date() for r in records]
    assert len(set(dates)) == len(dates)


def test_anchor_day_is_included_when_selected():
    # 2024-03-04 is a Monday (1)
    records = RecurrenceGenerator().generate(date(2024, 3, 4), [1], time(9, 0), time(18, 0), staff_id=1)

    assert [r.start_time.date() for r in records] == [
        date(2024, 3, 4),
        date(2024, 3, 11),
        date(2024, 3, 18),
        date(2024, 3, 25),
    ]


def test_empty_selection_is_noop():
    assert RecurrenceGenerator().generate(date(2024, 3, 4), [], time(9, 0), time(18, 0), staff_id=1) == []


def test_duplicate_weekdays_collapse():
    records = RecurrenceGenerator().generate(date(2024, 3, 4), [2, 2, 2], time(9, 0), time(18, 0), staff_id=1)
    assert len(records) == 4


def test_invalid_time_range_rejected():
    with pytest.raises(ValidationError):
        RecurrenceGenerator().generate(date(2024, 3, 4), [1], time(18, 0), time(9, 0), staff_id=1)


def test_invalid_weekday_rejected():
    with pytest.raises(ValidationError):
        RecurrenceGenerator().generate(date(2024, 3, 4), [7], time(9, 0), time(18, 0), staff_id=1)


def test_custom_horizon():
    records = RecurrenceGenerator(weeks=2).generate(date(2024, 3, 4), [1, 2], time(9, 0), time(18, 0), staff_id=1)
    assert len(records) == 4
