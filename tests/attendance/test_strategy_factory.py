from datetime import datetime

from src.staff_scheduling.staff_scheduling.attendance.factory import AttendanceStrategyFactory
from src.staff_scheduling.staff_scheduling.attendance.model import AttendanceRecord
from src.staff_scheduling.staff_scheduling.attendance.strategies.early_strategy import EarlyLeaveStrategy
from src.staff_scheduling.staff_scheduling.attendance.strategies.late_strategy import LateStrategy
from src.staff_scheduling.staff_scheduling.attendance.strategies.normal_strategy import NormalStrategy
from src.staff_scheduling.staff_scheduling.core.enums import RecordKind, RecordStatus

SHIFT = AttendanceRecord(
    record_id=1,
    staff_id=1,
    kind=RecordKind.SCHEDULED,
    start_time=datetime(2025, 1, 1, 8, 0),
    end_time=datetime(2025, 1, 1, 17, 0),
)


def test_factory_checkin_on_time_within_grace():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 8, 4, 59), shift=SHIFT, grace_minutes=5)

    assert isinstance(strategy, NormalStrategy)


def test_factory_checkin_late_after_grace():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=datetime(2025, 1, 1, 8, 6, 0), shift=SHIFT, grace_minutes=5)

    assert isinstance(strategy, LateStrategy)


def test_factory_without_shift_is_normal():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkin(now=datetime(2025, 1, 1, 23, 0), shift=None, grace_minutes=5), NormalStrategy)
    assert isinstance(factory.for_checkout(now=datetime(2025, 1, 1, 9, 0), shift=None, current_status=RecordStatus.NORMAL), NormalStrategy)


def test_factory_checkout_early_only_when_normal():
    factory = AttendanceStrategyFactory()
    early_now = datetime(2025, 1, 1, 16, 0)

    assert isinstance(factory.for_checkout(now=early_now, shift=SHIFT, current_status=RecordStatus.NORMAL), EarlyLeaveStrategy)
    assert isinstance(factory.for_checkout(now=early_now, shift=SHIFT, current_status=RecordStatus.LATE), NormalStrategy)
    assert isinstance(factory.for_checkout(now=datetime(2025, 1, 1, 17, 0), shift=SHIFT, current_status=RecordStatus.NORMAL), NormalStrategy)
