from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.enums import RecordStatus
from .model import AttendanceRecord
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on today's planned shift."""

    def for_checkin(self, *, now: datetime, shift: Optional[AttendanceRecord], grace_minutes: int) -> AttendanceStrategy:
        if not shift:
            return NormalStrategy()

        if now <= shift.start_time + timedelta(minutes=grace_minutes):
            return NormalStrategy()
        return LateStrategy()

    def for_checkout(self, *, now: datetime, shift: Optional[AttendanceRecord], current_status: Optional[RecordStatus]) -> AttendanceStrategy:
        if not shift:
            return NormalStrategy()

        if now < shift.end_time and current_status in (None, RecordStatus.NORMAL):
            return EarlyLeaveStrategy()
        return NormalStrategy()
