from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import RecordStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime, shift: Optional[AttendanceRecord], grace_minutes: int) -> StatusDecision:
        note = None
        if shift is not None:
            late_by = int((now - shift.start_time).total_seconds() // 60)
            note = f"Đi muộn {late_by} phút"
        return StatusDecision(status=RecordStatus.LATE, note=note)

    def decide_checkout(self, *, now: datetime, shift: Optional[AttendanceRecord], current: Optional[RecordStatus]) -> StatusDecision:
        return StatusDecision(status=current or RecordStatus.LATE)
