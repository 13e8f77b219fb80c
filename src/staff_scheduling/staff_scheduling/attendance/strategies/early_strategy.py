from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import RecordStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """Early leave on checkout (only when check-in was NORMAL)."""

    def decide_checkin(self, *, now: datetime, shift: Optional[AttendanceRecord], grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=RecordStatus.NORMAL)

    def decide_checkout(self, *, now: datetime, shift: Optional[AttendanceRecord], current: Optional[RecordStatus]) -> StatusDecision:
        return StatusDecision(status=RecordStatus.EARLY)
