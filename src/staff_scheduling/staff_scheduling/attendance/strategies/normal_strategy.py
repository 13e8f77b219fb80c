from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import RecordStatus
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, normal check-out."""

    def decide_checkin(self, *, now: datetime, shift: Optional[AttendanceRecord], grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=RecordStatus.NORMAL)

    def decide_checkout(self, *, now: datetime, shift: Optional[AttendanceRecord], current: Optional[RecordStatus]) -> StatusDecision:
        return StatusDecision(status=current or RecordStatus.NORMAL)
