from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import RecordStatus
from ..model import AttendanceRecord


@dataclass(frozen=True)
class StatusDecision:
    status: RecordStatus
    note: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a display status.

    ``shift`` is today's scheduled record for the staff member, if any.
    """

    @abstractmethod
    def decide_checkin(self, *, now: datetime, shift: Optional[AttendanceRecord], grace_minutes: int) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_checkout(self, *, now: datetime, shift: Optional[AttendanceRecord], current: Optional[RecordStatus]) -> StatusDecision:
        raise NotImplementedError
