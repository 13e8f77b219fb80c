from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import end_of_day, start_of_day
from ..core.enums import PresenceState, RecordKind
from ..staff.model import Staff
from .model import AttendanceRecord


@dataclass(frozen=True)
class PresenceStatus:
    staff_id: int
    state: PresenceState
    record: Optional[AttendanceRecord] = None
    staff_name: Optional[str] = None

    def to_dict(self) -> dict:
        r = self.record
        return {
            "staff_id": self.staff_id,
            "name": self.staff_name,
            "state": self.state.value,
            "record_id": r.record_id if r else None,
            "check_in": r.start_time.strftime("%H:%M") if r else None,
            "check_out": r.end_time.strftime("%H:%M") if r and self.state == PresenceState.CHECKED_OUT else None,
            "status": r.status.value if r and r.status else None,
        }


class AttendanceStatusResolver:
    """Derives absent / checked-in / checked-out from records and the clock.

    Nothing here is stored: an actual record whose end_time has passed counts as
    checked-out even if nobody pressed check-out.
    """

    def today_record(self, staff_id: int, records: Iterable[AttendanceRecord], now: datetime) -> Optional[AttendanceRecord]:
        day_start = start_of_day(now.date())
        day_end = end_of_day(now.date())

        found: Optional[AttendanceRecord] = None
        for r in records:
            if r.kind != RecordKind.ACTUAL or r.staff_id != int(staff_id):
                continue
            if not (day_start <= r.start_time <= day_end):
                continue
            if found is None or r.start_time > found.start_time:
                found = r
        return found

    def resolve(self, staff_id: int, records: Iterable[AttendanceRecord], now: datetime) -> PresenceStatus:
        record = self.today_record(staff_id, records, now)
        if record is None:
            return PresenceStatus(staff_id=int(staff_id), state=PresenceState.ABSENT)
        if now < record.end_time:
            return PresenceStatus(staff_id=int(staff_id), state=PresenceState.CHECKED_IN, record=record)
        return PresenceStatus(staff_id=int(staff_id), state=PresenceState.CHECKED_OUT, record=record)

    def panel(self, staff: Sequence[Staff], records: Iterable[AttendanceRecord], now: datetime) -> List[PresenceStatus]:
        """Quick attendance panel: one row per active staff member, roster order."""
        records = list(records)
        out: List[PresenceStatus] = []
        for s in staff:
            if not s.active:
                continue
            st = self.resolve(s.staff_id, records, now)
            out.append(PresenceStatus(staff_id=st.staff_id, state=st.state, record=st.record, staff_name=s.name))
        return out
