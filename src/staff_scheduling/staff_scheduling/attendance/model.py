from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.validators import require_time_range
from ..core.enums import RecordKind, RecordStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecordInput:
    """Dữ liệu tạo mới một bản ghi (chưa có id)."""

    staff_id: int
    kind: RecordKind
    start_time: datetime
    end_time: datetime
    status: Optional[RecordStatus] = None
    memo: Optional[str] = None

    def __post_init__(self):
        if int(self.staff_id) <= 0:
            raise ValidationError("Nhân viên không hợp lệ")
        require_time_range(self.start_time, self.end_time)


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi ca dự kiến hoặc giờ làm thực tế.

    Trạng thái checked-in/checked-out KHÔNG được lưu ở đây; xem ``attendance.status``.
    """

    record_id: int
    staff_id: int
    kind: RecordKind
    start_time: datetime
    end_time: datetime
    status: Optional[RecordStatus] = None
    memo: Optional[str] = None

    def __post_init__(self):
        require_time_range(self.start_time, self.end_time)

    @property
    def duration_minutes(self) -> int:
        return int((self.end_time - self.start_time).total_seconds() // 60)

    @classmethod
    def from_input(cls, record_id: int, data: AttendanceRecordInput) -> "AttendanceRecord":
        return cls(
            record_id=int(record_id),
            staff_id=int(data.staff_id),
            kind=data.kind,
            start_time=data.start_time,
            end_time=data.end_time,
            status=data.status,
            memo=data.memo,
        )


@dataclass(frozen=True)
class AttendanceRecordPatch:
    """Partial update; ``None`` means "keep the stored value"."""

    staff_id: Optional[int] = None
    kind: Optional[RecordKind] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[RecordStatus] = None
    memo: Optional[str] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f) is None for f in ("staff_id", "kind", "start_time", "end_time", "status", "memo"))

    def apply_to(self, record: AttendanceRecord) -> AttendanceRecord:
        """Return the merged record; raises ValidationError if the range breaks."""
        changes = {
            f: getattr(self, f)
            for f in ("staff_id", "kind", "start_time", "end_time", "status", "memo")
            if getattr(self, f) is not None
        }
        return replace(record, **changes)
