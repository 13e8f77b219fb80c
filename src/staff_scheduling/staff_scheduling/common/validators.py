from __future__ import annotations

from datetime import datetime, time
from typing import Iterable, List

from ..core.exceptions import ValidationError


def require_time_range(start: datetime | time, end: datetime | time) -> None:
    if start is None or end is None:
        raise ValidationError("Thiếu giờ bắt đầu hoặc giờ kết thúc")
    if start >= end:
        raise ValidationError("Giờ bắt đầu phải trước giờ kết thúc")


def require_staff_selection(staff_ids: Iterable[int]) -> List[int]:
    ids: List[int] = []
    for sid in staff_ids or []:
        sid = int(sid)
        if sid <= 0:
            raise ValidationError("Nhân viên không hợp lệ")
        if sid not in ids:
            ids.append(sid)
    if not ids:
        raise ValidationError("Vui lòng chọn ít nhất 1 nhân viên")
    return ids


def normalize_weekdays(weekdays: Iterable[int]) -> List[int]:
    """Weekday values 0=Sunday..6=Saturday, de-duplicated and sorted."""
    out = set()
    for d in weekdays or []:
        d = int(d)
        if d < 0 or d > 6:
            raise ValidationError(f"Thứ trong tuần không hợp lệ: {d}")
        out.add(d)
    return sorted(out)
