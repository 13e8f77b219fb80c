from __future__ import annotations

from enum import Enum


class RecordKind(str, Enum):
    """Loại bản ghi: ca dự kiến (scheduled) hoặc giờ làm thực tế (actual)."""

    SCHEDULED = "scheduled"
    ACTUAL = "actual"


class RecordStatus(str, Enum):
    """Phân loại hiển thị cho bản ghi actual (không dùng để suy ra trạng thái có mặt)."""

    NORMAL = "normal"
    LATE = "late"
    EARLY = "early"
    ABSENT = "absent"


class PresenceState(str, Enum):
    """Trạng thái có mặt trong ngày, luôn được tính lại từ bản ghi + giờ hiện tại."""

    ABSENT = "absent"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"


class ViewRange(str, Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"


class TimelineClass(str, Enum):
    SCHEDULED = "scheduled"
    ACTUAL_ON_TIME = "actual-on-time"
    ACTUAL_LATE = "actual-late"
