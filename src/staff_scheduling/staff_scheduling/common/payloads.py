from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from ..attendance.model import AttendanceRecordInput, AttendanceRecordPatch
from ..core.enums import RecordKind, RecordStatus
from ..core.exceptions import ValidationError
from .datetime_utils import now_local, parse_iso_date, parse_iso_datetime, week_dates


def _kind(value: Any, default: Optional[RecordKind]) -> Optional[RecordKind]:
    if value in (None, ""):
        return default
    try:
        return RecordKind(str(value))
    except ValueError:
        raise ValidationError("Loại bản ghi không hợp lệ")


def _status(value: Any) -> Optional[RecordStatus]:
    if value in (None, ""):
        return None
    try:
        return RecordStatus(str(value))
    except ValueError:
        raise ValidationError("Trạng thái không hợp lệ")


def json_object(raw: Any) -> dict:
    """Request body as a dict; a missing body counts as empty."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError("Dữ liệu gửi lên phải là một JSON object")
    return raw


def to_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ")


def record_input(data: dict, *, default_kind: RecordKind) -> AttendanceRecordInput:
    if not data.get("staff_id"):
        raise ValidationError("Vui lòng chọn nhân viên")
    return AttendanceRecordInput(
        staff_id=to_int(data.get("staff_id"), "Nhân viên"),
        kind=_kind(data.get("kind"), default_kind),
        start_time=parse_iso_datetime(data.get("start_time") or ""),
        end_time=parse_iso_datetime(data.get("end_time") or ""),
        status=_status(data.get("status")),
        memo=(data.get("memo") or "").strip() or None,
    )


def record_patch(data: dict) -> AttendanceRecordPatch:
    return AttendanceRecordPatch(
        staff_id=to_int(data["staff_id"], "Nhân viên") if data.get("staff_id") else None,
        kind=_kind(data.get("kind"), None),
        start_time=parse_iso_datetime(data["start_time"]) if data.get("start_time") else None,
        end_time=parse_iso_datetime(data["end_time"]) if data.get("end_time") else None,
        status=_status(data.get("status")),
        memo=data.get("memo"),
    )


def staff_ids(data: dict) -> List[int]:
    raw = data.get("staff_ids") or []
    if not isinstance(raw, list):
        raise ValidationError("staff_ids phải là danh sách")
    return [to_int(v, "Nhân viên") for v in raw]


def int_list(data: dict, key: str) -> List[int]:
    raw = data.get(key) or []
    if not isinstance(raw, list):
        raise ValidationError(f"{key} phải là danh sách")
    return [to_int(v, key) for v in raw]


def visible_dates(data: dict) -> List[date]:
    """Explicit ``dates`` list, else the Monday..Sunday week of ``week_of`` (default today)."""
    raw = data.get("dates")
    if raw:
        if not isinstance(raw, list):
            raise ValidationError("dates phải là danh sách")
        return [parse_iso_date(v) for v in raw]
    anchor = parse_iso_date(data["week_of"]) if data.get("week_of") else now_local().date()
    return week_dates(anchor)
