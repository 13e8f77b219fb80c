from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Staff:
    """Thực thể miền (domain): Nhân viên.

    Lưu ý: Danh sách nhân viên do hệ thống khác quản lý, ở đây chỉ đọc.
    """

    staff_id: int
    name: str
    role: Optional[str] = None
    active: bool = True
