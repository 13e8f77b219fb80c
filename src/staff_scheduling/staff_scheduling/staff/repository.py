from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Staff


class StaffRepository(Protocol):
    """Giao diện repository cho Staff (read-only).

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_by_id(self, staff_id: int) -> Optional[Staff]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Staff]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Staff]:
        raise NotImplementedError
