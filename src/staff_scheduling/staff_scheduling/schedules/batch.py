from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from ..attendance.model import AttendanceRecord, AttendanceRecordInput
from ..core.exceptions import BatchError, DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchResult:
    created: List[AttendanceRecord] = field(default_factory=list)
    skipped: int = 0

    def to_dict(self) -> dict:
        return {"created": len(self.created), "skipped": self.skipped}


def run_batch(
    create: Callable[[AttendanceRecordInput], AttendanceRecord],
    inputs: Sequence[AttendanceRecordInput],
) -> List[AttendanceRecord]:
    """Issue independent creations in order and stop at the first failure.

    Records created before the failure stay in the store (no rollback); the
    raised BatchError lists them so the caller can report a partial result.
    """

    created: List[AttendanceRecord] = []
    for i, item in enumerate(inputs):
        try:
            created.append(create(item))
        except DomainError as e:
            pending = len(inputs) - i - 1
            logger.warning(
                "Batch stopped after %s/%s creations (staff=%s start=%s): %s",
                len(created),
                len(inputs),
                item.staff_id,
                item.start_time,
                e,
            )
            raise BatchError(
                f"Đã tạo {len(created)}/{len(inputs)} lịch trước khi gặp lỗi: {e}",
                created=created,
                failed=item,
                pending=pending,
            ) from e
    return created
