from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional, Tuple

from ..core.exceptions import NotFoundError


@dataclass(frozen=True)
class TemplateEntry:
    weekday: int  # 0=Sunday .. 6=Saturday
    start: time
    end: time


@dataclass(frozen=True)
class ShiftTemplate:
    """Mẫu lịch tuần: thứ trong tuần -> giờ bắt đầu/kết thúc."""

    name: str
    label: str
    entries: Tuple[TemplateEntry, ...]

    def entry_for(self, weekday: int) -> Optional[TemplateEntry]:
        for e in self.entries:
            if e.weekday == weekday:
                return e
        return None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "label": self.label,
            "entries": [
                {"weekday": e.weekday, "start": e.start.strftime("%H:%M"), "end": e.end.strftime("%H:%M")}
                for e in self.entries
            ],
        }


def _entries(weekdays: Tuple[int, ...], start: time, end: time) -> Tuple[TemplateEntry, ...]:
    return tuple(TemplateEntry(weekday=d, start=start, end=end) for d in weekdays)


TEMPLATE_CATALOG: Tuple[ShiftTemplate, ...] = (
    ShiftTemplate("standard", "Standard", _entries((1, 2, 3, 4, 5), time(9, 0), time(18, 0))),
    ShiftTemplate("weekend", "Weekend", _entries((6, 0), time(10, 0), time(16, 0))),
    ShiftTemplate(
        "shift_a",
        "Shift A (morning)",
        _entries((1, 3, 5), time(8, 0), time(14, 0)) + _entries((0,), time(9, 0), time(13, 0)),
    ),
    ShiftTemplate("shift_b", "Shift B (evening)", _entries((2, 4, 6), time(14, 0), time(22, 0))),
)


def get_template(name: str) -> ShiftTemplate:
    key = (name or "").strip().lower()
    for t in TEMPLATE_CATALOG:
        if key in (t.name, t.label.lower()):
            return t
    raise NotFoundError(f"Không tìm thấy mẫu lịch: {name}")
