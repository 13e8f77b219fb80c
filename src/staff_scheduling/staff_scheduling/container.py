from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LATE_GRACE_MINUTES, DEFAULT_SHIFT_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .schedules.recurrence import RecurrenceGenerator
from .schedules.service import ScheduleService
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository
from .timeline.service import TimelineService


@dataclass(frozen=True)
class Container:
    staff_repo: StaffRepository
    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    schedule_service: ScheduleService
    timeline_service: TimelineService


def build_services(
    *,
    staff_repo: StaffRepository,
    attendance_repo: AttendanceRepository,
    default_shift_hours: float = DEFAULT_SHIFT_HOURS,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
) -> Container:
    attendance_service = AttendanceService(
        attendance_repo,
        staff_repo,
        strategy_factory=AttendanceStrategyFactory(),
        default_shift_hours=default_shift_hours,
        grace_minutes=grace_minutes,
    )
    schedule_service = ScheduleService(attendance_repo, staff_repo, generator=RecurrenceGenerator())
    timeline_service = TimelineService(attendance_repo, staff_repo)

    return Container(
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        schedule_service=schedule_service,
        timeline_service=timeline_service,
    )


def build_container(
    *,
    db_config: dict,
    default_shift_hours: float = DEFAULT_SHIFT_HOURS,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        staff_repo=MySQLStaffRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        default_shift_hours=default_shift_hours,
        grace_minutes=grace_minutes,
    )
