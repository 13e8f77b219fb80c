"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SHIFT_HOURS = 9
DEFAULT_LATE_GRACE_MINUTES = 5
RECURRENCE_WEEKS = 4
TODAY_VIEW_START_HOUR = 9
TODAY_VIEW_END_HOUR = 22

CHECK_IN_MEMO = "Check-in"
QUICK_SCHEDULE_MEMO = "Quick schedule"
BULK_SCHEDULE_MEMO = "Bulk schedule"
