"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
SECONDS_PER_HOUR = 60 * 60

DEFAULT_LATE_GRACE_MINUTES = 1
HOURS_DECIMALS = 2

UNASSIGNED_DEPARTMENT = "Unassigned"
REPORTABLE_EMPLOYEE_STATUSES = ("active", "onboarding")
