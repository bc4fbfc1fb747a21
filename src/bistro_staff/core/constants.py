"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_HOURLY_RATE = 15.0
DEFAULT_EMPLOYEE_PASSWORD = "employee123"
DEFAULT_PROFILE_IMAGE = "/placeholder.svg"
DEFAULT_NOTE_CATEGORY = "general"
MIN_PASSWORD_LENGTH = 6

DEFAULT_LATE_GRACE_MINUTES = 0

# Assumed working hours per month used by the bonus amount.
MONTHLY_BONUS_HOURS = 160

DEFAULT_OVERTIME_MULTIPLIER = 1.5
DEFAULT_DEDUCTION_RATE = 0.0

# (max approved leaves inclusive, bonus percentage); above the last row -> not eligible.
BONUS_LADDER = (
    (1, 7),
    (2, 5),
    (4, 3),
)

ID_LENGTH = 7
