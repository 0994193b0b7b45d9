"""Constants and defaults.

Note: Keep codes here so results stay comparable across releases; downstream
reports match on these exact strings.
"""

MINUTES_PER_DAY = 1440
DEFAULT_REGULAR_MINUTES = 480

# Error codes: the day's figures are unreliable and need a correction.
ERR_NO_BOOKINGS = "NO_BOOKINGS"
ERR_MISSING_COME = "MISSING_COME"
ERR_MISSING_GO = "MISSING_GO"
ERR_EARLY_COME = "EARLY_COME"
ERR_LATE_COME = "LATE_COME"
ERR_EARLY_GO = "EARLY_GO"
ERR_LATE_GO = "LATE_GO"
ERR_MISSED_CORE_START = "MISSED_CORE_START"
ERR_MISSED_CORE_END = "MISSED_CORE_END"
ERR_BELOW_MIN_WORK_TIME = "BELOW_MIN_WORK_TIME"
ERR_NO_MATCHING_SHIFT = "NO_MATCHING_SHIFT"

# Warning codes: informational only.
WARN_CROSS_MIDNIGHT = "CROSS_MIDNIGHT"
WARN_MAX_TIME_REACHED = "MAX_TIME_REACHED"
WARN_MANUAL_BREAK = "MANUAL_BREAK"
WARN_NO_BREAK_RECORDED = "NO_BREAK_RECORDED"
WARN_AUTO_BREAK_APPLIED = "AUTO_BREAK_APPLIED"

WARN_HOLIDAY = "HOLIDAY"
WARN_WORKED_ON_HOLIDAY = "WORKED_ON_HOLIDAY"
WARN_OFF_DAY = "OFF_DAY"
WARN_BOOKINGS_ON_OFF_DAY = "BOOKINGS_ON_OFF_DAY"
WARN_AVERAGE_NOT_IMPLEMENTED = "AVERAGE_NOT_IMPLEMENTED"
WARN_ABSENCE_NOT_IMPLEMENTED = "ABSENCE_NOT_IMPLEMENTED"
WARN_ABSENCE = "ABSENCE"
WARN_NO_BOOKINGS_CREDITED = "NO_BOOKINGS_CREDITED"
WARN_NO_BOOKINGS_DEDUCTED = "NO_BOOKINGS_DEDUCTED"
WARN_DAY_CHANGE_NOT_IMPLEMENTED = "DAY_CHANGE_NOT_IMPLEMENTED"

DEFAULT_MAX_RECALC_DAYS = 366

# Một kế hoạch ngày có tối đa 6 kế hoạch thay thế cho nhận diện ca.
MAX_ALTERNATIVE_PLANS = 6
