"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RATING_MIN = 1
RATING_MAX = 5
TOP_ACTIVE_STUDENTS_LIMIT = 3
REPORT_DECIMAL_PLACES = 2
