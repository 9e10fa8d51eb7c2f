"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MONTHS_PER_YEAR = 12
MIN_PASSWORD_LENGTH = 1

DATE_FORMAT_HINT = "Please use ISO (YYYY-MM-DD) or DD-MM-YYYY."
