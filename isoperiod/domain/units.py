"""Fixed unit lengths in nanoseconds

Calendar units use constant lengths:
1 day = 24 hours, 1 week = 7 days, 1 month = 30 days, 1 year = 365 days.
"""

# ISO8601 requires at least one designator for a zero duration
ZERO = "P0D"

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

DAYS_PER_YEAR = YEAR // DAY
DAYS_PER_WEEK = WEEK // DAY
HOURS_PER_DAY = DAY // HOUR
MINUTES_PER_HOUR = HOUR // MINUTE
