"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

DAYS_PER_WEEK = 7
# Mean Gregorian month length used for monthly proration.
MEAN_DAYS_PER_MONTH = 30.4375

MAX_PROGRESS_PERCENT = 100.0

REPORT_FILTER_ALL = "all"
DEFAULT_LOG_LEVEL = "INFO"
# Employee-days kept by the daily record cache before the least recently used is dropped.
DEFAULT_DAILY_CACHE_SIZE = 5000
