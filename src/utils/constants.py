"""
Constants for weekly pair scheduling.
"""

# Schedule limits
MAX_ROUNDS = 40
DEFAULT_WEEKS = 10
DAYS_PER_WEEK = 7

# Weekdays, numbered from Sunday
SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6
WEEKDAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday",
                 "Thursday", "Friday", "Saturday"]
DEFAULT_WEEKDAY = MONDAY

# Accepted date text
ISO_DATE_FORMAT = "%Y-%m-%d"
BR_DATE_FORMAT = "%d/%m/%Y"

# Copy text
PAIR_JOINER = " e "
PAIR_BULLET = "\U0001F539"
