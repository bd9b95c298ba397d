"""
Utilities module for weekly pair scheduling.
"""
from src.utils.constants import (
    MAX_ROUNDS, DEFAULT_WEEKS, DAYS_PER_WEEK,
    SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY,
    WEEKDAY_NAMES, DEFAULT_WEEKDAY,
    ISO_DATE_FORMAT, BR_DATE_FORMAT,
    PAIR_JOINER, PAIR_BULLET
)

__all__ = [
    'MAX_ROUNDS', 'DEFAULT_WEEKS', 'DAYS_PER_WEEK',
    'SUNDAY', 'MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY', 'SATURDAY',
    'WEEKDAY_NAMES', 'DEFAULT_WEEKDAY',
    'ISO_DATE_FORMAT', 'BR_DATE_FORMAT',
    'PAIR_JOINER', 'PAIR_BULLET'
]
