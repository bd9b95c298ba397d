"""
Pairing module for scheduling weekly pairs.

Provides:
- generate_rounds: Rotating fold pairing, one round per week
- label_schedule: Week numbers and dd/mm date ranges for each round
- resolve_start_date: First schedule day on a chosen weekday
- build_schedule: Form fields to labeled schedule
"""

from src.pairing.errors import SchedulingError, InvalidInput, MalformedDate
from src.pairing.rounds import generate_rounds, pair_key, count_repeats
from src.pairing.labeler import WeekRecord, label_schedule, format_date_range, format_day_month
from src.pairing.dates import resolve_start_date, parse_date
from src.pairing.form import ScheduleConfig, ScheduleResult, build_schedule, parse_names, parse_weeks
from src.pairing.display import format_week_text, format_schedule

__all__ = [
    'SchedulingError',
    'InvalidInput',
    'MalformedDate',
    'generate_rounds',
    'pair_key',
    'count_repeats',
    'WeekRecord',
    'label_schedule',
    'format_date_range',
    'format_day_month',
    'resolve_start_date',
    'parse_date',
    'ScheduleConfig',
    'ScheduleResult',
    'build_schedule',
    'parse_names',
    'parse_weeks',
    'format_week_text',
    'format_schedule',
]
