"""
Week labels for generated rounds.

Turns a schedule of rounds into numbered week records with a dd/mm date range.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Union

from src.pairing.rounds import Pair, Schedule
from src.utils.constants import DAYS_PER_WEEK

DateLike = Union[date, datetime]


@dataclass
class WeekRecord:
    """One labeled week of the schedule."""
    week_number: int
    label: str
    pairs: List[Pair] = field(default_factory=list)
    start: Optional[date] = None
    end: Optional[date] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'week_number': self.week_number,
            'label': self.label,
            'pairs': [list(p) for p in self.pairs],
            'start': self.start.isoformat() if self.start else None,
            'end': self.end.isoformat() if self.end else None,
        }


def _calendar_day(value: DateLike) -> date:
    # A datetime keeps its own wall-clock day, whatever its zone.
    if isinstance(value, datetime):
        return value.date()
    return value


def format_day_month(value: DateLike, include_year: bool = False) -> str:
    """
    Format a date as dd/mm, or dd/mm/yyyy with include_year.

    Day and month are always two digits.
    """
    day = _calendar_day(value)
    if include_year:
        return f"{day.day:02d}/{day.month:02d}/{day.year}"
    return f"{day.day:02d}/{day.month:02d}"


def format_date_range(start: DateLike, end: DateLike) -> str:
    """Format a range as 'dd/mm - dd/mm'."""
    return f"{format_day_month(start)} - {format_day_month(end)}"


def label_schedule(schedule: Schedule, start_date: DateLike) -> List[WeekRecord]:
    """
    Attach week numbers and date labels to each round.

    Round i covers start_date + 7*i days through six days later.

    Args:
        schedule: Rounds from generate_rounds
        start_date: First day of week 1

    Returns:
        List of WeekRecord, one per round (empty for an empty schedule)
    """
    first_day = _calendar_day(start_date)
    weeks = []

    for index, round_pairs in enumerate(schedule):
        week_start = first_day + timedelta(days=DAYS_PER_WEEK * index)
        week_end = week_start + timedelta(days=DAYS_PER_WEEK - 1)
        weeks.append(WeekRecord(
            week_number=index + 1,
            label=format_date_range(week_start, week_end),
            pairs=list(round_pairs),
            start=week_start,
            end=week_end
        ))

    return weeks
