"""
Form input handling for schedule requests.

Turns the raw fields a user fills in (a block of names, a week count, a start
date and a weekday) into a labeled schedule.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional

from src.pairing.dates import resolve_start_date
from src.pairing.errors import InvalidInput
from src.pairing.labeler import WeekRecord, label_schedule
from src.pairing.rounds import generate_rounds
from src.utils.constants import DEFAULT_WEEKS, DEFAULT_WEEKDAY


@dataclass
class ScheduleConfig:
    """Configuration for a schedule run."""
    participants: List[str]
    weeks: int = DEFAULT_WEEKS
    start_date: Optional[str] = None
    weekday: int = DEFAULT_WEEKDAY
    avoid_repeats: bool = False


@dataclass
class ScheduleResult:
    """A generated schedule and the start date it was resolved to."""
    start_date: date
    weeks: List[WeekRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'start_date': self.start_date.isoformat(),
            'weeks': [w.to_dict() for w in self.weeks],
        }


def parse_names(text: Optional[str]) -> List[str]:
    """Split a block of text into one trimmed name per non-blank line."""
    if not text:
        return []
    return [name.strip() for name in re.split(r'\r?\n', text) if name.strip()]


def parse_weeks(value) -> int:
    """Parse a week count, falling back to DEFAULT_WEEKS when missing or < 1."""
    try:
        weeks = int(value)
    except (TypeError, ValueError):
        return DEFAULT_WEEKS
    return weeks if weeks >= 1 else DEFAULT_WEEKS


def build_schedule(
    config: ScheduleConfig,
    today: Optional[Callable[[], date]] = None
) -> ScheduleResult:
    """
    Generate and label a schedule from form configuration.

    Args:
        config: Schedule configuration
        today: Supplier of the current date (default: date.today)

    Returns:
        ScheduleResult with the resolved start date and week records

    Raises:
        InvalidInput: If fewer than two names or weekday out of range
        MalformedDate: If the start date text cannot be parsed
    """
    if len(config.participants) < 2:
        raise InvalidInput("Add at least two names to form pairs.")

    start = resolve_start_date(config.start_date, config.weekday, today=today)
    rounds = generate_rounds(
        config.participants,
        parse_weeks(config.weeks),
        avoid_repeats=config.avoid_repeats
    )

    return ScheduleResult(start_date=start, weeks=label_schedule(rounds, start))
