"""
Start date resolution.

Finds the first schedule day: the next occurrence of a chosen weekday on or
after a typed date, or strictly after today when no date was typed.
Weekdays are numbered from Sunday (0) to Saturday (6).
"""

from datetime import date, datetime, timedelta
from typing import Callable, Optional, Union

from src.pairing.errors import InvalidInput, MalformedDate
from src.utils.constants import (
    ISO_DATE_FORMAT, BR_DATE_FORMAT, DAYS_PER_WEEK, WEEKDAY_NAMES
)


def parse_date(text: str) -> date:
    """
    Parse YYYY-MM-DD or DD/MM/YYYY text as a calendar date.

    Raises:
        MalformedDate: If the text matches neither form
    """
    text = text.strip()
    fmt = BR_DATE_FORMAT if '/' in text else ISO_DATE_FORMAT
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        raise MalformedDate(
            f"Unrecognized date '{text}', expected YYYY-MM-DD or DD/MM/YYYY"
        ) from None


def sunday_weekday(day: date) -> int:
    """Weekday of a date numbered from Sunday (0) to Saturday (6)."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def resolve_start_date(
    raw_date: Optional[Union[str, date]] = None,
    target_weekday: int = 1,
    today: Optional[Callable[[], date]] = None
) -> date:
    """
    Resolve the first schedule day.

    Args:
        raw_date: Typed start date (text or date); blank or None uses today
        target_weekday: Weekday to land on, 0=Sunday .. 6=Saturday
        today: Supplier of the current date (default: date.today)

    Returns:
        A date whose weekday is target_weekday

    Raises:
        InvalidInput: If target_weekday is outside 0..6
        MalformedDate: If raw_date text cannot be parsed
    """
    if isinstance(target_weekday, bool) or not isinstance(target_weekday, int) \
            or not 0 <= target_weekday < len(WEEKDAY_NAMES):
        raise InvalidInput(f"Weekday must be between 0 and 6, got {target_weekday!r}")

    if isinstance(raw_date, str):
        raw_date = raw_date.strip() or None

    explicit = raw_date is not None
    if not explicit:
        base = (today or date.today)()
    elif isinstance(raw_date, date):
        base = raw_date
    else:
        base = parse_date(raw_date)
    if isinstance(base, datetime):
        base = base.date()

    days_until = (target_weekday - sunday_weekday(base) + DAYS_PER_WEEK) % DAYS_PER_WEEK
    if not explicit and days_until == 0:
        # Today already matches; without a typed date, start next week.
        days_until = DAYS_PER_WEEK

    return base + timedelta(days=days_until)
