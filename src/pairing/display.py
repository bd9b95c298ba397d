"""
Text formatting for weekly schedules.

Provides chat-friendly copy text for a single week and a plain listing of the
whole schedule for terminal output.
"""

from typing import List

from src.pairing.labeler import WeekRecord
from src.utils.constants import PAIR_JOINER, PAIR_BULLET, WEEKDAY_NAMES


def format_pair(pair) -> str:
    """Format a pair as 'A e B'."""
    a, b = pair
    return f"{a}{PAIR_JOINER}{b}"


def format_week_text(week: WeekRecord) -> str:
    """
    Format one week as copy text for a chat message.

    The label is bold (wrapped in asterisks), followed by a blank line and one
    bulleted line per pair.

    Args:
        week: Week to format

    Returns:
        Copy text with no trailing whitespace
    """
    lines = [f"*{week.label}*", ""]
    for pair in week.pairs:
        lines.append(f"{PAIR_BULLET} {format_pair(pair)}")
    return "\n".join(lines).strip()


def format_schedule(weeks: List[WeekRecord]) -> str:
    """
    Format the whole schedule for terminal display.

    Args:
        weeks: Labeled weeks

    Returns:
        Formatted string, empty when there are no weeks
    """
    lines = []
    for week in weeks:
        lines.append(f"Week {week.week_number}: {week.label}")
        for pair in week.pairs:
            lines.append(f"  {format_pair(pair)}")
        lines.append("")
    return "\n".join(lines).rstrip()


def format_schedule_header(
    num_participants: int,
    num_weeks: int,
    start_date,
    weekday: int,
    repeats: int
) -> str:
    """Format schedule header information."""
    lines = []
    lines.append(f"Participants: {num_participants}")
    lines.append(f"Weeks: {num_weeks}")
    lines.append(f"Start: {start_date.isoformat()} ({WEEKDAY_NAMES[weekday]})")
    lines.append(f"Repeated pairs: {repeats}")
    lines.append("")
    return "\n".join(lines)
