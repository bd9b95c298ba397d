"""
Main script to generate a weekly pair schedule.
"""
import argparse
import json
import sys
from pathlib import Path

from src.pairing.errors import SchedulingError
from src.pairing.form import ScheduleConfig, build_schedule, parse_names
from src.pairing.rounds import count_repeats
from src.pairing.display import format_schedule, format_schedule_header, format_week_text
from src.utils.constants import DEFAULT_WEEKS, DEFAULT_WEEKDAY, MAX_ROUNDS, WEEKDAY_NAMES


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Generate rotating weekly pairs for a list of names.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Weekdays:
  0=Sunday 1=Monday 2=Tuesday 3=Wednesday 4=Thursday 5=Friday 6=Saturday

Examples:
  python main.py --names Ana Bruno Carla Davi --weeks 3
  python main.py --names-file team.txt --start-date 15/08/2025 --weekday 5
  python main.py --names-file team.txt --format copy --avoid-repeats
'''
    )
    parser.add_argument('--names', '-n', type=str, nargs='+', default=[],
                        help='Participant names')
    parser.add_argument('--names-file', type=str, default=None,
                        help='File with one participant name per line')
    parser.add_argument('--weeks', '-w', type=int, default=DEFAULT_WEEKS,
                        help=f'Number of weeks to schedule (default: {DEFAULT_WEEKS}, max: {MAX_ROUNDS})')
    parser.add_argument('--start-date', '-s', type=str, default=None,
                        help='Start date as YYYY-MM-DD or DD/MM/YYYY (default: next weekday after today)')
    parser.add_argument('--weekday', '-d', type=int, choices=range(len(WEEKDAY_NAMES)),
                        default=DEFAULT_WEEKDAY,
                        help=f'Weekday each week starts on (default: {DEFAULT_WEEKDAY})')
    parser.add_argument('--avoid-repeats', action='store_true',
                        help='Prefer pairs not used in earlier weeks')
    parser.add_argument('--format', '-f', type=str, choices=['text', 'copy', 'json'], default='text',
                        help='Output format: text listing, copy text per week, or json')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Skip the summary header in text output')

    return parser.parse_args(argv)


def load_names(args) -> list:
    """Collect names from --names and --names-file."""
    names = [n.strip() for n in args.names if n.strip()]
    if args.names_file:
        names.extend(parse_names(Path(args.names_file).read_text(encoding='utf-8')))
    return names


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        names = load_names(args)
    except OSError as e:
        print(f"Error: Could not read names file: {e}")
        return 1

    config = ScheduleConfig(
        participants=names,
        weeks=args.weeks,
        start_date=args.start_date,
        weekday=args.weekday,
        avoid_repeats=args.avoid_repeats
    )

    try:
        result = build_schedule(config)
    except SchedulingError as e:
        print(f"Error: {e}")
        return 1

    if args.format == 'json':
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif args.format == 'copy':
        print("\n\n".join(format_week_text(w) for w in result.weeks))
    else:
        if not args.quiet:
            print(format_schedule_header(
                num_participants=len(names),
                num_weeks=len(result.weeks),
                start_date=result.start_date,
                weekday=args.weekday,
                repeats=count_repeats([w.pairs for w in result.weeks])
            ))
        print(format_schedule(result.weeks))

    return 0


if __name__ == "__main__":
    sys.exit(main())
