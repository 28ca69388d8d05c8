#!/usr/bin/env python3
"""Fire-station duty schedule to iCalendar converter.

ETL pipeline that reads a shift schedule workbook, selects the duties
of one person and generates an iCalendar (.ics) file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from extractor import ScheduleSession, WorkbookReader
from transformer import ICalTransformer


def parse_timezone(name: str) -> ZoneInfo:
    """Parse an IANA timezone name such as Europe/Paris."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"Unknown timezone: '{name}'.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a duty schedule workbook to iCalendar format.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 garde2iCal.py planning.xlsx --list-names
  python3 garde2iCal.py planning.xlsx --sheet "Avril 2025" --name Dupont
  python3 garde2iCal.py planning.xlsx --name Dupont --timezone Europe/Paris -o dupont.ics
        """
    )
    
    parser.add_argument(
        "workbook",
        help="Path to the .xlsx schedule"
    )
    
    parser.add_argument(
        "--sheet",
        default=None,
        help="Sheet to read (default: first sheet)"
    )
    
    parser.add_argument(
        "--list-sheets",
        action="store_true",
        help="List the sheets of the workbook and exit"
    )
    
    parser.add_argument(
        "--list-names",
        action="store_true",
        help="List the names found in the selected sheet and exit"
    )
    
    parser.add_argument(
        "--name",
        default=None,
        help="Person whose duties are exported"
    )
    
    parser.add_argument(
        "-o", "--output",
        default=ICalTransformer.DEFAULT_FILENAME,
        help=f"Output file path (default: {ICalTransformer.DEFAULT_FILENAME})"
    )
    
    parser.add_argument(
        "--timezone",
        type=parse_timezone,
        default=None,
        help="Timezone attached to event times (default: floating local time)"
    )
    
    parser.add_argument(
        "--calendar-name",
        default="Gardes",
        help="Calendar name shown by calendar applications (default: Gardes)"
    )
    
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug logging"
    )
    
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the ETL pipeline."""
    args = build_parser().parse_args(argv)
    
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    
    # Ensure output file has .ics extension
    output_path = args.output
    if not output_path.lower().endswith(".ics"):
        output_path = f"{output_path}.ics"
    
    if not Path(args.workbook).is_file():
        print(f"Error: Workbook not found: {args.workbook}", file=sys.stderr)
        sys.exit(1)
    
    try:
        session = ScheduleSession(WorkbookReader.open(args.workbook))
        
        if args.list_sheets:
            for sheet_name in session.sheet_names:
                print(sheet_name)
            return
        
        sheet_name = args.sheet or session.sheet_names[0]
        if sheet_name not in session.sheet_names:
            print(f"Error: Sheet not found: {sheet_name}", file=sys.stderr)
            sys.exit(1)
        session.select_sheet(sheet_name)
        
        if args.list_names:
            for name in session.names():
                print(name)
            return
        
        if not args.name:
            print("Error: --name is required to export duties.", file=sys.stderr)
            sys.exit(1)
        session.select_name(args.name)
        
        events = session.event_data()
        print(f"Found {len(events)} duties for {args.name} in sheet '{sheet_name}'.")
        
        if not events:
            print("Warning: No duties found. The output file will be empty.")
        
        for event in events:
            print(f"  {event.date:<20} {event.team:<20} {event.shift_label}")
        
        transformer = ICalTransformer(calendar_name=args.calendar_name, tz=args.timezone)
        transformer.transform(events)
        transformer.save(output_path)
        
        print(f"Schedule saved to: {output_path} ({ICalTransformer.MIME_TYPE})")
        
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
