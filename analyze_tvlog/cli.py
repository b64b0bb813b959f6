# analyze_tvlog/cli.py
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .analyzers.connections import (
    LAYOUTS,
    ConnectionAnalyzer,
    ConnectionParser,
    ConnectionQuery,
    ConnectionReporter,
)
from .analyzers.events import EVENT_SPECS, EventReporter, scan_directory
from .config.patterns import LOGFILE_GLOB
from .core.log import diagnostics
from .core.timeparse import parse_bound


def _bound(text: str):
    try:
        return parse_bound(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _add_connection_parser(subparsers, name: str, help_text: str, with_name: bool):
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("log_path", type=Path, help="Path to the connection log")
    parser.add_argument(
        "--after", type=_bound, help="Only sessions started after this date"
    )
    parser.add_argument(
        "--before", type=_bound, help="Only sessions started before this date"
    )

    ranking = parser.add_mutually_exclusive_group()
    ranking.add_argument(
        "--shortest", action="store_true", help="Show the 10 shortest sessions"
    )
    ranking.add_argument(
        "--longest", action="store_true", help="Show the 10 longest sessions"
    )
    parser.add_argument(
        "--legacy-sort",
        action="store_true",
        help="Rank on the duration text, sentinels sorted as strings",
    )

    unique = parser.add_mutually_exclusive_group()
    unique.add_argument(
        "--unique-id", dest="unique", action="store_const", const="id",
        help="One session per distinct remote ID",
    )
    if with_name:
        unique.add_argument(
            "--unique-name", dest="unique", action="store_const", const="display_name",
            help="One session per distinct display name",
        )
    unique.add_argument(
        "--unique-user", dest="unique", action="store_const", const="user",
        help="One session per distinct logged-on user",
    )
    parser.set_defaults(layout=LAYOUTS[name])


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="TeamViewer log analysis tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_connection_parser(
        subparsers, "incoming", "Analyze Connections_incoming.txt", with_name=True
    )
    _add_connection_parser(
        subparsers, "outgoing", "Analyze Connections.txt", with_name=False
    )

    logfile = subparsers.add_parser("logfile", help="Scan TeamViewer program logs")
    logfile.add_argument("log_dir", type=Path, help="Directory holding the program logs")
    logfile.add_argument(
        "--event", choices=sorted(EVENT_SPECS), required=True, help="Event kind to extract"
    )
    logfile.add_argument(
        "--glob", default=LOGFILE_GLOB, help=f"Log file name pattern (default: {LOGFILE_GLOB})"
    )

    args = parser.parse_args(argv)
    if args.command != "logfile" and args.unique and (args.shortest or args.longest):
        parser.error("--unique-* cannot be combined with --shortest/--longest")
    return args


def analyze_connections(args) -> None:
    """Run connection log analysis"""
    records = ConnectionParser(args.layout).parse_file(args.log_path)

    query = ConnectionQuery(
        after=args.after,
        before=args.before,
        shortest=args.shortest,
        longest=args.longest,
        unique=args.unique,
        lexicographic=args.legacy_sort,
    )
    result = ConnectionAnalyzer().analyze(records, query)

    reporter = ConnectionReporter(args.layout)
    reporter.generate_report(result)


def analyze_logfiles(args) -> None:
    """Run program log event extraction"""
    spec = EVENT_SPECS[args.event]
    events = scan_directory(args.log_dir, spec, args.glob)

    reporter = EventReporter(spec)
    reporter.generate_report(events)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.command == "logfile":
            analyze_logfiles(args)
        else:
            analyze_connections(args)
    except (FileNotFoundError, ValueError) as e:
        diagnostics.print(f"Error: {e}", style="error", markup=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
