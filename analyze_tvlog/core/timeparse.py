# analyze_tvlog/core/timeparse.py
from datetime import datetime, timedelta
from typing import Optional

CONNECTION_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"
BOUND_DATE_FORMAT = "%d-%m-%Y"

PROGRAM_LOG_TIME_FORMATS = (
    "%Y/%m/%d %H:%M:%S.%f",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
)


def parse_connection_time(text: Optional[str]) -> Optional[datetime]:
    """Parse a connection log timestamp, None when absent or malformed"""
    if not text:
        return None
    try:
        return datetime.strptime(text.strip(), CONNECTION_TIME_FORMAT)
    except ValueError:
        return None


def parse_program_log_time(line: str) -> Optional[datetime]:
    """Parse the leading date and time tokens of a program log line"""
    tokens = line.split(None, 2)
    if len(tokens) < 2:
        return None

    text = f"{tokens[0]} {tokens[1]}"
    for fmt in PROGRAM_LOG_TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_bound(text: str) -> datetime:
    """Parse a --after/--before value, either a full timestamp or a date.

    Raises:
        ValueError: If neither format matches
    """
    for fmt in (CONNECTION_TIME_FORMAT, BOUND_DATE_FORMAT):
        try:
            return datetime.strptime(text.strip(), fmt)
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date {text!r}, expected 'dd-mm-yyyy HH:MM:SS' or 'dd-mm-yyyy'"
    )


def format_duration(td: timedelta) -> str:
    """Format an elapsed time as DDd.HHh:MMm:SSs"""
    sign = "-" if td < timedelta(0) else ""
    total_seconds = int(abs(td).total_seconds())
    days, rem = divmod(total_seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)
    return f"{sign}{days:02d}d.{hours:02d}h:{minutes:02d}m:{seconds:02d}s"
