# analyze_tvlog/analyzers/connections/models.py
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from analyze_tvlog.core.timeparse import CONNECTION_TIME_FORMAT, format_duration

MISSING = "--"

TIMESTAMP_COLUMNS = ("start", "end")
UNIQUE_FIELDS = ("id", "display_name", "user")

COLUMN_TITLES = {
    "id": "ID",
    "display_name": "Display Name",
    "start": "Start",
    "end": "End",
    "duration": "Duration",
    "user": "Logged-on User",
    "connection_type": "Connection Type",
    "connection_id": "Connection ID",
}


@dataclass(frozen=True)
class ConnectionLayout:
    """Column layout of one connection log variant"""
    name: str
    columns: Tuple[str, ...]
    duration_sentinel: str
    default_file: str

    @property
    def has_display_name(self) -> bool:
        return "display_name" in self.columns

    @property
    def record_columns(self) -> Tuple[str, ...]:
        """Raw columns with the derived duration placed after the end time"""
        idx = self.columns.index("end") + 1
        return self.columns[:idx] + ("duration",) + self.columns[idx:]


INCOMING_LAYOUT = ConnectionLayout(
    name="incoming",
    columns=(
        "id", "display_name", "start", "end",
        "user", "connection_type", "connection_id",
    ),
    duration_sentinel="Invalid Duration",
    default_file="Connections_incoming.txt",
)

OUTGOING_LAYOUT = ConnectionLayout(
    name="outgoing",
    columns=("id", "start", "end", "user", "connection_type", "connection_id"),
    duration_sentinel="--",
    default_file="Connections.txt",
)

LAYOUTS = {layout.name: layout for layout in (INCOMING_LAYOUT, OUTGOING_LAYOUT)}


@dataclass(frozen=True)
class ConnectionRecord:
    """One session line of a connection log"""
    layout: ConnectionLayout = field(repr=False, compare=False)
    id: Optional[str] = None
    display_name: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    user: Optional[str] = None
    connection_type: Optional[str] = None
    connection_id: Optional[str] = None
    raw_line: str = field(default="", repr=False, compare=False)

    @property
    def duration(self) -> Optional[timedelta]:
        """Elapsed time, only when both timestamps parsed"""
        if self.start is None or self.end is None:
            return None
        return self.end - self.start

    @property
    def duration_text(self) -> str:
        duration = self.duration
        if duration is None:
            return self.layout.duration_sentinel
        return format_duration(duration)

    def value(self, column: str) -> str:
        """Display value of one record column"""
        if column == "duration":
            return self.duration_text
        raw = getattr(self, column)
        if raw is None:
            return MISSING
        if isinstance(raw, datetime):
            return raw.strftime(CONNECTION_TIME_FORMAT)
        return raw

    def row(self) -> List[str]:
        return [self.value(column) for column in self.layout.record_columns]
