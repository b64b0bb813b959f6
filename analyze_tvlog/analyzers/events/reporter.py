# analyze_tvlog/analyzers/events/reporter.py
from datetime import datetime
from typing import Optional, Sequence, Union

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from analyze_tvlog.core import Reporter
from .models import MISSING, PairedEvent, PairSpec, SingleEvent
from .specs import EventSpec

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def _format_time(timestamp: Optional[datetime]) -> str:
    if timestamp is None:
        return MISSING
    return timestamp.strftime(TIMESTAMP_FORMAT)[:-3]


class EventReporter(Reporter):
    def __init__(self, spec: EventSpec, console: Optional[Console] = None):
        super().__init__(console)
        self.spec = spec

    def _pair_table(self, events: Sequence[PairedEvent]) -> Table:
        table = Table(show_header=True, header_style="header", box=box.SIMPLE)
        table.add_column("File", style="cyan")
        table.add_column(self.spec.start_label, style="timestamp", no_wrap=True)
        table.add_column(self.spec.end_label, style="timestamp", no_wrap=True)
        table.add_column("Duration", style="duration", no_wrap=True)

        for event in events:
            end_time = event.end.timestamp if event.end is not None else None
            table.add_row(
                event.file.name,
                _format_time(event.start.timestamp),
                _format_time(end_time),
                Text(event.duration_text, style="sentinel" if event.duration is None else ""),
            )
        return table

    def _single_table(self, events: Sequence[SingleEvent]) -> Table:
        table = Table(show_header=True, header_style="header", box=box.SIMPLE)
        table.add_column("File", style="cyan")
        table.add_column("Date", style="timestamp", no_wrap=True)
        for column in self.spec.columns:
            table.add_column(column)

        for event in events:
            table.add_row(
                event.file.name,
                _format_time(event.timestamp),
                *(event.values[column] for column in self.spec.columns),
            )
        return table

    def generate_report(
        self, analysis_result: Sequence[Union[PairedEvent, SingleEvent]]
    ) -> None:
        """Generate a table of program log events"""
        self.print_title(f"Program Log Events ({self.spec.kind})")

        if not analysis_result:
            self.print_empty()
            return

        if isinstance(self.spec, PairSpec):
            table = self._pair_table(analysis_result)
        else:
            table = self._single_table(analysis_result)

        self.console.print(table)
        self.console.print(f"{len(analysis_result)} event(s)")
