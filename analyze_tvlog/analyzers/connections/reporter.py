# analyze_tvlog/analyzers/connections/reporter.py
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from analyze_tvlog.config.theme import COLUMN_STYLES
from analyze_tvlog.core import Reporter
from .models import COLUMN_TITLES, ConnectionLayout, ConnectionRecord


def record_cells(record: ConnectionRecord) -> List[Text]:
    """Table cells of a record, sentinel durations highlighted"""
    cells = []
    for column, value in zip(record.layout.record_columns, record.row()):
        style = "sentinel" if column == "duration" and record.duration is None else ""
        cells.append(Text(value, style=style))
    return cells


class ConnectionReporter(Reporter):
    def __init__(self, layout: ConnectionLayout, console: Optional[Console] = None):
        super().__init__(console)
        self.layout = layout

    def build_table(self, records: Sequence[ConnectionRecord]) -> Table:
        table = Table(show_header=True, header_style="header", box=box.SIMPLE)

        for column in self.layout.record_columns:
            table.add_column(
                COLUMN_TITLES[column],
                style=COLUMN_STYLES.get(column),
                no_wrap=column in ("start", "end", "duration"),
            )

        for record in records:
            table.add_row(*record_cells(record))

        return table

    def generate_report(self, analysis_result: Sequence[ConnectionRecord]) -> None:
        """Generate a table of connection records"""
        self.print_title(f"Connections ({self.layout.name})")

        if not analysis_result:
            self.print_empty()
            return

        self.console.print(self.build_table(analysis_result))
        self.console.print(f"{len(analysis_result)} record(s)")
