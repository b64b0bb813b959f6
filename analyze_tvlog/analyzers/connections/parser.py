# analyze_tvlog/analyzers/connections/parser.py
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from analyze_tvlog.core import LinePreprocessor, LogReader
from analyze_tvlog.core.timeparse import parse_connection_time
from .models import TIMESTAMP_COLUMNS, ConnectionLayout, ConnectionRecord


class ConnectionParser:
    """Turn connection log lines into ConnectionRecord objects.

    Parsing never fails: fields that are missing or malformed end up as
    None and every input line yields exactly one record.
    """

    def __init__(self, layout: ConnectionLayout):
        self.layout = layout

    def _fold_display_name(self, line: str, tokens: List[str]) -> List[str]:
        """Rejoin a display name that was split on plain spaces"""
        if not self.layout.has_display_name or '\t' in line:
            return tokens

        start_idx = self.layout.columns.index("start")
        extra = len(tokens) - len(self.layout.columns)
        if extra > 0:
            return tokens[:1] + [" ".join(tokens[1:start_idx + extra])] + tokens[start_idx + extra:]

        # Short line: the first timestamp marks where the name ends
        if extra < 0:
            for i in range(1, len(tokens)):
                if parse_connection_time(tokens[i]) is not None:
                    if i != start_idx:
                        return tokens[:1] + [" ".join(tokens[1:i])] + tokens[i:]
                    break
        return tokens

    def parse_line(self, line: str) -> ConnectionRecord:
        tokens = self._fold_display_name(line, LinePreprocessor.split(line))

        values: Dict[str, Optional[str]] = {}
        for i, column in enumerate(self.layout.columns):
            values[column] = (tokens[i] or None) if i < len(tokens) else None

        timestamps = {
            column: parse_connection_time(values.pop(column))
            for column in TIMESTAMP_COLUMNS
        }

        return ConnectionRecord(
            layout=self.layout, raw_line=line, **values, **timestamps
        )

    def parse_lines(self, lines: Iterable[str]) -> List[ConnectionRecord]:
        return [self.parse_line(line) for line in lines]

    def parse_file(self, file_path: Path) -> List[ConnectionRecord]:
        """Parse every line of a connection log.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return self.parse_lines(LogReader.read_lines(file_path))


def parse_connection_file(
    file_path: Path, layout: ConnectionLayout
) -> List[ConnectionRecord]:
    return ConnectionParser(layout).parse_file(file_path)
