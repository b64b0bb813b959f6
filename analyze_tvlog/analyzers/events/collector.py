# analyze_tvlog/analyzers/events/collector.py
from pathlib import Path
from typing import Optional

from analyze_tvlog.core import DataCollector
from analyze_tvlog.core.timeparse import parse_program_log_time
from .models import MISSING, LogEvent, PairedEvent, PairSpec, SingleEvent, SingleSpec


class PairCollector(DataCollector):
    """Pair each start line with the next selected line of the same file.

    Only immediate neighbours in the sequence of selected lines are paired;
    a start followed by anything other than an end stays unpaired.
    """

    def __init__(self, file_path: Path, spec: PairSpec):
        super().__init__(file_path)
        self.spec = spec
        self._select = spec.select_pattern
        self._pending: Optional[LogEvent] = None

    def is_interested(self, line: str) -> bool:
        return self._select.search(line) is not None

    def _make_event(self, line_no: int, line: str, kind: str) -> LogEvent:
        return LogEvent(
            timestamp=parse_program_log_time(line),
            kind=kind,
            file=self.file_path,
            line_no=line_no,
            text=line,
        )

    def _flush_pending(self) -> None:
        if self._pending is not None and self.spec.keep_unpaired:
            self.results.append(PairedEvent(self.spec.kind, self._pending, None))
        self._pending = None

    def process_line(self, line_no: int, line: str) -> None:
        if not self.is_interested(line):
            return

        if self._pending is not None:
            if self.spec.end.search(line):
                end = self._make_event(line_no, line, self.spec.end_label)
                self.results.append(PairedEvent(self.spec.kind, self._pending, end))
                self._pending = None
                return
            self._flush_pending()

        if self.spec.start.search(line):
            self._pending = self._make_event(line_no, line, self.spec.start_label)

    def finish(self) -> None:
        self._flush_pending()


class SingleEventCollector(DataCollector):
    """One event per matching line, '--' for values that cannot be extracted"""

    def __init__(self, file_path: Path, spec: SingleSpec):
        super().__init__(file_path)
        self.spec = spec

    def is_interested(self, line: str) -> bool:
        return self.spec.pattern.search(line) is not None

    def process_line(self, line_no: int, line: str) -> None:
        if not self.is_interested(line):
            return

        try:
            values = self.spec.extract(line)
        except (IndexError, ValueError):
            values = (MISSING,) * len(self.spec.columns)

        self.results.append(SingleEvent(
            kind=self.spec.kind,
            timestamp=parse_program_log_time(line),
            values=dict(zip(self.spec.columns, values)),
            file=self.file_path,
            line_no=line_no,
        ))
