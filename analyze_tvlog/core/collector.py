# analyze_tvlog/core/collector.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List


class DataCollector(ABC):
    """Base class for collecting results from the lines of one log file"""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.results: List[Any] = []

    @abstractmethod
    def process_line(self, line_no: int, line: str) -> None:
        """Process a single log line"""
        pass

    @abstractmethod
    def is_interested(self, line: str) -> bool:
        """Determine if this collector is interested in the given line"""
        pass

    def finish(self) -> None:
        """Flush any state left over at the end of the file"""
        pass

    def collect(self, lines: List[str]) -> List[Any]:
        """Feed every line of the file and return what was collected"""
        for line_no, line in enumerate(lines, start=1):
            self.process_line(line_no, line)
        self.finish()
        return self.results
