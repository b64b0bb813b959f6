# analyze_tvlog/analyzers/events/models.py
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from analyze_tvlog.core.timeparse import format_duration

MISSING = "--"

Extractor = Callable[[str], Tuple[str, ...]]


@dataclass(frozen=True)
class PairSpec:
    """A start marker paired with the end marker that follows it"""
    kind: str
    start: re.Pattern
    end: re.Pattern
    start_label: str
    end_label: str
    select: Optional[re.Pattern] = None
    keep_unpaired: bool = False

    @property
    def select_pattern(self) -> re.Pattern:
        """Lines taking part in the matched sequence"""
        if self.select is not None:
            return self.select
        return re.compile(f"(?:{self.start.pattern})|(?:{self.end.pattern})",
                          self.start.flags | self.end.flags)


@dataclass(frozen=True)
class SingleSpec:
    """A marker producing one event per matching line"""
    kind: str
    pattern: re.Pattern
    columns: Tuple[str, ...]
    extract: Extractor


@dataclass(frozen=True)
class LogEvent:
    """A matched program log line"""
    timestamp: Optional[datetime]
    kind: str
    file: Path
    line_no: int
    text: str = field(repr=False)


@dataclass(frozen=True)
class PairedEvent:
    kind: str
    start: LogEvent
    end: Optional[LogEvent]

    @property
    def file(self) -> Path:
        return self.start.file

    @property
    def duration(self) -> Optional[timedelta]:
        if self.end is None or self.start.timestamp is None or self.end.timestamp is None:
            return None
        return self.end.timestamp - self.start.timestamp

    @property
    def duration_text(self) -> str:
        duration = self.duration
        return MISSING if duration is None else format_duration(duration)


@dataclass(frozen=True)
class SingleEvent:
    kind: str
    timestamp: Optional[datetime]
    values: Dict[str, str]
    file: Path
    line_no: int
