# analyze_tvlog/analyzers/events/scanner.py
from pathlib import Path
from typing import Iterable, List, Union

from analyze_tvlog.config.patterns import LOGFILE_GLOB
from analyze_tvlog.core import DataCollector, LogReader
from .collector import PairCollector, SingleEventCollector
from .models import PairedEvent, PairSpec, SingleEvent
from .specs import EVENT_SPECS, EventSpec

ScanResult = List[Union[PairedEvent, SingleEvent]]


def make_collector(file_path: Path, spec: EventSpec) -> DataCollector:
    if isinstance(spec, PairSpec):
        return PairCollector(file_path, spec)
    return SingleEventCollector(file_path, spec)


def scan_lines(lines: Iterable[str], spec: EventSpec, file_path: Path = Path("-")) -> ScanResult:
    """Scan the lines of a single file"""
    return make_collector(file_path, spec).collect(list(lines))


def scan_files(paths: Iterable[Path], spec: EventSpec) -> ScanResult:
    """
    Scan program log files one after another.

    Each file gets its own collector, so pairing never crosses a file
    boundary.

    Raises:
        FileNotFoundError: If one of the files does not exist
    """
    results: ScanResult = []
    for path in paths:
        results.extend(scan_lines(LogReader.read_lines(path), spec, Path(path)))
    return results


def scan_directory(
    directory: Path, spec: EventSpec, pattern: str = LOGFILE_GLOB
) -> ScanResult:
    """Scan every program log in a directory, warning when none is found"""
    return scan_files(LogReader.find_log_files(directory, pattern), spec)


def scan_event(directory: Path, kind: str, pattern: str = LOGFILE_GLOB) -> ScanResult:
    """Scan a directory for one of the built-in event kinds"""
    if kind not in EVENT_SPECS:
        raise KeyError(f"Unknown event kind: {kind!r}. Available: {sorted(EVENT_SPECS)}")
    return scan_directory(directory, EVENT_SPECS[kind], pattern)
