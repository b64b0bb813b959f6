# analyze_tvlog/analyzers/events/__init__.py
from .collector import PairCollector, SingleEventCollector
from .models import LogEvent, PairedEvent, PairSpec, SingleEvent, SingleSpec
from .reporter import EventReporter
from .scanner import scan_directory, scan_event, scan_files, scan_lines
from .specs import EVENT_SPECS

__all__ = [
    'PairCollector',
    'SingleEventCollector',
    'LogEvent',
    'PairedEvent',
    'PairSpec',
    'SingleEvent',
    'SingleSpec',
    'EventReporter',
    'scan_directory',
    'scan_event',
    'scan_files',
    'scan_lines',
    'EVENT_SPECS'
]
