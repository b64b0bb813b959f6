# analyze_tvlog/analyzers/connections/__init__.py
from .analyzer import ConnectionAnalyzer, ConnectionQuery
from .models import (
    INCOMING_LAYOUT,
    LAYOUTS,
    OUTGOING_LAYOUT,
    ConnectionLayout,
    ConnectionRecord,
)
from .parser import ConnectionParser, parse_connection_file
from .query import filter_by_date, rank_by_duration, unique_by
from .reporter import ConnectionReporter

__all__ = [
    'ConnectionAnalyzer',
    'ConnectionQuery',
    'INCOMING_LAYOUT',
    'LAYOUTS',
    'OUTGOING_LAYOUT',
    'ConnectionLayout',
    'ConnectionRecord',
    'ConnectionParser',
    'parse_connection_file',
    'filter_by_date',
    'rank_by_duration',
    'unique_by',
    'ConnectionReporter'
]
