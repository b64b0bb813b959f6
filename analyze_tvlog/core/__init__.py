# analyze_tvlog/core/__init__.py
from .log import LogReader, warn
from .collector import DataCollector
from .analyzer import Analyzer
from .reporter import Reporter
from .preprocessor import LinePreprocessor

__all__ = [
    'LogReader',
    'warn',
    'DataCollector',
    'Analyzer',
    'Reporter',
    'LinePreprocessor'
]
