# analyze_tvlog/core/analyzer.py
from abc import ABC, abstractmethod
from typing import Any


class Analyzer(ABC):
    """Base class for analyzing parsed records"""
    @abstractmethod
    def analyze(self, data: Any, query: Any) -> Any:
        """Analyze the parsed records"""
        pass
