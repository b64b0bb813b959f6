# analyze_tvlog/core/reporter.py
from abc import ABC, abstractmethod
from typing import Any, Optional

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel

from analyze_tvlog.config.theme import REPORT_THEME


class Reporter(ABC):
    """Base class for generating reports"""
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=REPORT_THEME)

    def print_title(self, title: str) -> None:
        title_panel = Panel(
            title, box=ROUNDED, style="title", padding=(0, 1), expand=False
        )
        self.console.print(title_panel)
        self.console.print("")

    def print_empty(self) -> None:
        self.console.print("No records found", style="empty")

    @abstractmethod
    def generate_report(self, analysis_result: Any) -> None:
        """Generate and display the report"""
        pass
