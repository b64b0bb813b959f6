# analyze_tvlog/core/log.py
from pathlib import Path
from typing import List

from rich.console import Console

from analyze_tvlog.config.theme import DIAGNOSTIC_THEME

# Bound to sys.stderr at write time, so redirection and capture keep working
diagnostics = Console(stderr=True, theme=DIAGNOSTIC_THEME, highlight=False)


def warn(message: str) -> None:
    """Print a non-fatal diagnostic"""
    diagnostics.print(f"Warning: {message}", style="warning", markup=False)


class LogReader:
    """Common file access for connection logs and program logs"""

    @staticmethod
    def read_lines(file_path: Path) -> List[str]:
        """Read a whole text file into a list of lines without line endings.

        A trailing newline does not produce an extra empty line, blank lines
        inside the file are kept.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Log file not found at {file_path}")

        lines = []
        with open(file_path, 'r', encoding='utf-8-sig', errors='replace') as f:
            for line in f:
                lines.append(line.rstrip('\r\n'))
        return lines

    @staticmethod
    def find_log_files(directory: Path, pattern: str) -> List[Path]:
        """List files in a directory matching a glob, sorted by name.

        A missing directory or an empty match is reported as a warning and
        yields an empty list.
        """
        directory = Path(directory)
        if not directory.is_dir():
            warn(f"Directory {directory} does not exist")
            return []

        files = sorted(p for p in directory.glob(pattern) if p.is_file())
        if not files:
            warn(f"No files matching {pattern!r} in {directory}")
        return files
