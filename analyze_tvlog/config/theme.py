# analyze_tvlog/config/theme.py
from rich.theme import Theme

DIAGNOSTIC_THEME = Theme(
    {
        "warning": "yellow",
        "error": "bold red",
    }
)

REPORT_THEME = Theme(
    {
        "title": "magenta",
        "header": "bold cyan",
        "timestamp": "bright_black",
        "duration": "green",
        "sentinel": "red",
        "empty": "yellow",
    }
)

# Column styles keyed by record field name
COLUMN_STYLES = {
    "id": "cyan",
    "display_name": "white",
    "start": "bright_black",
    "end": "bright_black",
    "duration": "green",
    "user": "yellow",
    "connection_type": "blue",
    "connection_id": "bright_black",
}
