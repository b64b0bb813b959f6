"""Tests for the command line front end and reporters."""

import io

import pytest
from rich.console import Console

from analyze_tvlog import cli
from analyze_tvlog.analyzers.connections import INCOMING_LAYOUT, ConnectionReporter
from analyze_tvlog.analyzers.connections.reporter import record_cells
from analyze_tvlog.analyzers.events import EVENT_SPECS, EventReporter, scan_event
from analyze_tvlog.config.theme import REPORT_THEME


def make_console():
    return Console(file=io.StringIO(), width=250, theme=REPORT_THEME)


class TestReporters:
    def test_connection_table(self, incoming_file, incoming_parser):
        console = make_console()
        records = incoming_parser.parse_file(incoming_file)
        ConnectionReporter(INCOMING_LAYOUT, console).generate_report(records)
        output = console.file.getvalue()
        assert "Display Name" in output
        assert "ACME Support" in output
        assert "00d.03h:15m:30s" in output
        assert "3 record(s)" in output

    def test_sentinel_duration_cell_is_styled(self, incoming_parser):
        bad = incoming_parser.parse_line("1\tHost\tgarbage\t25-12-2020 15:00:00\tu\tRC\t{x}")
        good = incoming_parser.parse_line("1\tHost\t25-12-2020 14:00:00\t25-12-2020 15:00:00\tu\tRC\t{x}")
        assert record_cells(bad)[4].plain == "Invalid Duration"
        assert record_cells(bad)[4].style == "sentinel"
        assert record_cells(good)[4].style == ""

    def test_cells_are_not_markup(self, incoming_parser):
        record = incoming_parser.parse_line("1\t[bold]Host[/bold]\t25-12-2020 14:00:00")
        assert record_cells(record)[1].plain == "[bold]Host[/bold]"

    def test_empty_connection_report(self):
        console = make_console()
        ConnectionReporter(INCOMING_LAYOUT, console).generate_report([])
        assert "No records found" in console.file.getvalue()

    def test_single_event_table(self, log_dir):
        console = make_console()
        events = scan_event(log_dir, "ip")
        EventReporter(EVENT_SPECS["ip"], console).generate_report(events)
        output = console.file.getvalue()
        assert "203.0.113.5" in output
        assert "2021-03-10 09:12:33.470" in output

    def test_pair_event_table(self, log_dir):
        console = make_console()
        events = scan_event(log_dir, "account")
        EventReporter(EVENT_SPECS["account"], console).generate_report(events)
        output = console.file.getvalue()
        assert "AccountLogon" in output
        assert "00d.00h:47m:00s" in output


class TestMain:
    def test_incoming_longest(self, incoming_file, capsys):
        assert cli.main(["incoming", str(incoming_file), "--longest"]) == 0
        assert "3 record(s)" in capsys.readouterr().out

    def test_outgoing_date_range(self, outgoing_file, capsys):
        argv = ["outgoing", str(outgoing_file), "--after", "01-02-2021 08:00:00"]
        assert cli.main(argv) == 0
        assert "1 record(s)" in capsys.readouterr().out

    def test_unique_user(self, incoming_file, capsys):
        assert cli.main(["incoming", str(incoming_file), "--unique-user"]) == 0
        assert "2 record(s)" in capsys.readouterr().out

    def test_logfile(self, log_dir, capsys):
        assert cli.main(["logfile", str(log_dir), "--event", "keyboard"]) == 0
        assert "1 event(s)" in capsys.readouterr().out

    def test_missing_file_is_error(self, tmp_path, capsys):
        assert cli.main(["incoming", str(tmp_path / "missing.txt")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_directory_is_warning(self, tmp_path, capsys):
        assert cli.main(["logfile", str(tmp_path / "nope"), "--event", "ip"]) == 0
        captured = capsys.readouterr()
        assert "Warning" in captured.err
        assert "No records found" in captured.out

    @pytest.mark.parametrize("argv", [
        ["incoming", "x", "--shortest", "--longest"],
        ["incoming", "x", "--unique-id", "--unique-user"],
        ["incoming", "x", "--unique-id", "--longest"],
        ["incoming", "x", "--after", "2021-01-01"],
        ["outgoing", "x", "--unique-name"],
        ["logfile", "x", "--event", "bogus"],
    ])
    def test_invalid_arguments(self, argv):
        with pytest.raises(SystemExit):
            cli.parse_args(argv)
