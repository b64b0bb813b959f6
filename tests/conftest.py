"""Shared fixtures for analyze_tvlog tests."""

from __future__ import annotations

import pytest

from analyze_tvlog.analyzers.connections import INCOMING_LAYOUT, OUTGOING_LAYOUT, ConnectionParser


# ── Sample connection log lines ───────────────────────────────────────

SAMPLE_INCOMING_LINES = [
    "123456789\tJohn Doe\t25-12-2020 14:30:00\t25-12-2020 15:00:00\tAdmin\tRemoteControl\t{6a1c4c1e-0001}",
    "987654321\tACME Support\t26-12-2020 09:00:00\t26-12-2020 09:00:45\tAdmin\tFileTransfer\t{6a1c4c1e-0002}",
    "123456789\tJohn Doe\t27-12-2020 22:00:00\t28-12-2020 01:15:30\tguest\tRemoteControl\t{6a1c4c1e-0003}",
]

SAMPLE_OUTGOING_LINES = [
    "555000111\t01-02-2021 08:00:00\t01-02-2021 08:10:00\tAdmin\tRemoteControl\t{7b2d-0001}",
    "555000222\t02-02-2021 08:00:00\t03-02-2021 08:00:00\tAdmin\tRemoteControl\t{7b2d-0002}",
]

# ── Sample program log lines ─────────────────────────────────────────

SAMPLE_PROGRAM_LOG_LINES = [
    "2021/03/10 09:12:30.000  5244       5248 S0   Startup finished",
    "2021/03/10 09:12:31.100  5244       5248 S0   Start Desktop process",
    "2021/03/10 09:12:33.470  5244       6820 S0   UDPv4: punch received a=203.0.113.5:51237: (*)",
    "2021/03/10 09:13:00.000  5244       6820 S0   Login successful",
    "2021/03/10 09:14:00.000  5244       6820 S0   CPersistentParticipantManager::AddParticipant: [1234567,-2082364416] type=6",
    "2021/03/10 09:14:05.250  5244       6820 S0   Changing keyboard layout to: 0409",
    "2021/03/10 09:44:00.000  5244       6820 S0   CPersistentParticipantManager::RemoveParticipant: [1234567,-2082364416]",
    "2021/03/10 10:00:00.000  5244       6820 S0   Account::Logout: Account session terminated successfully",
    "2021/03/10 18:00:00.000  5244       5248 S0   Shutdown TeamViewer",
]


def write_lines(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def incoming_file(tmp_path):
    return write_lines(tmp_path / "Connections_incoming.txt", SAMPLE_INCOMING_LINES)


@pytest.fixture
def outgoing_file(tmp_path):
    return write_lines(tmp_path / "Connections.txt", SAMPLE_OUTGOING_LINES)


@pytest.fixture
def incoming_parser():
    return ConnectionParser(INCOMING_LAYOUT)


@pytest.fixture
def outgoing_parser():
    return ConnectionParser(OUTGOING_LAYOUT)


@pytest.fixture
def log_dir(tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    write_lines(log_dir / "TeamViewer15_Logfile.log", SAMPLE_PROGRAM_LOG_LINES)
    return log_dir
