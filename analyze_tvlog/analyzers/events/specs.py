# analyze_tvlog/analyzers/events/specs.py
from typing import Dict, Tuple, Union

from analyze_tvlog.config import patterns
from .models import PairSpec, SingleSpec

# Program log columns: date time pid tid session message...
PID_COLUMN = 2


def extract_ip_port(line: str) -> Tuple[str, str]:
    """'... punch received a=203.0.113.5:51237: (*)' -> ('203.0.113.5', '51237')"""
    address = line.split("punch received a=", 1)[1].split()[0].rstrip(":")
    ip, port = address.rsplit(":", 1)
    if not ip or not port.isdigit():
        raise ValueError(f"Malformed address {address!r}")
    return ip, port


def extract_pid(line: str) -> Tuple[str]:
    pid = line.split()[PID_COLUMN]
    if not pid.isdigit():
        raise ValueError(f"Malformed pid {pid!r}")
    return (pid,)


def extract_keyboard_layout(line: str) -> Tuple[str]:
    return (line.split("Changing keyboard layout to:", 1)[1].split()[0],)


EventSpec = Union[PairSpec, SingleSpec]

EVENT_SPECS: Dict[str, EventSpec] = {
    "program": PairSpec(
        kind="program",
        start=patterns.PROGRAM_START,
        end=patterns.PROGRAM_END,
        start_label="ProgramStart",
        end_label="ProgramEnd",
        keep_unpaired=True,
    ),
    "session": PairSpec(
        kind="session",
        start=patterns.SESSION_START,
        end=patterns.SESSION_END,
        start_label="SessionStart",
        end_label="SessionEnd",
        select=patterns.SESSION_SELECT,
        keep_unpaired=True,
    ),
    "account": PairSpec(
        kind="account",
        start=patterns.ACCOUNT_LOGON,
        end=patterns.ACCOUNT_LOGOUT,
        start_label="AccountLogon",
        end_label="AccountLogout",
    ),
    "ip": SingleSpec(
        kind="ip",
        pattern=patterns.IP_PUNCH,
        columns=("IP", "Port"),
        extract=extract_ip_port,
    ),
    "pid": SingleSpec(
        kind="pid",
        pattern=patterns.PROCESS_START,
        columns=("PID",),
        extract=extract_pid,
    ),
    "keyboard": SingleSpec(
        kind="keyboard",
        pattern=patterns.KEYBOARD_LAYOUT,
        columns=("Keyboard",),
        extract=extract_keyboard_layout,
    ),
}
