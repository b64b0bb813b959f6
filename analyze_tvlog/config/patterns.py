# analyze_tvlog/config/patterns.py
import re

# Program logs rotate into TeamViewer<NN>_Logfile.log and TeamViewer<NN>_Logfile_OLD.log
LOGFILE_GLOB = "*Logfile*.log"

# Program start / shutdown
PROGRAM_START = re.compile(r"\bStartup finished\b")
PROGRAM_END = re.compile(r"\bShutdown\b|\bshutting down\b", re.IGNORECASE)

# Remote session participants
SESSION_START = re.compile(r"CPersistentParticipantManager::AddParticipant")
SESSION_END = re.compile(r"CPersistentParticipantManager::RemoveParticipant")
SESSION_SELECT = re.compile(r"CPersistentParticipantManager::")

# TeamViewer account authentication
ACCOUNT_LOGON = re.compile(r"Login successful|AccountLogon")
ACCOUNT_LOGOUT = re.compile(r"Account::Logout|AccountLogout")

# Single event markers
IP_PUNCH = re.compile(r"punch received a=")
PROCESS_START = re.compile(r"Start(?:ed)? (?:Desktop )?process")
KEYBOARD_LAYOUT = re.compile(r"Changing keyboard layout to:")
