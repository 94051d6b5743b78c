from .posixkeyreader import PosixKeyReader
from .terminalmodeguard import TerminalModeGuard
