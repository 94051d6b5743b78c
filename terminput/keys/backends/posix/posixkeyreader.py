"""
module terminput.keys.backends.posix.posixkeyreader

Contains the definition of the PosixKeyReader class, a key reader that uses
termios to read unbuffered, unechoed keystrokes on POSIX terminals
"""

from ..stream import StreamKeyReader
from .terminalmodeguard import TerminalModeGuard


class PosixKeyReader(StreamKeyReader):
    """
    class PosixKeyReader

    Key reader that uses termios to read unbuffered, unechoed keystrokes on
    POSIX terminals. The terminal mode is changed around each individual read
    so an interruption between keystrokes never leaves the terminal raw
    """

    def read_key(self: "PosixKeyReader") -> str:
        # input that isn't a terminal (i.e., a pipe) has no line discipline
        # to switch off
        if not self.stream.isatty():
            return super().read_key()

        with TerminalModeGuard(self.stream.fileno()):
            return super().read_key()
