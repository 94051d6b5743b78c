"""
module terminput.keys.backends.posix.terminalmodeguard

Contains the definition of the TerminalModeGuard class, a context manager that
disables canonical mode and local echo on a terminal for the duration of a
single read
"""

import termios
from types import TracebackType
from typing import List, Type


class TerminalModeGuard:
    """
    class TerminalModeGuard

    Context manager that disables canonical mode and local echo on a terminal
    and restores the original attributes on every exit path
    """

    __fd: int
    __original_attributes: List | None

    def __init__(self: "TerminalModeGuard", fd: int) -> None:
        self.__fd = fd
        self.__original_attributes = None

    def __enter__(self: "TerminalModeGuard") -> "TerminalModeGuard":
        self.__original_attributes = termios.tcgetattr(self.__fd)

        attributes: List = termios.tcgetattr(self.__fd)
        attributes[3] &= ~(termios.ICANON | termios.ECHO)

        # deliver every key as soon as it is pressed
        attributes[6][termios.VMIN] = 1
        attributes[6][termios.VTIME] = 0

        termios.tcsetattr(self.__fd, termios.TCSANOW, attributes)
        return self

    def __exit__(
        self: "TerminalModeGuard",
        exc_type: Type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self.__original_attributes is not None:
            termios.tcsetattr(self.__fd, termios.TCSANOW, self.__original_attributes)
            self.__original_attributes = None
