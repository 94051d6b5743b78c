"""
module terminput.keys.abstract.keyreader

Contains the definition of the KeyReader class, an abstract base class that
is extended by all terminput key reader integrations (i.e., termios or msvcrt)
"""

from abc import ABCMeta, abstractmethod
from typing import Tuple

from ... import constants


class KeyReader(metaclass=ABCMeta):
    """
    class KeyReader

    Abstract base class that is extended by all terminput key reader
    integrations. A key reader is not reentrant: only one read may be in
    flight at a time and callers are expected to serialize access.
    """

    CONFIRM_KEY: str = constants.KEY_POSIX_CONFIRM
    DELETE_KEYS: Tuple[str, ...] = constants.KEY_POSIX_DELETE

    def is_confirm(self: "KeyReader", key: str) -> bool:
        """
        Returns whether or not the provided key terminates a line of input. The
        end-of-input key always counts as a confirmation

        Args:
            key (str): The key returned by read_key()

        Returns:
            bool: True if the key ends the current line

        Raises:
            Nothing
        """

        return key in (self.CONFIRM_KEY, constants.KEY_END_OF_INPUT)

    def is_delete(self: "KeyReader", key: str) -> bool:
        return key in self.DELETE_KEYS

    @abstractmethod
    def read_key(self: "KeyReader") -> str:
        """
        Reads exactly one keystroke without waiting for a confirmation key and
        without the terminal echoing it

        Args:
            None

        Returns:
            str: The character that was pressed or the end-of-input key if the
                read failed or the input was exhausted

        Raises:
            Nothing
        """
