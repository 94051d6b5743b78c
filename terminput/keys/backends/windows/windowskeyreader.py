"""
module terminput.keys.backends.windows.windowskeyreader

Contains the definition of the WindowsKeyReader class, a key reader that uses
msvcrt to read unbuffered, unechoed keystrokes from the Windows console
"""

import msvcrt
import warnings

from .... import constants
from ...abstract import KeyReader


class WindowsKeyReader(KeyReader):
    """
    class WindowsKeyReader

    Key reader that uses msvcrt to read unbuffered, unechoed keystrokes from
    the Windows console. The console is never switched into another mode so
    there is nothing to restore after a read
    """

    CONFIRM_KEY = constants.KEY_WINDOWS_CONFIRM
    DELETE_KEYS = constants.KEY_WINDOWS_DELETE

    def read_key(self: "WindowsKeyReader") -> str:
        try:
            # pylint: disable=no-member
            return msvcrt.getwch()
        except OSError as exc:
            warnings.warn(f"{type(self).__name__}: {type(exc).__name__}: {exc}")
            return constants.KEY_END_OF_INPUT
