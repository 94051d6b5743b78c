"""
module terminput.keys.backends.stream.streamkeyreader

Contains the definition of the StreamKeyReader class, a key reader that takes
keystrokes one character at a time from an arbitrary text stream
"""

import sys
from typing import TextIO
import warnings

from .... import constants
from ...abstract import KeyReader


class StreamKeyReader(KeyReader):
    """
    class StreamKeyReader

    Key reader that takes keystrokes one character at a time from a text stream.
    Used directly for piped input and as the base of the termios reader
    """

    __stream: TextIO

    def __init__(self: "StreamKeyReader", stream: TextIO | None = None) -> None:
        self.__stream = stream if stream is not None else sys.stdin

    def read_key(self: "StreamKeyReader") -> str:
        try:
            return self.stream.read(1)
        except (OSError, ValueError) as exc:
            warnings.warn(f"{type(self).__name__}: {type(exc).__name__}: {exc}")
            return constants.KEY_END_OF_INPUT

    @property
    def stream(self: "StreamKeyReader") -> TextIO:
        return self.__stream
