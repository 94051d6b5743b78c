"""
module terminput.editor.lineeditor

Contains the definition of the LineEditor class which turns raw keystrokes from
a key reader into finished candidate strings, rendering them through a display
backend as plain text, a mask glyph or an upper-cased single key
"""

import functools
from typing import Callable, List

from ..checks.exceptions import CheckConfigurationException
from ..display import DisplayBackend
from ..keys import KeyReader
from .enums import InputStyle

InputFunction = Callable[[], str]


class LineEditor:
    """
    class LineEditor

    Turns raw keystrokes into finished candidate strings. What is captured is
    kept separate from what is displayed so the same accumulation serves
    plain, masked and instant input
    """

    __display: DisplayBackend
    __key_reader: KeyReader
    __mask: str

    def __init__(
        self: "LineEditor", key_reader: KeyReader, display: DisplayBackend, mask: str
    ) -> None:
        if len(mask) != 1:
            raise CheckConfigurationException(
                f"Input mask {mask!r} must be exactly one character"
            )

        self.__key_reader = key_reader
        self.__display = display
        self.__mask = mask

    @property
    def display(self: "LineEditor") -> DisplayBackend:
        return self.__display

    def input_function(self: "LineEditor", style: InputStyle) -> InputFunction:
        """
        Returns the function that reads one candidate in the provided style

        Args:
            style (InputStyle): The style of input to read

        Returns:
            InputFunction: A function that reads and returns one candidate

        Raises:
            NotImplementedError: If the style is not known
        """

        match style:
            case InputStyle.BASIC:
                return self.read_line
            case InputStyle.MASKED:
                return functools.partial(self.read_line, masked=True)
            case InputStyle.INSTANT:
                return self.read_instant

        raise NotImplementedError(f"Input style {style} not implemented")

    @property
    def key_reader(self: "LineEditor") -> KeyReader:
        return self.__key_reader

    @property
    def mask(self: "LineEditor") -> str:
        return self.__mask

    def read_instant(self: "LineEditor") -> str:
        """
        Reads a single keystroke and echoes it upper-cased without waiting for
        a confirmation key

        Args:
            None

        Returns:
            str: The key that was pressed, as it was pressed

        Raises:
            Nothing
        """

        key: str = self.key_reader.read_key()
        self.display.echo(key.upper())

        return key

    def read_line(self: "LineEditor", masked: bool = False) -> str:
        """
        Accumulates keystrokes until the confirm key is pressed or the input is
        exhausted. The delete key removes the last accumulated character

        Args:
            masked (bool): Whether the mask glyph is echoed in place of each
                character

        Returns:
            str: The accumulated input without the confirm key

        Raises:
            Nothing
        """

        characters: List[str] = []

        while not self.key_reader.is_confirm(key := self.key_reader.read_key()):
            if self.key_reader.is_delete(key):
                # nothing to erase on an empty line
                if len(characters) > 0:
                    characters.pop()
                    self.display.erase_last()

                continue

            characters.append(key)
            self.display.echo(self.mask if masked else key)

        return "".join(characters)
