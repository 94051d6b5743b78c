"""
module terminput.display.abstract.displaybackend

Contains the definition of the DisplayBackend class, an abstract base class that
is extended by all terminput display integrations (i.e., prompt_toolkit)
"""

from abc import ABCMeta, abstractmethod

from ...config import TermInputConfig


class DisplayBackend(metaclass=ABCMeta):
    """
    class DisplayBackend

    Abstract base class that is extended by all terminput display
    integrations. Echoed keystrokes and prompts go to the output stream while
    validation errors go to the error stream
    """

    config: TermInputConfig

    def __init__(self: "DisplayBackend", config: TermInputConfig) -> None:
        self.config = config

    @abstractmethod
    def echo(self: "DisplayBackend", text: str) -> None:
        """
        Displays text that stands in for a keystroke the user pressed

        Args:
            text (str): The literal character, mask glyph or upper-cased key

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def end_line(self: "DisplayBackend") -> None:
        """
        Terminates the line of echoed input on the output stream

        Args:
            None

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def erase_last(self: "DisplayBackend") -> None:
        """
        Erases the most recently echoed glyph by moving the cursor back one column,
        overwriting it with a space and moving the cursor back again

        Args:
            None

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def write_error(self: "DisplayBackend", message: str) -> None:
        """
        Displays a newline-terminated validation error message on the error stream

        Args:
            message (str): The message carried by the rejecting check

        Returns:
            None

        Raises:
            Nothing
        """

    @abstractmethod
    def write_prompt(self: "DisplayBackend", message: str) -> None:
        """
        Displays a prompt message without terminating the line

        Args:
            message (str): The message to prompt the user with

        Returns:
            None

        Raises:
            Nothing
        """
