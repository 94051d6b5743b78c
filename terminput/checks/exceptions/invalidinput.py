"""
module terminput.checks.exceptions.invalidinput

Contains the definition of the InvalidInput exception class, an exception
thrown by a check whenever it rejects a candidate string
"""

from ... import constants
from ...terminputexception import TermInputException


class InvalidInput(TermInputException):
    """
    class InvalidInput

    An exception thrown by a check whenever it rejects a candidate string. The
    message is displayed to the user before they are prompted again
    """

    def __init__(
        self: "InvalidInput", message: str = constants.INVALID_INPUT_MESSAGE
    ) -> None:
        super().__init__(message)

    @property
    def message(self: "InvalidInput") -> str:
        return self.args[0]
