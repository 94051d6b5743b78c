from terminput import __version__


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

DEFAULT_ASK_SUFFIX: str = "?\n"
DEFAULT_GET_SUFFIX: str = ": "
DEFAULT_INPUT_MASK: str = "*"
DEFAULT_ERROR_STYLE: str = "fg:ansired"
DEFAULT_PROMPT_STYLE: str = "bold"

INVALID_INPUT_MESSAGE: str = "Invalid Input"

# a failed or exhausted read is reported as an empty key and handled
# by the line editor as if the confirm key had been pressed
KEY_END_OF_INPUT: str = ""

KEY_POSIX_CONFIRM: str = "\n"
KEY_POSIX_DELETE: tuple[str, ...] = ("\x7f", "\b")
KEY_WINDOWS_CONFIRM: str = "\r"
KEY_WINDOWS_DELETE: tuple[str, ...] = ("\b",)

EXIT_KEYBOARD_INTERRUPT: int = 130
