"""
module terminput.validation.validationloop

Contains the definition of the validate() function which re-prompts for
input until every provided check accepts it
"""

from ..checks import CheckFunction, InvalidInput
from ..display import DisplayBackend
from ..display.backends.plain import PlainDisplay
from ..editor import InputFunction


def validate(
    input_function: InputFunction,
    *checks: CheckFunction,
    display: DisplayBackend | None = None,
) -> str:
    """
    Calls an input function until every check accepts its result. Checks run in
    the order provided and the first rejection is reported. There is no retry
    limit: an input source that never produces an acceptable candidate will
    be prompted forever

    Args:
        input_function (InputFunction): The function producing each candidate
        *checks (CheckFunction): The checks every candidate must pass
        display (DisplayBackend | None): Where rejections are reported. A plain
            display on the standard streams is used if not provided

    Returns:
        str: The first candidate that every check accepted, or the first candidate
            at all if no checks were provided

    Raises:
        Exception: Any exception other than InvalidInput raised by a check
    """

    if display is None:
        display = PlainDisplay()

    while True:
        user_input: str = input_function()
        display.end_line()

        try:
            for check in checks:
                check(user_input)
        except InvalidInput as invalid_input:
            display.write_error(invalid_input.message)
            continue

        return user_input
