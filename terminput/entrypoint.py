"""
module terminput.entrypoint

Contains the definition of the main() method that is invoked when terminput is
run directly as a module from the command line. Prompts, echoed keys and errors
are written to standard error so that only the accepted value reaches standard
output
"""

from argparse import ArgumentParser, Namespace
import sys
from typing import Any, List

from . import constants
from .checks import (
    Check,
    CheckConfigurationException,
    NumericKind,
    charset,
    equals,
    in_range,
    length,
    matches,
    numeric,
    with_message,
)
from .checks.enums.numerickind import numeric_parser
from .config import TermInputConfig
from .display import DisplayBackend, display_backends_by_name
from .editor import InputStyle
from .terminput import TermInput

_arg_parser: ArgumentParser = ArgumentParser(
    prog=constants.APPLICATION_NAME,
    description="Prompts for a line of input and prints it once every check passes",
)
_arg_parser.add_argument("message", type=str, help="The message to prompt with")
_arg_parser.add_argument(
    "--ask",
    action="store_true",
    help="Format the message as a question instead of a field label",
)
_arg_parser.add_argument(
    "--style",
    type=InputStyle,
    choices=InputStyle,
    default=InputStyle.BASIC,
    help="How keystrokes are displayed while typing",
)

_prompt_group = _arg_parser.add_mutually_exclusive_group()
_prompt_group.add_argument(
    "--prompt-once",
    dest="prompt_once",
    action="store_true",
    default=None,
    help="Show the message only before the first attempt",
)
_prompt_group.add_argument(
    "--prompt-every",
    dest="prompt_once",
    action="store_false",
    help="Show the message before every attempt",
)

_arg_parser.add_argument(
    "--equals", type=str, nargs="+", metavar="VALUE", help="Accepted values"
)
_arg_parser.add_argument(
    "--case-sensitive",
    action="store_true",
    help="Compare --equals values with case in mind",
)
_arg_parser.add_argument(
    "--matches", type=str, metavar="PATTERN", help="A regex the input must match"
)
_arg_parser.add_argument(
    "--length", type=int, metavar="N", help="The exact length of the input"
)
_arg_parser.add_argument(
    "--charset", type=str, metavar="CHARS", help="The characters the input may use"
)
_arg_parser.add_argument(
    "--numeric", type=NumericKind, choices=NumericKind, help="A numeric kind"
)
_arg_parser.add_argument(
    "--range",
    type=str,
    nargs=3,
    metavar=("KIND", "MIN", "MAX"),
    help="A numeric kind and the inclusive range the input must be in",
)
_arg_parser.add_argument(
    "--error-message",
    type=str,
    metavar="MESSAGE",
    help="The message shown whenever any check fails",
)
_arg_parser.add_argument(
    "--config",
    type=str,
    default=None,
    metavar="PATH",
    help="The configuration file to use",
)


def build_checks(args: Namespace) -> List[Check]:
    """
    Constructs the checks requested on the command line in a fixed order

    Args:
        args (Namespace): The parsed command line arguments

    Returns:
        List[Check]: The checks to apply to the user's input

    Raises:
        CheckConfigurationException: If a check cannot be constructed from
            the provided arguments
    """

    user_checks: List[Check] = []

    if args.equals is not None:
        user_checks.append(equals(*args.equals, case_sensitive=args.case_sensitive))
    if args.matches is not None:
        user_checks.append(matches(args.matches))
    if args.length is not None:
        user_checks.append(length(args.length))
    if args.charset is not None:
        user_checks.append(charset(args.charset))
    if args.numeric is not None:
        user_checks.append(numeric(args.numeric))
    if args.range is not None:
        user_checks.append(_build_range(*args.range))

    if args.error_message is not None:
        user_checks = [
            with_message(user_check, args.error_message) for user_check in user_checks
        ]

    return user_checks


def _build_range(kind_name: str, minimum: str, maximum: str) -> Check:
    try:
        kind: NumericKind = NumericKind(kind_name)
    except ValueError as exc:
        raise CheckConfigurationException(
            f"Unknown numeric kind '{kind_name}'"
        ) from exc

    parse = numeric_parser(kind)
    try:
        bounds: List[Any] = [parse(minimum), parse(maximum)]
    except ValueError as exc:
        raise CheckConfigurationException(
            f"Range bounds '{minimum}' and '{maximum}' are not {kind} numbers"
        ) from exc

    return in_range(kind, *bounds)


def main(argv: List[str] | None = None) -> int:
    """
    Prompts for input on the current terminal according to the command line and
    prints the accepted value

    Args:
        argv (List[str] | None): The command line arguments. Defaults to sys.argv

    Returns:
        int: Exit code to return to be returned to the system

    Raises:
        Nothing
    """

    args: Namespace = _arg_parser.parse_args(argv)

    try:
        user_checks: List[Check] = build_checks(args)
    except CheckConfigurationException as cce:
        _arg_parser.error(str(cce))

    config_path: str = (
        args.config if args.config is not None else TermInputConfig.default_path()
    )
    config: TermInputConfig = (
        TermInputConfig.from_file(config_path) or TermInputConfig.make_default()
    )
    display: DisplayBackend = display_backends_by_name[config.display_backend](
        config, output=sys.stderr, error=sys.stderr
    )
    session: TermInput = TermInput(
        display=display, config=config, config_path=config_path
    )

    try:
        user_input: str = (session.ask if args.ask else session.get)(
            args.message,
            *user_checks,
            style=args.style,
            **({} if args.prompt_once is None else {"prompt_once": args.prompt_once}),
        )
    except KeyboardInterrupt:
        return constants.EXIT_KEYBOARD_INTERRUPT

    print(user_input)
    return 0
