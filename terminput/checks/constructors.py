"""
module terminput.checks.constructors

Contains the functions that construct and combine checks. Every function
returns a new Check that closes over its arguments and holds no other state
"""

import re
from typing import Any

from .abstract import Check, CheckFunction
from .anyofcheck import AnyOfCheck
from .enums import NumericKind
from .equalscheck import EqualsCheck
from .exceptions import CheckConfigurationException
from .messagecheck import MessageCheck
from .negatedcheck import NegatedCheck
from .patterncheck import PatternCheck
from .rangecheck import RangeCheck


def equals(*strings: str, case_sensitive: bool = False) -> Check:
    """
    Returns a check that accepts a candidate equal to any of the given strings

    Args:
        *strings (str): The strings to compare the candidate to
        case_sensitive (bool): Whether or not case is considered when comparing

    Returns:
        Check: A check to call on the user's input

    Raises:
        Nothing
    """

    return EqualsCheck(strings, case_sensitive=case_sensitive)


def matches(pattern: str | re.Pattern) -> Check:
    """
    Returns a check that accepts a candidate if the whole of it matches the
    given regular expression

    Args:
        pattern (str | re.Pattern): The regular expression to match against

    Returns:
        Check: A check to call on the user's input

    Raises:
        CheckConfigurationException: If the pattern does not compile
    """

    return PatternCheck(pattern)


def length(count: int) -> Check:
    """
    Returns a check that accepts a candidate of exactly the given length

    Args:
        count (int): The number of characters the candidate must have

    Returns:
        Check: A check to call on the user's input

    Raises:
        CheckConfigurationException: If the length is negative
    """

    if count < 0:
        raise CheckConfigurationException(f"Length {count} is negative")

    return PatternCheck(f".{{{count}}}", re.DOTALL)


def charset(allowed_chars: str) -> Check:
    """
    Returns a check that accepts a non-empty candidate made up only of the
    given characters. Every character is taken literally

    Args:
        allowed_chars (str): The characters the candidate may consist of

    Returns:
        Check: A check to call on the user's input

    Raises:
        CheckConfigurationException: If no characters were provided
    """

    if len(allowed_chars) == 0:
        raise CheckConfigurationException("A charset needs at least one character")

    return PatternCheck(
        "[" + "".join(re.escape(character) for character in allowed_chars) + "]+"
    )


def numeric(kind: NumericKind | type = int) -> Check:
    """
    Returns a check that accepts a literal of the given numeric kind: digits for
    unsigned integers, digits with an optional leading minus for signed
    integers, and digits with a mandatory fractional part for floats

    Args:
        kind (NumericKind | type): The kind of number, or one of int, float
            and Decimal

    Returns:
        Check: A check to call on the user's input

    Raises:
        CheckConfigurationException: If the kind is not numeric
    """

    return PatternCheck(NumericKind.of(kind).pattern)


def in_range(
    kind: NumericKind | type = int, minimum: Any = None, maximum: Any = None
) -> Check:
    """
    Returns a check that accepts a literal of the given numeric kind whose value
    is between minimum and maximum (inclusive)

    Args:
        kind (NumericKind | type): The kind of number, or one of int, float
            and Decimal
        minimum (Any): The smallest accepted value or None for no lower bound
        maximum (Any): The largest accepted value or None for no upper bound

    Returns:
        Check: A check to call on the user's input

    Raises:
        CheckConfigurationException: If the kind is not numeric or the
            minimum is greater than the maximum
    """

    return RangeCheck(kind, minimum=minimum, maximum=maximum)


def with_message(check: CheckFunction, message: str) -> Check:
    """
    Gives any check a new error message

    Args:
        check (CheckFunction): The check to attach a new error message to
        message (str): The message to show when the check rejects

    Returns:
        Check: A check to call on the user's input

    Raises:
        Nothing
    """

    return MessageCheck(check, message)


def negate(check: CheckFunction) -> Check:
    """
    Returns the inverse of a check. The inverse rejects with the default
    message whenever the wrapped check accepts

    Args:
        check (CheckFunction): The check to invert

    Returns:
        Check: A check to call on the user's input

    Raises:
        Nothing
    """

    return NegatedCheck(check)


def any_of(*checks: CheckFunction) -> Check:
    """
    Returns a check that accepts if any one of the given checks accepts. The
    checks are tried in order until one of them accepts

    Args:
        *checks (CheckFunction): The checks to try

    Returns:
        Check: A check to call on the user's input

    Raises:
        Nothing
    """

    return AnyOfCheck(checks)
