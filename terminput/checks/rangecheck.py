"""
module terminput.checks.rangecheck

Contains the definition of the RangeCheck class, a check that accepts a
numeric literal whose value lies inside an inclusive range
"""

from decimal import Decimal
import math
from typing import Any, Callable

from .abstract import Check
from .enums import NumericKind
from .enums.numerickind import numeric_parser
from .exceptions import CheckConfigurationException, InvalidInput
from .patterncheck import PatternCheck


class RangeCheck(Check):
    """
    class RangeCheck

    A check that accepts a numeric literal of a given kind whose value lies
    inside an inclusive range. A missing bound leaves that side of the
    range open
    """

    __maximum: Any
    __minimum: Any
    __numeric_check: PatternCheck
    __parse: Callable[[str], Any]

    def __init__(
        self: "RangeCheck",
        kind: NumericKind | type = int,
        minimum: Any = None,
        maximum: Any = None,
    ) -> None:
        for bound in (minimum, maximum):
            if bound is not None and not _is_finite(bound):
                raise CheckConfigurationException(f"Range bound {bound} is not finite")

        if minimum is not None and maximum is not None and minimum > maximum:
            raise CheckConfigurationException(
                f"Range minimum {minimum} is greater than its maximum {maximum}"
            )

        self.__numeric_check = PatternCheck(NumericKind.of(kind).pattern)
        self.__parse = numeric_parser(kind)
        self.__minimum = minimum
        self.__maximum = maximum

    def check(self: "RangeCheck", candidate: str) -> None:
        self.__numeric_check(candidate)

        # a literal that passed the pattern but still can't be represented
        # is rejected rather than truncated
        try:
            value: Any = self.__parse(candidate)
        except (ArithmeticError, ValueError) as exc:
            raise InvalidInput() from exc

        if not _is_finite(value):
            raise InvalidInput()

        if self.__minimum is not None and value < self.__minimum:
            raise InvalidInput()

        if self.__maximum is not None and value > self.__maximum:
            raise InvalidInput()


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()

    if isinstance(value, float):
        return math.isfinite(value)

    return True
