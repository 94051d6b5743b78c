"""
module terminput.checks.patterncheck

Contains the definition of the PatternCheck class, a check that accepts a
candidate only if the whole of it matches a regular expression
"""

import re

from .abstract import Check
from .exceptions import CheckConfigurationException, InvalidInput


class PatternCheck(Check):
    """
    class PatternCheck

    A check that accepts a candidate only if the whole of it matches a regular
    expression. Partial matches are rejected
    """

    __pattern: re.Pattern

    def __init__(
        self: "PatternCheck", pattern: str | re.Pattern, flags: int = 0
    ) -> None:
        try:
            self.__pattern = re.compile(pattern, flags)
        except re.error as exc:
            raise CheckConfigurationException(
                f"Invalid pattern {pattern!r}: {exc}"
            ) from exc

    def check(self: "PatternCheck", candidate: str) -> None:
        if self.__pattern.fullmatch(candidate) is None:
            raise InvalidInput()
