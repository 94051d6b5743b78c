"""
module terminput.checks.equalscheck

Contains the definition of the EqualsCheck class, a check that accepts a
candidate equal to one of a set of strings
"""

from typing import Iterable, Tuple

from .abstract import Check
from .exceptions import InvalidInput


class EqualsCheck(Check):
    """
    class EqualsCheck

    A check that accepts a candidate equal to one of a set of strings. Both
    sides are case-folded unless the comparison is case sensitive
    """

    __case_sensitive: bool
    __strings: Tuple[str, ...]

    def __init__(
        self: "EqualsCheck", strings: Iterable[str], case_sensitive: bool = False
    ) -> None:
        self.__case_sensitive = case_sensitive
        self.__strings = tuple(self._normalize(string) for string in strings)

    def check(self: "EqualsCheck", candidate: str) -> None:
        if self._normalize(candidate) not in self.__strings:
            raise InvalidInput()

    def _normalize(self: "EqualsCheck", string: str) -> str:
        return string if self.__case_sensitive else string.casefold()
