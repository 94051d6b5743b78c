from typing import Iterable, Tuple

from .abstract import Check, CheckFunction, passes
from .exceptions import InvalidInput


class AnyOfCheck(Check):
    __checks: Tuple[CheckFunction, ...]

    def __init__(self: "AnyOfCheck", checks: Iterable[CheckFunction]) -> None:
        self.__checks = tuple(checks)

    def check(self: "AnyOfCheck", candidate: str) -> None:
        # any() stops at the first check that accepts
        if not any(passes(check, candidate) for check in self.__checks):
            raise InvalidInput()
