from .abstract import Check, CheckFunction, passes
from .exceptions import InvalidInput


class NegatedCheck(Check):
    __check: CheckFunction

    def __init__(self: "NegatedCheck", check: CheckFunction) -> None:
        self.__check = check

    def check(self: "NegatedCheck", candidate: str) -> None:
        if passes(self.__check, candidate):
            raise InvalidInput()
