from .abstract import Check, CheckFunction
from .exceptions import InvalidInput


class MessageCheck(Check):
    __check: CheckFunction
    __message: str

    def __init__(self: "MessageCheck", check: CheckFunction, message: str) -> None:
        self.__check = check
        self.__message = message

    def check(self: "MessageCheck", candidate: str) -> None:
        try:
            self.__check(candidate)
        except InvalidInput as exc:
            raise InvalidInput(self.__message) from exc
