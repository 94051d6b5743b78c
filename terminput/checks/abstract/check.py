"""
module terminput.checks.abstract.check

Contains the definition of the Check class, an abstract base class for callable
predicates over a candidate string, and of the CheckFunction type accepted
anywhere a check is expected
"""

from abc import ABCMeta, abstractmethod
from typing import Callable

from ..exceptions import InvalidInput

CheckFunction = Callable[[str], None]


class Check(metaclass=ABCMeta):
    """
    class Check

    Abstract base class for callable predicates over a candidate string. A check
    returns normally when it accepts the candidate and raises InvalidInput when
    it rejects it. Checks hold no mutable state and may be reused freely
    """

    def __call__(self: "Check", candidate: str) -> None:
        self.check(candidate)

    @abstractmethod
    def check(self: "Check", candidate: str) -> None:
        """
        Evaluates this check against a candidate string

        Args:
            candidate (str): The input to evaluate

        Returns:
            Nothing

        Raises:
            InvalidInput: If the candidate is rejected
        """


def passes(check: CheckFunction, candidate: str) -> bool:
    """
    Evaluates any check or plain check function and converts its outcome into
    a boolean

    Args:
        check (CheckFunction): The check to evaluate
        candidate (str): The input to evaluate

    Returns:
        bool: True if the check accepted the candidate

    Raises:
        Exception: Any exception other than InvalidInput raised by the check
    """

    try:
        check(candidate)
    except InvalidInput:
        return False

    return True
