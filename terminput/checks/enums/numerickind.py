from decimal import Decimal
from enum import StrEnum
from typing import Any, Callable, Dict, Type

from ..exceptions import CheckConfigurationException


class NumericKind(StrEnum):
    UNSIGNED_INTEGER = "unsigned"
    SIGNED_INTEGER = "signed"
    FLOAT = "float"

    @property
    def pattern(self: "NumericKind") -> str:
        return _numeric_patterns[self]

    @classmethod
    def of(cls: Type["NumericKind"], kind: "NumericKind | type") -> "NumericKind":
        """
        Resolves either a NumericKind or a Python numeric type to a NumericKind

        Args:
            kind (NumericKind | type): The kind or type to resolve

        Returns:
            NumericKind: The kind of literal the type is written as

        Raises:
            CheckConfigurationException: If the kind is not numeric
        """

        if isinstance(kind, NumericKind):
            return kind

        # bool is an int subclass but has no numeric literal of its own
        if isinstance(kind, type) and kind is not bool and kind in _kinds_by_type:
            return _kinds_by_type[kind]

        raise CheckConfigurationException(
            f"{getattr(kind, '__name__', repr(kind))} is not a numeric kind"
        )


def numeric_parser(kind: NumericKind | type) -> Callable[[str], Any]:
    """
    Returns the function used to convert a numeric literal of the provided kind
    into a value. Python types parse to themselves

    Args:
        kind (NumericKind | type): The kind or type to parse

    Returns:
        Callable[[str], Any]: A function parsing a literal into a value

    Raises:
        CheckConfigurationException: If the kind is not numeric
    """

    resolved_kind: NumericKind = NumericKind.of(kind)
    if isinstance(kind, NumericKind):
        return _parsers_by_kind[resolved_kind]

    return kind


_numeric_patterns: Dict[NumericKind, str] = {
    NumericKind.UNSIGNED_INTEGER: r"[0-9]+",
    NumericKind.SIGNED_INTEGER: r"-?[0-9]+",
    NumericKind.FLOAT: r"-?[0-9]+\.[0-9]+",
}

_kinds_by_type: Dict[type, NumericKind] = {
    int: NumericKind.SIGNED_INTEGER,
    float: NumericKind.FLOAT,
    Decimal: NumericKind.FLOAT,
}

_parsers_by_kind: Dict[NumericKind, Callable[[str], Any]] = {
    NumericKind.UNSIGNED_INTEGER: int,
    NumericKind.SIGNED_INTEGER: int,
    NumericKind.FLOAT: float,
}
